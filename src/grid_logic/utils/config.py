import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

class Settings:
    # Project Root (calculated relative to this file)
    ROOT_DIR: Path = Path(__file__).resolve().parents[3]

    # Puzzle storage
    PUZZLE_DIR: Path = ROOT_DIR / os.getenv("PUZZLE_PATH", "data/puzzles")

    # Search budget, 0 means exhaustive
    MAX_SEARCH_NODES: int = int(os.getenv("MAX_SEARCH_NODES", "0"))

    # Display
    DISPLAY_FILLED: str = os.getenv("DISPLAY_FILLED", "█ ")
    DISPLAY_EMPTY: str = os.getenv("DISPLAY_EMPTY", "· ")

settings = Settings()
