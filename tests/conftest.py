import pytest

from grid_logic.data.examples import WORKED_EXAMPLE


@pytest.fixture
def worked_clues():
    return WORKED_EXAMPLE.row_clues, WORKED_EXAMPLE.col_clues


@pytest.fixture
def worked_solution():
    return WORKED_EXAMPLE.expected_grid()
