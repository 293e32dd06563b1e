"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Callable, Iterable, Tuple

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import (
    BEGINNER,
    Board,
    Cell,
    Difficulty,
    GameSession,
    calculate_numbers,
)


BoardFactory = Callable[..., Board]


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def make_board() -> BoardFactory:
    """
    Build a board with mines at fixed positions and counts computed.

    Usage: make_board(rows, cols, mines=[(row, col), ...])
    """
    def _make(
        rows: int, cols: int, mines: Iterable[Tuple[int, int]] = ()
    ) -> Board:
        board = Board.empty(rows, cols)
        for row, col in mines:
            board.grid[row][col].is_mine = True
        return calculate_numbers(board)

    return _make


@pytest.fixture
def empty_board() -> Board:
    """Create a 5x5 board with no mines for cascade testing."""
    return Board.empty(5, 5)


@pytest.fixture
def corner_mine_board(make_board: BoardFactory) -> Board:
    """3x3 board with a single mine in the bottom-right corner."""
    return make_board(3, 3, mines=[(2, 2)])


@pytest.fixture
def chord_board(make_board: BoardFactory) -> Board:
    """
    3x3 board whose center shows 2 with both mines flagged.

    Mines sit at (0, 0) and (0, 2); the center is revealed.
    """
    board = make_board(3, 3, mines=[(0, 0), (0, 2)])
    board.grid[0][0].toggle_flag()
    board.grid[0][2].toggle_flag()
    board.grid[1][1].reveal()
    return board


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def beginner_session() -> GameSession:
    """Session with a seeded beginner game ready for the first click."""
    session = GameSession()
    session.new_game(BEGINNER, seed="beginner-seed")
    return session


@pytest.fixture
def small_difficulty() -> Difficulty:
    """5x5 board with 3 mines."""
    return Difficulty("small", 5, 5, 3)
