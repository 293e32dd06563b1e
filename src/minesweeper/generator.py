"""
Board generation: seeded mine placement, neighbor counts and first-click
safety.

Functions that take a board mutate it in place and return it.
"""
import logging
import math
from typing import Set, Tuple

from .board import Board
from .seeding import SeededRandom


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

MIN_SIZE = 5
MAX_SIZE = 50
MAX_MINE_DENSITY = 0.99


def _safe_zone(board: Board, row: int, col: int) -> Set[Tuple[int, int]]:
    """The clicked position plus its in-bounds neighbors."""
    zone = set(board.neighbor_positions(row, col))
    zone.add((row, col))
    return zone


# ============================================================================
# Generation
# ============================================================================

def generate_board(rows: int, cols: int, mine_count: int, seed: str) -> Board:
    """
    Create a board with mines placed from a seeded random sequence.

    Coordinates are drawn as ``floor(rand() * rows)`` then
    ``floor(rand() * cols)`` until ``mine_count`` distinct cells hold a
    mine. The same arguments always produce the same layout. Neighbor counts
    are left at 0; call :func:`calculate_numbers` afterwards.

    Args:
        rows: Number of rows.
        cols: Number of columns.
        mine_count: Mines to place. Callers are expected to check it with
            :func:`validate_custom_difficulty` first.
        seed: Any string.

    Returns:
        The new board.

    Raises:
        ValueError: If ``mine_count`` is negative or larger than the board.
    """
    if mine_count < 0:
        raise ValueError("Number of mines cannot be negative")
    if mine_count > rows * cols:
        raise ValueError(f"Too many mines (max {rows * cols})")

    board = Board.empty(rows, cols)
    rng = SeededRandom(seed)

    mines_placed = 0
    while mines_placed < mine_count:
        row = rng.randrange(rows)
        col = rng.randrange(cols)
        cell = board.grid[row][col]
        if not cell.is_mine:
            cell.is_mine = True
            mines_placed += 1

    logger.debug(
        "Generated %dx%d board with %d mines from seed %r",
        rows, cols, mine_count, seed,
    )
    return board


def calculate_numbers(board: Board) -> Board:
    """Store the neighbor mine count on every non-mine cell."""
    for cell in board.cells():
        if cell.is_mine:
            continue
        count = 0
        for neighbor_row, neighbor_col in board.neighbor_positions(
            cell.row, cell.col
        ):
            if board.grid[neighbor_row][neighbor_col].is_mine:
                count += 1
        cell.neighbor_mines = count
    return board


def ensure_first_click_safety(
    board: Board, first_row: int, first_col: int
) -> Board:
    """
    Move mines away from the first click and its neighbors.

    Mines inside the clipped 3x3 zone around the click are swapped, in
    row-major order, with mine-free cells outside it. The total mine count
    never changes; if the board runs out of free cells outside the zone the
    remaining mines stay where they are. Neighbor counts are recomputed for
    the whole board after any move.

    Args:
        board: Board with mines placed.
        first_row: Row of the first click.
        first_col: Column of the first click.

    Returns:
        The same board.
    """
    zone = _safe_zone(board, first_row, first_col)
    if not any(board.grid[row][col].is_mine for row, col in zone):
        return board

    unsafe_mines = []
    safe_cells = []
    for cell in board.cells():
        inside = cell.position in zone
        if cell.is_mine and inside:
            unsafe_mines.append(cell)
        elif not cell.is_mine and not inside:
            safe_cells.append(cell)

    moves = min(len(unsafe_mines), len(safe_cells))
    for source, destination in zip(unsafe_mines[:moves], safe_cells[:moves]):
        source.is_mine = False
        destination.is_mine = True

    if moves < len(unsafe_mines):
        logger.debug(
            "Only %d of %d mines could leave the first-click zone",
            moves, len(unsafe_mines),
        )
    else:
        logger.debug("Relocated %d mines away from first click", moves)

    return calculate_numbers(board)


# ============================================================================
# Validation
# ============================================================================

def validate_custom_difficulty(rows: int, cols: int, mines: int) -> bool:
    """
    Check user-supplied board settings.

    Rows and columns must be in [5, 50], and there must be at least one mine
    and no more than 99% of the cells (rounded down).
    """
    if not MIN_SIZE <= rows <= MAX_SIZE:
        return False
    if not MIN_SIZE <= cols <= MAX_SIZE:
        return False
    if mines < 1:
        return False
    return mines <= math.floor(rows * cols * MAX_MINE_DENSITY)
