"""
Reveal engine: single-cell and flood-fill reveals, win/loss predicates and
post-game review helpers.

The board is mutated by reference; functions that change it return the same
board for convenience.
"""
from collections import deque
from typing import List, Tuple

from .board import Board
from .cell import Cell


# ============================================================================
# Neighbors
# ============================================================================

def get_neighbors(board: Board, row: int, col: int) -> List[Cell]:
    """
    Get the in-bounds cells adjacent to a position.

    Returns 3 cells at a corner, 5 on an edge and 8 in the interior, in
    row-major order.
    """
    return [
        board.grid[neighbor_row][neighbor_col]
        for neighbor_row, neighbor_col in board.neighbor_positions(row, col)
    ]


def get_flagged_neighbors(board: Board, row: int, col: int) -> List[Cell]:
    """Get the flagged cells adjacent to a position."""
    return [cell for cell in get_neighbors(board, row, col) if cell.is_flagged]


# ============================================================================
# Reveal
# ============================================================================

def reveal_cell(board: Board, row: int, col: int) -> Board:
    """
    Reveal a cell, flooding outward from cells with no neighboring mines.

    Out-of-bounds positions, flagged cells and revealed cells are left
    alone. A mine or a numbered cell is revealed on its own. A zero cell
    also reveals every hidden neighbor, continuing through further zero
    cells and stopping at the numbered cells that border the region.
    Flagged cells are never revealed by the flood.

    Args:
        board: Board to mutate.
        row: Row index to reveal.
        col: Column index to reveal.

    Returns:
        The same board.
    """
    cell = board.get_cell(row, col)
    if cell is None or not cell.reveal():
        return board

    if cell.is_mine or cell.neighbor_mines > 0:
        return board

    frontier = deque([cell])
    while frontier:
        current = frontier.popleft()
        for neighbor in get_neighbors(board, current.row, current.col):
            if not neighbor.reveal():
                continue
            if not neighbor.is_mine and neighbor.neighbor_mines == 0:
                frontier.append(neighbor)

    return board


def reveal_all_mines(board: Board) -> Board:
    """
    Show every mine after a loss.

    Hidden mines are revealed. Flagged mines keep their flag, which already
    marks them as mines. Other cells are untouched.
    """
    for cell in board.cells():
        if cell.is_mine:
            cell.reveal()
    return board


# ============================================================================
# Game End Conditions
# ============================================================================

def check_win(board: Board, total_mines: int) -> bool:
    """True when every non-mine cell is revealed. Flags are irrelevant."""
    return board.count_revealed() == board.total_cells - total_mines


def check_loss(board: Board) -> bool:
    """True when any mine has been revealed."""
    return any(cell.is_mine and cell.is_revealed for cell in board.cells())


def get_wrong_flags(board: Board) -> List[Tuple[int, int]]:
    """
    Get flags that were placed on safe cells.

    Returns:
        (row, col) positions of flagged non-mine cells, row-major.
    """
    return [
        cell.position
        for cell in board.cells()
        if cell.is_flagged and not cell.is_mine
    ]
