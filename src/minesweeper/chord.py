"""
Chord engine.

A chord on a revealed numbered cell whose flag count matches its number
reveals all of its other hidden neighbors at once. This module only decides
eligibility and computes the candidates; applying them is left to the
caller so that win/loss can be checked after each reveal.
"""
from typing import List

from .board import Board
from .cell import Cell
from .reveal import get_flagged_neighbors, get_neighbors


def can_chord(board: Board, row: int, col: int) -> bool:
    """
    Check if a chord is allowed at a position.

    The cell must be in bounds, revealed and numbered, and the number of
    flagged neighbors must equal its number exactly.
    """
    cell = board.get_cell(row, col)
    if cell is None:
        return False
    if not cell.is_revealed or cell.neighbor_mines == 0:
        return False
    flag_count = len(get_flagged_neighbors(board, row, col))
    return flag_count == cell.neighbor_mines


def chord(board: Board, row: int, col: int) -> List[Cell]:
    """
    Get the cells a chord at a position would reveal.

    Returns:
        Neighbors that are neither flagged nor revealed, or an empty list
        when :func:`can_chord` is False. The board is not modified.
    """
    if not can_chord(board, row, col):
        return []
    return [
        neighbor
        for neighbor in get_neighbors(board, row, col)
        if neighbor.is_hidden
    ]
