"""
Board module for the Minesweeper rules engine.

The board is a plain rectangular grid of cells. It carries no game rules of
its own; the generator, reveal and chord modules operate on it and mutate it
in place.
"""
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Row-major grid of cells, indexed as ``grid[row][col]``.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        grid: The cells. Each cell's ``row``/``col`` match its indices.
    """

    rows: int
    cols: int
    grid: List[List[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Build the grid when none is given."""
        if not self.grid:
            self.grid = [
                [Cell(row, col) for col in range(self.cols)]
                for row in range(self.rows)
            ]

    @classmethod
    def empty(cls, rows: int, cols: int) -> "Board":
        """Create a board with every cell hidden and mine-free."""
        return cls(rows, cols)

    # ========================================================================
    # Position Utilities
    # ========================================================================

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.is_valid_position(row, col):
            return None
        return self.grid[row][col]

    def neighbor_positions(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for in-bounds neighbors, row-major.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def cells(self) -> Iterator[Cell]:
        """Iterate over all cells in row-major order."""
        for row in self.grid:
            yield from row

    @property
    def total_cells(self) -> int:
        """Get the number of cells on the board."""
        return self.rows * self.cols

    # ========================================================================
    # Counting
    # ========================================================================

    def count_mines(self) -> int:
        """Count cells holding a mine."""
        return sum(1 for cell in self.cells() if cell.is_mine)

    def count_revealed(self) -> int:
        """Count revealed cells."""
        return sum(1 for cell in self.cells() if cell.is_revealed)

    def count_flags(self) -> int:
        """Count cells currently flagged."""
        return sum(1 for cell in self.cells() if cell.is_flagged)

    def mine_positions(self) -> List[Tuple[int, int]]:
        """Positions of all mines in row-major order."""
        return [cell.position for cell in self.cells() if cell.is_mine]

    # ========================================================================
    # Observation
    # ========================================================================

    def get_observation(self) -> np.ndarray:
        """
        Get the visible board state as a numpy array.

        Returns:
            2D int8 array of shape (rows, cols) where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with neighbor mine count
                9 = revealed mine
        """
        obs = np.zeros((self.rows, self.cols), dtype=np.int8)
        for cell in self.cells():
            obs[cell.row, cell.col] = cell.to_observation()
        return obs

    def get_hidden_positions(self) -> List[Tuple[int, int]]:
        """
        Get positions that can still be revealed.

        Returns:
            List of (row, col) positions whose cell is hidden.
        """
        return [cell.position for cell in self.cells() if cell.is_hidden]
