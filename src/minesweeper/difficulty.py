"""
Difficulty presets and custom board settings.
"""
from dataclasses import dataclass
from typing import Dict

from .generator import validate_custom_difficulty


@dataclass(frozen=True)
class Difficulty:
    """
    Immutable board settings.

    Direct construction only checks that the board is non-empty and leaves
    at least one safe cell. The user-facing limits (sizes in [5, 50], at
    most 99% mines) are enforced by :meth:`custom`.

    Attributes:
        name: Preset name, or "custom".
        rows: Number of rows.
        cols: Number of columns.
        mines: Total mines to place.
    """

    name: str
    rows: int
    cols: int
    mines: int

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure the board can hold its mines."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if self.mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.rows * self.cols - 1
        if self.mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @classmethod
    def custom(cls, rows: int, cols: int, mines: int) -> "Difficulty":
        """
        Build user-supplied settings.

        Raises:
            ValueError: If :func:`validate_custom_difficulty` rejects them.
        """
        if not validate_custom_difficulty(rows, cols, mines):
            raise ValueError(
                f"Invalid custom difficulty: {rows}x{cols} with {mines} mines"
            )
        return cls("custom", rows, cols, mines)

    @property
    def total_cells(self) -> int:
        """Get the number of cells on the board."""
        return self.rows * self.cols


# Preset difficulty levels
BEGINNER = Difficulty("beginner", 9, 9, 10)
INTERMEDIATE = Difficulty("intermediate", 16, 16, 40)
EXPERT = Difficulty("expert", 16, 30, 99)

PRESETS: Dict[str, Difficulty] = {
    preset.name: preset for preset in (BEGINNER, INTERMEDIATE, EXPERT)
}
