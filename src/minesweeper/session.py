"""
Game session: the mutable root that owns one game's board and counters.

The session drives the engine modules. The first reveal generates the
seeded board and makes the click safe; later reveals, flags and chords
mutate the board in place, and win/loss is evaluated after every reveal.
Timers, sound and storage stay with the caller.
"""
import logging
import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Tuple

from .board import Board
from .cell import Cell
from .chord import chord as chord_candidates
from .difficulty import Difficulty
from .generator import (
    calculate_numbers,
    ensure_first_click_safety,
    generate_board,
)
from .reveal import (
    check_loss,
    check_win,
    get_wrong_flags,
    reveal_all_mines,
    reveal_cell,
)


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Lifecycle of a game."""

    INITIAL = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()


def make_seed() -> str:
    """Seed string derived from the wall clock."""
    return str(time.time_ns())


# ============================================================================
# Game Session
# ============================================================================

@dataclass
class GameSession:
    """
    State of one game from ``new_game`` until the next ``new_game``.

    Attributes:
        difficulty: Settings of the current game, None before the first
            ``new_game``.
        board: The grid. Empty and mine-free until the first reveal.
        status: Lifecycle status.
        timer: Elapsed seconds, advanced by the caller via ``update_timer``.
        flags: Number of currently flagged cells.
        first_click: True until mines have been placed.
        seed: Seed string for mine placement. Filled from the wall clock at
            the first reveal when not supplied.
    """

    difficulty: Optional[Difficulty] = None
    board: Board = field(default_factory=lambda: Board(0, 0))
    status: GameStatus = GameStatus.INITIAL
    timer: int = 0
    flags: int = 0
    first_click: bool = True
    seed: Optional[str] = None

    # ========================================================================
    # Lifecycle
    # ========================================================================

    def new_game(
        self, difficulty: Difficulty, seed: Optional[str] = None
    ) -> None:
        """Reset every counter and install an empty board for the settings."""
        self.difficulty = difficulty
        self.board = Board.empty(difficulty.rows, difficulty.cols)
        self.status = GameStatus.INITIAL
        self.timer = 0
        self.flags = 0
        self.first_click = True
        self.seed = seed

    def start_game(self) -> None:
        """Switch to PLAYING. Does nothing if already playing or over."""
        if self.status == GameStatus.INITIAL:
            self.status = GameStatus.PLAYING

    def end_game(self, result: GameStatus) -> None:
        """
        Finish the game.

        Args:
            result: GameStatus.WON or GameStatus.LOST.

        Raises:
            ValueError: If result is not a terminal status.
        """
        if result not in (GameStatus.WON, GameStatus.LOST):
            raise ValueError(f"Cannot end game with status {result.name}")
        self.status = result
        logger.info(
            "Game %s after %d seconds (seed %r)",
            result.name.lower(), self.timer, self.seed,
        )

    def update_timer(self) -> None:
        """Advance the elapsed time by one second."""
        self.timer += 1

    # ========================================================================
    # Player Actions
    # ========================================================================

    def reveal(self, row: int, col: int) -> bool:
        """
        Reveal a cell.

        On the first reveal the mines are placed from the session seed and
        moved away from the clicked cell and its neighbors. Revealing a mine
        loses the game and exposes every mine; revealing the last safe cell
        wins it.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            True if the reveal happened, False otherwise.
        """
        if not self._can_reveal(row, col):
            return False

        if self.status == GameStatus.INITIAL:
            self.start_game()

        if self.first_click:
            self._handle_first_click(row, col)

        reveal_cell(self.board, row, col)
        self._check_end_conditions()
        return True

    def _can_reveal(self, row: int, col: int) -> bool:
        """Check if a cell can be revealed."""
        if self.difficulty is None or self.is_over:
            return False
        cell = self.board.get_cell(row, col)
        return cell is not None and cell.is_hidden

    def _handle_first_click(self, row: int, col: int) -> None:
        """Place mines, keep the click safe and install the new board."""
        if self.seed is None:
            self.seed = make_seed()

        board = generate_board(
            self.difficulty.rows,
            self.difficulty.cols,
            self.difficulty.mines,
            self.seed,
        )
        board = ensure_first_click_safety(calculate_numbers(board), row, col)
        for cell in self.board.cells():
            if cell.is_flagged:
                board.grid[cell.row][cell.col].toggle_flag()

        self.board = board
        self.first_click = False

    def _check_end_conditions(self) -> None:
        """End the game if a mine is revealed or every safe cell is."""
        if check_loss(self.board):
            reveal_all_mines(self.board)
            self.end_game(GameStatus.LOST)
        elif check_win(self.board, self.difficulty.mines):
            self.end_game(GameStatus.WON)

    def flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if flag was toggled, False otherwise.
        """
        if self.difficulty is None or self.is_over:
            return False
        cell = self.board.get_cell(row, col)
        if cell is None or not cell.toggle_flag():
            return False
        self.flags += 1 if cell.is_flagged else -1
        return True

    def chord(self, row: int, col: int) -> List[Cell]:
        """
        Reveal the hidden neighbors of a satisfied numbered cell.

        Candidates are revealed one at a time and the game end conditions
        are checked after each, so a wrong flag loses exactly as a manual
        click would.

        Returns:
            The candidate cells that were revealed, in order.
        """
        if self.status != GameStatus.PLAYING:
            return []

        revealed = []
        for cell in chord_candidates(self.board, row, col):
            if self.is_over:
                break
            if not cell.is_hidden:
                continue
            reveal_cell(self.board, cell.row, cell.col)
            revealed.append(cell)
            self._check_end_conditions()
        return revealed

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self.status == GameStatus.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self.status == GameStatus.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self.status == GameStatus.LOST

    @property
    def is_over(self) -> bool:
        """Check if game was won or lost."""
        return self.status in (GameStatus.WON, GameStatus.LOST)

    @property
    def mines_remaining(self) -> int:
        """Mine count minus flags placed. Can go negative."""
        if self.difficulty is None:
            return 0
        return self.difficulty.mines - self.flags

    def wrong_flags(self) -> List[Tuple[int, int]]:
        """Flags placed on safe cells, for post-game review."""
        return get_wrong_flags(self.board)
