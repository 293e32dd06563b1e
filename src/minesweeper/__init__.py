"""
Minesweeper rules engine.

Provides seeded board generation, reveal and chord logic, win/loss
detection, the game session state and a Gymnasium environment.
"""
from .cell import Cell, CellState
from .board import Board
from .seeding import SeededRandom, seed_to_state
from .generator import (
    generate_board,
    calculate_numbers,
    ensure_first_click_safety,
    validate_custom_difficulty,
)
from .reveal import (
    get_neighbors,
    get_flagged_neighbors,
    reveal_cell,
    check_win,
    check_loss,
    get_wrong_flags,
    reveal_all_mines,
)
from .chord import can_chord, chord
from .difficulty import Difficulty, BEGINNER, INTERMEDIATE, EXPERT, PRESETS
from .session import GameSession, GameStatus
from .environment import MinesweeperEnv, make_vec_env

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "SeededRandom",
    "seed_to_state",
    "generate_board",
    "calculate_numbers",
    "ensure_first_click_safety",
    "validate_custom_difficulty",
    "get_neighbors",
    "get_flagged_neighbors",
    "reveal_cell",
    "check_win",
    "check_loss",
    "get_wrong_flags",
    "reveal_all_mines",
    "can_chord",
    "chord",
    "Difficulty",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "PRESETS",
    "GameSession",
    "GameStatus",
    "MinesweeperEnv",
    "make_vec_env",
]
