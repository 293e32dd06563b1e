"""
Gymnasium environment wrapper for the Minesweeper rules engine.

Drives a GameSession through the same reveal calls a UI would make and
exposes the board as a numpy observation.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .difficulty import BEGINNER, Difficulty
from .session import GameSession


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D int8 array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with neighbor mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size rows * cols.
        Action i reveals the cell at (i // cols, i % cols).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed/flagged)
    """

    metadata = {"render_modes": []}

    def __init__(self, difficulty: Optional[Difficulty] = None) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            difficulty: Board settings (default: beginner, 9x9 with 10 mines).
        """
        super().__init__()

        self.difficulty = difficulty or BEGINNER
        self.session = GameSession()
        self.session.new_game(self.difficulty)

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.difficulty.rows, self.difficulty.cols),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.difficulty.total_cells)

        self._steps = 0
        self._total_safe_cells = (
            self.difficulty.total_cells - self.difficulty.mines
        )

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game.

        The session seed string is drawn from ``np_random``, so resetting
        with the same ``seed`` reproduces the mine layout.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        board_seed = str(int(self.np_random.integers(0, 2**32)))
        self.session.new_game(self.difficulty, seed=board_seed)
        self._steps = 0

        return self.session.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Reveal one cell.

        Args:
            action: Cell index to reveal (row * cols + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(row, col)
        observation = self.session.board.get_observation()
        terminated = self.session.is_over

        return observation, reward, terminated, False, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        row = int(action) // self.difficulty.cols
        col = int(action) % self.difficulty.cols
        return row, col

    def _calculate_reward(self, row: int, col: int) -> float:
        """Reveal the cell and score the outcome."""
        if not self.session.reveal(row, col):
            return -0.1
        if self.session.is_won:
            return 10.0
        if self.session.is_lost:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        board = self.session.board
        return {
            "steps": self._steps,
            "revealed": board.count_revealed(),
            "total_safe": self._total_safe_cells,
            "game_state": self.session.status.name,
            "seed": self.session.seed,
            "valid_actions": len(board.get_hidden_positions()),
        }

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for row, col in self.session.board.get_hidden_positions():
            mask[row * self.difficulty.cols + col] = True
        return mask


# ============================================================================
# Vectorized Environment Factory
# ============================================================================

def make_vec_env(
    n_envs: int = 4,
    difficulty: Optional[Difficulty] = None,
) -> gym.vector.VectorEnv:
    """
    Create vectorized environment for parallel rollouts.

    Args:
        n_envs: Number of parallel environments.
        difficulty: Board settings.

    Returns:
        Vectorized environment.
    """
    def make_env() -> MinesweeperEnv:
        return MinesweeperEnv(difficulty=difficulty)

    return gym.vector.AsyncVectorEnv([make_env for _ in range(n_envs)])
