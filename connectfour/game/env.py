"""
env.py - Gymnasium environment wrapping the Connect Four engine

Both players act through the same environment: each ``step`` drops a piece
for whichever player is to move. Rewards are from the point of view of the
player who just acted.
"""

from typing import Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from connectfour.debug import debug
from connectfour.game.engine import GameEngine, MoveOutcome, PlacementResult
from connectfour.utils import ROWS, COLS, Player


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Rejected moves (full column, out-of-range column, move after game end)
    leave the board untouched and end the episode as truncated.
    """

    metadata = {'render_modes': ['ascii', 'human']}

    reward_win = 1.0
    reward_tie = 0.0
    reward_step = 0.0
    reward_rejected = -1.0

    def __init__(self, render_mode: Optional[str] = None):
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        debug.debug("Initializing ConnectFourEnv", "env")
        self.engine = GameEngine()
        self.render_mode = render_mode

        self.action_space = spaces.Discrete(COLS)
        self.observation_space = spaces.Box(
            low=Player.EMPTY.value, high=Player.TWO.value, shape=(ROWS, COLS), dtype=np.int8
        )

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        super().reset(seed=seed)
        self.engine.initialize()

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Drop a piece for the player to move.

        Args:
            action: Column index

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        placement = self.engine.drop_piece(action)
        outcome = placement.outcome

        terminated = False
        truncated = False
        if outcome == MoveOutcome.WIN:
            reward = self.reward_win
            terminated = True
        elif outcome == MoveOutcome.TIE:
            reward = self.reward_tie
            terminated = True
        elif outcome == MoveOutcome.PLACED:
            reward = self.reward_step
        else:
            debug.warning(f"Rejected action {action!r}: {outcome.name}", "env")
            reward = self.reward_rejected
            truncated = True

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, truncated, self._get_info(placement)

    def render(self) -> Optional[str]:
        if self.render_mode == "ascii":
            return self.engine.render()
        if self.render_mode == "human":
            print(self.engine.render())
        return None

    def _get_observation(self) -> np.ndarray:
        return self.engine.board.get_state()

    def _get_info(self, placement: Optional[PlacementResult] = None) -> Dict:
        last = self.engine.last_placement
        return {
            'outcome': placement.outcome.name if placement else None,
            'current_player': self.engine.current_player.value,
            'valid_moves': self.engine.get_valid_moves(),
            'moves_made': self.engine.moves_made,
            'game_result': self.engine.result.name,
            'last_placement': (last.row, last.column) if last else None,
        }
