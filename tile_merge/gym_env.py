"""Gymnasium environment wrapper for the tile merge engine.

Observation is the board as an ``(size, size)`` int64 array indexed
``[y, x]`` with ``0`` for empty cells. Reward is the delta of
``state.score`` per step (the sum of values produced by merges).
``terminated`` is ``True`` once the phase is ``GAME_OVER``; episodes are
never truncated by the environment itself.

Usage:

``env = TileMergeEnv(size=4)``

The environment is purposely *not* vectorized; wrap externally if needed.
"""

from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from tile_merge.actions import Action, GymAction
from tile_merge.config import GameConfig
from tile_merge.levels.board import state_to_array
from tile_merge.state import State
from tile_merge.step import new_game, step
from tile_merge.types import Phase

ObsType = np.ndarray

_MAX_TILE_VALUE = 2**31 - 1


def env_status_dict(state: State) -> Dict[str, Any]:
    """Status portion of ``info`` (score, best, phase, turn, moved)."""
    return {
        "score": int(state.score),
        "score_best": int(state.score_best),
        "phase": str(state.phase),
        "turn": int(state.turn),
        "moved": bool(state.moved),
    }


class TileMergeEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` implementation over :func:`tile_merge.step.step`.

    The action space is ``Discrete(len(GymAction))``; see
    :mod:`tile_merge.actions`.
    """

    metadata: Dict[str, Any] = {"render_modes": []}

    def __init__(self, size: int = 4, seed: Optional[int] = None) -> None:
        """Create a new environment instance.

        Arguments:
            size: Tiles per side of the board.
            seed: Base seed for the first episode. ``None`` draws one.
        """
        self.config = GameConfig(size=size, seed=seed)
        self.state: Optional[State] = None
        self._score_best = 0

        self.observation_space = spaces.Box(
            low=0, high=_MAX_TILE_VALUE, shape=(size, size), dtype=np.int64
        )
        self.action_space = spaces.Discrete(len(GymAction))

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, Any]]:
        """Start a new episode.

        Arguments:
            seed: Reseeds the episode RNG; later resets continue its stream.
            options: Gymnasium options (unused).

        Returns:
            Observation array and status info per Gymnasium API.
        """
        if seed is None and self.state is None:
            seed = self.config.seed
        super().reset(seed=seed)
        # Episode seed is drawn from the env RNG.
        episode_seed = int(self.np_random.integers(0, 2**31))
        if self.state is not None:
            self._score_best = self.state.score_best
        self.state = new_game(
            GameConfig(size=self.config.size, seed=episode_seed),
            score_best=self._score_best,
        )
        return self._get_obs(), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, Any]]:
        """Apply one environment step.

        Arguments:
            action: Integer index into the ``GymAction`` enum.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        assert self.state is not None, "Call reset() before step()"

        if not 0 <= int(action) < len(GymAction):
            raise ValueError(f"Invalid action: {action}")
        step_action = Action[GymAction(int(action)).name]

        prev_score = self.state.score
        self.state = step(self.state, step_action)
        reward = float(self.state.score - prev_score)
        terminated = self.state.phase == Phase.GAME_OVER
        return self._get_obs(), reward, terminated, False, self._get_info()

    def _get_obs(self) -> ObsType:
        assert self.state is not None
        return state_to_array(self.state)

    def _get_info(self) -> Dict[str, Any]:
        assert self.state is not None
        return env_status_dict(self.state)
