"""Gymnasium-compatible wrapper around :class:`GameEngine`.

Actions are the engine's command surface:

  0. gravity tick (no player input)
  1. move left
  2. move right
  3. rotate
  4. hard drop

After a left/right/rotate action one gravity tick is applied as well, so the
piece keeps falling whatever the agent does.  Observation is a flat vector
suitable for SB3-style MLP policies:

  - board occupancy with the active piece overlaid (height*width)
  - active piece kind one-hot (7)

Reward is the score gained during the step.  An episode terminates when the
step ended the game (spawn collision), at which point the engine has already
reset itself.
"""

from __future__ import annotations

from typing import Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .config import GameConfig
from .engine import Command, GameEngine
from .events import GameListener
from .pieces import SELECTION_ORDER
from .scoring import ScoreTracker
from .utils import format_grid, render_grid


ACTIONS = (Command.TICK, Command.LEFT, Command.RIGHT, Command.ROTATE, Command.DROP)
NUM_KINDS = len(SELECTION_ORDER)


class _StepListener(GameListener):
    """Collects what happened during one environment step."""

    def __init__(self) -> None:
        self.clear()

    def clear(self) -> None:
        self.game_over = False
        self.points = 0

    def rows_cleared(self, count, blocks, board) -> None:
        self.points += ScoreTracker.points_for_lines(count)

    def game_reset(self) -> None:
        self.game_over = True


class BlockfallEnv(gym.Env):
    metadata = {
        "render_modes": ["ansi"],
        "render_fps": 2,
    }

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        max_steps: Optional[int] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self.config = config or GameConfig()
        self.render_mode = render_mode
        self._listener = _StepListener()
        self._engine = GameEngine(self.config, listeners=[self._listener])
        self._obs_size = self.config.width * self.config.height + NUM_KINDS
        self.action_space = spaces.Discrete(len(ACTIONS))
        self.observation_space = spaces.Box(
            low=0.0, high=1.0, shape=(self._obs_size,), dtype=np.float32
        )
        self._steps = 0
        self._max_steps = max_steps

    @property
    def engine(self) -> GameEngine:
        return self._engine

    # ----------------------- Env API -----------------------
    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        if seed is not None:
            self._engine.state.rng.seed(seed)
        self._engine.reset()
        self._listener.clear()
        self._steps = 0
        return self._observation(), self._info()

    def step(self, action: int):
        command = ACTIONS[int(action)]
        self._listener.clear()

        self._engine.execute(command)
        if command in (Command.LEFT, Command.RIGHT, Command.ROTATE) and not self._listener.game_over:
            self._engine.gravity_tick()

        terminated = self._listener.game_over
        reward = float(self._listener.points)
        self._steps += 1
        truncated = self._max_steps is not None and self._steps >= self._max_steps
        return self._observation(), reward, terminated, truncated, self._info()

    def render(self):
        return format_grid(render_grid(self._engine.board, self._engine.active))

    def close(self):
        return None

    # -------------------- Helpers -------------------------
    def _observation(self) -> np.ndarray:
        grid = np.array(render_grid(self._engine.board, self._engine.active), dtype=np.float32)
        board = (grid > 0).astype(np.float32).reshape(-1)
        kind_oh = np.zeros((NUM_KINDS,), dtype=np.float32)
        active = self._engine.active
        if active is not None:
            kind_oh[SELECTION_ORDER.index(active.kind)] = 1.0
        return np.concatenate([board, kind_oh]).astype(np.float32)

    def _info(self) -> Dict:
        tracker = self._engine.state.tracker
        return {"score": tracker.score, "lines": tracker.lines}
