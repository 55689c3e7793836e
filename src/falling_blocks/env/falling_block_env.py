from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_blocks.game import (
    DEFAULT_CONFIG,
    Action,
    Colour,
    FallingBlockGame,
    GameConfig,
    GameGrid,
    RGB,
    hash_seed,
    index_of_colour,
)


logger = logging.getLogger(__name__)


class FallingBlockEnv(gym.Env):
    """One env step is one engine action; the reward is the score gained."""

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 max_steps: int = 10_000) -> None:
        super().__init__()
        self.config = config or DEFAULT_CONFIG
        self.grid = GameGrid(self.config.width, self.config.height)
        self.game = FallingBlockGame(self.config, seed=0)
        self.render_mode = render_mode
        self.max_steps = int(max_steps)

        h, w = self.config.height, self.config.width
        self.observation_space = spaces.Dict(
            {
                "grid": spaces.Box(low=-len(Colour), high=len(Colour), shape=(h, w), dtype=np.int8),
                "preview": spaces.Discrete(len(Colour)),
            }
        )
        self.action_space = spaces.Discrete(len(Action))
        self._steps = 0

    def _get_obs(self) -> Dict[str, Any]:
        state = self.game.state
        return {
            "grid": self.grid.occupancy(state.main_grid_cubes, state.current_cubes),
            "preview": index_of_colour(state.preview_grid_cubes[0].colour),
        }

    def _get_info(self) -> Dict[str, Any]:
        state = self.game.state
        return {
            "score": state.score,
            "level": state.level,
            "lines_cleared": state.lines_cleared,
            "high_score": state.high_score,
            "max_height": max(self.grid.column_heights(state.main_grid_cubes)),
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        # Engine seeds come from the env's np_random so gym seeding stays reproducible
        start = hash_seed(int(self.np_random.integers(0, 1000)))
        self.game = FallingBlockGame(self.config, seed=start)
        self._steps = 0
        logger.debug("reset env with engine seed %d", start)
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        before = self.game.state.score
        state = self.game.step(Action(int(action)))
        self._steps += 1
        reward = float(state.score - before)
        terminated = bool(state.game_end)
        truncated = self._steps >= self.max_steps
        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            return None
        state = self.game.state
        cell = 12
        h, w = self.config.height, self.config.width
        img = np.full((h * cell, w * cell, 3), 30, dtype=np.uint8)
        for c in state.main_grid_cubes + state.current_cubes:
            if 0 <= c.y < h and 0 <= c.x < w:
                img[c.y * cell : (c.y + 1) * cell, c.x * cell : (c.x + 1) * cell, :] = RGB[c.colour]
        return img

    def close(self) -> None:
        pass
