from __future__ import annotations

import logging
from dataclasses import replace
from enum import IntEnum
from functools import reduce
from itertools import accumulate
from typing import Iterable, Iterator, Optional

import numpy as np

from .config import DEFAULT_CONFIG, GameConfig
from .grid import GameGrid, translate
from .pieces import Cells, generate_tetromino, index_of_colour
from .rng import hash_seed, random_seed, scale
from .state import GameState, initial_state


logger = logging.getLogger(__name__)


class Action(IntEnum):
    TICK = 0
    MOVE_LEFT = 1
    MOVE_RIGHT = 2
    MOVE_DOWN = 3
    ROTATE = 4
    HARD_DROP = 5
    RESET = 6


def _grid(config: GameConfig) -> GameGrid:
    return GameGrid(config.width, config.height)


def _land(s: GameState, settled: Cells, moved: Cells, spawn: bool, config: GameConfig) -> GameState:
    """Clear full rows, score them and, on `spawn`, bring in the next piece."""
    final_settled, lines = _grid(config).clear_full_rows(settled)
    rules = config.rules
    score = s.score + rules.score_for_lines(lines)
    if spawn:
        current = generate_tetromino(
            index_of_colour(s.preview_grid_cubes[0].colour), config.spawn_x, config.spawn_y, "c"
        )
        preview = generate_tetromino(scale(s.rng), config.preview_x, config.preview_y, "p")
        rng = hash_seed(s.rng)
    else:
        current, preview, rng = moved, s.preview_grid_cubes, s.rng
    return replace(
        s,
        current_cubes=current,
        main_grid_cubes=final_settled,
        previous_main_grid_cubes=s.main_grid_cubes,
        preview_grid_cubes=preview,
        hold_on_cooldown=False if spawn else s.hold_on_cooldown,
        update_grid=spawn,
        rng=rng,
        level=rules.level_for_score(score),
        score=score,
        lines_cleared=s.lines_cleared + lines,
        high_score=max(s.high_score, score),
        game_end=any(c.y < 0 for c in final_settled),
    )


def _game_tick(s: GameState, config: GameConfig) -> GameState:
    grid = _grid(config)
    moved = translate(s.current_cubes, 0, 1)
    landed = grid.is_colliding(moved, s.main_grid_cubes)
    settled = s.main_grid_cubes + translate(s.current_cubes, 0, 0, True) if landed else s.main_grid_cubes
    spawn = landed or not s.current_cubes
    return replace(_land(s, settled, moved, spawn, config), game_tick=s.game_tick + 1)


def _tick(s: GameState, config: GameConfig) -> GameState:
    current_tick = s.current_tick + 1
    if current_tick != s.drop_tick:
        return replace(s, current_tick=current_tick, update_grid=False)
    rolled = replace(
        s,
        current_tick=0,
        drop_tick=config.rules.drop_tick_for_level(s.level),
        update_grid=False,
    )
    return _game_tick(rolled, config)


def _move(s: GameState, dx: int, dy: int, config: GameConfig) -> GameState:
    moved = translate(s.current_cubes, dx, dy)
    valid = _grid(config).is_valid_placement(moved, s.main_grid_cubes, s.game_end)
    return replace(s, current_cubes=moved if valid else s.current_cubes, update_grid=False)


def _rotate(s: GameState, config: GameConfig) -> GameState:
    grid = _grid(config)
    if not grid.is_rotatable(s.current_cubes):
        return s
    return replace(s, current_cubes=grid.rotate(s.current_cubes, s.main_grid_cubes), update_grid=False)


def _hard_drop(s: GameState, config: GameConfig) -> GameState:
    distance = _grid(config).drop_distance(s.current_cubes, s.main_grid_cubes)
    dropped = translate(s.current_cubes, 0, distance, True)
    return _land(s, s.main_grid_cubes + dropped, dropped, True, config)


def _reset(s: GameState, config: GameConfig) -> GameState:
    if not s.game_end:
        return s
    return replace(
        s,
        game_tick=0,
        current_tick=0,
        drop_tick=config.rules.initial_drop_tick,
        current_cubes=(),
        main_grid_cubes=(),
        previous_main_grid_cubes=s.main_grid_cubes,
        update_grid=False,
        level=1,
        score=0,
        lines_cleared=0,
        game_end=False,
    )


def apply(s: GameState, action: Action, config: GameConfig = DEFAULT_CONFIG) -> GameState:
    """Fold one action onto a state and return the next state.

    Illegal moves leave the state unchanged. Once the game has ended only
    RESET has any effect.
    """
    action = Action(action)
    if s.game_end and action != Action.RESET:
        return s
    if action == Action.TICK:
        return _tick(s, config)
    elif action == Action.MOVE_LEFT:
        return _move(s, -1, 0, config)
    elif action == Action.MOVE_RIGHT:
        return _move(s, 1, 0, config)
    elif action == Action.MOVE_DOWN:
        return _move(s, 0, 1, config)
    elif action == Action.ROTATE:
        return _rotate(s, config)
    elif action == Action.HARD_DROP:
        return _hard_drop(s, config)
    elif action == Action.RESET:
        return _reset(s, config)
    raise ValueError(f"Unhandled action: {action!r}")


def run(s: GameState, actions: Iterable[Action], config: GameConfig = DEFAULT_CONFIG) -> Iterator[GameState]:
    """Yield every state produced by folding `actions`, not including `s`."""
    states = accumulate(actions, lambda state, a: apply(state, a, config), initial=s)
    next(states)
    return states


def reduce_state(s: GameState, actions: Iterable[Action], config: GameConfig = DEFAULT_CONFIG) -> GameState:
    return reduce(lambda state, a: apply(state, a, config), actions, s)


class FallingBlockGame:
    """Holds the latest state of one session and folds actions onto it."""

    def __init__(self, config: Optional[GameConfig] = None, seed: Optional[int] = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self.seed = random_seed() if seed is None else seed
        self.state = initial_state(self.seed, self.config)

    @property
    def game_over(self) -> bool:
        return self.state.game_end

    def step(self, action: Action) -> GameState:
        before = self.state
        self.state = apply(before, action, self.config)
        if self.state.lines_cleared > before.lines_cleared:
            logger.debug(
                "cleared %d line(s), score %d, level %d",
                self.state.lines_cleared - before.lines_cleared,
                self.state.score,
                self.state.level,
            )
        if self.state.game_end and not before.game_end:
            logger.info("game over at score %d (high score %d)", self.state.score, self.state.high_score)
        return self.state

    def reset(self) -> GameState:
        """Restart after a game over; a no-op while the game is running."""
        if self.state.game_end:
            logger.debug("resetting board, high score %d", self.state.high_score)
        return self.step(Action.RESET)

    def get_state(self) -> np.ndarray:
        # Overlay current piece on the settled grid
        grid = GameGrid(self.config.width, self.config.height)
        return grid.occupancy(self.state.main_grid_cubes, self.state.current_cubes)
