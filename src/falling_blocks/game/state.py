from __future__ import annotations

from dataclasses import dataclass

from .config import DEFAULT_CONFIG, GameConfig
from .pieces import Cells, generate_tetromino
from .rng import hash_seed


@dataclass(frozen=True)
class GameState:
    """Snapshot of a game. Never mutated; every action yields a new one.

    `previous_main_grid_cubes` and `update_grid` exist for renderers that
    redraw the settled grid only when it changed. `hold_on_cooldown` is
    carried for shape compatibility and gates nothing.
    """

    # Ticks
    game_tick: int
    current_tick: int
    drop_tick: int

    # Cubes
    current_cubes: Cells
    main_grid_cubes: Cells
    previous_main_grid_cubes: Cells
    preview_grid_cubes: Cells

    # Game mechanics
    hold_on_cooldown: bool
    update_grid: bool
    rng: int
    level: int
    score: int
    lines_cleared: int
    high_score: int
    game_end: bool


def initial_state(seed: int, config: GameConfig = DEFAULT_CONFIG) -> GameState:
    return GameState(
        game_tick=0,
        current_tick=0,
        drop_tick=config.rules.initial_drop_tick,
        current_cubes=(),
        main_grid_cubes=(),
        previous_main_grid_cubes=(),
        preview_grid_cubes=generate_tetromino(seed, config.preview_x, config.preview_y, "p"),
        hold_on_cooldown=False,
        update_grid=False,
        rng=hash_seed(seed),
        level=1,
        score=0,
        lines_cleared=0,
        high_score=0,
        game_end=False,
    )
