from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Tuple

import pytest

from falling_blocks.game import Cell, Colour, GameState, initial_state
from falling_blocks.game.grid import cell_identity


def make_cells(colour: Colour, coords: Iterable[Tuple[int, int]], group: str = "c") -> Tuple[Cell, ...]:
    return tuple(Cell(x, y, colour, f"{group}{n}") for n, (x, y) in enumerate(coords, start=1))


def settled_cells(coords: Iterable[Tuple[int, int]], colour: Colour = Colour.RED) -> Tuple[Cell, ...]:
    return tuple(Cell(x, y, colour, cell_identity(x, y)) for x, y in coords)


def with_board(state: GameState, current=(), settled=(), **changes) -> GameState:
    return replace(state, current_cubes=tuple(current), main_grid_cubes=tuple(settled), **changes)


@pytest.fixture
def state() -> GameState:
    # seed 6 scales to the cyan I piece
    return initial_state(6)
