from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Tuple

from .rng import scale


class Colour(str, Enum):
    YELLOW = "yellow"
    BLUE = "blue"
    ORANGE = "orange"
    RED = "red"
    GREEN = "green"
    PURPLE = "purple"
    CYAN = "cyan"


@dataclass(frozen=True)
class Cell:
    x: int
    y: int
    colour: Colour
    identity: str


Cells = Tuple[Cell, ...]
Coordinates = List[Tuple[int, int]]

# Shape index order; the first coordinate of every template is the pivot.
COLOURS: Tuple[Colour, ...] = tuple(Colour)


def _square(x: int, y: int) -> Coordinates:
    return [(x, y), (x + 1, y), (x, y + 1), (x + 1, y + 1)]


def _j(x: int, y: int) -> Coordinates:
    return [(x, y + 1), (x + 1, y + 1), (x - 1, y + 1), (x - 1, y)]


def _l(x: int, y: int) -> Coordinates:
    return [(x, y + 1), (x + 1, y + 1), (x - 1, y + 1), (x + 1, y)]


def _s(x: int, y: int) -> Coordinates:
    return [(x, y), (x - 1, y), (x, y + 1), (x + 1, y + 1)]


def _z(x: int, y: int) -> Coordinates:
    return [(x, y), (x + 1, y), (x, y + 1), (x - 1, y + 1)]


def _t(x: int, y: int) -> Coordinates:
    return [(x, y + 1), (x + 1, y + 1), (x - 1, y + 1), (x, y)]


def _i(x: int, y: int) -> Coordinates:
    return [(x, y), (x - 1, y), (x + 1, y), (x + 2, y)]


SHAPE_TEMPLATES: Dict[Colour, Callable[[int, int], Coordinates]] = {
    Colour.YELLOW: _square,
    Colour.BLUE: _j,
    Colour.ORANGE: _l,
    Colour.RED: _s,
    Colour.GREEN: _z,
    Colour.PURPLE: _t,
    Colour.CYAN: _i,
}


def create_tetromino(colour: Colour, coordinates: Coordinates, group: str) -> Cells:
    return tuple(
        Cell(x=x, y=y, colour=colour, identity=f"{group}{n}")
        for n, (x, y) in enumerate(coordinates, start=1)
    )


def generate_tetromino(selector: int, x: int, y: int, group: str) -> Cells:
    """Build one of the 7 tetrominoes anchored at (x, y).

    `selector` is reduced with `scale`, so a raw generator value or a shape
    index both work. `group` only prefixes the cell identities.
    """
    colour = COLOURS[scale(selector)]
    return create_tetromino(colour, SHAPE_TEMPLATES[colour](x, y), group)


def index_of_colour(colour: Colour | str) -> int:
    return COLOURS.index(Colour(colour))


RGB: Dict[Colour, Tuple[int, int, int]] = {
    Colour.YELLOW: (240, 240, 0),
    Colour.BLUE: (0, 0, 240),
    Colour.ORANGE: (240, 160, 0),
    Colour.RED: (240, 0, 0),
    Colour.GREEN: (0, 240, 0),
    Colour.PURPLE: (160, 0, 240),
    Colour.CYAN: (0, 240, 240),
}
