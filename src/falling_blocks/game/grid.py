from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Iterable, List, Tuple

import numpy as np

from .pieces import Cell, Cells, Colour, index_of_colour


Rows = Tuple[Cells, ...]


def cell_identity(x: int, y: int) -> str:
    return f"x{x}y{y}"


def translate(cells: Iterable[Cell], dx: int, dy: int, regenerate_identity: bool = False) -> Cells:
    """Shift every cell by (dx, dy).

    With `regenerate_identity` the identities are derived from the new
    coordinates, which is how cells are keyed once they settle.
    """
    return tuple(
        Cell(
            x=c.x + dx,
            y=c.y + dy,
            colour=c.colour,
            identity=cell_identity(c.x + dx, c.y + dy) if regenerate_identity else c.identity,
        )
        for c in cells
    )


@dataclass(frozen=True)
class GameGrid:
    """Geometry of the playfield.

    The grid holds no cells itself: settled cells are passed in, so every
    method is a pure function of its arguments. y=0 is the top row and pieces
    may hang above it with negative y.
    """

    width: int = 10
    height: int = 20

    def is_out_of_bounds(self, piece: Iterable[Cell]) -> bool:
        return any(c.x < 0 or c.x >= self.width or c.y >= self.height for c in piece)

    def is_colliding(self, piece: Iterable[Cell], settled: Iterable[Cell]) -> bool:
        occupied = {(c.x, c.y) for c in settled}
        return any((c.x, c.y) in occupied or c.y >= self.height for c in piece)

    def is_valid_placement(self, piece: Cells, settled: Cells, game_end: bool = False) -> bool:
        return not self.is_colliding(piece, settled) and not self.is_out_of_bounds(piece) and not game_end

    def materialize_rows(self, settled: Iterable[Cell]) -> Rows:
        rows: List[List[Cell]] = [[] for _ in range(self.height)]
        for c in settled:
            if 0 <= c.y < self.height:
                rows[c.y].append(c)
        return tuple(tuple(row) for row in rows)

    def full_row_indices(self, rows: Rows) -> List[int]:
        return [y for y, row in enumerate(rows) if len(row) == self.width]

    def clear_row(self, settled: Cells, y: int) -> Cells:
        """Remove row `y` and drop everything above it by one."""
        return tuple(
            Cell(x=c.x, y=c.y + 1, colour=c.colour, identity=cell_identity(c.x, c.y + 1)) if c.y <= y else c
            for c in settled
            if c.y != y
        )

    def clear_full_rows(self, settled: Cells) -> Tuple[Cells, int]:
        # Ascending order: each clear only shifts rows above the next full row
        full_rows = self.full_row_indices(self.materialize_rows(settled))
        if not full_rows:
            return settled, 0
        return reduce(self.clear_row, full_rows, settled), len(full_rows)

    def is_rotatable(self, piece: Cells) -> bool:
        """The square and the empty piece never rotate."""
        return bool(piece) and piece[0].colour != Colour.YELLOW

    def rotate(self, piece: Cells, settled: Cells) -> Cells:
        """Rotate 90 degrees about cell 0, then kick back inside the side walls.

        Pieces that are not rotatable are returned as is, and so is the
        unrotated piece when the rotated one would collide.
        """
        if not self.is_rotatable(piece):
            return piece
        px, py = piece[0].x, piece[0].y
        rotated = tuple(
            Cell(x=px - (c.y - py), y=py + (c.x - px), colour=c.colour, identity=c.identity) for c in piece
        )
        min_x = min(c.x for c in rotated)
        max_x = max(c.x for c in rotated)
        if min_x < 0:
            shift = -min_x
        elif max_x >= self.width:
            shift = self.width - max_x - 1
        else:
            shift = 0
        kicked = translate(rotated, shift, 0)
        if self.is_colliding(kicked, settled):
            return piece
        return kicked

    def drop_distance(self, piece: Cells, settled: Cells) -> int:
        """Rows the piece can fall before it rests on the floor or the stack."""
        distance = self.height
        for x in sorted({c.x for c in piece}):
            lowest = max(c.y for c in piece if c.x == x)
            below = [c.y for c in settled if c.x == x and c.y > lowest]
            floor = min(below) if below else self.height
            distance = min(distance, floor - lowest - 1)
        return distance

    def occupancy(self, settled: Iterable[Cell], piece: Iterable[Cell] = ()) -> np.ndarray:
        """Matrix view: colour index + 1 for settled cells, negated for the piece."""
        grid = np.zeros((self.height, self.width), dtype=np.int8)
        for c in settled:
            if 0 <= c.y < self.height and 0 <= c.x < self.width:
                grid[c.y, c.x] = index_of_colour(c.colour) + 1
        for c in piece:
            if 0 <= c.y < self.height and 0 <= c.x < self.width:
                grid[c.y, c.x] = -(index_of_colour(c.colour) + 1)
        return grid

    def column_heights(self, settled: Iterable[Cell]) -> List[int]:
        heights = [0] * self.width
        for c in settled:
            if 0 <= c.x < self.width:
                heights[c.x] = max(heights[c.x], self.height - c.y)
        return heights
