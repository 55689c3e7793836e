from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

import pygame

from falling_blocks.game import RGB, Cell, GameState


def _color_for_cell(cell: Cell) -> Tuple[int, int, int]:
    return RGB.get(cell.colour, (200, 200, 200))


@dataclass(frozen=True)
class RenderConfig:
    canvas_width: int = 200
    canvas_height: int = 400
    preview_width: int = 160
    preview_height: int = 80
    grid_width: int = 10
    grid_height: int = 20
    margin: int = 20

    @property
    def block_width(self) -> int:
        return self.canvas_width // self.grid_width

    @property
    def block_height(self) -> int:
        return self.canvas_height // self.grid_height

    @property
    def window_size(self) -> Tuple[int, int]:
        width = self.margin * 3 + self.canvas_width + self.preview_width
        height = self.margin * 2 + self.canvas_height
        return width, height


class Renderer:
    """Draws a GameState. The main grid is rebuilt only when its cells change."""

    def __init__(self, config: RenderConfig | None = None) -> None:
        self.config = config or RenderConfig()
        self._board: pygame.Surface | None = None
        self._settled: Tuple[Cell, ...] | None = None
        self.font: pygame.font.Font | None = None

    def _blit_cells(self, surf: pygame.Surface, cells: Iterable[Cell]) -> None:
        bw, bh = self.config.block_width, self.config.block_height
        for cell in cells:
            # Cells above the visible board are skipped
            if cell.y < 0:
                continue
            rect = pygame.Rect(cell.x * bw, cell.y * bh, bw - 1, bh - 1)
            pygame.draw.rect(surf, _color_for_cell(cell), rect)

    def _board_surface(self, state: GameState) -> pygame.Surface:
        # Several states may be folded per frame, so key on the settled cells
        if self._board is None or state.main_grid_cubes != self._settled:
            surf = pygame.Surface((self.config.canvas_width, self.config.canvas_height))
            surf.fill((30, 30, 36))
            self._blit_cells(surf, state.main_grid_cubes)
            self._board = surf
            self._settled = state.main_grid_cubes
        return self._board

    def render_board(self, state: GameState) -> pygame.Surface:
        """Settled grid with the falling piece on top, in board pixels."""
        board = self._board_surface(state).copy()
        self._blit_cells(board, state.current_cubes)
        return board

    def _preview_surface(self, state: GameState) -> pygame.Surface:
        surf = pygame.Surface((self.config.preview_width, self.config.preview_height))
        surf.fill((30, 30, 36))
        self._blit_cells(surf, state.preview_grid_cubes)
        return surf

    def draw(self, screen: pygame.Surface, state: GameState) -> None:
        cfg = self.config
        board = self.render_board(state)
        screen.fill((10, 10, 14))
        screen.blit(board, (cfg.margin, cfg.margin))
        side_x = cfg.margin * 2 + cfg.canvas_width
        screen.blit(self._preview_surface(state), (side_x, cfg.margin))

        if self.font is None:
            self.font = pygame.font.SysFont(None, 24)
        lines = [
            f"Level: {state.level}",
            f"Score: {state.score}",
            f"High score: {state.high_score}",
        ]
        y_text = cfg.margin * 2 + cfg.preview_height
        for i, txt in enumerate(lines):
            img = self.font.render(txt, True, (230, 230, 230))
            screen.blit(img, (side_x, y_text + i * 22))
        if state.game_end:
            over = self.font.render("Game Over - Press R to restart", True, (255, 100, 100))
            screen.blit(over, (cfg.margin, 2))
        pygame.display.flip()
