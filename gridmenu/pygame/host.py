"""Grid host that draws the displayed menu into a pygame surface."""

from __future__ import annotations

from typing import Dict, Hashable, Iterable, Optional, Tuple

import pygame

from gridmenu.core.host import GridHandle, HeadlessHost
from gridmenu.core.layout import ROW_WIDTH
from gridmenu.pygame.renderer import draw_grid, draw_status


class PygameGridHost(HeadlessHost):
    """Show one user's grids in a window and map mouse positions to slots."""

    def __init__(
        self,
        *,
        cell_size: int = 64,
        margin: int = 16,
        header_height: int = 40,
        footer_height: int = 36,
        max_rows: int = 6,
        permissions: Optional[Dict[Hashable, Iterable[str]]] = None,
    ) -> None:
        super().__init__(permissions)
        self.cell_size = cell_size
        self.margin = margin
        self.header_height = header_height
        self.footer_height = footer_height
        self.max_rows = max_rows

    # ------------------------------------------------------------------
    def window_size(self) -> Tuple[int, int]:
        width = ROW_WIDTH * self.cell_size + self.margin * 2
        height = (
            self.max_rows * self.cell_size
            + self.margin * 2
            + self.header_height
            + self.footer_height
        )
        return width, height

    def grid_origin(self) -> Tuple[int, int]:
        return self.margin, self.margin + self.header_height

    def slot_rect(self, slot: int) -> pygame.Rect:
        origin_x, origin_y = self.grid_origin()
        row, column = divmod(slot, ROW_WIDTH)
        return pygame.Rect(
            origin_x + column * self.cell_size,
            origin_y + row * self.cell_size,
            self.cell_size,
            self.cell_size,
        )

    def slot_at(self, position: Tuple[int, int], grid: Optional[GridHandle]) -> Optional[int]:
        if grid is None:
            return None
        origin_x, origin_y = self.grid_origin()
        x = position[0] - origin_x
        y = position[1] - origin_y
        if x < 0 or y < 0:
            return None
        column = x // self.cell_size
        row = y // self.cell_size
        if column >= ROW_WIDTH:
            return None
        slot = row * ROW_WIDTH + column
        if slot >= grid.size:
            return None
        return slot

    # ------------------------------------------------------------------
    def draw(self, surface: pygame.Surface, user: Hashable, font: pygame.font.Font) -> None:
        surface.fill((18, 20, 28))
        grid = self.displayed(user)
        if grid is not None:
            draw_grid(surface, grid, self.slot_rect, font, title_pos=(self.margin, self.margin))
        messages = self.messages_for(user)
        status = messages[-1] if messages else None
        height = surface.get_height()
        draw_status(surface, status, font, (self.margin, height - self.footer_height))


__all__ = ["PygameGridHost"]
