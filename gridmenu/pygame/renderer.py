"""Drawing helpers for the pygame front-end."""

from __future__ import annotations

import zlib
from typing import Callable, Optional, Tuple

import pygame

from gridmenu.core.host import GridHandle
from gridmenu.core.items import MenuItem


def material_color(material: str) -> pygame.Color:
    """Stable muted colour derived from a material name."""
    digest = zlib.crc32(material.encode("utf-8"))
    r = 60 + (digest & 0x7F)
    g = 60 + ((digest >> 8) & 0x7F)
    b = 60 + ((digest >> 16) & 0x7F)
    return pygame.Color(r, g, b)


def draw_cell(
    surface: pygame.Surface,
    rect: pygame.Rect,
    item: Optional[MenuItem],
    font: pygame.font.Font,
) -> None:
    pygame.draw.rect(surface, pygame.Color(36, 40, 54), rect)
    if item is not None and not item.is_empty:
        inner = rect.inflate(-6, -6)
        pygame.draw.rect(surface, material_color(item.material), inner, border_radius=6)
        if not item.hide_tooltip:
            label = item.label.strip() or item.material
            text = font.render(label[:8], True, pygame.Color(240, 240, 240))
            surface.blit(text, text.get_rect(center=inner.center))
        if item.amount > 1:
            count = font.render(str(item.amount), True, pygame.Color("white"))
            surface.blit(count, count.get_rect(bottomright=(inner.right - 3, inner.bottom - 1)))
    pygame.draw.rect(surface, pygame.Color(14, 16, 24), rect, width=1)


def draw_grid(
    surface: pygame.Surface,
    grid: GridHandle,
    slot_rect: Callable[[int], pygame.Rect],
    font: pygame.font.Font,
    *,
    title_pos: Tuple[int, int] = (0, 0),
) -> None:
    title = font.render(grid.title, True, pygame.Color(230, 230, 230))
    surface.blit(title, title_pos)
    for slot in range(grid.size):
        draw_cell(surface, slot_rect(slot), grid.get(slot), font)


def draw_status(
    surface: pygame.Surface,
    message: Optional[str],
    font: pygame.font.Font,
    position: Tuple[int, int],
) -> None:
    if not message:
        return
    text = font.render(message, True, pygame.Color(180, 188, 200))
    surface.blit(text, position)


__all__ = ["draw_cell", "draw_grid", "draw_status", "material_color"]
