"""Input handling for the pygame front-end."""

from __future__ import annotations

import logging
from typing import Optional

import pygame

from gridmenu.core.events import ClickDecision, InteractionEvent

logger = logging.getLogger(__name__)


class InputHandler:
    """Translate pygame events into engine interactions."""

    def __init__(self, app) -> None:
        self.app = app

    # ------------------------------------------------------------------
    # Event entry point
    def process_event(self, event: pygame.event.Event) -> Optional[ClickDecision]:
        if event.type == pygame.QUIT:
            self.app.running = False
            return None
        if event.type == pygame.KEYDOWN:
            self._handle_key(event.key)
            return None
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            return self._handle_click(event.pos)
        return None

    # ------------------------------------------------------------------
    # Internal helpers
    def _handle_key(self, key: int) -> None:
        app = self.app
        if key == pygame.K_ESCAPE:
            if app.engine.displayed_menu(app.user) is not None:
                app.engine.close(app.user)
            else:
                app.running = False
            return
        if key == pygame.K_BACKSPACE:
            app.engine.back(app.user)
            return
        if key == pygame.K_m:
            app.engine.open(app.menus.main)

    def _handle_click(self, position: tuple[int, int]) -> Optional[ClickDecision]:
        app = self.app
        grid = app.host.displayed(app.user)
        slot = app.host.slot_at(position, grid)
        if slot is None:
            return None
        decision = app.engine.on_click(
            InteractionEvent(user=app.user, slot=slot, clicked=grid.get(slot), grid=grid)
        )
        logger.debug("Click on slot %d resolved to %s", slot, decision.value)
        return decision


__all__ = ["InputHandler"]
