"""Pygame-powered window for browsing gridmenu menus."""

from __future__ import annotations

import logging
from typing import Hashable, Optional

try:
    import pygame
except ImportError as exc:  # pragma: no cover - depends on runtime environment
    raise RuntimeError(
        "The pygame package is required to run the graphical gridmenu front-end."
    ) from exc

from gridmenu.config import EngineSettings, load_engine_settings
from gridmenu.core.engine import MenuEngine
from gridmenu.core.scheduling import FrameScheduler
from gridmenu.pygame.demo import build_demo_menus
from gridmenu.pygame.host import PygameGridHost
from gridmenu.pygame.input import InputHandler

logger = logging.getLogger(__name__)


class PygameMenuApp:
    """Single-user window driving a :class:`MenuEngine` from the pygame loop."""

    def __init__(
        self,
        user: Hashable = "local",
        *,
        cell_size: int = 64,
        settings: Optional[EngineSettings] = None,
        start_open: bool = True,
        debug: bool = False,
    ) -> None:
        pygame.init()
        pygame.font.init()

        self.user = user
        self.debug = debug
        self.scheduler = FrameScheduler()
        self.host = PygameGridHost(cell_size=cell_size)
        self.engine = MenuEngine(
            self.host,
            settings=settings or load_engine_settings(),
            scheduler=self.scheduler,
        )
        self.menus = build_demo_menus(self.engine, user)
        self.input = InputHandler(self)

        self.screen = pygame.display.set_mode(self.host.window_size())
        pygame.display.set_caption("gridmenu")
        self.font = pygame.font.SysFont("consolas", 14)
        self.clock = pygame.time.Clock()
        self.running = True

        if start_open:
            self.engine.open(self.menus.main)

    # ------------------------------------------------------------------
    def step(self) -> None:
        for event in pygame.event.get():
            self.input.process_event(event)
        # Deferred checks run after this frame's clicks and reopens.
        self.scheduler.run_due()
        self.host.draw(self.screen, self.user, self.font)
        pygame.display.flip()

    def run(self) -> None:
        try:
            while self.running:
                self.step()
                self.clock.tick(30)
        finally:
            pygame.quit()


def run_pygame(debug: bool = False, **kwargs) -> None:
    app = PygameMenuApp(debug=debug, **kwargs)
    logger.info("Starting gridmenu window for %s", app.user)
    app.run()


__all__ = ["PygameMenuApp", "run_pygame"]
