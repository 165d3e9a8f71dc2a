"""Pygame front-end for gridmenu."""

from gridmenu.pygame.app import PygameMenuApp, run_pygame
from gridmenu.pygame.host import PygameGridHost

__all__ = ["PygameGridHost", "PygameMenuApp", "run_pygame"]
