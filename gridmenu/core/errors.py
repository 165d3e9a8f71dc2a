"""Exceptions raised by the menu engine."""

from __future__ import annotations


class MenuError(Exception):
    """Base class for menu library failures."""


class RenderError(MenuError):
    """Computing or writing a menu's cells failed."""

    def __init__(self, menu_name: str, reason: str) -> None:
        super().__init__(f"Failed to render menu '{menu_name}': {reason}")
        self.menu_name = menu_name
        self.reason = reason


__all__ = ["MenuError", "RenderError"]
