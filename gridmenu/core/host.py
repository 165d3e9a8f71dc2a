"""Contract between the menu engine and whatever displays the grids."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterable, List, Optional, Set, Tuple

from gridmenu.core.items import MenuItem

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class GridHandle:
    """A displayable container of ``size`` cells owned by ``holder``."""

    title: str
    size: int
    holder: Any = None
    cells: Dict[int, MenuItem] = field(default_factory=dict)

    def get(self, slot: int) -> Optional[MenuItem]:
        return self.cells.get(slot)


class GridHost(ABC):
    """Operations the engine needs from the host environment."""

    @abstractmethod
    def create_grid(self, title: str, size: int, holder: Any = None) -> GridHandle:
        """Allocate an empty container."""

    @abstractmethod
    def set_cell(self, grid: GridHandle, slot: int, item: Optional[MenuItem]) -> None:
        """Write (or clear, with ``None``) one cell."""

    @abstractmethod
    def show(self, grid: GridHandle, user: Hashable) -> None:
        """Present ``grid`` to ``user``, replacing what they were viewing."""

    @abstractmethod
    def close(self, user: Hashable) -> None:
        """Close whatever container ``user`` is viewing."""

    @abstractmethod
    def displayed(self, user: Hashable) -> Optional[GridHandle]:
        """The container ``user`` is currently viewing, if any."""

    @abstractmethod
    def has_permission(self, user: Hashable, permission: str) -> bool:
        ...

    @abstractmethod
    def send_message(self, user: Hashable, text: str) -> None:
        ...


class HeadlessHost(GridHost):
    """In-memory host that tracks displayed grids without drawing them.

    Closing a grid here does not emit close events; front-ends that own an
    event loop forward those to the engine themselves.
    """

    def __init__(self, permissions: Optional[Dict[Hashable, Iterable[str]]] = None) -> None:
        self._displayed: Dict[Hashable, GridHandle] = {}
        self._permissions: Dict[Hashable, Set[str]] = {
            user: set(granted) for user, granted in (permissions or {}).items()
        }
        self.messages: List[Tuple[Hashable, str]] = []

    # ------------------------------------------------------------------
    def create_grid(self, title: str, size: int, holder: Any = None) -> GridHandle:
        return GridHandle(title=title, size=size, holder=holder)

    def set_cell(self, grid: GridHandle, slot: int, item: Optional[MenuItem]) -> None:
        if not 0 <= slot < grid.size:
            raise IndexError(f"slot {slot} outside grid of size {grid.size}")
        if item is None:
            grid.cells.pop(slot, None)
        else:
            grid.cells[slot] = item

    def show(self, grid: GridHandle, user: Hashable) -> None:
        self._displayed[user] = grid

    def close(self, user: Hashable) -> None:
        self._displayed.pop(user, None)

    def displayed(self, user: Hashable) -> Optional[GridHandle]:
        return self._displayed.get(user)

    def has_permission(self, user: Hashable, permission: str) -> bool:
        return permission in self._permissions.get(user, ())

    def send_message(self, user: Hashable, text: str) -> None:
        logger.debug("Message to %s: %s", user, text)
        self.messages.append((user, text))

    # ------------------------------------------------------------------
    def grant(self, user: Hashable, *permissions: str) -> None:
        self._permissions.setdefault(user, set()).update(permissions)

    def revoke(self, user: Hashable, *permissions: str) -> None:
        self._permissions.get(user, set()).difference_update(permissions)

    def messages_for(self, user: Hashable) -> List[str]:
        return [text for recipient, text in self.messages if recipient == user]


__all__ = ["GridHandle", "GridHost", "HeadlessHost"]
