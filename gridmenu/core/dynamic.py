"""Cells that keep refreshing while their menu stays on screen."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Optional

from gridmenu.core.items import MenuItem
from gridmenu.core.scheduling import ScheduledCall

if TYPE_CHECKING:  # pragma: no cover
    from gridmenu.core.engine import MenuEngine
    from gridmenu.core.menu import Menu

logger = logging.getLogger(__name__)


class SlotRefresher:
    """Rewrite one cell of a menu every ``interval`` seconds.

    The refresher stops on its own once the owner no longer views the grid
    of ``menu``. A failing supplier is logged and retried on the next tick.
    """

    def __init__(
        self,
        engine: "MenuEngine",
        menu: "Menu",
        slot: int,
        supplier: Callable[[], Optional[MenuItem]],
        interval: float,
    ) -> None:
        if interval <= 0:
            raise ValueError("refresh interval must be positive")
        self.engine = engine
        self.menu = menu
        self.slot = slot
        self.supplier = supplier
        self.interval = interval
        self.ticks = 0
        self._call: Optional[ScheduledCall] = None
        self._stopped = False

    @property
    def active(self) -> bool:
        return not self._stopped

    def start(self) -> None:
        self._schedule()

    def stop(self) -> None:
        self._stopped = True
        if self._call is not None:
            self._call.cancel()
            self._call = None

    # ------------------------------------------------------------------
    def _schedule(self) -> None:
        if self._stopped:
            return
        self._call = self.engine.scheduler.call_later(self.interval, self._tick)

    def _tick(self) -> None:
        owner = self.menu.owner
        with self.engine.sessions.locked(owner):
            if self._stopped:
                return
            grid = self.engine.host.displayed(owner)
            if grid is None or grid.holder is not self.menu:
                logger.debug("Stopping refresher for slot %d of %r", self.slot, self.menu.name)
                self.stop()
                return
            try:
                item = self.supplier()
                self.engine.host.set_cell(grid, self.slot, item)
            except Exception:
                logger.exception(
                    "Refreshing slot %d of menu %r failed", self.slot, self.menu.name
                )
            self.ticks += 1
            self._schedule()


__all__ = ["SlotRefresher"]
