"""Menu engine: opening menus, routing clicks and tracking navigation."""

from __future__ import annotations

import logging
from typing import Callable, Hashable, Optional

from gridmenu.config import EngineSettings
from gridmenu.core.dynamic import SlotRefresher
from gridmenu.core.errors import RenderError
from gridmenu.core.events import ClickDecision, CloseEvent, InteractionEvent, OpenResult
from gridmenu.core.history import NavigationHistory
from gridmenu.core.host import GridHandle, GridHost
from gridmenu.core.items import MenuItem
from gridmenu.core.menu import Menu, PaginatedMenu
from gridmenu.core.registry import ClickHandler
from gridmenu.core.scheduling import Scheduler, ThreadingScheduler
from gridmenu.core.session import SessionRegistry, UserSession

logger = logging.getLogger(__name__)

DEFAULT_BUTTON_MATERIAL = "arrow"


class MenuEngine:
    """Coordinate menus, their owners' histories and the host.

    All work for one user happens under that user's session lock, so hosts
    may deliver events for different users from different threads.
    """

    def __init__(
        self,
        host: GridHost,
        *,
        settings: Optional[EngineSettings] = None,
        scheduler: Optional[Scheduler] = None,
    ) -> None:
        self.host = host
        self.settings = settings or EngineSettings()
        self.scheduler = scheduler or ThreadingScheduler()
        self.history: NavigationHistory[Menu] = NavigationHistory()
        self.sessions = SessionRegistry()

    # ------------------------------------------------------------------
    # Queries
    def current_menu(self, user: Hashable) -> Optional[Menu]:
        return self.history.current(user)

    def displayed_menu(self, user: Hashable) -> Optional[Menu]:
        grid = self.host.displayed(user)
        if grid is None or not isinstance(grid.holder, Menu):
            return None
        return grid.holder

    # ------------------------------------------------------------------
    # Opening and closing
    def open(self, menu: Menu) -> OpenResult:
        owner = menu.owner
        with self.sessions.locked(owner) as session:
            if menu.permission and not self.host.has_permission(owner, menu.permission):
                logger.warning(
                    "%s lacks permission %r for menu %r", owner, menu.permission, menu.name
                )
                self.host.send_message(owner, self.settings.no_permission_message)
                return OpenResult.DENIED

            session.cancel_close_check()
            pushed = self.history.push(owner, menu)
            try:
                grid = self._render(menu)
                self.host.show(grid, owner)
            except Exception:
                logger.exception("Could not open menu %r for %s", menu.name, owner)
                if pushed:
                    self.history.discard(owner, menu)
                self.host.close(owner)
                self._schedule_close_check(session)
                return OpenResult.FAILED

            logger.info("Opened menu %r for %s", menu.name, owner)
            return OpenResult.OPENED

    def close(self, user: Hashable) -> None:
        """Close the user's display and handle it as a close event."""
        grid = self.host.displayed(user)
        self.host.close(user)
        self.on_close(CloseEvent(user=user, grid=grid))

    def back(self, user: Hashable) -> Optional[Menu]:
        """Reopen the menu shown before the current one, if there is one."""
        with self.sessions.locked(user):
            previous = self.history.previous(user)
            if previous is None or self._reopen_previous(user) is not OpenResult.OPENED:
                return None
            return previous

    # ------------------------------------------------------------------
    # Host events
    def on_click(self, event: InteractionEvent) -> ClickDecision:
        menu = event.grid.holder if event.grid is not None else None
        if not isinstance(menu, Menu):
            return ClickDecision.NONE
        if event.slot in menu.takable_slots:
            return ClickDecision.NONE

        with self.sessions.locked(event.user):
            self._run_hook(menu, "click", menu.on_click, event)

            clicked = event.clicked
            if clicked is not None and clicked.back_button:
                if self._reopen_previous(event.user) is OpenResult.OPENED:
                    return ClickDecision.REOPEN
                return ClickDecision.CONSUME

            menu.clicks.dispatch(clicked, event)
            return ClickDecision.CONSUME

    def on_close(self, event: CloseEvent) -> None:
        grid = event.grid if event.grid is not None else self.host.displayed(event.user)
        menu = grid.holder if grid is not None else None
        if not isinstance(menu, Menu):
            return
        with self.sessions.locked(event.user) as session:
            self._run_hook(menu, "close", menu.on_close, event)
            self._schedule_close_check(session)

    # ------------------------------------------------------------------
    # Click bindings
    def register(self, menu: Menu, item: MenuItem, handler: ClickHandler) -> MenuItem:
        return menu.bind(item, handler)

    def dispatch(self, menu: Optional[Menu], clicked: Optional[MenuItem], event: InteractionEvent) -> int:
        if menu is None:
            return 0
        return menu.clicks.dispatch(clicked, event)

    def back_button(self, item: Optional[MenuItem] = None) -> MenuItem:
        base = item or MenuItem(DEFAULT_BUTTON_MATERIAL, display_name=self.settings.back_label)
        return base.as_back_button()

    def bind_close(self, menu: Menu, item: Optional[MenuItem] = None) -> MenuItem:
        item = item or MenuItem("barrier", display_name=self.settings.close_label)
        return menu.bind(item, lambda event: self.close(event.user))

    def bind_next_page(self, menu: PaginatedMenu, item: Optional[MenuItem] = None) -> MenuItem:
        item = item or MenuItem(DEFAULT_BUTTON_MATERIAL, display_name=self.settings.next_label)
        return menu.bind(item, lambda event: self.next_page(menu))

    def bind_previous_page(self, menu: PaginatedMenu, item: Optional[MenuItem] = None) -> MenuItem:
        item = item or MenuItem(DEFAULT_BUTTON_MATERIAL, display_name=self.settings.previous_label)
        return menu.bind(item, lambda event: self.previous_page(menu))

    # ------------------------------------------------------------------
    # Paging
    def get_page(self, menu: PaginatedMenu) -> int:
        return menu.page

    def set_page(self, menu: PaginatedMenu, page: int) -> None:
        menu.set_page(page)
        logger.debug("Menu %r moved to page %d", menu.name, menu.page)

    def is_last_page(self, menu: PaginatedMenu) -> bool:
        menu.layout()
        return menu.is_last_page()

    def next_page(self, menu: PaginatedMenu) -> OpenResult:
        with self.sessions.locked(menu.owner):
            if not self.is_last_page(menu):
                self.set_page(menu, menu.page + 1)
            return self.open(menu)

    def previous_page(self, menu: PaginatedMenu) -> OpenResult:
        with self.sessions.locked(menu.owner):
            if not menu.is_first_page():
                self.set_page(menu, menu.page - 1)
            return self.open(menu)

    # ------------------------------------------------------------------
    # Dynamic cells
    def refresh_slot(
        self,
        menu: Menu,
        slot: int,
        supplier: Callable[[], Optional[MenuItem]],
        interval: float,
    ) -> SlotRefresher:
        refresher = SlotRefresher(self, menu, slot, supplier, interval)
        refresher.start()
        return refresher

    # ------------------------------------------------------------------
    # Internal helpers
    def _reopen_previous(self, user: Hashable) -> Optional[OpenResult]:
        """Open the entry beneath the current one, restoring it if that fails."""
        current = self.history.current(user)
        previous = self.history.pop_to_previous(user)
        if previous is None:
            return None
        result = self.open(previous)
        if result is not OpenResult.OPENED:
            self.history.push(user, current)
        return result

    def _render(self, menu: Menu) -> GridHandle:
        try:
            cells = menu.render(show_back=self.history.has_previous(menu.owner))
            grid = self.host.create_grid(menu.title, int(menu.size), holder=menu)
            for slot in sorted(cells):
                self.host.set_cell(grid, slot, cells[slot])
        except Exception as exc:
            raise RenderError(menu.name, str(exc) or type(exc).__name__) from exc
        return grid

    def _schedule_close_check(self, session: UserSession) -> None:
        user = session.user

        def check() -> None:
            with session.lock:
                if session.pending_close_check is not call:
                    return
                session.pending_close_check = None
                if self.displayed_menu(user) is None:
                    self.history.clear(user)
                    self.sessions.evict(session)

        call = self.scheduler.call_later(self.settings.close_check_delay, check)
        session.replace_close_check(call)

    @staticmethod
    def _run_hook(menu: Menu, kind: str, hook: Callable, event: object) -> None:
        try:
            hook(event)
        except Exception:
            logger.exception("Menu %r %s handler failed", menu.name, kind)


__all__ = ["MenuEngine"]
