"""Core menu logic, independent of any display front-end."""

from gridmenu.core.dynamic import SlotRefresher
from gridmenu.core.engine import MenuEngine
from gridmenu.core.errors import MenuError, RenderError
from gridmenu.core.events import ClickDecision, CloseEvent, InteractionEvent, OpenResult
from gridmenu.core.history import NavigationHistory
from gridmenu.core.host import GridHandle, GridHost, HeadlessHost
from gridmenu.core.items import ItemFingerprint, MenuItem, create_item, is_item, is_similar
from gridmenu.core.layout import GridSize
from gridmenu.core.menu import Menu, PaginatedMenu
from gridmenu.core.paginator import PageLayout, paginate
from gridmenu.core.registry import ClickRegistry
from gridmenu.core.scheduling import FrameScheduler, Scheduler, ThreadingScheduler

__all__ = [
    "ClickDecision",
    "ClickRegistry",
    "CloseEvent",
    "FrameScheduler",
    "GridHandle",
    "GridHost",
    "GridSize",
    "HeadlessHost",
    "InteractionEvent",
    "ItemFingerprint",
    "Menu",
    "MenuEngine",
    "MenuError",
    "MenuItem",
    "NavigationHistory",
    "OpenResult",
    "PageLayout",
    "PaginatedMenu",
    "RenderError",
    "Scheduler",
    "SlotRefresher",
    "ThreadingScheduler",
    "create_item",
    "is_item",
    "is_similar",
    "paginate",
]
