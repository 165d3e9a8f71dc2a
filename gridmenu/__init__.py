"""Top-level package for gridmenu, paged clickable grid menus."""

__version__ = "1.0.0"

from gridmenu.config import EngineSettings, load_engine_settings
from gridmenu.core import (
    ClickDecision,
    CloseEvent,
    GridHost,
    GridSize,
    HeadlessHost,
    InteractionEvent,
    Menu,
    MenuEngine,
    MenuItem,
    NavigationHistory,
    OpenResult,
    PaginatedMenu,
)

__all__ = [
    "ClickDecision",
    "CloseEvent",
    "EngineSettings",
    "GridHost",
    "GridSize",
    "HeadlessHost",
    "InteractionEvent",
    "Menu",
    "MenuEngine",
    "MenuItem",
    "NavigationHistory",
    "OpenResult",
    "PaginatedMenu",
    "load_engine_settings",
]

__all__.append("__version__")

try:
    from gridmenu.pygame import PygameGridHost, run_pygame  # type: ignore[misc]
except (ImportError, RuntimeError):
    PygameGridHost = None

    def run_pygame(*_args, **_kwargs):  # type: ignore[override]
        raise RuntimeError(
            "The pygame front-end requires the optional pygame dependency. "
            "Install pygame to browse menus in a window."
        )

    __all__.extend(["PygameGridHost", "run_pygame"])
else:
    __all__.extend(["PygameGridHost", "run_pygame"])
