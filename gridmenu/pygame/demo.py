"""Sample menus used by the pygame front-end."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Hashable, List

from gridmenu.core.engine import MenuEngine
from gridmenu.core.items import MenuItem
from gridmenu.core.layout import GridSize, bottom_slots, spread_buttons
from gridmenu.core.menu import Menu, PaginatedMenu

CATALOGUE_SIZE = 120
CLOCK_SLOT = 13


@dataclass
class DemoMenus:
    main: Menu
    catalogue: PaginatedMenu
    restricted: Menu
    clock: Menu


def catalogue_items(count: int = CATALOGUE_SIZE) -> List[MenuItem]:
    materials = ["stone", "oak_log", "iron_ingot", "gold_ingot", "diamond", "emerald"]
    return [
        MenuItem(materials[index % len(materials)], display_name=f"#{index + 1}").with_id(
            f"catalogue_{index + 1}"
        )
        for index in range(count)
    ]


def build_demo_menus(engine: MenuEngine, user: Hashable) -> DemoMenus:
    """Wire a main menu, a paginated catalogue, a gated menu and a clock."""

    settings = engine.settings
    items = catalogue_items()
    previous_slot, back_slot, next_slot = spread_buttons(GridSize.LARGEST)

    catalogue = PaginatedMenu(
        user,
        "Catalogue",
        GridSize.LARGEST,
        items=items,
        static_slots=sorted(bottom_slots(GridSize.LARGEST)),
        border_material="gray_glass",
        border_name=settings.border_name,
        buttons=lambda menu: {
            previous_slot: engine.bind_previous_page(menu),
            back_slot: engine.back_button(),
            next_slot: engine.bind_next_page(menu),
        },
    )

    def picked(event) -> None:
        if event.clicked is not None:
            engine.host.send_message(event.user, f"Picked {event.clicked.label}")

    for item in items:
        catalogue.bind(item, picked)

    restricted = Menu(user, "Staff tools", GridSize.SMALLEST, permission="gridmenu.demo.staff")

    clock = Menu(
        user,
        "Clock",
        GridSize.NORMAL,
        content=lambda menu: {18: engine.back_button(), 26: engine.bind_close(menu)},
    )

    def open_clock() -> None:
        engine.open(clock)
        engine.refresh_slot(
            clock,
            CLOCK_SLOT,
            lambda: MenuItem("clock", display_name=time.strftime("%H:%M:%S")),
            interval=1.0,
        )

    main_content = {
        10: MenuItem("chest", display_name="Catalogue"),
        13: MenuItem("clock", display_name="Clock"),
        16: MenuItem("barrier", display_name="Staff"),
        22: MenuItem("oak_door", display_name=settings.close_label),
    }
    main = Menu(user, "Main menu", GridSize.NORMAL, content=main_content)
    main.bind(main_content[10], lambda event: engine.open(catalogue))
    main.bind(main_content[13], lambda event: open_clock())
    main.bind(main_content[16], lambda event: engine.open(restricted))
    main.bind(main_content[22], lambda event: engine.close(event.user))

    return DemoMenus(main=main, catalogue=catalogue, restricted=restricted, clock=clock)


__all__ = ["DemoMenus", "build_demo_menus", "catalogue_items"]
