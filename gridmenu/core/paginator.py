"""Page layout for menus whose content spills over several grids."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from gridmenu.core.items import MenuItem
from gridmenu.core.layout import dedupe_and_clamp

NO_PAGES = -1


@dataclass
class PageLayout:
    """Result of laying out one page of a paginated grid."""

    cells: Dict[int, MenuItem] = field(default_factory=dict)
    static_slots: List[int] = field(default_factory=list)
    capacity: int = 0
    number_of_pages: int = NO_PAGES

    @property
    def dynamic_slots(self) -> List[int]:
        static = set(self.static_slots)
        return sorted(slot for slot in self.cells if slot not in static)


def page_count(item_count: int, capacity: int) -> int:
    """Index of the last page, or ``NO_PAGES`` when nothing can be shown."""
    if capacity <= 0 or item_count <= 0:
        return NO_PAGES
    return math.ceil(item_count / capacity) - 1


def paginate(
    size: int,
    static_slots: Iterable[int],
    items: Sequence[MenuItem],
    page: int,
    *,
    border: Optional[MenuItem] = None,
    buttons: Optional[Mapping[int, MenuItem]] = None,
) -> PageLayout:
    """Fill the dynamic cells of ``page`` and the static cells around them.

    ``page`` is used as given; callers are expected to consult
    ``number_of_pages`` before advancing. Buttons bound to a slot that is not
    static are dropped.
    """

    clean = dedupe_and_clamp(static_slots, size)
    reserved = set(clean)
    capacity = max(0, size - len(clean))
    layout = PageLayout(
        static_slots=clean,
        capacity=capacity,
        number_of_pages=page_count(len(items), capacity),
    )

    if border is not None:
        for slot in clean:
            layout.cells[slot] = border

    if capacity > 0 and page >= 0:
        offset = capacity * page
        index = 0
        for slot in range(size):
            if slot in reserved:
                continue
            if index + offset >= len(items):
                break
            layout.cells[slot] = items[index + offset]
            index += 1

    if buttons:
        for slot, button in buttons.items():
            if slot in reserved:
                layout.cells[slot] = button

    return layout


__all__ = ["NO_PAGES", "PageLayout", "page_count", "paginate"]
