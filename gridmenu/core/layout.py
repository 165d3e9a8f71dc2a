"""Grid sizes and reserved slot layouts for menu grids."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, List, Set, Tuple, Union

ROW_WIDTH = 9


class GridSize(IntEnum):
    """Supported grid sizes, one to six rows of nine cells."""

    SMALLEST = 9
    SMALL = 18
    NORMAL = 27
    LARGE = 36
    LARGER = 45
    LARGEST = 54

    @property
    def rows(self) -> int:
        return self.value // ROW_WIDTH

    @classmethod
    def coerce(cls, size: Union["GridSize", int]) -> "GridSize":
        try:
            return cls(int(size))
        except ValueError:
            valid = ", ".join(str(member.value) for member in cls)
            raise ValueError(f"Unsupported grid size {size!r}; expected one of {valid}") from None


NONE: Tuple[int, ...] = ()


def top_slots(size: int) -> Set[int]:
    return set(range(0, min(ROW_WIDTH, size)))


def bottom_slots(size: int) -> Set[int]:
    return set(range(max(0, size - ROW_WIDTH), size))


def left_slots(size: int) -> Set[int]:
    return {row * ROW_WIDTH for row in range(size // ROW_WIDTH)}


def right_slots(size: int) -> Set[int]:
    return {row * ROW_WIDTH + ROW_WIDTH - 1 for row in range(size // ROW_WIDTH)}


def standard_slots(size: int) -> Set[int]:
    """Border cells: every cell on the outer edge of the grid."""
    return top_slots(size) | bottom_slots(size) | left_slots(size) | right_slots(size)


def dedupe_and_clamp(indices: Iterable[int], size: int) -> List[int]:
    """Drop repeated and out-of-range indices, keeping first-seen order."""
    seen: Set[int] = set()
    result: List[int] = []
    for index in indices:
        if index in seen or not 0 <= index < size:
            continue
        seen.add(index)
        result.append(index)
    return result


def combine(*slot_lists: Iterable[int], size: int = GridSize.LARGEST) -> List[int]:
    merged: List[int] = []
    for slots in slot_lists:
        merged.extend(slots)
    return dedupe_and_clamp(merged, size)


def middle_buttons(size: int) -> List[int]:
    """The three centre cells of the bottom row."""
    centre = max(0, size - ROW_WIDTH) + ROW_WIDTH // 2
    return dedupe_and_clamp([centre - 1, centre, centre + 1], size)


def spread_buttons(size: int) -> List[int]:
    """First, centre and last cells of the bottom row."""
    start = max(0, size - ROW_WIDTH)
    return dedupe_and_clamp([start, start + ROW_WIDTH // 2, size - 1], size)


__all__ = [
    "GridSize",
    "NONE",
    "ROW_WIDTH",
    "top_slots",
    "bottom_slots",
    "left_slots",
    "right_slots",
    "standard_slots",
    "dedupe_and_clamp",
    "combine",
    "middle_buttons",
    "spread_buttons",
]
