"""Cell content values and the fingerprints used to match clicks."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Mapping, NamedTuple, Optional, Tuple, Union

EMPTY_MATERIAL = "air"


class ItemFingerprint(NamedTuple):
    """Value-equality key of a :class:`MenuItem`.

    Cosmetic state (tooltip visibility, the back-control flag) is left out so
    that toggling it never changes which handler a click reaches.
    """

    material: str
    amount: int
    display_name: Optional[str]
    lore: Tuple[str, ...]
    item_id: Optional[str]
    enchantments: Tuple[Tuple[str, int], ...]


EnchantmentsLike = Union[Mapping[str, int], Iterable[Tuple[str, int]]]


@dataclass(frozen=True)
class MenuItem:
    """Content placed in a grid cell."""

    material: str
    amount: int = 1
    display_name: Optional[str] = None
    lore: Tuple[str, ...] = ()
    item_id: Optional[str] = None
    enchantments: Tuple[Tuple[str, int], ...] = ()
    hide_tooltip: bool = False
    back_button: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "lore", tuple(self.lore))
        object.__setattr__(self, "enchantments", _normalise_enchantments(self.enchantments))
        if self.item_id is not None:
            object.__setattr__(self, "item_id", self.item_id.lower())

    # ------------------------------------------------------------------
    # Builder helpers
    def with_id(self, item_id: str) -> "MenuItem":
        return replace(self, item_id=item_id)

    def with_name(self, display_name: Optional[str]) -> "MenuItem":
        return replace(self, display_name=display_name)

    def with_lore(self, *lines: str) -> "MenuItem":
        return replace(self, lore=tuple(lines))

    def with_amount(self, amount: int) -> "MenuItem":
        return replace(self, amount=amount)

    def enchanted(self, enchantments: EnchantmentsLike) -> "MenuItem":
        return replace(self, enchantments=enchantments)

    def hidden(self, hide_tooltip: bool = True) -> "MenuItem":
        return replace(self, hide_tooltip=hide_tooltip)

    def as_back_button(self, back_button: bool = True) -> "MenuItem":
        return replace(self, back_button=back_button)

    # ------------------------------------------------------------------
    @property
    def is_empty(self) -> bool:
        return self.material == EMPTY_MATERIAL

    @property
    def label(self) -> str:
        return self.display_name if self.display_name is not None else self.material

    def fingerprint(self) -> ItemFingerprint:
        return ItemFingerprint(
            material=self.material,
            amount=self.amount,
            display_name=self.display_name,
            lore=self.lore,
            item_id=self.item_id,
            enchantments=self.enchantments,
        )


def _normalise_enchantments(value: EnchantmentsLike) -> Tuple[Tuple[str, int], ...]:
    pairs = value.items() if isinstance(value, Mapping) else value
    return tuple(sorted((str(name), int(level)) for name, level in pairs))


def create_item(name: Optional[str], material: str) -> MenuItem:
    return MenuItem(material=material, display_name=name)


def is_item(item: Optional[MenuItem], item_id: str) -> bool:
    """Return True when ``item`` carries the given custom identifier."""
    if item is None or item.item_id is None:
        return False
    return item.item_id == item_id.lower()


def is_similar(first: Optional[MenuItem], second: Optional[MenuItem]) -> bool:
    if first is None or second is None:
        return False
    return first.fingerprint() == second.fingerprint()


__all__ = [
    "EMPTY_MATERIAL",
    "ItemFingerprint",
    "MenuItem",
    "create_item",
    "is_item",
    "is_similar",
]
