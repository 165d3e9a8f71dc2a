"""Menu definitions: plain grids and paginated grids."""

from __future__ import annotations

from typing import (
    Callable,
    Dict,
    FrozenSet,
    Hashable,
    Iterable,
    List,
    Mapping,
    Optional,
    Sequence,
    Union,
)

from gridmenu.core.events import CloseEvent, InteractionEvent
from gridmenu.core.items import MenuItem, is_item
from gridmenu.core.layout import GridSize, bottom_slots
from gridmenu.core.paginator import NO_PAGES, PageLayout, paginate
from gridmenu.core.registry import ClickHandler, ClickRegistry

ContentMap = Mapping[int, MenuItem]
ContentProvider = Callable[["Menu"], ContentMap]
ItemsProvider = Callable[["PaginatedMenu"], Sequence[MenuItem]]
CloseHandler = Callable[[CloseEvent], None]


class Menu:
    """A grid screen shown to a single owner.

    Only the name, size and content are required. Permission, title texture,
    click and close hooks are optional and may be supplied as arguments or by
    overriding the matching methods in a subclass. Menus compare by identity.
    """

    def __init__(
        self,
        owner: Hashable,
        name: str,
        size: Union[GridSize, int] = GridSize.NORMAL,
        *,
        content: Optional[Union[ContentMap, ContentProvider]] = None,
        permission: Optional[str] = None,
        texture: Optional[str] = None,
        on_click: Optional[ClickHandler] = None,
        on_close: Optional[CloseHandler] = None,
        takable_slots: Iterable[int] = (),
    ) -> None:
        self.owner = owner
        self.name = name
        self.size = GridSize.coerce(size)
        self.permission = permission
        self.texture = texture
        self.takable_slots: FrozenSet[int] = frozenset(takable_slots)
        self.clicks = ClickRegistry()
        self._content = content
        self._on_click = on_click
        self._on_close = on_close

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r} owner={self.owner!r} size={int(self.size)}>"

    # ------------------------------------------------------------------
    # Content
    @property
    def title(self) -> str:
        return self.texture if self.texture else self.name

    def get_content(self) -> ContentMap:
        if self._content is None:
            return {}
        if callable(self._content):
            return self._content(self)
        return self._content

    def render(self, *, show_back: bool = True) -> Dict[int, MenuItem]:
        """Content ready to be written into a grid.

        Back controls are omitted when ``show_back`` is false and cells outside
        the grid are dropped.
        """

        cells: Dict[int, MenuItem] = {}
        for slot, item in self.get_content().items():
            if item is None or not 0 <= slot < self.size:
                continue
            if item.back_button and not show_back:
                continue
            cells[slot] = item
        return cells

    def fill(self, material: str, name: Optional[str] = " ") -> Dict[int, MenuItem]:
        filler = MenuItem(material=material, display_name=name)
        return {slot: filler for slot in range(self.size)}

    # ------------------------------------------------------------------
    # Interaction hooks
    def bind(self, item: MenuItem, handler: ClickHandler) -> MenuItem:
        """Route clicks on content equal to ``item`` to ``handler``."""
        self.clicks.register(item, handler)
        return item

    def is_item(self, item: Optional[MenuItem], item_id: str) -> bool:
        return is_item(item, item_id)

    def on_click(self, event: InteractionEvent) -> None:
        if self._on_click is not None:
            self._on_click(event)

    def on_close(self, event: CloseEvent) -> None:
        if self._on_close is not None:
            self._on_close(event)


class PaginatedMenu(Menu):
    """Menu whose items are spread over as many pages as they need.

    Static slots hold the border and buttons on every page; the remaining
    cells show a window of ``items`` selected by ``page``.
    """

    def __init__(
        self,
        owner: Hashable,
        name: str,
        size: Union[GridSize, int] = GridSize.LARGEST,
        *,
        items: Union[Sequence[MenuItem], ItemsProvider] = (),
        static_slots: Optional[Iterable[int]] = None,
        border_material: Optional[str] = None,
        border_name: str = " ",
        buttons: Optional[Union[ContentMap, Callable[["PaginatedMenu"], ContentMap]]] = None,
        **kwargs,
    ) -> None:
        super().__init__(owner, name, size, **kwargs)
        if static_slots is None:
            static_slots = sorted(bottom_slots(self.size))
        self.static_slots: List[int] = list(static_slots)
        self.border_material = border_material
        self.border_name = border_name
        self._items = items
        self._buttons = buttons
        self.page = 0
        self.number_of_pages = NO_PAGES

    # ------------------------------------------------------------------
    def get_items(self) -> Sequence[MenuItem]:
        if callable(self._items):
            return self._items(self)
        return self._items

    def get_buttons(self) -> ContentMap:
        if self._buttons is None:
            return {}
        if callable(self._buttons):
            return self._buttons(self)
        return self._buttons

    def get_border(self) -> Optional[MenuItem]:
        if self.border_material is None:
            return None
        return MenuItem(material=self.border_material, display_name=self.border_name)

    def layout(self) -> PageLayout:
        """Lay out the current page and refresh ``number_of_pages``."""
        page_layout = paginate(
            self.size,
            self.static_slots,
            list(self.get_items()),
            self.page,
            border=self.get_border(),
            buttons=self.get_buttons(),
        )
        self.number_of_pages = page_layout.number_of_pages
        return page_layout

    def get_content(self) -> ContentMap:
        return self.layout().cells

    # ------------------------------------------------------------------
    # Paging
    def set_page(self, page: int) -> None:
        self.page = max(0, page)

    def is_last_page(self) -> bool:
        # An empty menu has a single page, which is also its last.
        return self.page >= max(0, self.number_of_pages)

    def is_first_page(self) -> bool:
        return self.page == 0


__all__ = ["ContentMap", "Menu", "PaginatedMenu"]
