"""Click handler bindings matched by content value."""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Union

from gridmenu.core.events import InteractionEvent
from gridmenu.core.items import ItemFingerprint, MenuItem

logger = logging.getLogger(__name__)

ClickHandler = Callable[[InteractionEvent], None]


class ClickRegistry:
    """Handlers bound to cell contents of a single menu.

    Bindings are keyed by fingerprint, so a click matches at most one handler.
    Registering again for an equal fingerprint replaces that handler but keeps
    its position.
    """

    def __init__(self) -> None:
        self._bindings: Dict[ItemFingerprint, ClickHandler] = {}

    def __len__(self) -> int:
        return len(self._bindings)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, MenuItem):
            return item.fingerprint() in self._bindings
        return item in self._bindings

    def register(self, content: Union[MenuItem, ItemFingerprint], handler: ClickHandler) -> None:
        key = content.fingerprint() if isinstance(content, MenuItem) else content
        self._bindings[key] = handler

    def matches(self, clicked: Optional[MenuItem]) -> List[ClickHandler]:
        if clicked is None:
            return []
        handler = self._bindings.get(clicked.fingerprint())
        return [handler] if handler is not None else []

    def dispatch(self, clicked: Optional[MenuItem], event: InteractionEvent) -> int:
        """Run the handler bound to ``clicked``; return 1 if it completed, else 0.

        A failing handler is logged and never propagates to the caller.
        """
        completed = 0
        for handler in self.matches(clicked):
            try:
                handler(event)
            except Exception:
                logger.exception(
                    "Click handler %r failed for %s at slot %d",
                    handler,
                    event.user,
                    event.slot,
                )
                continue
            completed += 1
        return completed

    def clear(self) -> None:
        self._bindings.clear()


__all__ = ["ClickHandler", "ClickRegistry"]
