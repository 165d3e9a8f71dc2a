"""Per-user navigation history used by back controls."""

from __future__ import annotations

import logging
from typing import Dict, Generic, Hashable, List, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class NavigationHistory(Generic[T]):
    """Stack of previously opened menus for each user.

    The top of a user's stack is the menu currently shown and the entry below
    it is where a back control leads. Menus are compared by identity.
    """

    def __init__(self) -> None:
        self._stacks: Dict[Hashable, List[T]] = {}

    def push(self, user: Hashable, menu: T) -> bool:
        """Record ``menu`` as current unless it already is."""
        if self.current(user) is menu:
            return False
        self._stacks.setdefault(user, []).append(menu)
        logger.debug("History push for %s (depth %d)", user, self.depth(user))
        return True

    def current(self, user: Hashable) -> Optional[T]:
        stack = self._stacks.get(user)
        if not stack:
            return None
        return stack[-1]

    def previous(self, user: Hashable) -> Optional[T]:
        stack = self._stacks.get(user)
        if not stack or len(stack) < 2:
            return None
        return stack[-2]

    def pop_to_previous(self, user: Hashable) -> Optional[T]:
        """Drop the current entry and return the one beneath it.

        Nothing is popped when the user has fewer than two entries.
        """
        stack = self._stacks.get(user)
        if not stack or len(stack) < 2:
            return None
        stack.pop()
        logger.debug("History pop for %s (depth %d)", user, len(stack))
        return stack[-1]

    def discard(self, user: Hashable, menu: T) -> bool:
        """Remove ``menu`` if it is the user's current entry."""
        stack = self._stacks.get(user)
        if not stack or stack[-1] is not menu:
            return False
        stack.pop()
        if not stack:
            del self._stacks[user]
        logger.debug("History discard for %s (depth %d)", user, len(stack))
        return True

    def has_previous(self, user: Hashable) -> bool:
        return self.depth(user) > 1

    def depth(self, user: Hashable) -> int:
        return len(self._stacks.get(user, ()))

    def clear(self, user: Hashable) -> None:
        if self._stacks.pop(user, None) is not None:
            logger.debug("History cleared for %s", user)

    def users(self) -> List[Hashable]:
        return list(self._stacks)


__all__ = ["NavigationHistory"]
