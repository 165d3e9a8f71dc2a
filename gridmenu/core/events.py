"""Immutable interaction events and the decisions returned for them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Hashable, Optional

from gridmenu.core.items import MenuItem

if TYPE_CHECKING:  # pragma: no cover
    from gridmenu.core.host import GridHandle


@dataclass(frozen=True)
class InteractionEvent:
    """A user clicked ``slot`` of ``grid`` while it held ``clicked``."""

    user: Hashable
    slot: int
    clicked: Optional[MenuItem]
    grid: Optional["GridHandle"]


@dataclass(frozen=True)
class CloseEvent:
    user: Hashable
    grid: Optional["GridHandle"] = None


class ClickDecision(Enum):
    """What the host should do with a click after the engine saw it."""

    NONE = "none"  # not managed here; apply the host's default behaviour
    CONSUME = "consume"  # cancel the host's default slot mutation
    REOPEN = "reopen"  # consumed, and a previous menu was reopened


class OpenResult(Enum):
    OPENED = "opened"
    DENIED = "denied"
    FAILED = "failed"


__all__ = ["ClickDecision", "CloseEvent", "InteractionEvent", "OpenResult"]
