"""Listeners that react to every change of a store."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from . import actions
from .context import get_or_init
from .subscriber import SubscriberId


class Listener(ABC):
    """Reacts to changes of the store named by its ``store`` attribute."""

    store: Any

    @abstractmethod
    def on_change(self, state: Any) -> None:
        """Handle the new state of the store."""


class _ListenerSlot:
    __slots__ = ("subscription",)

    def __init__(self) -> None:
        self.subscription: Optional[SubscriberId] = None


def init_listener(listener: Listener) -> None:
    """Start ``listener``; one already started with the same type and store is replaced."""
    try:
        store_type = listener.store
    except AttributeError:
        raise TypeError(f"{listener!r} does not name a store") from None

    subscription = actions.subscribe_silent(store_type, listener.on_change)
    slot = get_or_init((_ListenerSlot, type(listener), store_type), _ListenerSlot).state
    previous, slot.subscription = slot.subscription, subscription
    if previous is not None:
        previous.unsubscribe()