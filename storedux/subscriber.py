"""Subscriber lists and the handles that keep subscriptions alive."""

from __future__ import annotations

import itertools
import threading
from typing import Any, Callable, Dict

from .context import get_or_init

_local = threading.local()


def _leaked() -> list:
    leaked = getattr(_local, "leaked", None)
    if leaked is None:
        leaked = _local.leaked = []
    return leaked


class Subscribers:
    """Callbacks waiting for changes to one store."""

    def __init__(self) -> None:
        self._callbacks: Dict[int, Callable[[Any], Any]] = {}
        self._keys = itertools.count()

    def subscribe(self, on_change: Callable[[Any], Any]) -> "SubscriberId":
        """Add ``on_change`` and return the handle that keeps it subscribed."""
        key = next(self._keys)
        self._callbacks[key] = on_change
        return SubscriberId(self, key)

    def unsubscribe(self, key: int) -> Callable[[Any], Any]:
        """Remove and return the subscriber stored under ``key``.

        Raises KeyError if no subscriber has that key.
        """
        try:
            return self._callbacks.pop(key)
        except KeyError:
            raise KeyError(f"no subscriber with key {key}") from None

    def notify(self, state: Any) -> None:
        """Call every subscriber with ``state``."""
        for callback in list(self._callbacks.values()):
            callback(state)

    def __len__(self) -> int:
        return len(self._callbacks)


class SubscriberId:
    """Keeps a subscription; it is removed when this handle is released."""

    def __init__(self, subscribers: Subscribers, key: int) -> None:
        self._subscribers = subscribers
        self.key = key
        self._active = True

    def leak(self) -> None:
        """Keep this subscription for the life of the thread."""
        _leaked().append(self)

    def unsubscribe(self) -> None:
        """Remove the subscription; later calls do nothing."""
        if self._active:
            self._active = False
            self._subscribers.unsubscribe(self.key)

    def __enter__(self) -> "SubscriberId":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.unsubscribe()

    def __del__(self) -> None:
        if getattr(self, "_active", False):
            try:
                self.unsubscribe()
            except KeyError:
                pass


def subscribers_for(store_type: Any) -> Subscribers:
    """Return the subscriber list of ``store_type``, creating it on first use."""
    return get_or_init((Subscribers, store_type), Subscribers).state