"""Per-thread registry holding the current state of every store."""

from __future__ import annotations

import threading
from typing import Any, Callable, Generic, Hashable, Optional, TypeVar

from .store import apply_async_reducer, apply_reducer

S = TypeVar("S")

_local = threading.local()


def _contexts() -> dict:
    contexts = getattr(_local, "contexts", None)
    if contexts is None:
        contexts = _local.contexts = {}
    return contexts


def _should_notify(new: Any, old: Any) -> bool:
    method = getattr(new, "should_notify", None)
    if callable(method):
        return bool(method(old))
    return new != old


class Context(Generic[S]):
    """Holds the current state of one store."""

    __slots__ = ("state",)

    def __init__(self, state: S) -> None:
        self.state = state

    def reduce(self, reducer) -> bool:
        """Apply ``reducer`` and tell whether subscribers should be notified."""
        old = self.state
        self.state = apply_reducer(reducer, old)
        return _should_notify(self.state, old)

    async def reduce_future(self, reducer) -> bool:
        """Apply an async ``reducer`` and tell whether subscribers should be notified."""
        old = self.state
        new = await apply_async_reducer(reducer, old)
        self.state = new
        return _should_notify(new, old)

    def __repr__(self) -> str:
        return f"Context({self.state!r})"


def _default_factory(key: Any) -> Callable[[], Any]:
    new = getattr(key, "new", None)
    if callable(new):
        return new
    if callable(key):
        return key
    raise TypeError(f"no factory given and {key!r} cannot create a state")


def get_or_init(key: Hashable, factory: Optional[Callable[[], Any]] = None) -> Context:
    """Return the context for ``key``, creating its state on first use.

    ``factory`` defaults to ``key.new`` (or ``key`` itself). It runs outside
    any lookup so that it may itself access other stores.
    """
    contexts = _contexts()
    context = contexts.get(key)
    if context is None:
        state = (factory or _default_factory(key))()
        context = Context(state)
        contexts[key] = context
    return context