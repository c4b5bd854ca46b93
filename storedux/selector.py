"""Derived values of a store, updated only when they change."""

from __future__ import annotations

import operator
import weakref
from typing import Any, Callable, Generic, Optional, TypeVar

from . import actions

R = TypeVar("R")


class Selector(Generic[R]):
    """Tracks ``selector(state, deps)`` for the store ``store_type``.

    The value is recomputed on every change of the store; when ``eq`` finds it
    different from the previous one it is kept and passed to ``on_change``.
    The subscription ends with :meth:`close`, on leaving a ``with`` block, or
    when the selector is garbage collected.
    """

    def __init__(
        self,
        store_type: Any,
        selector: Callable[[Any, Any], R],
        eq: Callable[[R, R], bool] = operator.eq,
        deps: Any = None,
        on_change: Optional[Callable[[R], Any]] = None,
    ) -> None:
        self._selector = selector
        self._eq = eq
        self._deps = deps
        self._on_change = on_change
        self._value = selector(actions.get(store_type), deps)

        receiver = weakref.WeakMethod(self._receive)

        def receive(state: Any) -> None:
            method = receiver()
            if method is not None:
                method(state)

        self._subscription = actions.subscribe(store_type, receive)

    def _receive(self, state: Any) -> None:
        value = self._selector(state, self._deps)
        if not self._eq(self._value, value):
            self._value = value
            if self._on_change is not None:
                self._on_change(value)

    def value(self) -> R:
        """The most recently selected value."""
        return self._value

    def close(self) -> None:
        """Stop following the store."""
        self._subscription.unsubscribe()

    def __enter__(self) -> "Selector[R]":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def select(
    store_type: Any,
    selector: Callable[[Any], R],
    on_change: Optional[Callable[[R], Any]] = None,
) -> Selector[R]:
    """Follow ``selector(state)``, comparing values with ``==``."""
    return Selector(store_type, lambda state, _deps: selector(state), on_change=on_change)


def select_with_deps(
    store_type: Any,
    selector: Callable[[Any, Any], R],
    deps: Any,
    on_change: Optional[Callable[[R], Any]] = None,
) -> Selector[R]:
    """Follow ``selector(state, deps)``, comparing values with ``==``."""
    return Selector(store_type, selector, deps=deps, on_change=on_change)