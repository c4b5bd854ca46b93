"""The primary interface to a store: reading, changing and subscribing."""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Optional

from . import actions
from .subscriber import SubscriberId


def _spawn(coro: Awaitable[Any]) -> "asyncio.Task[Any]":
    # Runs the coroutine on the current event loop without waiting for it.
    return asyncio.get_running_loop().create_task(coro)


class Dispatch:
    """Handle to the store ``store_type``.

    A dispatch made with :meth:`subscribe` or :meth:`subscribe_silent` keeps
    its subscription alive; copies share it, and it ends once every copy is
    released or the dispatch is closed through ``with``.
    """

    __slots__ = ("_store_type", "_subscription")

    def __init__(self, store_type: Any) -> None:
        self._store_type = store_type
        self._subscription: Optional[SubscriberId] = None

    @classmethod
    def _with_subscription(cls, store_type: Any, subscription: SubscriberId) -> "Dispatch":
        dispatch = cls(store_type)
        dispatch._subscription = subscription
        return dispatch

    @classmethod
    def subscribe(cls, store_type: Any, on_change: Callable[[Any], Any]) -> "Dispatch":
        """Subscribe ``on_change``; it receives the current state now and on every change."""
        return cls._with_subscription(store_type, actions.subscribe(store_type, on_change))

    @classmethod
    def subscribe_silent(cls, store_type: Any, on_change: Callable[[Any], Any]) -> "Dispatch":
        """Subscribe ``on_change`` to later changes only."""
        return cls._with_subscription(
            store_type, actions.subscribe_silent(store_type, on_change)
        )

    @property
    def store_type(self) -> Any:
        return self._store_type

    def get(self) -> Any:
        """Return the current state."""
        return actions.get(self._store_type)

    def apply(self, reducer: Any) -> None:
        """Apply a reducer immediately."""
        actions.reduce(self._store_type, reducer)

    async def apply_future(self, reducer: Any) -> None:
        """Apply an async reducer."""
        await actions.reduce_future(self._store_type, reducer)

    def apply_callback(self, f: Callable[[Any], Any]) -> Callable[..., None]:
        """Return a callback that applies the reducer ``f`` builds from the event."""

        def callback(event: Any = None) -> None:
            actions.reduce(self._store_type, f(event))

        return callback

    def apply_future_callback(self, f: Callable[[Any], Any]) -> Callable[..., "asyncio.Task[Any]"]:
        """Return a callback that schedules the async reducer ``f`` builds from the event."""

        def callback(event: Any = None) -> "asyncio.Task[Any]":
            return _spawn(actions.reduce_future(self._store_type, f(event)))

        return callback

    def set(self, value: Any) -> None:
        """Replace the state with ``value``."""
        actions.set(self._store_type, value)

    def set_callback(self, f: Callable[[Any], Any]) -> Callable[..., None]:
        """Return a callback that sets the state to ``f(event)``."""

        def callback(event: Any = None) -> None:
            actions.set(self._store_type, f(event))

        return callback

    def reduce(self, f: Callable[[Any], Any]) -> None:
        """Replace the state with ``f(state)``."""
        actions.reduce(self._store_type, f)

    async def reduce_future(self, f: Callable[[Any], Awaitable[Any]]) -> None:
        """Replace the state with the awaited ``f(state)``."""
        await actions.reduce_future(self._store_type, f)

    def reduce_callback(self, f: Callable[[Any], Any]) -> Callable[..., None]:
        """Return a callback that replaces the state with ``f(state)``, ignoring the event."""

        def callback(event: Any = None) -> None:
            actions.reduce(self._store_type, f)

        return callback

    def reduce_future_callback(
        self, f: Callable[[Any], Awaitable[Any]]
    ) -> Callable[..., "asyncio.Task[Any]"]:
        """Return a callback that schedules an async replacement of the state."""

        def callback(event: Any = None) -> "asyncio.Task[Any]":
            return _spawn(actions.reduce_future(self._store_type, f))

        return callback

    def reduce_callback_with(self, f: Callable[[Any, Any], Any]) -> Callable[[Any], None]:
        """Return a callback that replaces the state with ``f(state, event)``."""

        def callback(event: Any) -> None:
            actions.reduce(self._store_type, lambda state: f(state, event))

        return callback

    def reduce_future_callback_with(
        self, f: Callable[[Any, Any], Awaitable[Any]]
    ) -> Callable[[Any], "asyncio.Task[Any]"]:
        """Return a callback that schedules replacing the state with awaited ``f(state, event)``."""

        def callback(event: Any) -> "asyncio.Task[Any]":
            return _spawn(
                actions.reduce_future(self._store_type, lambda state: f(state, event))
            )

        return callback

    def reduce_mut(self, f: Callable[[Any], Any]) -> None:
        """Change a copy of the state in place with ``f``."""
        actions.reduce_mut(self._store_type, f)

    async def reduce_mut_future(self, f: Callable[[Any], Awaitable[Any]]) -> None:
        """Change a copy of the state in place with the coroutine ``f``."""
        await actions.reduce_mut_future(self._store_type, f)

    def reduce_mut_callback(self, f: Callable[[Any], Any]) -> Callable[..., None]:
        """Return a callback that changes the state in place with ``f``, ignoring the event."""

        def callback(event: Any = None) -> None:
            actions.reduce_mut(self._store_type, f)

        return callback

    def reduce_mut_future_callback(
        self, f: Callable[[Any], Awaitable[Any]]
    ) -> Callable[..., "asyncio.Task[Any]"]:
        """Return a callback that schedules an in-place async change with ``f``."""

        def callback(event: Any = None) -> "asyncio.Task[Any]":
            return _spawn(actions.reduce_mut_future(self._store_type, f))

        return callback

    def reduce_mut_callback_with(self, f: Callable[[Any, Any], Any]) -> Callable[[Any], None]:
        """Return a callback that changes the state in place with ``f(state, event)``."""

        def callback(event: Any) -> None:
            actions.reduce_mut(self._store_type, lambda state: f(state, event))

        return callback

    def reduce_mut_future_callback_with(
        self, f: Callable[[Any, Any], Awaitable[Any]]
    ) -> Callable[[Any], "asyncio.Task[Any]"]:
        """Return a callback that schedules an in-place async change with ``f(state, event)``."""

        def callback(event: Any) -> "asyncio.Task[Any]":
            return _spawn(
                actions.reduce_mut_future(self._store_type, lambda state: f(state, event))
            )

        return callback

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dispatch):
            return NotImplemented
        return (
            self._subscription is not None
            and self._subscription is other._subscription
        )

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self) -> "Dispatch":
        clone = type(self)(self._store_type)
        clone._subscription = self._subscription
        return clone

    def __deepcopy__(self, memo: dict) -> "Dispatch":
        return self.__copy__()

    def __enter__(self) -> "Dispatch":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        if self._subscription is not None:
            self._subscription.unsubscribe()

    def __repr__(self) -> str:
        name = getattr(self._store_type, "__name__", repr(self._store_type))
        subscribed = self._subscription is not None
        return f"Dispatch({name}, subscribed={subscribed})"