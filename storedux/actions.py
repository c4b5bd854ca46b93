"""Module-level operations on stores: reading, changing and subscribing."""

from __future__ import annotations

import copy
import inspect
from typing import Any, Awaitable, Callable

from .context import get_or_init
from .subscriber import SubscriberId, subscribers_for


def _copy_state(state: Any) -> Any:
    # Containers are duplicated so the old state stays intact for change
    # detection; Mrc handles keep sharing their inner value.
    return copy.deepcopy(state)


def reduce(store_type: Any, reducer: Any) -> None:
    """Apply ``reducer`` to the state of ``store_type`` and notify if it changed."""
    context = get_or_init(store_type)
    if context.reduce(reducer):
        notify_subscribers(store_type, context.state)


async def reduce_future(store_type: Any, reducer: Any) -> None:
    """Apply an async ``reducer`` to the state of ``store_type`` and notify if it changed."""
    context = get_or_init(store_type)
    if await context.reduce_future(reducer):
        notify_subscribers(store_type, context.state)


def reduce_mut(store_type: Any, f: Callable[[Any], Any]) -> None:
    """Change a copy of the state in place with ``f``; its return value is ignored."""

    def reducer(state: Any) -> Any:
        state = _copy_state(state)
        f(state)
        return state

    reduce(store_type, reducer)


async def reduce_mut_future(store_type: Any, f: Callable[[Any], Awaitable[Any]]) -> None:
    """Like :func:`reduce_mut`, awaiting what ``f`` returns before storing the state."""

    async def reducer(state: Any) -> Any:
        state = _copy_state(state)
        result = f(state)
        if inspect.isawaitable(result):
            await result
        return state

    await reduce_future(store_type, reducer)


def set(store_type: Any, value: Any) -> None:  # noqa: A001
    """Replace the state of ``store_type`` with ``value``."""
    reduce(store_type, lambda _: value)


def get(store_type: Any) -> Any:
    """Return the current state of ``store_type``."""
    return get_or_init(store_type).state


def notify_subscribers(store_type: Any, state: Any) -> None:
    """Send ``state`` to every subscriber of ``store_type``."""
    subscribers_for(store_type).notify(state)


def subscribe(store_type: Any, on_change: Callable[[Any], Any]) -> SubscriberId:
    """Call ``on_change`` with the current state now, and again on every change."""
    on_change(get(store_type))
    return subscribers_for(store_type).subscribe(on_change)


def subscribe_silent(store_type: Any, on_change: Callable[[Any], Any]) -> SubscriberId:
    """Call ``on_change`` on every change, without sending the current state first."""
    return subscribers_for(store_type).subscribe(on_change)