"""Stores and the reducers that change them."""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Generic, TypeVar, Union

S = TypeVar("S")

ReducerLike = Union["Reducer[S]", Callable[[S], S]]
AsyncReducerLike = Union["AsyncReducer[S]", Callable[[S], Awaitable[S]]]


class Store:
    """Base class for globally shared state.

    Subclasses usually are dataclasses; the defaults create the store by
    calling the class without arguments and notify subscribers whenever the
    new state compares unequal to the old one.
    """

    @classmethod
    def new(cls):
        """Create the initial state of this store."""
        return cls()

    def should_notify(self, old: Any) -> bool:
        """Tell whether subscribers should hear about the change from ``old``."""
        return self != old


class Reducer(ABC, Generic[S]):
    """A value that turns one state into the next."""

    @abstractmethod
    def apply(self, state: S) -> S:
        """Return the state that follows ``state``."""


class AsyncReducer(ABC, Generic[S]):
    """A value that turns one state into the next, asynchronously."""

    @abstractmethod
    async def apply(self, state: S) -> S:
        """Return the state that follows ``state``."""


def apply_reducer(reducer: ReducerLike, state: S) -> S:
    """Apply a :class:`Reducer` or a plain function of the state."""
    if isinstance(reducer, Reducer):
        return reducer.apply(state)
    if callable(reducer):
        return reducer(state)
    raise TypeError(f"{reducer!r} is not a reducer")


async def apply_async_reducer(reducer: AsyncReducerLike, state: S) -> S:
    """Apply an :class:`AsyncReducer` or a function returning an awaitable state."""
    if isinstance(reducer, AsyncReducer):
        return await reducer.apply(state)
    if callable(reducer):
        result = reducer(state)
        if inspect.isawaitable(result):
            result = await result
        return result
    raise TypeError(f"{reducer!r} is not an async reducer")