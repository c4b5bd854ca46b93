"""A shared, mutable container with change detection."""

from __future__ import annotations

import threading
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
R = TypeVar("R")

_local = threading.local()


def _next_nonce() -> int:
    nonce = (getattr(_local, "nonce", 0) + 1) & 0xFFFFFFFF
    _local.nonce = nonce
    return nonce


class _Cell:
    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        self.value = value


class Mrc(Generic[T]):
    """Shared mutable value that is marked as changed on every mutable access.

    Copies share the underlying value. Two handles compare equal only while
    they share it and neither has been mutably accessed since they were
    copied, so holding one in a store state makes any mutable access visible
    to change detection without comparing the value itself.
    """

    __slots__ = ("_cell", "_nonce")

    def __init__(self, value: T) -> None:
        self._cell = _Cell(value)
        self._nonce = _next_nonce()

    def borrow(self) -> T:
        """Return the inner value without marking a change."""
        return self._cell.value

    def borrow_mut(self) -> T:
        """Return the inner value for mutation and mark this handle as changed."""
        self._nonce = _next_nonce()
        return self._cell.value

    def with_mut(self, f: Callable[[T], R]) -> R:
        """Call ``f`` with the inner value, marking a change, and return its result."""
        return f(self.borrow_mut())

    def set(self, value: T) -> None:
        """Replace the inner value and mark this handle as changed."""
        self._nonce = _next_nonce()
        self._cell.value = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mrc):
            return NotImplemented
        return self._cell is other._cell and self._nonce == other._nonce

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self) -> "Mrc[T]":
        clone = type(self).__new__(type(self))
        clone._cell = self._cell
        clone._nonce = self._nonce
        return clone

    def __deepcopy__(self, memo: dict) -> "Mrc[T]":
        return self.__copy__()

    def __repr__(self) -> str:
        return f"Mrc({self._cell.value!r})"