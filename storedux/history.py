"""Undo and redo history for any store."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Optional, Sequence, Tuple

from . import actions
from .listener import Listener
from .store import Reducer, Store


class HistoryAction(enum.Enum):
    """What a :class:`HistoryMessage` does."""

    UNDO = "undo"
    REDO = "redo"
    CLEAR = "clear"
    JUMP_TO = "jump_to"


class HistoryStore(Store):
    """The recorded states of one store and the position of the current one.

    Use :func:`history_store` to get the history class of a given store.
    """

    store_type: Any = None

    def __init__(self, states: Sequence[Any], index: int = 0) -> None:
        states = tuple(states)
        if not states:
            raise ValueError("a history holds at least one state")
        if not 0 <= index < len(states):
            raise ValueError(f"index {index} outside history of {len(states)} states")
        self._states: Tuple[Any, ...] = states
        self._index = index

    @classmethod
    def new(cls) -> "HistoryStore":
        if cls.store_type is None:
            raise TypeError("HistoryStore has no store type; use history_store()")
        return cls((actions.get(cls.store_type),), 0)

    def can_apply(self, message: "HistoryMessage") -> bool:
        """Tell whether applying ``message`` would do anything."""
        action = message.action
        if action is HistoryAction.UNDO:
            return self._index > 0
        if action is HistoryAction.REDO:
            return self._index + 1 < len(self._states)
        if action is HistoryAction.CLEAR:
            return len(self._states) > 1
        return message.target != self._index and message.target < len(self._states)

    def index(self) -> int:
        """Position of the current state."""
        return self._index

    def states(self) -> Tuple[Any, ...]:
        """Every recorded state, oldest first."""
        return self._states

    def current(self) -> Any:
        """The state at the current position."""
        return self._states[self._index]

    def _replace(self, states: Sequence[Any], index: int) -> "HistoryStore":
        return type(self)(states, index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HistoryStore):
            return NotImplemented
        return self._index == other._index and self._states == other._states

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(states={self._states!r}, index={self._index})"


@dataclass(frozen=True)
class HistoryMessage(Reducer):
    """A change to a history: undo, redo, clear or jump to a position."""

    action: HistoryAction
    target: Optional[int] = None

    @classmethod
    def undo(cls) -> "HistoryMessage":
        return cls(HistoryAction.UNDO)

    @classmethod
    def redo(cls) -> "HistoryMessage":
        return cls(HistoryAction.REDO)

    @classmethod
    def clear(cls) -> "HistoryMessage":
        return cls(HistoryAction.CLEAR)

    @classmethod
    def jump_to(cls, index: int) -> "HistoryMessage":
        if index < 0:
            raise ValueError(f"history index must not be negative: {index}")
        return cls(HistoryAction.JUMP_TO, index)

    def apply(self, state: HistoryStore) -> HistoryStore:
        """Return the history after this message and move the watched store along."""
        states = state.states()
        index = state.index()
        changed = False

        if self.action is HistoryAction.UNDO:
            if index > 0:
                index -= 1
                changed = True
        elif self.action is HistoryAction.REDO:
            if index + 1 < len(states):
                index += 1
                changed = True
        elif self.action is HistoryAction.CLEAR:
            states = (states[index],)
            index = 0
        elif self.target < len(states):
            index = self.target
            changed = True

        new_state = state._replace(states, index)
        if changed:
            current = new_state.current()
            actions.reduce(state.store_type, lambda _: current)
        return new_state


class _HistoryChange(Reducer):
    def __init__(self, state: Any) -> None:
        self.state = state

    def apply(self, history: HistoryStore) -> HistoryStore:
        if history.current() is self.state:
            return history
        index = history.index() + 1
        states = history.states()[:index] + (self.state,)
        return history._replace(states, index)


class HistoryListener(Listener):
    """Records every change of ``store_type`` in its history store."""

    def __init__(self, store_type: Any) -> None:
        self.store = store_type

    def on_change(self, state: Any) -> None:
        actions.reduce(history_store(self.store), _HistoryChange(state))


@lru_cache(maxsize=None)
def history_store(store_type: Any) -> type:
    """Return the history store class that records ``store_type``."""
    name = getattr(store_type, "__name__", repr(store_type))
    return type(f"HistoryStore[{name}]", (HistoryStore,), {"store_type": store_type})