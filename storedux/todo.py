"""State of a to-do list: entries, the active filter and the edit buffer."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from .store import Store


class Filter(enum.Enum):
    """Which entries are shown."""

    ALL = "All"
    ACTIVE = "Active"
    COMPLETED = "Completed"

    def fits(self, entry: "Entry") -> bool:
        """Tell whether ``entry`` is shown under this filter."""
        if self is Filter.ALL:
            return True
        if self is Filter.ACTIVE:
            return not entry.completed
        return entry.completed

    def as_href(self) -> str:
        """The link fragment of this filter."""
        return _HREFS[self]

    def __str__(self) -> str:
        return self.value


_HREFS = {
    Filter.ALL: "#/",
    Filter.ACTIVE: "#/active",
    Filter.COMPLETED: "#/completed",
}


@dataclass
class Entry:
    """One to-do item."""

    description: str = ""
    completed: bool = False
    editing: bool = False


@dataclass
class TodoState(Store):
    """The whole to-do list. Indexes given to methods count visible entries only."""

    entries: List[Entry] = field(default_factory=list)
    filter: Filter = Filter.ALL
    edit_value: str = ""

    @classmethod
    def new(cls) -> "TodoState":
        return cls()

    def should_notify(self, old: object) -> bool:
        return self != old

    def _visible(self) -> Iterator[Tuple[int, Entry]]:
        return ((i, entry) for i, entry in enumerate(self.entries) if self.filter.fits(entry))

    def _visible_at(self, idx: int) -> Tuple[int, Entry]:
        if idx >= 0:
            for position, item in enumerate(self._visible()):
                if position == idx:
                    return item
        raise IndexError(f"no visible entry at {idx}")

    def total(self) -> int:
        """Number of entries, whatever the filter."""
        return len(self.entries)

    def total_completed(self) -> int:
        """Number of completed entries."""
        return sum(1 for entry in self.entries if Filter.COMPLETED.fits(entry))

    def is_all_completed(self) -> bool:
        """True when there are visible entries and all of them are completed."""
        visible = [entry for _, entry in self._visible()]
        return bool(visible) and all(entry.completed for entry in visible)

    def clear_completed(self) -> None:
        """Drop every completed entry."""
        self.entries = [entry for entry in self.entries if Filter.ACTIVE.fits(entry)]

    def toggle(self, idx: int) -> None:
        """Flip completion of the visible entry at ``idx``."""
        _, entry = self._visible_at(idx)
        entry.completed = not entry.completed

    def toggle_all(self, value: bool) -> None:
        """Set completion of every visible entry to ``value``."""
        for _, entry in self._visible():
            entry.completed = value

    def toggle_edit(self, idx: int) -> None:
        """Flip editing of the visible entry at ``idx``."""
        _, entry = self._visible_at(idx)
        entry.editing = not entry.editing

    def clear_all_edit(self) -> None:
        """Stop editing every entry."""
        for entry in self.entries:
            entry.editing = False

    def complete_edit(self, idx: int, val: str) -> None:
        """Finish editing the visible entry at ``idx``; an empty ``val`` removes it."""
        if not val:
            self.remove(idx)
            return
        _, entry = self._visible_at(idx)
        entry.description = val
        entry.editing = not entry.editing

    def remove(self, idx: int) -> None:
        """Remove the visible entry at ``idx``."""
        position, _ = self._visible_at(idx)
        del self.entries[position]