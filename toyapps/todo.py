"""State of a to-do list with filtering and persistence."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Any, List, Tuple

STORAGE_KEY = "yew.functiontodomvc.self"


@dataclass(frozen=True)
class Entry:
    id: int
    description: str
    completed: bool = False


class Filter(Enum):
    ALL = "All"
    ACTIVE = "Active"
    COMPLETED = "Completed"

    def __str__(self) -> str:
        return self.value

    def fits(self, entry: Entry) -> bool:
        """Whether ``entry`` is shown under this filter."""
        if self is Filter.ALL:
            return True
        if self is Filter.ACTIVE:
            return not entry.completed
        return entry.completed

    def as_href(self) -> str:
        return _HREFS[self]


_HREFS = {
    Filter.ALL: "#/",
    Filter.ACTIVE: "#/active",
    Filter.COMPLETED: "#/completed",
}


@dataclass(frozen=True)
class TodoState:
    """Immutable list state; every action returns a new state."""

    entries: Tuple[Entry, ...] = field(default_factory=tuple)
    filter: Filter = Filter.ALL

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", tuple(self.entries))

    def _with(self, entries) -> TodoState:
        return replace(self, entries=tuple(entries))

    def add(self, description: str) -> TodoState:
        next_id = self.entries[-1].id + 1 if self.entries else 1
        return self._with((*self.entries, Entry(next_id, description, False)))

    def edit(self, entry_id: int, description: str) -> TodoState:
        """Change a description; an empty one removes the entry."""
        if not description:
            return self.remove(entry_id)
        done = False
        entries = []
        for entry in self.entries:
            if not done and entry.id == entry_id:
                entry = replace(entry, description=description)
                done = True
            entries.append(entry)
        return self._with(entries)

    def remove(self, entry_id: int) -> TodoState:
        return self._with(e for e in self.entries if e.id != entry_id)

    def toggle(self, entry_id: int) -> TodoState:
        done = False
        entries = []
        for entry in self.entries:
            if not done and entry.id == entry_id:
                entry = replace(entry, completed=not entry.completed)
                done = True
            entries.append(entry)
        return self._with(entries)

    def toggle_all(self) -> TodoState:
        """Flip completion of every entry visible under the current filter."""
        return self._with(
            replace(e, completed=not e.completed) if self.filter.fits(e) else e
            for e in self.entries
        )

    def clear_completed(self) -> TodoState:
        return self._with(e for e in self.entries if Filter.ACTIVE.fits(e))

    def set_filter(self, filter_: Filter) -> TodoState:
        return replace(self, filter=filter_)

    def visible_entries(self) -> List[Entry]:
        return [e for e in self.entries if self.filter.fits(e)]

    def completed_count(self) -> int:
        return sum(1 for e in self.entries if Filter.COMPLETED.fits(e))

    def all_completed(self) -> bool:
        """True when every entry is both visible and completed."""
        return all(self.filter.fits(e) and e.completed for e in self.entries)


def _entry_from_json(data: Any) -> Entry:
    if not isinstance(data, dict):
        raise ValueError("entry must be an object")
    entry_id = data.get("id")
    description = data.get("description")
    completed = data.get("completed")
    if isinstance(entry_id, bool) or not isinstance(entry_id, int) or entry_id < 0:
        raise ValueError("invalid id")
    if not isinstance(description, str):
        raise ValueError("invalid description")
    if not isinstance(completed, bool):
        raise ValueError("invalid completed flag")
    return Entry(entry_id, description, completed)


def load_entries(path: str | Path) -> List[Entry]:
    """Stored entries, or an empty list when nothing valid is stored."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(data, list):
            return []
        return [_entry_from_json(item) for item in data]
    except (OSError, ValueError):
        return []


def save_entries(entries, path: str | Path) -> None:
    """Store entries as JSON; raises ``OSError`` if the file cannot be written."""
    payload = [
        {"id": e.id, "description": e.description, "completed": e.completed}
        for e in entries
    ]
    Path(path).write_text(json.dumps(payload), encoding="utf-8")