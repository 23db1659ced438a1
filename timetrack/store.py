"""In-memory store for active timers and time entries."""
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from fastapi import Request

from timetrack.exceptions import ConflictError
from timetrack.models.time_entry import TimeEntry, TimeEntryBase
from timetrack.models.timer import Timer


class TimeStore:
    """
    Process-wide store of active timers (keyed by user) and time entries
    (keyed by an auto-incrementing id).

    Every operation holds one re-entrant lock, so callers that need several
    operations to apply as a unit wrap them in ``transaction()``. Values
    handed out are copies; nothing outside the store keeps a reference to
    stored objects.
    """

    def __init__(self):
        """Initialize an empty store."""
        self._lock = threading.RLock()
        self._timers: dict[str, Timer] = {}
        self._entries: dict[int, TimeEntry] = {}
        self._counter = 0

    @contextmanager
    def transaction(self) -> Iterator["TimeStore"]:
        """Hold the store lock across several operations."""
        with self._lock:
            yield self

    # Active timers

    def put_active_timer(self, timer: Timer) -> Timer:
        """
        Store a timer for its user.

        Raises:
            ConflictError: If the user already has an active timer
        """
        with self._lock:
            if timer.user_id in self._timers:
                raise ConflictError("User already has an active timer. Stop it first.")
            self._timers[timer.user_id] = timer.model_copy(deep=True)
            return timer.model_copy(deep=True)

    def take_active_timer(self, user_id: str) -> Optional[Timer]:
        """Remove the user's timer and return a copy of it, or None."""
        with self._lock:
            timer = self._timers.pop(user_id, None)
            return timer.model_copy(deep=True) if timer else None

    def peek_active_timer(self, user_id: str) -> Optional[Timer]:
        """Return a copy of the user's timer without removing it, or None."""
        with self._lock:
            timer = self._timers.get(user_id)
            return timer.model_copy(deep=True) if timer else None

    def list_active_timers(self) -> list[Timer]:
        """Snapshot of all active timers."""
        with self._lock:
            return [timer.model_copy(deep=True) for timer in self._timers.values()]

    def count_active_timers(self) -> int:
        with self._lock:
            return len(self._timers)

    # Time entries

    def append_entry(self, entry: TimeEntryBase) -> TimeEntry:
        """
        Assign the next id to an entry and store it.

        Ids are never reused, even after deletes.
        """
        with self._lock:
            self._counter += 1
            stored = TimeEntry(
                id=self._counter,
                **entry.model_dump(exclude={"duration_hours"}),
            )
            self._entries[stored.id] = stored
            return stored.model_copy(deep=True)

    def get_entry(self, entry_id: int) -> Optional[TimeEntry]:
        with self._lock:
            entry = self._entries.get(entry_id)
            return entry.model_copy(deep=True) if entry else None

    def update_entry(self, entry_id: int, changes: dict) -> Optional[TimeEntry]:
        """
        Apply field changes to an entry in place.

        Returns:
            Updated entry, or None if the id is unknown
        """
        with self._lock:
            entry = self._entries.get(entry_id)
            if entry is None:
                return None
            updated = entry.model_copy(update=changes).model_copy(deep=True)
            self._entries[entry_id] = updated
            return updated.model_copy(deep=True)

    def delete_entry(self, entry_id: int) -> bool:
        """Remove an entry. Returns False if the id is unknown."""
        with self._lock:
            return self._entries.pop(entry_id, None) is not None

    def list_entries(self) -> list[TimeEntry]:
        """Snapshot of all entries in insertion order."""
        with self._lock:
            return [entry.model_copy(deep=True) for entry in self._entries.values()]

    def count_entries(self) -> int:
        with self._lock:
            return len(self._entries)

    def reset(self) -> None:
        """Drop all timers and entries and restart ids at 1 (test harnesses)."""
        with self._lock:
            self._timers.clear()
            self._entries.clear()
            self._counter = 0


def get_store(request: Request) -> TimeStore:
    """Dependency to get the application store."""
    return request.app.state.store
