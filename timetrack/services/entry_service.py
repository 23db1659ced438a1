"""Entry service - business logic for manual time entries."""
import logging
from datetime import timedelta

from timetrack.exceptions import NotFoundError, ValidationError
from timetrack.models.time_entry import (
    TimeEntry,
    TimeEntryBase,
    TimeEntryCreate,
    TimeEntryUpdate,
)
from timetrack.store import TimeStore
from timetrack.utils.timeutil import elapsed_seconds


logger = logging.getLogger(__name__)

# Fields that may be patched but never cleared
_NON_NULLABLE_FIELDS = ("started_at", "ended_at", "duration_seconds", "billable")


def _offset(started_at, duration_seconds: int):
    """started_at moved forward by duration_seconds."""
    try:
        return started_at + timedelta(seconds=duration_seconds)
    except OverflowError:
        raise ValidationError("duration_seconds out of range")


class EntryService:
    """Service for creating, editing and deleting time entries."""

    def __init__(self, store: TimeStore, clock):
        """Initialize service with the store and a clock."""
        self.store = store
        self.clock = clock

    def create_entry(self, entry_create: TimeEntryCreate) -> TimeEntry:
        """
        Create a manual time entry.

        When ended_at is given the duration is computed from it; otherwise
        ended_at is derived from started_at + duration_seconds.

        Args:
            entry_create: Time entry creation data

        Returns:
            Created time entry

        Raises:
            ValidationError: If a required field is missing or the duration
                would be negative
        """
        if not entry_create.user_id:
            raise ValidationError("user_id is required")
        if not entry_create.issue_id:
            raise ValidationError("issue_id is required")
        if entry_create.started_at is None:
            raise ValidationError("started_at is required")

        started_at = entry_create.started_at
        if entry_create.ended_at is not None:
            ended_at = entry_create.ended_at
            duration = elapsed_seconds(started_at, ended_at)
        elif entry_create.duration_seconds is not None:
            duration = entry_create.duration_seconds
            ended_at = _offset(started_at, duration)
        else:
            raise ValidationError("Either ended_at or duration_seconds is required")

        if ended_at < started_at:
            raise ValidationError("ended_at must not be before started_at")

        entry = self.store.append_entry(
            TimeEntryBase(
                user_id=entry_create.user_id,
                issue_id=entry_create.issue_id,
                started_at=started_at,
                ended_at=ended_at,
                duration_seconds=duration,
                description=entry_create.description,
                tags=list(entry_create.tags or []),
                billable=entry_create.billable is not False,
                created_at=self.clock.now(),
            )
        )

        logger.info("Created time entry %s for user %s", entry.id, entry.user_id)
        return entry

    def get_entry(self, entry_id: int) -> TimeEntry:
        """
        Get a time entry by id.

        Raises:
            NotFoundError: If entry not found
        """
        entry = self.store.get_entry(entry_id)
        if entry is None:
            raise NotFoundError("Time entry not found")
        return entry

    def update_entry(self, entry_id: int, entry_update: TimeEntryUpdate) -> TimeEntry:
        """
        Update a time entry.

        Only fields present in the update apply. A duration_seconds change
        moves ended_at to started_at + duration_seconds; the stored duration
        is then always recomputed from the resulting start and end times.

        Args:
            entry_id: Time entry ID
            entry_update: Update data

        Returns:
            Updated time entry

        Raises:
            NotFoundError: If entry not found
            ValidationError: If a field is cleared that cannot be, or the
                resulting duration would be negative
        """
        changes = entry_update.model_dump(exclude_unset=True)
        for field in _NON_NULLABLE_FIELDS:
            if field in changes and changes[field] is None:
                raise ValidationError(f"{field} cannot be null")

        with self.store.transaction():
            existing = self.store.get_entry(entry_id)
            if existing is None:
                raise NotFoundError("Time entry not found")

            started_at = changes.get("started_at", existing.started_at)
            ended_at = changes.get("ended_at", existing.ended_at)
            if "duration_seconds" in changes:
                ended_at = _offset(started_at, changes["duration_seconds"])

            if ended_at < started_at:
                raise ValidationError("ended_at must not be before started_at")
            duration = elapsed_seconds(started_at, ended_at)

            update_doc = {
                "started_at": started_at,
                "ended_at": ended_at,
                "duration_seconds": duration,
            }
            if "description" in changes:
                update_doc["description"] = changes["description"]
            if "tags" in changes:
                update_doc["tags"] = list(changes["tags"] or [])
            if "billable" in changes:
                update_doc["billable"] = changes["billable"]

            entry = self.store.update_entry(entry_id, update_doc)

        logger.info("Updated time entry %s", entry_id)
        return entry

    def delete_entry(self, entry_id: int) -> dict:
        """
        Delete a time entry permanently.

        Returns:
            Dictionary with deleted_count

        Raises:
            NotFoundError: If entry not found
        """
        if not self.store.delete_entry(entry_id):
            raise NotFoundError("Time entry not found")

        logger.info("Deleted time entry %s", entry_id)
        return {"deleted_count": 1, "message": "Time entry deleted"}
