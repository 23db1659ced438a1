"""Timer service - business logic for starting and stopping timers."""
import logging
from datetime import datetime
from typing import Optional

from timetrack.exceptions import NotFoundError, ValidationError
from timetrack.models.time_entry import TimeEntry, TimeEntryBase
from timetrack.models.timer import ActiveTimer, Timer
from timetrack.store import TimeStore
from timetrack.utils.timeutil import elapsed_seconds, seconds_to_hours


logger = logging.getLogger(__name__)

AUTO_STOP_DESCRIPTION = "Auto-stopped on issue closure"
AUTO_STOP_TAG = "auto-stopped"


class TimerService:
    """Service for handling timer operations."""

    def __init__(self, store: TimeStore, clock):
        """Initialize service with the store and a clock."""
        self.store = store
        self.clock = clock

    def _build_entry(
        self,
        timer: Timer,
        ended_at: datetime,
        description: Optional[str],
        tags: list[str],
        billable: bool,
    ) -> TimeEntryBase:
        return TimeEntryBase(
            user_id=timer.user_id,
            issue_id=timer.issue_id,
            started_at=timer.started_at,
            ended_at=ended_at,
            duration_seconds=elapsed_seconds(timer.started_at, ended_at),
            description=description,
            tags=tags,
            billable=billable,
            created_at=self.clock.now(),
        )

    def start_timer(
        self,
        user_id: Optional[str],
        issue_id: Optional[str],
        description: Optional[str] = None,
        tags: Optional[list[str]] = None,
    ) -> ActiveTimer:
        """
        Start a timer for a user.

        Args:
            user_id: User ID
            issue_id: Issue the time is tracked against
            description: Optional description
            tags: Optional tags

        Returns:
            Started timer with zero elapsed time

        Raises:
            ValidationError: If user_id or issue_id is missing
            ConflictError: If the user already has an active timer
        """
        if not user_id:
            raise ValidationError("user_id is required")
        if not issue_id:
            raise ValidationError("issue_id is required")

        timer = Timer(
            user_id=user_id,
            issue_id=issue_id,
            started_at=self.clock.now(),
            description=description,
            tags=list(tags or []),
        )
        timer = self.store.put_active_timer(timer)

        logger.info("Started timer for user %s on issue %s", user_id, issue_id)
        return ActiveTimer(**timer.model_dump(), elapsed_seconds=0, elapsed_hours=0.0)

    def stop_timer(
        self,
        user_id: Optional[str],
        description: Optional[str] = None,
        billable: Optional[bool] = None,
    ) -> TimeEntry:
        """
        Stop the user's timer and record it as a time entry.

        Args:
            user_id: User ID
            description: Overrides the timer's description when given
            billable: Entry is billable unless this is explicitly False

        Returns:
            Created time entry

        Raises:
            ValidationError: If user_id is missing
            NotFoundError: If the user has no active timer
        """
        if not user_id:
            raise ValidationError("user_id is required")

        with self.store.transaction():
            timer = self.store.take_active_timer(user_id)
            if timer is None:
                raise NotFoundError("No active timer for user")

            entry = self._build_entry(
                timer,
                ended_at=self.clock.now(),
                description=description if description is not None else timer.description,
                tags=timer.tags,
                billable=billable is not False,
            )
            entry = self.store.append_entry(entry)

        logger.info(
            "Stopped timer for user %s on issue %s (%ss)",
            user_id,
            entry.issue_id,
            entry.duration_seconds,
        )
        return entry

    def auto_stop_timer(self, timer: Timer) -> Optional[TimeEntry]:
        """
        Stop a timer seen in an earlier snapshot of active timers.

        The timer is only stopped if it is still the user's active timer; a
        timer stopped (or replaced) since the snapshot is left alone.

        Returns:
            Created time entry, or None if the timer is no longer active
        """
        with self.store.transaction():
            if self.store.peek_active_timer(timer.user_id) != timer:
                return None
            current = self.store.take_active_timer(timer.user_id)

            entry = self._build_entry(
                current,
                ended_at=self.clock.now(),
                description=(
                    current.description
                    if current.description is not None
                    else AUTO_STOP_DESCRIPTION
                ),
                tags=current.tags + [AUTO_STOP_TAG],
                billable=True,
            )
            return self.store.append_entry(entry)

    def get_active_timer(self, user_id: str) -> ActiveTimer:
        """
        Get the user's running timer with elapsed time.

        Raises:
            NotFoundError: If the user has no active timer
        """
        timer = self.store.peek_active_timer(user_id)
        if timer is None:
            raise NotFoundError("No active timer for user")

        elapsed = elapsed_seconds(timer.started_at, self.clock.now())
        return ActiveTimer(
            **timer.model_dump(),
            elapsed_seconds=elapsed,
            elapsed_hours=seconds_to_hours(elapsed),
        )
