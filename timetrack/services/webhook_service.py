"""Webhook service - reacts to issue status transitions."""
import logging
from typing import Iterable

from timetrack.models.webhook import WebhookResult
from timetrack.services.timer_service import TimerService


logger = logging.getLogger(__name__)

DEFAULT_AUTO_STOP_STATUSES = ("closed", "done")


class WebhookService:
    """Auto-stops running timers when their issue is closed."""

    def __init__(
        self,
        timer_service: TimerService,
        auto_stop_statuses: Iterable[str] = DEFAULT_AUTO_STOP_STATUSES,
    ):
        """Initialize service with the timer service and trigger statuses."""
        self.timer_service = timer_service
        self.auto_stop_statuses = frozenset(auto_stop_statuses)

    def handle_issue_transition(self, issue_id: str, to_status: str) -> WebhookResult:
        """
        Stop every active timer on an issue that moved to a closing status.

        Timers are scanned from a snapshot; each one is stopped atomically
        and skipped if it was stopped in the meantime. Resulting entries are
        billable, tagged "auto-stopped", and get a fallback description.

        Args:
            issue_id: Issue that transitioned
            to_status: Status the issue moved to

        Returns:
            Number of timers stopped and a message; "No action taken" for
            non-closing statuses
        """
        if to_status not in self.auto_stop_statuses:
            return WebhookResult(stopped_timers=0, message="No action taken")

        stopped = 0
        for timer in self.timer_service.store.list_active_timers():
            if timer.issue_id != issue_id:
                continue
            if self.timer_service.auto_stop_timer(timer) is not None:
                stopped += 1

        logger.info(
            "Issue %s transitioned to %s: stopped %d active timer(s)",
            issue_id,
            to_status,
            stopped,
        )
        return WebhookResult(
            stopped_timers=stopped,
            message=f"Stopped {stopped} active timer(s)",
        )
