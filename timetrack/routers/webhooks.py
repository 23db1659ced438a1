"""Webhook endpoints - inbound issue events."""
from fastapi import APIRouter, Depends

from timetrack.clock import get_clock
from timetrack.config import settings
from timetrack.models.webhook import IssueTransitionEvent, WebhookResult
from timetrack.services.timer_service import TimerService
from timetrack.services.webhook_service import WebhookService
from timetrack.store import get_store


router = APIRouter(prefix="/webhooks", tags=["webhooks"])


@router.post("/issue.transitioned", response_model=WebhookResult)
async def issue_transitioned(
    event: IssueTransitionEvent,
    store=Depends(get_store),
    clock=Depends(get_clock),
):
    """
    Handle an issue status transition.

    Moving an issue to a closing status stops every timer running on it.
    """
    service = WebhookService(
        TimerService(store, clock),
        auto_stop_statuses=settings.auto_stop_statuses_list,
    )
    return service.handle_issue_transition(
        issue_id=event.issue.id,
        to_status=event.transition.to,
    )
