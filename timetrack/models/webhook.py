"""Webhook payload model definitions."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class IssueRef(BaseModel):
    """Issue portion of a transition event; extra issue fields are ignored."""

    id: str


class IssueTransition(BaseModel):
    """Status change of an issue."""

    model_config = ConfigDict(populate_by_name=True)

    from_status: Optional[str] = Field(default=None, alias="from")
    to: str


class IssueTransitionEvent(BaseModel):
    """Payload of the issue.transitioned webhook."""

    issue: IssueRef
    transition: IssueTransition


class WebhookResult(BaseModel):
    """Webhook handling outcome."""

    stopped_timers: int
    message: str
