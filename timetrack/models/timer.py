"""Timer model definitions."""
from typing import Optional

from pydantic import BaseModel, Field

from timetrack.models.types import UtcDatetime


class Timer(BaseModel):
    """A running timer; at most one per user."""

    user_id: str
    issue_id: str
    started_at: UtcDatetime
    description: Optional[str] = None
    tags: list[str] = Field(default_factory=list)


class ActiveTimer(Timer):
    """Timer with elapsed time computed against the clock."""

    elapsed_seconds: int = 0
    elapsed_hours: float = 0.0
