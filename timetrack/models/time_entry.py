"""Time entry model definitions."""
from typing import Optional

from pydantic import BaseModel, Field, computed_field, field_validator

from timetrack.models.types import UtcDatetime
from timetrack.utils.timeutil import seconds_to_hours


class TimeEntryBase(BaseModel):
    """Time entry fields, everything except the store-assigned id."""

    user_id: str
    issue_id: str
    started_at: UtcDatetime
    ended_at: UtcDatetime
    duration_seconds: int
    description: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    billable: bool = True
    created_at: UtcDatetime

    @computed_field
    @property
    def duration_hours(self) -> float:
        """Duration in hours, rounded to 2 decimal places."""
        return seconds_to_hours(self.duration_seconds)


class TimeEntry(TimeEntryBase):
    """Full time entry model with store fields."""

    id: int


class TimeEntryCreate(BaseModel):
    """
    Time entry creation model.

    Required fields are checked by EntryService so that a missing field is
    reported the same way as any other invalid input.
    """

    user_id: Optional[str] = None
    issue_id: Optional[str] = None
    started_at: Optional[UtcDatetime] = None
    ended_at: Optional[UtcDatetime] = None
    duration_seconds: Optional[int] = None
    description: Optional[str] = None
    tags: Optional[list[str]] = None
    billable: Optional[bool] = None


class TimeEntryUpdate(BaseModel):
    """Time entry update model - only fields present in the payload apply."""

    started_at: Optional[UtcDatetime] = None
    ended_at: Optional[UtcDatetime] = None
    duration_seconds: Optional[int] = None
    description: Optional[str] = None
    tags: Optional[list[str]] = None
    billable: Optional[bool] = None


class TimeEntryFilters(BaseModel):
    """Filters shared by listing, summary and export; combined with AND."""

    user_id: Optional[str] = None
    issue_id: Optional[str] = None
    start_date: Optional[UtcDatetime] = None
    end_date: Optional[UtcDatetime] = None
    billable: Optional[bool] = None
    tags: Optional[list[str]] = None

    @field_validator("tags", mode="before")
    @classmethod
    def split_tags(cls, value):
        """Accept a comma-separated string; blank items are dropped."""
        if value is None:
            return None
        if isinstance(value, str):
            value = value.split(",")
        tags = [tag.strip() for tag in value if isinstance(tag, str) and tag.strip()]
        return tags or None


class TimeEntryList(BaseModel):
    """Time entry listing response."""

    count: int
    entries: list[TimeEntry]
