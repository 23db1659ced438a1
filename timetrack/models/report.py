"""Summary report model definitions."""
from pydantic import BaseModel, Field


class GroupTotals(BaseModel):
    """Totals for one user or one issue."""

    total_seconds: int = 0
    total_hours: float = 0.0
    entry_count: int = 0


class Summary(BaseModel):
    """Aggregated totals over a filtered set of time entries."""

    total_entries: int = 0
    total_seconds: int = 0
    total_hours: float = 0.0
    billable_entries: int = 0
    billable_seconds: int = 0
    billable_hours: float = 0.0
    non_billable_hours: float = 0.0
    by_user: dict[str, GroupTotals] = Field(default_factory=dict)
    by_issue: dict[str, GroupTotals] = Field(default_factory=dict)
