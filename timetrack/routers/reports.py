"""Report endpoints."""
from fastapi import APIRouter, Depends

from timetrack.models.report import Summary
from timetrack.models.time_entry import TimeEntryFilters
from timetrack.routers.entries import get_entry_filters
from timetrack.services.query_service import QueryService
from timetrack.store import get_store


router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/summary", response_model=Summary)
async def summary(
    filters: TimeEntryFilters = Depends(get_entry_filters),
    store=Depends(get_store),
):
    """
    Summarize time entries.

    Accepts the same filters as listing entries. Totals are grouped by user
    and by issue.
    """
    return QueryService(store).summarize(filters)
