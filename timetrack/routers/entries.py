"""Time entry endpoints - manual entries and listing."""
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from timetrack.clock import get_clock
from timetrack.exceptions import TimeTrackingError
from timetrack.models.time_entry import (
    TimeEntry,
    TimeEntryCreate,
    TimeEntryFilters,
    TimeEntryList,
    TimeEntryUpdate,
)
from timetrack.services.entry_service import EntryService
from timetrack.services.query_service import QueryService
from timetrack.store import get_store


router = APIRouter(prefix="/entries", tags=["entries"])


def get_entry_filters(
    user_id: Optional[str] = Query(None, description="Filter by user"),
    issue_id: Optional[str] = Query(None, description="Filter by issue"),
    start_date: Optional[datetime] = Query(None, description="Earliest started_at (inclusive)"),
    end_date: Optional[datetime] = Query(None, description="Latest started_at (inclusive)"),
    billable: Optional[bool] = Query(None, description="Filter by billable flag"),
    tags: Optional[str] = Query(None, description="Comma-separated tags, any may match"),
) -> TimeEntryFilters:
    """Dependency collecting the shared entry filters from the query string."""
    return TimeEntryFilters(
        user_id=user_id,
        issue_id=issue_id,
        start_date=start_date,
        end_date=end_date,
        billable=billable,
        tags=tags,
    )


@router.post("", response_model=TimeEntry, status_code=status.HTTP_201_CREATED)
async def create_entry(
    entry_create: TimeEntryCreate,
    store=Depends(get_store),
    clock=Depends(get_clock),
):
    """
    Create a manual time entry.

    - user_id, issue_id and started_at are required
    - Either ended_at or duration_seconds is required
    """
    service = EntryService(store, clock)
    try:
        return service.create_entry(entry_create)
    except TimeTrackingError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))


@router.get("", response_model=TimeEntryList)
async def list_entries(
    filters: TimeEntryFilters = Depends(get_entry_filters),
    store=Depends(get_store),
):
    """
    List time entries.

    - Optional filters: user_id, issue_id, start_date, end_date, billable, tags
    - Results sorted by started_at descending (most recent first)
    """
    entries = QueryService(store).list_entries(filters)
    return TimeEntryList(count=len(entries), entries=entries)


@router.get("/{entry_id}", response_model=TimeEntry)
async def get_entry(
    entry_id: int,
    store=Depends(get_store),
    clock=Depends(get_clock),
):
    """Get a specific time entry by ID."""
    service = EntryService(store, clock)
    try:
        return service.get_entry(entry_id)
    except TimeTrackingError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))


@router.put("/{entry_id}", response_model=TimeEntry)
@router.patch("/{entry_id}", response_model=TimeEntry)
async def update_entry(
    entry_id: int,
    entry_update: TimeEntryUpdate,
    store=Depends(get_store),
    clock=Depends(get_clock),
):
    """
    Update a time entry.

    - Only fields present in the body are changed
    - Duration is recomputed from started_at and ended_at
    """
    service = EntryService(store, clock)
    try:
        return service.update_entry(entry_id, entry_update)
    except TimeTrackingError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))


@router.delete("/{entry_id}")
async def delete_entry(
    entry_id: int,
    store=Depends(get_store),
    clock=Depends(get_clock),
):
    """
    Delete a time entry.

    - Hard delete (permanent)
    """
    service = EntryService(store, clock)
    try:
        return service.delete_entry(entry_id)
    except TimeTrackingError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
