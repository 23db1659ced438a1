"""Timer endpoints - start, stop and inspect running timers."""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from timetrack.clock import get_clock
from timetrack.exceptions import TimeTrackingError
from timetrack.models.time_entry import TimeEntry
from timetrack.models.timer import ActiveTimer
from timetrack.services.timer_service import TimerService
from timetrack.store import get_store


router = APIRouter(prefix="/timer", tags=["timers"])


class TimerStart(BaseModel):
    """Request model for starting a timer."""

    user_id: Optional[str] = None
    issue_id: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[list[str]] = None


class TimerStop(BaseModel):
    """Request model for stopping a timer."""

    user_id: Optional[str] = None
    description: Optional[str] = None
    billable: Optional[bool] = None


@router.post("/start", response_model=ActiveTimer)
async def start_timer(
    timer_start: TimerStart,
    store=Depends(get_store),
    clock=Depends(get_clock),
):
    """
    Start a timer.

    - Only one timer can run per user (409 otherwise)
    - user_id and issue_id are required
    """
    service = TimerService(store, clock)
    try:
        return service.start_timer(
            user_id=timer_start.user_id,
            issue_id=timer_start.issue_id,
            description=timer_start.description,
            tags=timer_start.tags,
        )
    except TimeTrackingError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))


@router.post("/stop", response_model=TimeEntry)
async def stop_timer(
    timer_stop: TimerStop,
    store=Depends(get_store),
    clock=Depends(get_clock),
):
    """
    Stop the user's running timer and record a time entry.

    - Returns 404 if the user has no running timer
    - Entry is billable unless billable is explicitly false
    """
    service = TimerService(store, clock)
    try:
        return service.stop_timer(
            user_id=timer_stop.user_id,
            description=timer_stop.description,
            billable=timer_stop.billable,
        )
    except TimeTrackingError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))


@router.get("/active/{user_id}", response_model=ActiveTimer)
async def get_active_timer(
    user_id: str,
    store=Depends(get_store),
    clock=Depends(get_clock),
):
    """
    Get the user's running timer with elapsed time.

    - Returns 404 if no timer is running
    """
    service = TimerService(store, clock)
    try:
        return service.get_active_timer(user_id=user_id)
    except TimeTrackingError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
