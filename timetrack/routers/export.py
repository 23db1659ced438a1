"""Export endpoints."""
from fastapi import APIRouter, Depends
from fastapi.responses import Response

from timetrack.config import settings
from timetrack.models.time_entry import TimeEntryFilters
from timetrack.routers.entries import get_entry_filters
from timetrack.services.export_service import CsvExporter
from timetrack.services.query_service import QueryService
from timetrack.store import get_store


router = APIRouter(prefix="/export", tags=["export"])


@router.get("/csv")
async def export_csv(
    filters: TimeEntryFilters = Depends(get_entry_filters),
    store=Depends(get_store),
):
    """
    Download time entries as a CSV attachment.

    Accepts the same filters as listing entries; rows keep the listing order.
    """
    entries = QueryService(store).list_entries(filters)
    return Response(
        content=CsvExporter().export(entries),
        media_type="text/csv",
        headers={
            "Content-Disposition": f'attachment; filename="{settings.export_filename}"',
        },
    )
