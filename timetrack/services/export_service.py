"""CSV export of time entries."""
import csv
import io
from typing import Iterable

from timetrack.models.time_entry import TimeEntry
from timetrack.utils.timeutil import isoformat_utc


CSV_HEADER = [
    "ID",
    "User ID",
    "Issue ID",
    "Started At",
    "Ended At",
    "Duration (hours)",
    "Description",
    "Tags",
    "Billable",
    "Created At",
]


class CsvExporter:
    """Serializes time entries to CSV text."""

    def _row(self, entry: TimeEntry) -> list:
        return [
            entry.id,
            entry.user_id,
            entry.issue_id,
            isoformat_utc(entry.started_at),
            isoformat_utc(entry.ended_at),
            entry.duration_hours,
            entry.description or "",
            ", ".join(entry.tags),
            "true" if entry.billable else "false",
            isoformat_utc(entry.created_at),
        ]

    def export(self, entries: Iterable[TimeEntry]) -> str:
        """
        Render entries as CSV, header first, rows in the order given.

        Fields containing commas, quotes or newlines are quoted.
        """
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for entry in entries:
            writer.writerow(self._row(entry))
        return buffer.getvalue()
