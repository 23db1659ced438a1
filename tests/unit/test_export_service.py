"""Tests for CsvExporter."""
import csv
import io
from datetime import datetime, timedelta, timezone

from timetrack.models.time_entry import TimeEntry
from timetrack.services.export_service import CSV_HEADER, CsvExporter


STARTED = datetime(2025, 11, 10, 10, 0, tzinfo=timezone.utc)


def make_entry(entry_id=1, **overrides):
    data = {
        "id": entry_id,
        "user_id": "user123",
        "issue_id": "issue456",
        "started_at": STARTED,
        "ended_at": STARTED + timedelta(hours=2),
        "duration_seconds": 7200,
        "description": "Work",
        "tags": ["development", "backend"],
        "billable": True,
        "created_at": STARTED + timedelta(hours=2),
    }
    data.update(overrides)
    return TimeEntry(**data)


class TestCsvExporter:
    """Tests for CSV rendering."""

    def test_header_only(self):
        """Test an empty export is just the header."""
        text = CsvExporter().export([])

        assert text == ",".join(CSV_HEADER) + "\n"
        assert text.startswith(
            "ID,User ID,Issue ID,Started At,Ended At,Duration (hours),"
            "Description,Tags,Billable,Created At"
        )

    def test_row_format(self):
        """Test a row renders UTC timestamps, joined tags and flags."""
        text = CsvExporter().export([make_entry()])

        rows = list(csv.reader(io.StringIO(text)))
        assert rows[1] == [
            "1",
            "user123",
            "issue456",
            "2025-11-10T10:00:00Z",
            "2025-11-10T12:00:00Z",
            "2.0",
            "Work",
            "development, backend",
            "true",
            "2025-11-10T12:00:00Z",
        ]

    def test_quotes_special_characters(self):
        """Test commas and quotes in fields are escaped."""
        entry = make_entry(description='Fix "login", again', tags=["a"])

        text = CsvExporter().export([entry])

        assert '"Fix ""login"", again"' in text
        rows = list(csv.reader(io.StringIO(text)))
        assert rows[1][6] == 'Fix "login", again'

    def test_missing_description_and_non_billable(self):
        """Test an absent description is empty and billable renders false."""
        entry = make_entry(description=None, tags=[], billable=False)

        rows = list(csv.reader(io.StringIO(CsvExporter().export([entry]))))

        assert rows[1][6] == ""
        assert rows[1][7] == ""
        assert rows[1][8] == "false"

    def test_keeps_given_order(self):
        """Test rows follow the order entries are passed in."""
        entries = [make_entry(3), make_entry(1), make_entry(2)]

        rows = list(csv.reader(io.StringIO(CsvExporter().export(entries))))

        assert [row[0] for row in rows[1:]] == ["3", "1", "2"]
