"""Integration tests for summary and export endpoints."""
import csv
import io

import pytest


async def create_entry(app_client, hours, billable=True, user_id="user1", issue_id="issue1"):
    return await app_client.post(
        "/entries",
        json={
            "user_id": user_id,
            "issue_id": issue_id,
            "started_at": "2025-11-10T09:00:00Z",
            "duration_seconds": int(hours * 3600),
            "billable": billable,
        },
    )


@pytest.mark.asyncio
class TestSummary:
    """Tests for the summary report."""

    async def test_summary_totals(self, app_client):
        """Test billable and non-billable hours."""
        await create_entry(app_client, 1)
        await create_entry(app_client, 2, billable=False)
        await create_entry(app_client, 0.5)

        response = await app_client.get("/reports/summary")

        assert response.status_code == 200
        data = response.json()
        assert data["total_entries"] == 3
        assert data["total_hours"] == 3.5
        assert data["billable_entries"] == 2
        assert data["billable_hours"] == 1.5
        assert data["non_billable_hours"] == 2.0

    async def test_summary_groupings(self, app_client):
        """Test per-user and per-issue totals."""
        await create_entry(app_client, 1, user_id="alice", issue_id="issue1")
        await create_entry(app_client, 2, user_id="bob", issue_id="issue1")

        data = (await app_client.get("/reports/summary")).json()

        assert data["by_user"]["alice"] == {
            "total_seconds": 3600,
            "total_hours": 1.0,
            "entry_count": 1,
        }
        assert data["by_issue"]["issue1"]["total_hours"] == 3.0
        assert data["by_issue"]["issue1"]["entry_count"] == 2

    async def test_summary_filtered(self, app_client):
        """Test summary accepts the listing filters."""
        await create_entry(app_client, 1, user_id="alice")
        await create_entry(app_client, 2, user_id="bob")

        data = (await app_client.get("/reports/summary", params={"user_id": "bob"})).json()

        assert data["total_entries"] == 1
        assert data["total_hours"] == 2.0


@pytest.mark.asyncio
class TestCsvExport:
    """Tests for the CSV export."""

    async def test_export_csv(self, app_client):
        """Test the export is a CSV attachment."""
        await create_entry(app_client, 1.5)

        response = await app_client.get("/export/csv")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert "attachment" in response.headers["content-disposition"]
        assert "time_entries.csv" in response.headers["content-disposition"]

        rows = list(csv.reader(io.StringIO(response.text)))
        assert rows[0][0] == "ID"
        assert rows[0][5] == "Duration (hours)"
        assert rows[1][0] == "1"
        assert rows[1][3] == "2025-11-10T09:00:00Z"
        assert rows[1][4] == "2025-11-10T10:30:00Z"
        assert rows[1][5] == "1.5"

    async def test_export_csv_filtered(self, app_client):
        """Test the export applies filters."""
        await create_entry(app_client, 1, user_id="alice")
        await create_entry(app_client, 1, user_id="bob")

        response = await app_client.get("/export/csv", params={"user_id": "bob"})

        rows = list(csv.reader(io.StringIO(response.text)))
        assert len(rows) == 2
        assert rows[1][1] == "bob"
