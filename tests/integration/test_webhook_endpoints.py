"""Integration tests for webhook endpoints."""
import pytest


def transition(issue_id, to_status):
    return {
        "issue": {"id": issue_id, "title": "Some issue"},
        "transition": {"from": "in_progress", "to": to_status},
    }


@pytest.mark.asyncio
class TestIssueTransitioned:
    """Tests for the issue.transitioned webhook."""

    async def test_closed_stops_matching_timers(self, app_client, clock):
        """Test timers on the closed issue are stopped and tagged."""
        await app_client.post("/timer/start", json={"user_id": "user1", "issue_id": "issue1"})
        await app_client.post("/timer/start", json={"user_id": "user2", "issue_id": "issue2"})
        clock.advance(minutes=45)

        response = await app_client.post(
            "/webhooks/issue.transitioned", json=transition("issue1", "closed")
        )

        assert response.status_code == 200
        data = response.json()
        assert data["stopped_timers"] == 1
        assert data["message"] == "Stopped 1 active timer(s)"

        assert (await app_client.get("/timer/active/user1")).status_code == 404
        assert (await app_client.get("/timer/active/user2")).status_code == 200

        entries = (await app_client.get("/entries")).json()["entries"]
        assert len(entries) == 1
        assert entries[0]["tags"] == ["auto-stopped"]
        assert entries[0]["description"] == "Auto-stopped on issue closure"
        assert entries[0]["billable"] is True
        assert entries[0]["duration_seconds"] == 2700

    async def test_other_status_no_action(self, app_client):
        """Test non-closing transitions change nothing."""
        await app_client.post("/timer/start", json={"user_id": "user1", "issue_id": "issue1"})

        response = await app_client.post(
            "/webhooks/issue.transitioned", json=transition("issue1", "review")
        )

        assert response.status_code == 200
        assert response.json() == {"stopped_timers": 0, "message": "No action taken"}
        assert (await app_client.get("/timer/active/user1")).status_code == 200

    async def test_malformed_payload(self, app_client):
        """Test a payload without a transition is a client error."""
        response = await app_client.post(
            "/webhooks/issue.transitioned", json={"issue": {"id": "issue1"}}
        )

        assert response.status_code == 400
