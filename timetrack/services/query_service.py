"""Query service - filtering, sorting and summarizing time entries."""
from typing import Iterable, Optional

from timetrack.models.report import GroupTotals, Summary
from timetrack.models.time_entry import TimeEntry, TimeEntryFilters
from timetrack.store import TimeStore
from timetrack.utils.timeutil import hours_difference, seconds_to_hours


def matches(entry: TimeEntry, filters: TimeEntryFilters) -> bool:
    """
    Check an entry against every filter that is set.

    Tags match when the entry shares at least one tag with the filter.
    Date bounds are inclusive and apply to started_at.
    """
    if filters.user_id is not None and entry.user_id != filters.user_id:
        return False
    if filters.issue_id is not None and entry.issue_id != filters.issue_id:
        return False
    if filters.start_date is not None and entry.started_at < filters.start_date:
        return False
    if filters.end_date is not None and entry.started_at > filters.end_date:
        return False
    if filters.billable is not None and entry.billable != filters.billable:
        return False
    if filters.tags and not set(entry.tags) & set(filters.tags):
        return False
    return True


def _group_totals(entries: Iterable[TimeEntry], key: str) -> dict[str, GroupTotals]:
    seconds: dict[str, int] = {}
    counts: dict[str, int] = {}
    for entry in entries:
        group = getattr(entry, key)
        seconds[group] = seconds.get(group, 0) + entry.duration_seconds
        counts[group] = counts.get(group, 0) + 1

    return {
        group: GroupTotals(
            total_seconds=total,
            total_hours=seconds_to_hours(total),
            entry_count=counts[group],
        )
        for group, total in seconds.items()
    }


class QueryService:
    """Service for reading time entries back out of the store."""

    def __init__(self, store: TimeStore):
        """Initialize service with the store."""
        self.store = store

    def list_entries(self, filters: Optional[TimeEntryFilters] = None) -> list[TimeEntry]:
        """
        List time entries matching all given filters.

        Args:
            filters: Optional filters; no filters returns every entry

        Returns:
            Entries sorted by started_at descending (most recent first)
        """
        filters = filters or TimeEntryFilters()
        entries = [entry for entry in self.store.list_entries() if matches(entry, filters)]
        entries.sort(key=lambda entry: entry.started_at, reverse=True)
        return entries

    def summarize(self, filters: Optional[TimeEntryFilters] = None) -> Summary:
        """
        Summarize time entries matching the filters.

        non_billable_hours is the difference of the rounded total and
        billable hours, not a separately rounded sum.

        Args:
            filters: Optional filters, same semantics as list_entries

        Returns:
            Summary with totals and per-user / per-issue groupings
        """
        entries = self.list_entries(filters)
        billable = [entry for entry in entries if entry.billable]

        total_seconds = sum(entry.duration_seconds for entry in entries)
        billable_seconds = sum(entry.duration_seconds for entry in billable)
        total_hours = seconds_to_hours(total_seconds)
        billable_hours = seconds_to_hours(billable_seconds)

        return Summary(
            total_entries=len(entries),
            total_seconds=total_seconds,
            total_hours=total_hours,
            billable_entries=len(billable),
            billable_seconds=billable_seconds,
            billable_hours=billable_hours,
            non_billable_hours=hours_difference(total_hours, billable_hours),
            by_user=_group_totals(entries, "user_id"),
            by_issue=_group_totals(entries, "issue_id"),
        )
