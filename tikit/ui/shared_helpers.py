"""Helpers shared by the session and the TUI, with no TUI dependencies."""

from typing import Dict, List, Optional, Sequence

from tikit.api.models import Issue
from tikit.config import defaults


def assignee_name(issue: Issue) -> str:
    if issue.assignee is None:
        return defaults.UNASSIGNED
    return issue.assignee.display_name


def field_value(issue: Issue, filter_key: str) -> Optional[str]:
    """Value of the issue field a filter key constrains, ``None`` if unknown key."""
    if filter_key == "status":
        return issue.status.name
    if filter_key == "issueType":
        return issue.issue_type.name
    if filter_key == "assignee":
        return assignee_name(issue)
    return None


def matches_search(issue: Issue, search_text: str) -> bool:
    if not search_text:
        return True
    search_text = search_text.lower()
    return search_text in issue.key.lower() or search_text in issue.summary.lower()


def matches_filters(issue: Issue, filters: Dict[str, str]) -> bool:
    for key, value in filters.items():
        if not value:
            continue
        current = field_value(issue, key)
        if current is not None and current != value:
            return False
    return True


def filter_issues(
    issues: Sequence[Issue],
    search_text: str = "",
    filters: Optional[Dict[str, str]] = None,
) -> List[Issue]:
    """Return the issues matching the search text and every filter, in order.

    The search is a case-insensitive substring match on key or summary.
    Filters are exact matches on status, issue type or assignee name, with a
    missing assignee compared as ``Unassigned``.
    """
    filters = filters or {}
    return [
        issue
        for issue in issues
        if matches_search(issue, search_text) and matches_filters(issue, filters)
    ]


def get_row_data_for_issue(issue: Issue) -> tuple:
    summary = issue.summary
    if len(summary) > defaults.SUMMARY_MAX_LENGTH:
        summary = f"{summary[: defaults.SUMMARY_MAX_LENGTH - 1]}…"
    return (
        issue.key,
        summary,
        issue.status.name,
        issue.issue_type.name,
        assignee_name(issue),
    )
