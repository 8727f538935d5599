"""Pure derivations over the store's collections."""

from __future__ import annotations

from collections.abc import Iterable

from ..core.models import Issue, Update
from .models import Filters, Stats

BASE_TOTAL_ISSUES = 1247
BASE_RESOLVED_ISSUES = 892
BASE_ACTIVE_POLITICIANS = 156


def issue_matches(issue: Issue, filters: Filters) -> bool:
    if filters.category and issue.category != filters.category:
        return False
    if filters.status and issue.status != filters.status:
        return False
    if filters.search:
        haystack = f"{issue.title} {issue.description}".lower()
        if filters.search.lower() not in haystack:
            return False
    return True


def visible_issues(issues: Iterable[Issue], filters: Filters) -> list[Issue]:
    """Return the issues passing every active filter, in source order."""
    return [issue for issue in issues if issue_matches(issue, filters)]


def visible_updates(updates: Iterable[Update], kind: str = "all") -> list[Update]:
    return [u for u in updates if kind == "all" or u.type == kind]


def compute_stats(
    base_total_issues: int,
    base_resolved_issues: int,
    active_politicians: int,
    current_issue_count: int,
) -> Stats:
    """Build dashboard counters.

    Only ``total_issues`` follows the live data; the other two counters are
    historical figures recorded at seed time and pass through unchanged.
    """
    return Stats(
        total_issues=base_total_issues + current_issue_count,
        resolved_issues=base_resolved_issues,
        active_politicians=active_politicians,
    )
