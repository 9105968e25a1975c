"""Free-text narrowing of the issue list."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from mirrorball.domain.model import Issue


def issue_matches(issue: Issue, query: str) -> bool:
    """Case-sensitive substring match against the message or any option."""

    return query in issue.message or any(query in option for option in issue.options)


def filter_issues(issues: Iterable[Issue], query: str | None) -> list[Issue]:
    """Return the issues matching ``query`` in their original order.

    A blank query keeps everything. A non-blank query is matched verbatim,
    surrounding whitespace included.
    """

    if query is None or not query.strip():
        return list(issues)
    return [issue for issue in issues if issue_matches(issue, query)]
