"""Group issues by title and summarise their option slots."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mirrorball.domain.model import IssueGroup
from mirrorball.domain.summarize import summarize_slot

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from mirrorball.domain.model import Issue, SlotSummary


def summarize_slots(
    issues: Sequence[Issue],
    *,
    include_trailing_slot: bool = True,
) -> tuple[SlotSummary, ...]:
    """Summarise every option slot of ``issues``.

    With ``include_trailing_slot`` the range runs one past the longest option
    list, yielding an extra slot no issue fills.
    """

    max_options = max((len(issue.options) for issue in issues), default=0)
    slot_count = max_options + 1 if include_trailing_slot else max_options
    return tuple(
        summarize_slot(
            [issue.options[slot] if slot < len(issue.options) else None for issue in issues]
        )
        for slot in range(slot_count)
    )


def group_issues(
    issues: Iterable[Issue],
    *,
    include_trailing_slot: bool = True,
) -> list[IssueGroup]:
    """Group ``issues`` by exact title, keeping first-seen title order."""

    by_title: dict[str, list[Issue]] = {}
    for issue in issues:
        by_title.setdefault(issue.title, []).append(issue)

    return [
        IssueGroup(
            title=title,
            issues=tuple(members),
            slots=summarize_slots(members, include_trailing_slot=include_trailing_slot),
        )
        for title, members in by_title.items()
    ]
