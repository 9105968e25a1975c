"""Domain model for mirroring issues."""

from __future__ import annotations

from .enums import IssueState, MessageTone
from .issue import CLEAR_CHOICE, Issue, IssueGroup, IssueId, IssueSnapshot, SlotSummary

__all__ = [
    "CLEAR_CHOICE",
    "Issue",
    "IssueGroup",
    "IssueId",
    "IssueSnapshot",
    "IssueState",
    "MessageTone",
    "SlotSummary",
]
