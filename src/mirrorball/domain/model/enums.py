"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class IssueState(StrEnum):
    """Lifecycle state reported by the mirroring engine for an issue.

    ``UNKNOWN`` never appears on the wire; it stands in for any value the
    engine sends that this client does not recognise.
    """

    NEW = "New"
    QUEUED = "Queued"
    BUSY = "Busy"
    FAILED = "Failed"
    UNKNOWN = "Unknown"

    @classmethod
    def from_wire(cls, value: str) -> IssueState:
        try:
            state = cls(value)
        except ValueError:
            return cls.UNKNOWN
        return state


class MessageTone(StrEnum):
    INFO = "message"
    ERROR = "error"
