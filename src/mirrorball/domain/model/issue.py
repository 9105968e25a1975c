"""Issue entities as reported by the mirroring engine."""

from __future__ import annotations

from dataclasses import dataclass, field

from .enums import IssueState

type IssueId = str | int

CLEAR_CHOICE = ""
"""Choice submitted to acknowledge a failed issue."""


@dataclass(frozen=True, slots=True)
class Issue:
    """Read-only snapshot of one conflict awaiting attention.

    ``options`` only carries meaning while the issue is ``NEW`` and
    ``progress``/``progress_text`` only while it is ``BUSY``; the engine may
    still send stale values in other states.
    """

    id: IssueId
    title: str
    message: str = ""
    state: IssueState = IssueState.NEW
    options: tuple[str, ...] = ()
    progress: float = 0.0
    progress_text: str = ""
    raw_state: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if not self.raw_state:
            object.__setattr__(self, "raw_state", str(self.state))


type IssueSnapshot = tuple[Issue, ...]


@dataclass(frozen=True, slots=True)
class SlotSummary:
    """Column-consensus summary of one option slot across a group."""

    text: str
    uniform: bool

    def display_text(self, varies_marker: str = "(varies)") -> str:
        return self.text if self.uniform else varies_marker


@dataclass(frozen=True, slots=True)
class IssueGroup:
    """Issues sharing a title, with their options summarised slot by slot."""

    title: str
    issues: tuple[Issue, ...]
    slots: tuple[SlotSummary, ...] = ()

    @property
    def options(self) -> tuple[str, ...]:
        return tuple(slot.text for slot in self.slots)

    def display_options(self, varies_marker: str = "(varies)") -> tuple[str, ...]:
        return tuple(slot.display_text(varies_marker) for slot in self.slots)
