"""What a reviewer can see and do for an issue in each lifecycle state.

The engine owns state transitions. This module only maps the current state
to a presentation and to the choices a submission may carry.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, assert_never

from mirrorball.domain.model import CLEAR_CHOICE, IssueState, MessageTone

if TYPE_CHECKING:
    from mirrorball.domain.model import Issue


@dataclass(frozen=True, slots=True)
class ChooseOption:
    options: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class AwaitQueue:
    label: str = "Queued..."


@dataclass(frozen=True, slots=True)
class ShowProgress:
    progress: float
    text: str

    @property
    def percent(self) -> float:
        return min(max(self.progress, 0.0), 1.0) * 100


@dataclass(frozen=True, slots=True)
class AcknowledgeFailure:
    reason: str
    label: str = "Clear"


@dataclass(frozen=True, slots=True)
class DisplayOnly:
    raw_state: str


type IssueAction = ChooseOption | AwaitQueue | ShowProgress | AcknowledgeFailure | DisplayOnly


@dataclass(frozen=True, slots=True)
class IssuePresentation:
    issue: Issue
    tone: MessageTone
    action: IssueAction


def issue_action(issue: Issue) -> IssueAction:
    match issue.state:
        case IssueState.NEW:
            return ChooseOption(options=issue.options)
        case IssueState.QUEUED:
            return AwaitQueue()
        case IssueState.BUSY:
            return ShowProgress(progress=issue.progress, text=issue.progress_text)
        case IssueState.FAILED:
            return AcknowledgeFailure(reason=issue.message)
        case IssueState.UNKNOWN:
            return DisplayOnly(raw_state=issue.raw_state)
        case _ as unreachable:
            assert_never(unreachable)


def present(issue: Issue) -> IssuePresentation:
    tone = MessageTone.ERROR if issue.state is IssueState.FAILED else MessageTone.INFO
    return IssuePresentation(issue=issue, tone=tone, action=issue_action(issue))


def allowed_choices(issue: Issue) -> frozenset[str]:
    """Return the choices a resolution for ``issue`` may carry right now."""

    action = issue_action(issue)
    match action:
        case ChooseOption(options=options):
            return frozenset(options)
        case AcknowledgeFailure():
            return frozenset({CLEAR_CHOICE})
        case AwaitQueue() | ShowProgress() | DisplayOnly():
            return frozenset()
        case _ as unreachable:
            assert_never(unreachable)
