"""Translate mirroring engine payloads into domain issues."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mirrorball.domain.model import Issue, IssueState

from .schema import IssuePayload

if TYPE_CHECKING:
    from collections.abc import Mapping


def parse_issue(payload: Mapping[str, object] | IssuePayload) -> Issue:
    model = payload if isinstance(payload, IssuePayload) else IssuePayload.model_validate(payload)
    return parse_issue_model(model)


def parse_issue_model(model: IssuePayload) -> Issue:
    raw_state = "" if model.state is None else str(model.state)
    state = (
        IssueState.from_wire(model.state) if isinstance(model.state, str) else IssueState.UNKNOWN
    )
    return Issue(
        id=model.id,
        title=model.title,
        message=model.message or "",
        state=state,
        options=tuple(model.options or ()),
        progress=model.progress or 0.0,
        progress_text=model.progress_text or "",
        raw_state=raw_state,
    )
