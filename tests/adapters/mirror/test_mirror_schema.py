from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from mirrorball.adapters.mirror import IssuePayload, parse_issue
from mirrorball.domain.model import IssueState


def test_issue_payload_reads_camel_case_progress_text() -> None:
    payload = IssuePayload.model_validate(
        {"id": 1, "title": "T", "state": "Busy", "progressText": "halfway"}
    )

    assert payload.progress_text == "halfway"


def test_issue_payload_requires_id_and_title() -> None:
    with pytest.raises(ValidationError):
        IssuePayload.model_validate({"title": "T"})


def test_parse_issue_fills_defaults() -> None:
    issue = parse_issue({"id": "x", "title": "T", "state": "Queued"})

    assert issue.state is IssueState.QUEUED
    assert issue.message == ""
    assert issue.options == ()
    assert issue.progress == 0.0


def test_unmodeled_keys_are_logged_once(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        parse_issue({"id": 1, "title": "T", "state": "New", "options": ["a"], "reviewer_hint": 3})
        parse_issue({"id": 2, "title": "T", "state": "New", "options": ["a"], "reviewer_hint": 4})

    warnings = [record for record in caplog.records if "reviewer_hint" in record.getMessage()]
    assert len(warnings) == 1


@pytest.mark.parametrize(
    ("state", "raw_state"),
    [(4, "4"), (None, "Unknown"), (True, "True"), ("new", "new")],
)
def test_parse_issue_maps_non_text_states_to_unknown(state: object, raw_state: str) -> None:
    issue = parse_issue({"id": 1, "title": "T", "state": state, "options": ["a"]})

    assert issue.state is IssueState.UNKNOWN
    assert issue.raw_state == raw_state


def test_parse_issue_without_state_is_unknown() -> None:
    issue = parse_issue({"id": 1, "title": "T"})

    assert issue.state is IssueState.UNKNOWN
