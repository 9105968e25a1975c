from __future__ import annotations

import asyncio

from mirrorball.app import MirrorSession
from mirrorball.config import MirrorConfig, build_mirror_resilience
from mirrorball.domain.resolution import ResolutionOutcome
from tests.support.mirror import FakeMirrorEngine, make_issue


def _config(*, include_trailing_slot: bool = True) -> MirrorConfig:
    return MirrorConfig(
        resilience=build_mirror_resilience("http://mirror.test"),
        poll_interval_seconds=0.001,
        include_trailing_slot=include_trailing_slot,
    )


def test_session_filters_then_groups_latest_snapshot() -> None:
    engine = FakeMirrorEngine(
        [
            make_issue(1, "A", options=["x", "y"], message="libfoo"),
            make_issue(2, "B", options=["x"], message="libbar"),
            make_issue(3, "A", options=["x", "z"], message="libfoo again"),
        ]
    )

    async def scenario() -> MirrorSession:
        session = MirrorSession(engine, config=_config())
        await session.sync.poll_once()
        return session

    session = asyncio.run(scenario())

    groups = session.groups("libfoo")
    assert [group.title for group in groups] == ["A"]
    assert groups[0].display_options() == ("x", "(varies)", "")
    assert [issue.id for issue in session.issues()] == [1, 2, 3]


def test_session_honours_trailing_slot_setting() -> None:
    engine = FakeMirrorEngine([make_issue(1, options=["x"])])

    async def scenario() -> MirrorSession:
        session = MirrorSession(engine, config=_config(include_trailing_slot=False))
        await session.sync.poll_once()
        return session

    session = asyncio.run(scenario())

    assert session.groups()[0].options == ("x",)


def test_session_resolves_against_polled_snapshot() -> None:
    engine = FakeMirrorEngine([make_issue(5, options=["keep"])])

    async def scenario() -> ResolutionOutcome:
        session = MirrorSession(engine, config=_config())
        await session.sync.poll_once()
        issue = session.find_issue("5")
        assert issue is not None
        return await session.submitter.resolve(issue.id, "keep")

    assert asyncio.run(scenario()) is ResolutionOutcome.DISPATCHED
    assert engine.resolve_calls == [(5, "keep")]
