"""Submitting a reviewer's choice back to the mirroring engine."""

from __future__ import annotations

import asyncio
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from mirrorball.domain.issue_actions import allowed_choices
from mirrorball.domain.model import CLEAR_CHOICE
from mirrorball.domain.ports.mirror import MirrorEngineError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from mirrorball.domain.model import Issue, IssueId
    from mirrorball.domain.ports.mirror import MirrorEngine

log = getLogger(__name__)

DEFAULT_RESOLVE_TIMEOUT_SECONDS = 10.0


class ResolutionOutcome(StrEnum):
    DISPATCHED = "dispatched"
    FAILED = "failed"
    IN_FLIGHT = "in_flight"


class InvalidResolutionError(ValueError):
    """Raised when a resolution is rejected before reaching the engine."""

    def __init__(self, message: str, *, issue_id: IssueId) -> None:
        super().__init__(message)
        self.issue_id = issue_id


class UnknownIssueError(InvalidResolutionError):
    """Raised when the issue id is not part of the current snapshot."""


class InvalidChoiceError(InvalidResolutionError):
    """Raised when the choice is not available for the issue's current state."""


class ResolutionSubmitter:
    """Forward choices to the engine, one outstanding submission per issue.

    ``snapshot`` supplies the issues the submitter validates against, usually
    the sync loop's latest snapshot. Issue state is never changed locally:
    whatever the engine did shows up on the next poll.
    """

    def __init__(
        self,
        engine: MirrorEngine,
        *,
        snapshot: Callable[[], Sequence[Issue]],
        timeout_seconds: float = DEFAULT_RESOLVE_TIMEOUT_SECONDS,
    ) -> None:
        self._engine = engine
        self._snapshot = snapshot
        self._timeout_seconds = timeout_seconds
        self._resolving: set[IssueId] = set()

    def is_resolving(self, issue_id: IssueId) -> bool:
        return issue_id in self._resolving

    @property
    def resolving(self) -> frozenset[IssueId]:
        return frozenset(self._resolving)

    async def resolve(self, issue_id: IssueId, choice: str) -> ResolutionOutcome:
        issue = self._find_issue(issue_id)
        if choice not in allowed_choices(issue):
            raise InvalidChoiceError(
                f"Choice {choice!r} is not available for issue {issue_id!r} in state {issue.state}",
                issue_id=issue_id,
            )

        # check-and-set with no await in between
        if issue_id in self._resolving:
            log.info("Resolution for issue %r already in flight, ignoring %r", issue_id, choice)
            return ResolutionOutcome.IN_FLIGHT
        self._resolving.add(issue_id)

        try:
            async with asyncio.timeout(self._timeout_seconds):
                await self._engine.resolve(issue_id, choice)
        except (MirrorEngineError, TimeoutError):
            log.warning("Resolution for issue %r failed", issue_id, exc_info=True)
            return ResolutionOutcome.FAILED
        finally:
            self._resolving.discard(issue_id)

        log.info("Dispatched resolution %r for issue %r", choice, issue_id)
        return ResolutionOutcome.DISPATCHED

    async def clear(self, issue_id: IssueId) -> ResolutionOutcome:
        """Acknowledge a failed issue."""

        return await self.resolve(issue_id, CLEAR_CHOICE)

    def _find_issue(self, issue_id: IssueId) -> Issue:
        for issue in self._snapshot():
            if issue.id == issue_id:
                return issue
        raise UnknownIssueError(f"Unknown issue: {issue_id!r}", issue_id=issue_id)
