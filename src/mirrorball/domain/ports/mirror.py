"""Port for talking to the mirroring engine."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from mirrorball.domain.model import Issue, IssueId


class MirrorEngineError(RuntimeError):
    """Base class for failures talking to the mirroring engine."""


class MirrorTransportError(MirrorEngineError):
    """Raised when a request to the engine cannot complete."""


class MirrorAPIError(MirrorEngineError):
    """Raised when the engine returns a payload of unexpected shape."""


@runtime_checkable
class MirrorEngine(Protocol):
    """Boundary operations the issue coordinator needs from the engine.

    Implementations raise ``MirrorEngineError`` subclasses on transport
    failure or malformed payloads; callers in the domain decide how to recover.
    """

    async def fetch_issues(self) -> Sequence[Issue]:
        """Return the full current issue set."""
        ...

    async def resolve(self, issue_id: IssueId, choice: str) -> None:
        """Submit ``choice`` for ``issue_id``; the response body is ignored."""
        ...

    async def request_diff(self) -> None:
        """Ask the engine to re-scan immediately."""
        ...


__all__ = ["MirrorAPIError", "MirrorEngine", "MirrorEngineError", "MirrorTransportError"]
