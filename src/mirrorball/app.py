"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from mirrorball.adapters.mirror import MirrorHttpEngine
from mirrorball.config import get_mirror_config
from mirrorball.domain.grouping import group_issues
from mirrorball.domain.resolution import ResolutionSubmitter
from mirrorball.domain.search import filter_issues
from mirrorball.domain.sync_loop import IssueSyncLoop

if TYPE_CHECKING:
    from mirrorball.config import MirrorConfig
    from mirrorball.domain.model import Issue, IssueGroup
    from mirrorball.domain.ports.mirror import MirrorEngine
    from mirrorball.domain.sync_loop import SnapshotObserver

log = getLogger(__name__)


class MirrorSession:
    """Wire the sync loop, submitter and views around one engine."""

    def __init__(
        self,
        engine: MirrorEngine,
        *,
        config: MirrorConfig,
        on_snapshot: SnapshotObserver | None = None,
    ) -> None:
        self.config = config
        self.engine = engine
        self.sync = IssueSyncLoop(
            engine,
            interval_seconds=config.poll_interval_seconds,
            request_timeout_seconds=config.request_timeout_seconds,
            on_snapshot=on_snapshot,
        )
        self.submitter = ResolutionSubmitter(
            engine,
            snapshot=lambda: self.sync.snapshot,
            timeout_seconds=config.request_timeout_seconds,
        )

    def issues(self, query: str | None = None) -> list[Issue]:
        return filter_issues(self.sync.snapshot, query)

    def groups(self, query: str | None = None) -> list[IssueGroup]:
        return group_issues(
            self.issues(query),
            include_trailing_slot=self.config.include_trailing_slot,
        )

    def find_issue(self, issue_id: str) -> Issue | None:
        """Look up an issue by the textual form of its id."""

        for issue in self.sync.snapshot:
            if str(issue.id) == issue_id:
                return issue
        return None


def build_http_engine(config: MirrorConfig | None = None) -> MirrorHttpEngine:
    return MirrorHttpEngine(config=config or get_mirror_config())
