"""Keep a local snapshot of the engine's issues current by polling."""

from __future__ import annotations

import asyncio
import contextlib
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from mirrorball.domain.ports.mirror import MirrorEngineError

if TYPE_CHECKING:
    from collections.abc import Callable

    from mirrorball.domain.model import IssueSnapshot
    from mirrorball.domain.ports.mirror import MirrorEngine

log = getLogger(__name__)

DEFAULT_POLL_INTERVAL_SECONDS = 1.0
DEFAULT_REQUEST_TIMEOUT_SECONDS = 10.0

type SnapshotObserver = Callable[[IssueSnapshot], None]


@dataclass(slots=True)
class SyncStatus:
    polls: int = 0
    failures: int = 0
    last_error: str | None = None


class IssueSyncLoop:
    """Poll the engine for the full issue set, one request at a time.

    Each cycle fetches, replaces the snapshot wholesale, notifies the observer
    and then waits ``interval_seconds`` before the next cycle. A failed poll
    keeps the previous snapshot and the cadence unchanged.

    ``stop()`` is cooperative: it is honoured at the top of every cycle and as
    soon as an in-flight poll returns, whose result is then discarded.
    """

    def __init__(
        self,
        engine: MirrorEngine,
        *,
        interval_seconds: float = DEFAULT_POLL_INTERVAL_SECONDS,
        request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
        on_snapshot: SnapshotObserver | None = None,
    ) -> None:
        self._engine = engine
        self._interval = interval_seconds
        self._timeout = request_timeout_seconds
        self._on_snapshot = on_snapshot
        self._snapshot: IssueSnapshot = ()
        self._stopped = asyncio.Event()
        self._task: asyncio.Task[None] | None = None
        self._polling = False
        self._refreshes: set[asyncio.Task[bool]] = set()
        self.status = SyncStatus()

    @property
    def snapshot(self) -> IssueSnapshot:
        return self._snapshot

    def start(self) -> asyncio.Task[None]:
        if self._task is None:
            self._task = asyncio.create_task(self.run(), name="issue-sync-loop")
        return self._task

    def stop(self) -> None:
        self._stopped.set()

    async def wait_stopped(self) -> None:
        """Stop the loop and wait for the polling task to wind down."""

        self.stop()
        if self._task is not None:
            await self._task

    async def run(self) -> None:
        log.info("Issue sync loop started (interval=%ss)", self._interval)
        while not self._stopped.is_set():
            await self.poll_once()
            if self._stopped.is_set():
                break
            await self._sleep()
        log.info("Issue sync loop stopped after %s polls", self.status.polls)

    async def poll_once(self) -> bool:
        """Run a single poll, returning whether a new snapshot was published.

        Meant for one-shot use when no loop is running. Polls never overlap:
        calling this while another poll is outstanding raises ``RuntimeError``.
        """

        if self._polling:
            raise RuntimeError("An issue poll is already in flight")
        self._polling = True
        self.status.polls += 1
        try:
            async with asyncio.timeout(self._timeout):
                issues = await self._engine.fetch_issues()
        except (MirrorEngineError, TimeoutError) as exc:
            self.status.failures += 1
            self.status.last_error = str(exc) or type(exc).__name__
            log.warning("Issue poll failed, keeping previous snapshot: %s", self.status.last_error)
            return False
        finally:
            self._polling = False

        if self._stopped.is_set():
            log.debug("Discarding poll result received after stop")
            return False

        self._snapshot = tuple(issues)
        self.status.last_error = None
        if self._on_snapshot is not None:
            try:
                self._on_snapshot(self._snapshot)
            except Exception:  # noqa: BLE001
                log.exception("Snapshot observer failed")
        return True

    def request_refresh(self) -> asyncio.Task[bool]:
        """Ask the engine to re-scan now, without touching the poll cadence."""

        task = asyncio.create_task(refresh(self._engine, timeout_seconds=self._timeout))
        self._refreshes.add(task)
        task.add_done_callback(self._refreshes.discard)
        return task

    async def _sleep(self) -> None:
        with contextlib.suppress(TimeoutError):
            await asyncio.wait_for(self._stopped.wait(), timeout=self._interval)


async def refresh(
    engine: MirrorEngine,
    *,
    timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
) -> bool:
    """Trigger a re-diff on the engine; failures are logged, not raised."""

    try:
        async with asyncio.timeout(timeout_seconds):
            await engine.request_diff()
    except (MirrorEngineError, TimeoutError):
        log.warning("Refresh request failed", exc_info=True)
        return False
    return True
