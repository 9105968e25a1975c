from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from mirrorball.app import MirrorSession, build_http_engine
from mirrorball.config import configure_logging, get_mirror_config
from mirrorball.domain.issue_actions import (
    AcknowledgeFailure,
    AwaitQueue,
    ChooseOption,
    DisplayOnly,
    ShowProgress,
    present,
)
from mirrorball.domain.resolution import InvalidResolutionError, ResolutionOutcome
from mirrorball.domain.sync_loop import refresh

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from mirrorball.config import MirrorConfig
    from mirrorball.domain.model import Issue, IssueGroup

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Review issues raised by the mirroring engine")
    subparsers = parser.add_subparsers(dest="command", required=True)

    issues = subparsers.add_parser("issues", help="Fetch and list current issues once")
    issues.add_argument("--query", type=str, help="Only show issues containing this text")

    watch = subparsers.add_parser("watch", help="Poll issues continuously until interrupted")
    watch.add_argument("--query", type=str, help="Only show issues containing this text")
    watch.add_argument(
        "--no-refresh",
        action="store_true",
        help="Do not ask the engine to re-scan before polling",
    )
    watch.add_argument(
        "--max-polls",
        type=int,
        help="Stop after this many successful polls (default: run until interrupted)",
    )

    resolve = subparsers.add_parser("resolve", help="Submit a choice for an issue")
    resolve.add_argument("--id", dest="issue_id", type=str, required=True, help="Issue id")
    resolve.add_argument("--choice", type=str, required=True, help="One of the issue's options")

    clear = subparsers.add_parser("clear", help="Acknowledge a failed issue")
    clear.add_argument("--id", dest="issue_id", type=str, required=True, help="Issue id")

    subparsers.add_parser("diff", help="Ask the engine to re-scan now")

    return parser.parse_args(list(argv))


def _describe(issue: Issue) -> str:
    presentation = present(issue)
    match presentation.action:
        case ChooseOption(options=options):
            detail = "choose: " + " | ".join(options)
        case AwaitQueue(label=label):
            detail = label
        case ShowProgress(text=text) as progress:
            detail = f"{progress.percent:.0f}% {text}".rstrip()
        case AcknowledgeFailure(reason=reason):
            detail = f"failed: {reason} (clear to dismiss)"
        case DisplayOnly(raw_state=raw_state):
            detail = f"state {raw_state!r}"
    return f"[{issue.id}] {issue.message} -- {detail}"


def _log_groups(groups: Sequence[IssueGroup]) -> None:
    if not groups:
        log.info("No issues")
        return
    for group in groups:
        log.info(
            "%s (%s issues) options: %s",
            group.title,
            len(group.issues),
            ", ".join(repr(option) for option in group.display_options()),
        )
        for issue in group.issues:
            log.info("  %s", _describe(issue))


async def _list_issues(config: MirrorConfig, query: str | None) -> None:
    async with build_http_engine(config) as engine:
        session = MirrorSession(engine, config=config)
        if not await session.sync.poll_once():
            raise RuntimeError(f"Could not fetch issues: {session.sync.status.last_error}")
        _log_groups(session.groups(query))


async def _watch_issues(
    config: MirrorConfig,
    query: str | None,
    *,
    request_refresh: bool,
    max_polls: int | None = None,
) -> None:
    async with build_http_engine(config) as engine:
        session: MirrorSession
        published = 0

        def on_snapshot(_snapshot: object) -> None:
            nonlocal published
            published += 1
            _log_groups(session.groups(query))
            if max_polls is not None and published >= max_polls:
                session.sync.stop()

        session = MirrorSession(engine, config=config, on_snapshot=on_snapshot)
        if request_refresh:
            session.sync.request_refresh()
        try:
            await session.sync.run()
        finally:
            session.sync.stop()


async def _submit(config: MirrorConfig, issue_id: str, choice: str | None) -> ResolutionOutcome:
    async with build_http_engine(config) as engine:
        session = MirrorSession(engine, config=config)
        if not await session.sync.poll_once():
            raise RuntimeError(f"Could not fetch issues: {session.sync.status.last_error}")
        issue = session.find_issue(issue_id)
        if issue is None:
            raise InvalidResolutionError(f"Unknown issue: {issue_id!r}", issue_id=issue_id)
        if choice is None:
            return await session.submitter.clear(issue.id)
        return await session.submitter.resolve(issue.id, choice)


async def _diff(config: MirrorConfig) -> bool:
    async with build_http_engine(config) as engine:
        return await refresh(engine, timeout_seconds=config.request_timeout_seconds)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        config = get_mirror_config()
        if parsed_args.command == "issues":
            asyncio.run(_list_issues(config, parsed_args.query))
        elif parsed_args.command == "watch":
            asyncio.run(
                _watch_issues(
                    config,
                    parsed_args.query,
                    request_refresh=not parsed_args.no_refresh,
                    max_polls=parsed_args.max_polls,
                )
            )
        elif parsed_args.command in {"resolve", "clear"}:
            choice = parsed_args.choice if parsed_args.command == "resolve" else None
            outcome = asyncio.run(_submit(config, parsed_args.issue_id, choice))
            log.info("Resolution for issue %s: %s", parsed_args.issue_id, outcome)
            if outcome is ResolutionOutcome.FAILED:
                sys.exit(1)
        elif parsed_args.command == "diff":
            if not asyncio.run(_diff(config)):
                sys.exit(1)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except InvalidResolutionError:
        log.exception("Resolution rejected")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
