"""HTTP client for the mirroring engine's issue API."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Self

import httpx
from pydantic import ValidationError

from mirrorball.adapters.http_resilience import ResilientClient
from mirrorball.config.mirror import DIFF_PATH, ISSUES_PATH, RESOLVE_PATH
from mirrorball.domain.ports.mirror import MirrorAPIError, MirrorTransportError

from .schema import IssueListAdapter, ResolvePayload
from .translator import parse_issue_model

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from mirrorball.config.http_resilience import ResilienceConfig
    from mirrorball.config.mirror import MirrorConfig
    from mirrorball.domain.model import Issue, IssueId

log = getLogger(__name__)


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


class MirrorHttpEngine:
    """``MirrorEngine`` backed by the engine's JSON endpoints.

    Must be entered with ``async with`` so one HTTP client is shared across
    polls and resolutions.
    """

    def __init__(
        self,
        *,
        config: MirrorConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._resilience = config.resilience
        self._client_factory = client_factory or _default_client_factory
        self._client: ResilientClient | None = None

    async def __aenter__(self) -> Self:
        if self._resilience.base_url is None:
            raise MirrorAPIError("Missing mirror base_url in resilience configuration")
        self._client = self._client_factory(self._resilience)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def fetch_issues(self) -> list[Issue]:
        response = await self._send("GET", ISSUES_PATH)
        try:
            payloads = IssueListAdapter.validate_json(response.content)
        except ValidationError as exc:
            raise MirrorAPIError(f"Unexpected issue payload: {exc.error_count()} errors") from exc
        return [parse_issue_model(payload) for payload in payloads]

    async def resolve(self, issue_id: IssueId, choice: str) -> None:
        body = ResolvePayload(id=issue_id, choice=choice).model_dump()
        await self._send("POST", RESOLVE_PATH, json=body)

    async def request_diff(self) -> None:
        await self._send("POST", DIFF_PATH)

    async def _send(self, method: str, path: str, *, json: object = None) -> httpx.Response:
        client = self._require_client()
        try:
            if method == "GET":
                response = await client.get(path)
            elif json is None:
                response = await client.post(path)
            else:
                response = await client.post(path, json=json)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise MirrorTransportError(f"{method} {path} failed: {exc}") from exc
        log.debug("%s %s -> %s", method, path, response.status_code)
        return response

    def _require_client(self) -> ResilientClient:
        if self._client is None:
            raise MirrorTransportError("Mirror client used outside of its async context")
        return self._client
