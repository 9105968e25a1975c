"""Mirroring engine connection settings."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_bool, optional_float, optional_positive_int, require_env_vars
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

DEFAULT_POLL_INTERVAL_SECONDS = 1.0
DEFAULT_REQUEST_TIMEOUT_SECONDS = 10.0

ISSUES_PATH = "api/mirror/issues"
RESOLVE_PATH = "api/mirror/resolve"
DIFF_PATH = "api/mirror/diff"


@dataclass(frozen=True, slots=True)
class MirrorConfig:
    """Where the mirroring engine lives and how often to ask it about issues."""

    resilience: ResilienceConfig
    poll_interval_seconds: float = DEFAULT_POLL_INTERVAL_SECONDS
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS
    include_trailing_slot: bool = True


def build_mirror_resilience(
    base_url: str,
    *,
    timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
    max_calls_per_second: int | None = None,
) -> ResilienceConfig:
    if not base_url.endswith("/"):
        base_url = f"{base_url}/"
    return ResilienceConfig(
        name="mirror",
        base_url=base_url,
        timeout_seconds=timeout_seconds,
        retry=RetryPolicy(),
        ratelimit=(
            RateLimit(max_calls=max_calls_per_second, per_seconds=1.0)
            if max_calls_per_second is not None
            else None
        ),
        default_headers={"Accept": "application/json"},
    )


def get_mirror_config() -> MirrorConfig:
    values = require_env_vars(("MIRRORBALL_BASE_URL",))
    timeout = optional_float("MIRRORBALL_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT_SECONDS)
    return MirrorConfig(
        resilience=build_mirror_resilience(
            values["MIRRORBALL_BASE_URL"],
            timeout_seconds=timeout,
            max_calls_per_second=optional_positive_int("MIRRORBALL_RATE_LIMIT"),
        ),
        poll_interval_seconds=optional_float(
            "MIRRORBALL_POLL_INTERVAL", DEFAULT_POLL_INTERVAL_SECONDS
        ),
        request_timeout_seconds=timeout,
        include_trailing_slot=optional_bool("MIRRORBALL_TRAILING_SLOT", default=True),
    )
