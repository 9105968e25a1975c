"""Application configuration helpers."""

from __future__ import annotations

from .env import require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .mirror import (
    DIFF_PATH,
    ISSUES_PATH,
    RESOLVE_PATH,
    MirrorConfig,
    build_mirror_resilience,
    get_mirror_config,
)

__all__ = [
    "DIFF_PATH",
    "ISSUES_PATH",
    "RESOLVE_PATH",
    "ConfigurationError",
    "MirrorConfig",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "build_mirror_resilience",
    "configure_logging",
    "get_mirror_config",
    "require_env_vars",
]
