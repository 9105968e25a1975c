from __future__ import annotations

import pytest

from mirrorball.config import (
    ConfigurationError,
    MissingConfigurationError,
    RateLimit,
    get_mirror_config,
    require_env_vars,
)


@pytest.fixture(autouse=True)
def _clear_mirror_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "MIRRORBALL_BASE_URL",
        "MIRRORBALL_POLL_INTERVAL",
        "MIRRORBALL_REQUEST_TIMEOUT",
        "MIRRORBALL_TRAILING_SLOT",
        "MIRRORBALL_RATE_LIMIT",
    ):
        monkeypatch.delenv(name, raising=False)


def test_require_env_vars_returns_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "value")

    assert require_env_vars(["EXAMPLE_VAR"]) == {"EXAMPLE_VAR": "value"}


def test_require_env_vars_rejects_blank(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "   ")

    with pytest.raises(MissingConfigurationError) as exc:
        require_env_vars(["EXAMPLE_VAR"])

    assert "EXAMPLE_VAR" in str(exc.value)


def test_get_mirror_config_requires_base_url() -> None:
    with pytest.raises(MissingConfigurationError):
        get_mirror_config()


def test_get_mirror_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MIRRORBALL_BASE_URL", "http://localhost:5000")

    config = get_mirror_config()

    assert config.resilience.base_url == "http://localhost:5000/"
    assert config.poll_interval_seconds == 1.0
    assert config.request_timeout_seconds == 10.0
    assert config.resilience.timeout_seconds == 10.0
    assert config.include_trailing_slot is True
    assert config.resilience.retry is not None
    assert config.resilience.retry.allowed_methods == frozenset({"GET"})
    assert config.resilience.ratelimit is None


def test_get_mirror_config_reads_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MIRRORBALL_BASE_URL", "http://mirror/")
    monkeypatch.setenv("MIRRORBALL_POLL_INTERVAL", "2.5")
    monkeypatch.setenv("MIRRORBALL_REQUEST_TIMEOUT", "3")
    monkeypatch.setenv("MIRRORBALL_TRAILING_SLOT", "off")
    monkeypatch.setenv("MIRRORBALL_RATE_LIMIT", "5")

    config = get_mirror_config()

    assert config.resilience.base_url == "http://mirror/"
    assert config.poll_interval_seconds == 2.5
    assert config.request_timeout_seconds == 3.0
    assert config.include_trailing_slot is False
    assert config.resilience.ratelimit == RateLimit(max_calls=5, per_seconds=1.0)


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("MIRRORBALL_POLL_INTERVAL", "soon"),
        ("MIRRORBALL_POLL_INTERVAL", "0"),
        ("MIRRORBALL_REQUEST_TIMEOUT", "-1"),
        ("MIRRORBALL_TRAILING_SLOT", "maybe"),
        ("MIRRORBALL_RATE_LIMIT", "1.5"),
        ("MIRRORBALL_RATE_LIMIT", "0"),
    ],
)
def test_get_mirror_config_rejects_invalid_values(
    monkeypatch: pytest.MonkeyPatch, name: str, value: str
) -> None:
    monkeypatch.setenv("MIRRORBALL_BASE_URL", "http://mirror/")
    monkeypatch.setenv(name, value)

    with pytest.raises(ConfigurationError):
        get_mirror_config()
