from __future__ import annotations

import logging

import pytest

from mirrorball.config import configure_logging


def test_configure_logging_uses_info_and_terse_format(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    configure_logging()
    configure_logging(level=logging.DEBUG, force=True)

    assert calls[0]["level"] == logging.INFO
    assert calls[0]["force"] is False
    assert "%(levelname)s [%(name)s]" in str(calls[0]["format"])
    assert calls[1]["level"] == logging.DEBUG
    assert calls[1]["force"] is True
