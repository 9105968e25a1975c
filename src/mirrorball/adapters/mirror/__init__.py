"""Mirroring engine HTTP adapter."""

from __future__ import annotations

from .client import MirrorHttpEngine
from .schema import IssuePayload, ResolvePayload
from .translator import parse_issue, parse_issue_model

__all__ = [
    "IssuePayload",
    "MirrorHttpEngine",
    "ResolvePayload",
    "parse_issue",
    "parse_issue_model",
]
