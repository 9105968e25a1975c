from __future__ import annotations

from .mirror import MirrorAPIError, MirrorEngine, MirrorEngineError, MirrorTransportError

__all__ = ["MirrorAPIError", "MirrorEngine", "MirrorEngineError", "MirrorTransportError"]
