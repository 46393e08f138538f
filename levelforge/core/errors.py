"""Exception hierarchy for levelforge.

Unparseable text and degenerate geometry are not errors: they produce the
invalid elevation sentinel or a neutral value. The exceptions below cover
malformed input at the boundary, unprocessable offsets, export I/O and the
host adapter.
"""

from typing import Any, Dict, Optional


class LevelforgeError(Exception):
    """Base class for all levelforge errors."""
    pass


class ValidationError(LevelforgeError):
    """Raised when input geometry is malformed.

    Attributes:
        details: Extra context about the rejected input
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class OffsetError(LevelforgeError):
    """Raised when a source polygon cannot be offset.

    Attributes:
        distance: Requested offset distance
        reason: Short machine-readable reason (``'open'``, ``'self_intersecting'``,
            ``'collapsed'``, ``'split'``)
    """

    def __init__(self, message: str, distance: Optional[float] = None, reason: str = ""):
        super().__init__(message)
        self.distance = distance
        self.reason = reason


class ExportError(LevelforgeError):
    """Raised when the export destination cannot be written."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class ConfigurationError(LevelforgeError):
    """Raised for invalid configuration values."""
    pass


class HostError(LevelforgeError):
    """Raised by drawing adapters for unknown handles or wrong entity kinds."""
    pass


__all__ = [
    'LevelforgeError',
    'ValidationError',
    'OffsetError',
    'ExportError',
    'ConfigurationError',
    'HostError',
]
