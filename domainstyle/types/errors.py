"""
Error types for domain style classification.

Both failures are terminal for a single classification call. They carry an
`ErrorKind` so callers that only see a `ClassificationResult` can still tell
them apart.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Machine-readable failure categories."""

    INVALID_FORMAT = "invalid_format"
    NO_STYLE_MATCHED = "no_style_matched"


class DomainStyleError(Exception):
    """Base class for classification failures."""

    kind: ErrorKind

    def __init__(self, message: str, reason: str | None = None):
        super().__init__(message)
        self.message = message
        # Finer-grained key for localized messages ("empty" vs "invalid_format")
        self.reason = reason or self.kind.value


class DomainFormatError(DomainStyleError, ValueError):
    """Raw input is empty or has no label/suffix separator."""

    kind = ErrorKind.INVALID_FORMAT


class NoStyleMatchedError(DomainStyleError):
    """Every registered checker declined the domain."""

    kind = ErrorKind.NO_STYLE_MATCHED
