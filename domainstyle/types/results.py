"""
Result types for domain style classification.

This module contains the style tag, the matched style value and an
Either-like result wrapper returned by the detector facade.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from domainstyle.types.errors import DomainStyleError, ErrorKind


class StyleKind(str, Enum):
    """Stable identifier for each style a checker can report."""

    PURE_NUMBER = "pure_number"
    PURE_INITIAL_CONSONANT = "pure_initial_consonant"
    FULL_PINYIN = "full_pinyin"
    PURE_LETTER = "pure_letter"
    MIXED_ALPHANUMERIC = "mixed_alphanumeric"


@dataclass(frozen=True)
class Style:
    """A matched style.

    `count` is the character length of the main label, except for
    FULL_PINYIN where it is the minimum number of syllables.
    """

    kind: StyleKind
    count: int
    # One minimal segmentation, only set for FULL_PINYIN
    syllables: tuple[str, ...] = ()

    @property
    def style_id(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class ClassificationResult:
    """Result of classifying one raw domain string - Either-like structure."""

    success: bool
    domain: str
    style: Style | None = None
    error_kind: ErrorKind | None = None
    error_message: str | None = None
    # Key into the localized error table, e.g. "empty"
    error_reason: str | None = None
    # Toneless pinyin of any CJK ideographs in the main label
    reading: tuple[str, ...] = ()

    @classmethod
    def success_with_style(cls, domain: str, style: Style, reading: tuple[str, ...] = ()) -> ClassificationResult:
        return cls(success=True, domain=domain, style=style, reading=reading)

    @classmethod
    def failure(cls, domain: str, error: DomainStyleError) -> ClassificationResult:
        return cls(
            success=False,
            domain=domain,
            error_kind=error.kind,
            error_message=error.message,
            error_reason=error.reason,
        )


@dataclass(frozen=True)
class CacheInfo:
    """Immutable snapshot of the Han reading cache."""

    cache_size: int
    hits: int
    misses: int
