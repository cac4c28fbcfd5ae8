"""
Configuration for domain style classification.

The config is a frozen, picklable value so that it can be shared between
detectors and shipped to worker processes unchanged.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

from domainstyle.syllables_data import SUPPORTED_LOCALES
from domainstyle.types.results import StyleKind


class NumericPolicy(str, Enum):
    """How strictly the pure-number check reads a label."""

    # ASCII decimal digits only
    DIGITS = "digits"
    # Any numeric string: surrounding whitespace, sign, decimal point, exponent ("1e3", "-1.5")
    NUMERIC_STRING = "numeric_string"


DEFAULT_STYLE_ORDER = (
    StyleKind.PURE_NUMBER,
    StyleKind.PURE_INITIAL_CONSONANT,
    StyleKind.FULL_PINYIN,
    StyleKind.PURE_LETTER,
    StyleKind.MIXED_ALPHANUMERIC,
)

_NUMERIC_PATTERNS = {
    NumericPolicy.DIGITS: re.compile(r"[0-9]+"),
    NumericPolicy.NUMERIC_STRING: re.compile(r"\s*[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\s*"),
}


@dataclass(frozen=True)
class StyleConfig:
    """Immutable settings for one classification pipeline."""

    numeric_policy: NumericPolicy = NumericPolicy.DIGITS
    style_order: tuple[StyleKind, ...] = DEFAULT_STYLE_ORDER
    # Lower-case the label before the consonant and pinyin checks
    fold_case: bool = False
    locale: str = "zh"

    letter_pattern: re.Pattern[str] = field(default=re.compile(r"[a-zA-Z]+"), repr=False, compare=False)
    mixed_pattern: re.Pattern[str] = field(
        default=re.compile(r"[a-zA-Z0-9\-\u4e00-\u9fa5]+"),
        repr=False,
        compare=False,
    )
    cjk_pattern: re.Pattern[str] = field(default=re.compile(r"[\u4e00-\u9fa5]"), repr=False, compare=False)

    def __post_init__(self):
        if self.locale not in SUPPORTED_LOCALES:
            raise ValueError(f"unsupported locale '{self.locale}'")
        if not self.style_order:
            raise ValueError("style_order must name at least one style")
        # Accept plain strings such as "digits" or "full_pinyin"
        object.__setattr__(self, "numeric_policy", NumericPolicy(self.numeric_policy))
        object.__setattr__(self, "style_order", tuple(StyleKind(kind) for kind in self.style_order))

    @classmethod
    def create_default(cls) -> StyleConfig:
        return cls()

    @property
    def numeric_pattern(self) -> re.Pattern[str]:
        return _NUMERIC_PATTERNS[self.numeric_policy]
