"""
Style checkers for domain style classification.

Each checker inspects the main label of a `Domain` and either returns the
`Style` it recognises or None. Checkers are pure: they hold only immutable
configuration and never mutate shared state, so one instance can serve any
number of classifications.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Protocol

from domainstyle.services.segmentation import PinyinSegmentationService
from domainstyle.syllables_data import INITIAL_CONSONANT_TOKENS
from domainstyle.types import Domain, Style, StyleConfig, StyleKind


class StyleChecker(Protocol):
    kind: StyleKind

    def check(self, domain: Domain) -> Style | None: ...


class PureNumberChecker:
    kind = StyleKind.PURE_NUMBER

    def __init__(self, config: StyleConfig):
        self._pattern = config.numeric_pattern

    def check(self, domain: Domain) -> Style | None:
        label = domain.main_label
        if self._pattern.fullmatch(label):
            return Style(self.kind, len(label))
        return None


class PureInitialConsonantChecker:
    """
    Matches labels made only of pinyin initials.

    Every occurrence of each token is deleted, token by token in the fixed
    order, and the label matches as soon as nothing is left. Deletion ignores
    syllable boundaries, so any string over the initial letters reduces to
    empty.
    """

    kind = StyleKind.PURE_INITIAL_CONSONANT

    def __init__(self, config: StyleConfig, tokens: tuple[str, ...] = INITIAL_CONSONANT_TOKENS):
        self._fold_case = config.fold_case
        self._tokens = tokens

    def check(self, domain: Domain) -> Style | None:
        label = domain.main_label
        remaining = label.lower() if self._fold_case else label

        for token in self._tokens:
            remaining = remaining.replace(token, "")
            if not remaining:
                return Style(self.kind, len(label))
        return None


class FullPinyinChecker:
    kind = StyleKind.FULL_PINYIN

    def __init__(self, config: StyleConfig, segmenter: PinyinSegmentationService | None = None):
        self._fold_case = config.fold_case
        self._segmenter = segmenter or PinyinSegmentationService()

    def check(self, domain: Domain) -> Style | None:
        label = domain.main_label.lower() if self._fold_case else domain.main_label
        segmentation = self._segmenter.segment(label)
        if segmentation is None:
            return None
        return Style(self.kind, segmentation.count, syllables=segmentation.syllables)


class PureLetterChecker:
    kind = StyleKind.PURE_LETTER

    def __init__(self, config: StyleConfig):
        self._pattern = config.letter_pattern

    def check(self, domain: Domain) -> Style | None:
        label = domain.main_label
        if self._pattern.fullmatch(label):
            return Style(self.kind, len(label))
        return None


class MixedAlphaNumericChecker:
    """Catch-all for ASCII letters, digits, hyphens and CJK ideographs (U+4E00-U+9FA5)."""

    kind = StyleKind.MIXED_ALPHANUMERIC

    def __init__(self, config: StyleConfig):
        self._pattern = config.mixed_pattern

    def check(self, domain: Domain) -> Style | None:
        label = domain.main_label
        if self._pattern.fullmatch(label):
            # len() counts code points, so each ideograph counts once
            return Style(self.kind, len(label))
        return None


CHECKER_REGISTRY = MappingProxyType(
    {
        StyleKind.PURE_NUMBER: PureNumberChecker,
        StyleKind.PURE_INITIAL_CONSONANT: PureInitialConsonantChecker,
        StyleKind.FULL_PINYIN: FullPinyinChecker,
        StyleKind.PURE_LETTER: PureLetterChecker,
        StyleKind.MIXED_ALPHANUMERIC: MixedAlphaNumericChecker,
    }
)


def create_checker(kind: StyleKind | str, config: StyleConfig) -> StyleChecker:
    """Build the checker registered for `kind`."""
    try:
        checker_cls = CHECKER_REGISTRY[StyleKind(kind)]
    except ValueError as e:
        raise ValueError(f"unknown style '{kind}'") from e
    return checker_cls(config)
