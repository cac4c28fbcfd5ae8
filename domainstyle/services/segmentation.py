"""
Pinyin segmentation service.

This module decides whether a string can be partitioned into romanized
syllables with no gaps or overlaps, and how few syllables are needed.

Two equivalent strategies are provided:

- `iter_segmentations` walks the full search tree. Working from the right end
  of the string, a suffix accumulator grows one character at a time; each time
  it is a syllable the remaining left part is searched recursively and the
  accumulator keeps growing, so every split point is explored. This is the
  reference behavior and is exponential in the worst case.
- `min_syllable_count` computes the same minimum with a dynamic program over
  prefix lengths, linear in the string length for a bounded syllable length.

Both agree on which strings are segmentable and on the minimum count.
"""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from domainstyle.syllables_data import PINYIN_SYLLABLES


@dataclass(frozen=True)
class Segmentation:
    """A complete segmentation of a label."""

    syllables: tuple[str, ...]

    @property
    def count(self) -> int:
        return len(self.syllables)


class PinyinSegmentationService:
    """Segments strings into dictionary syllables."""

    def __init__(self, syllables: frozenset[str] = PINYIN_SYLLABLES):
        self._syllables = syllables
        self._max_length = max((len(s) for s in syllables), default=0)

    def is_syllable(self, text: str) -> bool:
        return text in self._syllables

    # ---------- reference search ----------
    def iter_segmentations(self, label: str) -> Iterator[Segmentation]:
        """Yield every complete segmentation of `label`, in search order."""
        if not label:
            return
        yield from self._search(label, ())

    def _search(self, remaining: str, chosen_right: tuple[str, ...]) -> Iterator[Segmentation]:
        # chosen_right holds syllables already taken from the right end, rightmost first
        accumulator = ""
        for char in reversed(remaining):
            accumulator = char + accumulator
            if not self.is_syllable(accumulator):
                continue
            left = remaining[: len(remaining) - len(accumulator)]
            taken = (*chosen_right, accumulator)
            if not left:
                yield Segmentation(tuple(reversed(taken)))
            else:
                yield from self._search(left, taken)

    # ---------- production path ----------
    def segment(self, label: str) -> Segmentation | None:
        """Return one segmentation with the fewest syllables, or None if there is none."""
        if not label:
            return None

        n = len(label)
        # best[i]: fewest syllables covering label[:i]; back[i]: length of the last syllable
        best: list[int | None] = [None] * (n + 1)
        back = [0] * (n + 1)
        best[0] = 0

        for end in range(1, n + 1):
            for length in range(1, min(self._max_length, end) + 1):
                start = end - length
                if best[start] is None or label[start:end] not in self._syllables:
                    continue
                candidate = best[start] + 1
                if best[end] is None or candidate < best[end]:
                    best[end] = candidate
                    back[end] = length

        if best[n] is None:
            return None

        syllables = []
        end = n
        while end > 0:
            start = end - back[end]
            syllables.append(label[start:end])
            end = start
        return Segmentation(tuple(reversed(syllables)))

    def min_syllable_count(self, label: str) -> int | None:
        """Fewest syllables needed to cover `label`, or None when it cannot be segmented."""
        segmentation = self.segment(label)
        return segmentation.count if segmentation else None
