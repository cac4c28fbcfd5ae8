#!/usr/bin/env python3
"""
Segmentation and classification benchmark for domainstyle.

This script compares the dynamic-programming segmentation against the full
recursive enumeration and checks that both report the same counts, then
times end-to-end classification of the same names through the detector.
"""

from __future__ import annotations

import argparse
import os
import random
import statistics
import time
from collections import Counter

from domainstyle import DomainStyleDetector
from domainstyle.services import PinyinSegmentationService
from domainstyle.syllables_data import INITIAL_CONSONANT_TOKENS, PINYIN_SYLLABLES

SUFFIXES = (".com", ".cn", ".com.cn", ".net")


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Profile segmentation strategies and classification throughput.")
    parser.add_argument("--names", type=int, default=12000, help="Number of deterministic test domains.")
    parser.add_argument("--runs", type=int, default=3, help="Number of timed runs per mode.")
    parser.add_argument("--max-syllables", type=int, default=4, help="Longest generated pinyin label, in syllables.")
    parser.add_argument("--seed", type=int, default=42, help="Seed for the name generator.")
    return parser.parse_args()


def generate_test_names(count: int, max_syllables: int, seed: int) -> list[str]:
    """Build a reproducible mix of pinyin, numeric, consonant, letter and mixed domains."""
    rng = random.Random(seed)
    syllables = sorted(PINYIN_SYLLABLES)
    initials = [token for token in INITIAL_CONSONANT_TOKENS if len(token) == 1]
    names = []

    for index in range(count):
        kind = index % 5
        if kind in (0, 1):
            label = "".join(rng.choice(syllables) for _ in range(rng.randint(1, max_syllables)))
        elif kind == 2:
            label = "".join(rng.choice("0123456789") for _ in range(rng.randint(1, 6)))
        elif kind == 3:
            label = "".join(rng.choice(initials) for _ in range(rng.randint(2, 5)))
        else:
            label = "".join(rng.choice("abcdefghijklmnopqrstuvwxyz0123456789-") for _ in range(rng.randint(3, 10)))
        names.append(label + rng.choice(SUFFIXES))
    return names


def _print_stats(label: str, times: list[float], item_count: int) -> float:
    rates = [item_count / elapsed for elapsed in times]
    mean_rate = statistics.mean(rates)
    median_rate = statistics.median(rates)
    cv = (statistics.stdev(rates) / mean_rate * 100.0) if len(rates) > 1 and mean_rate > 0 else 0.0
    print(f"{label}:")
    print(f"  runs_sec={','.join(f'{t:.4f}' for t in times)}")
    print(f"  rates_per_sec={','.join(f'{r:.0f}' for r in rates)}")
    print(f"  mean_rate={mean_rate:.2f} median_rate={median_rate:.2f} cv_percent={cv:.2f}")
    return median_rate


def _time_segmentation(labels: list[str], runs: int) -> tuple[list[float], list[float], bool]:
    service = PinyinSegmentationService()
    dp_times: list[float] = []
    enum_times: list[float] = []
    dp_counts: list[int | None] = []
    enum_counts: list[int | None] = []

    for _ in range(runs):
        start = time.perf_counter()
        dp_counts = [service.min_syllable_count(label) for label in labels]
        dp_times.append(time.perf_counter() - start)

        start = time.perf_counter()
        enum_counts = []
        for label in labels:
            counts = [segmentation.count for segmentation in service.iter_segmentations(label)]
            enum_counts.append(min(counts) if counts else None)
        enum_times.append(time.perf_counter() - start)

    return dp_times, enum_times, dp_counts == enum_counts


def _time_classification(detector: DomainStyleDetector, names: list[str], runs: int) -> tuple[list[float], Counter]:
    run_times: list[float] = []
    styles: Counter = Counter()

    for _ in range(runs):
        start = time.perf_counter()
        results = detector.analyze_batch(names)
        run_times.append(time.perf_counter() - start)
        styles = Counter(r.style.style_id if r.success else r.error_kind.value for r in results)

    return run_times, styles


def main() -> int:
    args = _parse_args()

    if args.names < 1:
        raise ValueError("--names must be >= 1")
    if args.runs < 1:
        raise ValueError("--runs must be >= 1")
    if args.max_syllables < 1:
        raise ValueError("--max-syllables must be >= 1")

    os.environ.setdefault("PYTHONHASHSEED", "42")
    os.environ.setdefault("PYTHONIOENCODING", "utf-8")

    detector = DomainStyleDetector()
    names = generate_test_names(args.names, args.max_syllables, args.seed)
    labels = [name.partition(".")[0] for name in names]

    print("=" * 88)
    print("DOMAINSTYLE SEGMENTATION AND CLASSIFICATION PROFILE")
    print("=" * 88)
    print(f"names={len(names)} runs={args.runs}")
    print()

    dp_times, enum_times, counts_match = _time_segmentation(labels, args.runs)
    dp_rate = _print_stats("dynamic_program", dp_times, len(labels))
    print()
    enum_rate = _print_stats("enumeration", enum_times, len(labels))
    print()
    print(f"segmentation_counts_match={counts_match}")
    print(f"segmentation_speedup_median={dp_rate / enum_rate:.2f}x")
    print()

    classify_times, styles = _time_classification(detector, names, args.runs)
    _print_stats("classification", classify_times, len(names))
    for style_id, count in sorted(styles.items()):
        print(f"  {style_id}={count}")

    return 0 if counts_match else 1


if __name__ == "__main__":
    raise SystemExit(main())
