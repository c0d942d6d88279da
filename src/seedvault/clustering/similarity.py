"""Lexical similarity between keyword sets."""

import math
from collections.abc import Iterable


def jaccard_similarity(keywords_a: Iterable[str], keywords_b: Iterable[str]) -> float:
    """Jaccard index of two keyword collections, 0.0 when both are empty."""
    set_a = set(keywords_a)
    set_b = set(keywords_b)

    union = set_a | set_b
    if not union:
        return 0.0
    return len(set_a & set_b) / len(union)


def overlapping_keywords(base: list[str], other: list[str]) -> list[str]:
    """Base keywords that contain, or are contained in, any keyword of ``other``.

    Order and repeats follow ``base``.
    """
    return [kw for kw in base if any(kw in o or o in kw for o in other)]


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding up."""
    return math.floor(value + 0.5)
