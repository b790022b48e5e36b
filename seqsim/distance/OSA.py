"""seqsim.distance.OSA

Optimal String Alignment distance, also known as the restricted
Damerau-Levenshtein distance. Adjacent transpositions cost 1, but no
substring may be edited more than once, so ``OSA("ca", "abc") == 3`` where
the unrestricted variant gives 2. OSA does not satisfy the triangle
inequality.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from ._initialize import (
    _distance_cutoff,
    _norm_distance,
    _norm_distance_cutoff,
    _norm_similarity_cutoff,
    _preprocess,
    _similarity_cutoff,
)


def _osa(s1: Sequence[Any], s2: Sequence[Any]) -> int:
    if len(s1) < len(s2):
        s1, s2 = s2, s1
    len2 = len(s2)
    if not len2:
        return len(s1)

    # rows i-2 and i-1 of the DP table
    prev_two = [0] * (len2 + 1)
    prev = list(range(len2 + 1))
    for i in range(1, len(s1) + 1):
        ch1 = s1[i - 1]
        current = [i] + [0] * len2
        for j in range(1, len2 + 1):
            ch2 = s2[j - 1]
            cost = ch1 != ch2
            best = min(prev[j] + 1, current[j - 1] + 1, prev[j - 1] + cost)
            if cost and i > 1 and j > 1 and ch1 == s2[j - 2] and s1[i - 2] == ch2:
                best = min(best, prev_two[j - 2] + 1)
            current[j] = best
        prev_two, prev = prev, current
    return prev[len2]


def distance(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: int | None = None,
) -> int:
    """
    Calculates the Optimal String Alignment distance between two sequences.
    """
    s1, s2 = _preprocess(s1, s2, processor)
    return _distance_cutoff(_osa(s1, s2), score_cutoff)


def similarity(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: int | None = None,
) -> int:
    """
    Calculates the OSA similarity, ``max(len1, len2) - distance``.
    """
    s1, s2 = _preprocess(s1, s2, processor)
    sim = max(len(s1), len(s2)) - _osa(s1, s2)
    return _similarity_cutoff(sim, score_cutoff)


def normalized_distance(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """
    Calculates the normalized OSA distance in [0, 1].
    """
    s1, s2 = _preprocess(s1, s2, processor)
    dist = _norm_distance(_osa(s1, s2), max(len(s1), len(s2)))
    return _norm_distance_cutoff(dist, score_cutoff)


def normalized_similarity(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """
    Calculates the normalized OSA similarity in [0, 1].
    """
    s1, s2 = _preprocess(s1, s2, processor)
    sim = 1.0 - _norm_distance(_osa(s1, s2), max(len(s1), len(s2)))
    return _norm_similarity_cutoff(sim, score_cutoff)


__all__ = [
    "distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
]
