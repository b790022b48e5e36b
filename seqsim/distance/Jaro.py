"""seqsim.distance.Jaro"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from ._initialize import _norm_distance_cutoff, _norm_similarity_cutoff, _preprocess


def _jaro(s1: Sequence[Any], s2: Sequence[Any]) -> float:
    len1, len2 = len(s1), len(s2)
    if not len1 and not len2:
        return 1.0
    if not len1 or not len2:
        return 0.0

    window = max(max(len1, len2) // 2 - 1, 0)
    s1_flags = [False] * len1
    s2_flags = [False] * len2
    matches = 0

    # greedy left-to-right, the earliest unmatched candidate wins
    for i, ch1 in enumerate(s1):
        lo = max(i - window, 0)
        hi = min(i + window + 1, len2)
        for j in range(lo, hi):
            if not s2_flags[j] and s2[j] == ch1:
                s1_flags[i] = s2_flags[j] = True
                matches += 1
                break

    if not matches:
        return 0.0

    s2_matched = (ch2 for ch2, flag in zip(s2, s2_flags) if flag)
    transpositions = sum(
        1
        for ch1, flag in zip(s1, s1_flags)
        if flag and ch1 != next(s2_matched)
    )
    transpositions //= 2

    return (
        matches / len1 + matches / len2 + (matches - transpositions) / matches
    ) / 3


def similarity(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """
    Calculates the Jaro similarity in [0, 1].

    Two empty sequences are identical (1.0); one empty sequence scores 0.0.
    """
    s1, s2 = _preprocess(s1, s2, processor)
    return _norm_similarity_cutoff(_jaro(s1, s2), score_cutoff)


def distance(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """
    Calculates the Jaro distance, ``1 - similarity``.
    """
    s1, s2 = _preprocess(s1, s2, processor)
    return _norm_distance_cutoff(1.0 - _jaro(s1, s2), score_cutoff)


# Jaro is already normalized
normalized_similarity = similarity
normalized_distance = distance

__all__ = [
    "distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
]
