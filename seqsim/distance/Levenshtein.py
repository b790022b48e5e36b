"""seqsim.distance.Levenshtein"""

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


def _remove_common_affix(
    s1: Sequence[Any], s2: Sequence[Any]
) -> tuple[Sequence[Any], Sequence[Any]]:
    start = 0
    limit = min(len(s1), len(s2))
    while start < limit and s1[start] == s2[start]:
        start += 1
    end = 0
    limit -= start
    while end < limit and s1[-1 - end] == s2[-1 - end]:
        end += 1
    return s1[start : len(s1) - end], s2[start : len(s2) - end]


def _levenshtein(s1: Sequence[Any], s2: Sequence[Any]) -> int:
    """Single-row Wagner-Fischer; the shorter sequence is the row dimension."""
    s1, s2 = _remove_common_affix(s1, s2)
    if len(s1) < len(s2):
        s1, s2 = s2, s1
    if not s2:
        return len(s1)

    previous = list(range(len(s2) + 1))
    for i, ch1 in enumerate(s1, start=1):
        current = [i]
        for j, ch2 in enumerate(s2, start=1):
            current.append(
                min(
                    previous[j] + 1,  # deletion
                    current[j - 1] + 1,  # insertion
                    previous[j - 1] + (ch1 != ch2),  # substitution
                )
            )
        previous = current
    return previous[-1]


def distance(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: int | None = None,
) -> int:
    """
    Calculates the minimum number of insertions, deletions and substitutions
    required to turn *s1* into *s2*.

    Works on any sequences of comparable elements, e.g. ``str``, ``bytes``
    or lists of token ids.
    """
    s1, s2 = _preprocess(s1, s2, processor)
    return _distance_cutoff(_levenshtein(s1, s2), score_cutoff)


def similarity(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: int | None = None,
) -> int:
    """
    Calculates the Levenshtein similarity, ``max(len1, len2) - distance``.
    """
    s1, s2 = _preprocess(s1, s2, processor)
    sim = max(len(s1), len(s2)) - _levenshtein(s1, s2)
    return _similarity_cutoff(sim, score_cutoff)


def normalized_distance(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """
    Calculates the Levenshtein distance divided by the length of the longer
    sequence. Two empty sequences have a normalized distance of 0.0.
    """
    s1, s2 = _preprocess(s1, s2, processor)
    dist = _norm_distance(_levenshtein(s1, s2), max(len(s1), len(s2)))
    return _norm_distance_cutoff(dist, score_cutoff)


def normalized_similarity(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """
    Calculates ``1 - normalized_distance``, a similarity in [0, 1].
    """
    s1, s2 = _preprocess(s1, s2, processor)
    sim = 1.0 - _norm_distance(_levenshtein(s1, s2), max(len(s1), len(s2)))
    return _norm_similarity_cutoff(sim, score_cutoff)


__all__ = [
    "distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
]
