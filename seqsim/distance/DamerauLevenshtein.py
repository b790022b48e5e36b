"""seqsim.distance.DamerauLevenshtein

Unrestricted Damerau-Levenshtein distance: insertions, deletions,
substitutions and transpositions of any two elements that are not
otherwise edited, each at cost 1. Unlike OSA this is a true metric.

Elements must be hashable, since the last row each element was seen in
is tracked in a dict.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence
from typing import Any

from ._initialize import (
    _distance_cutoff,
    _norm_distance,
    _norm_distance_cutoff,
    _norm_similarity_cutoff,
    _preprocess,
    _similarity_cutoff,
)


def _damerau_levenshtein(s1: Sequence[Hashable], s2: Sequence[Hashable]) -> int:
    """
    Linear-memory variant of the Lowrance-Wagner recurrence (Zhao et al.).

    Keeps the current and previous DP rows, a row of saved diagonal values
    for transpositions, and a map from element to the last row of *s1* it
    occurred in. All rows are offset by one so that column -1 exists.
    """
    if len(s1) < len(s2):
        s1, s2 = s2, s1
    len1, len2 = len(s1), len(s2)
    if not len2:
        return len1

    max_val = len1 + 1
    last_row_id: dict[Hashable, int] = {}
    fr = [max_val] * (len2 + 2)
    r1 = [max_val] * (len2 + 2)
    r = [max_val, *range(len2 + 1)]

    for i in range(1, len1 + 1):
        r, r1 = r1, r
        ch1 = s1[i - 1]
        last_col_id = -1
        last_i2l1 = r[1]
        r[1] = i
        t = max_val

        for j in range(1, len2 + 1):
            ch2 = s2[j - 1]
            temp = min(r1[j] + (ch1 != ch2), r[j] + 1, r1[j + 1] + 1)

            if ch1 == ch2:
                last_col_id = j
                fr[j + 1] = r1[j - 1]
                t = last_i2l1
            else:
                k = last_row_id.get(ch2, -1)
                if j - last_col_id == 1:
                    temp = min(temp, fr[j + 1] + (i - k))
                elif i - k == 1:
                    temp = min(temp, t + (j - last_col_id))

            last_i2l1 = r[j + 1]
            r[j + 1] = temp

        last_row_id[ch1] = i

    return r[len2 + 1]


def distance(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: int | None = None,
) -> int:
    """
    Calculates the Damerau-Levenshtein distance between two sequences.
    """
    s1, s2 = _preprocess(s1, s2, processor)
    return _distance_cutoff(_damerau_levenshtein(s1, s2), score_cutoff)


def similarity(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: int | None = None,
) -> int:
    """
    Calculates the Damerau-Levenshtein similarity, ``max(len1, len2) - distance``.
    """
    s1, s2 = _preprocess(s1, s2, processor)
    sim = max(len(s1), len(s2)) - _damerau_levenshtein(s1, s2)
    return _similarity_cutoff(sim, score_cutoff)


def normalized_distance(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """
    Calculates the normalized Damerau-Levenshtein distance in [0, 1].
    """
    s1, s2 = _preprocess(s1, s2, processor)
    dist = _norm_distance(_damerau_levenshtein(s1, s2), max(len(s1), len(s2)))
    return _norm_distance_cutoff(dist, score_cutoff)


def normalized_similarity(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """
    Calculates the normalized Damerau-Levenshtein similarity in [0, 1].
    """
    s1, s2 = _preprocess(s1, s2, processor)
    sim = 1.0 - _norm_distance(_damerau_levenshtein(s1, s2), max(len(s1), len(s2)))
    return _norm_similarity_cutoff(sim, score_cutoff)


__all__ = [
    "distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
]
