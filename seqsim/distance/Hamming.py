"""seqsim.distance.Hamming"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from ._initialize import (
    LengthMismatch,
    _distance_cutoff,
    _norm_distance,
    _norm_distance_cutoff,
    _norm_similarity_cutoff,
    _preprocess,
    _similarity_cutoff,
)


def _hamming(s1: Sequence[Any], s2: Sequence[Any], pad: bool) -> int:
    len1, len2 = len(s1), len(s2)
    if len1 != len2 and not pad:
        raise LengthMismatch(len1, len2)
    mismatches = sum(1 for ch1, ch2 in zip(s1, s2) if ch1 != ch2)
    return mismatches + abs(len1 - len2)


def distance(
    s1: Any,
    s2: Any,
    *,
    pad: bool = False,
    processor: Callable[..., Any] | None = None,
    score_cutoff: int | None = None,
) -> int:
    """
    Calculates the Hamming distance: the number of positions at which the
    two sequences differ.

    Raises
    ------
    LengthMismatch
        If the sequences differ in length and *pad* is false. With
        ``pad=True`` each position past the end of the shorter sequence
        counts as a mismatch.
    """
    s1, s2 = _preprocess(s1, s2, processor)
    return _distance_cutoff(_hamming(s1, s2, pad), score_cutoff)


def similarity(
    s1: Any,
    s2: Any,
    *,
    pad: bool = False,
    processor: Callable[..., Any] | None = None,
    score_cutoff: int | None = None,
) -> int:
    """
    Calculates the Hamming similarity, ``max(len1, len2) - distance``.
    """
    s1, s2 = _preprocess(s1, s2, processor)
    sim = max(len(s1), len(s2)) - _hamming(s1, s2, pad)
    return _similarity_cutoff(sim, score_cutoff)


def normalized_distance(
    s1: Any,
    s2: Any,
    *,
    pad: bool = False,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """
    Calculates the Hamming distance divided by the length of the longer sequence.
    """
    s1, s2 = _preprocess(s1, s2, processor)
    dist = _norm_distance(_hamming(s1, s2, pad), max(len(s1), len(s2)))
    return _norm_distance_cutoff(dist, score_cutoff)


def normalized_similarity(
    s1: Any,
    s2: Any,
    *,
    pad: bool = False,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """
    Calculates ``1 - normalized_distance``.
    """
    s1, s2 = _preprocess(s1, s2, processor)
    sim = 1.0 - _norm_distance(_hamming(s1, s2, pad), max(len(s1), len(s2)))
    return _norm_similarity_cutoff(sim, score_cutoff)


__all__ = [
    "distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
]
