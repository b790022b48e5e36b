"""seqsim.distance.JaroWinkler

Jaro similarity with a bonus for a shared prefix:
``jaro + l * prefix_weight * (1 - jaro)``, where ``l`` is the length of the
common prefix capped at ``MAX_PREFIX``. The bonus only applies once the Jaro
similarity reaches ``BOOST_THRESHOLD``.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from ._initialize import _norm_distance_cutoff, _norm_similarity_cutoff, _preprocess
from .Jaro import _jaro

BOOST_THRESHOLD = 0.7
MAX_PREFIX = 4
DEFAULT_PREFIX_WEIGHT = 0.1


def _jaro_winkler(
    s1: Sequence[Any], s2: Sequence[Any], prefix_weight: float
) -> float:
    if not 0.0 <= prefix_weight <= 1.0 / MAX_PREFIX:
        raise ValueError(
            f"prefix_weight must be between 0.0 and {1.0 / MAX_PREFIX}, got {prefix_weight!r}"
        )

    sim = _jaro(s1, s2)
    if sim < BOOST_THRESHOLD:
        return sim

    prefix = 0
    for ch1, ch2 in zip(s1[:MAX_PREFIX], s2[:MAX_PREFIX]):
        if ch1 != ch2:
            break
        prefix += 1
    return sim + prefix * prefix_weight * (1.0 - sim)


def similarity(
    s1: Any,
    s2: Any,
    *,
    prefix_weight: float = DEFAULT_PREFIX_WEIGHT,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """
    Calculates the Jaro-Winkler similarity in [0, 1].

    Raises
    ------
    ValueError
        If *prefix_weight* is outside ``[0, 0.25]``, which would let the
        score exceed 1.0.
    """
    s1, s2 = _preprocess(s1, s2, processor)
    return _norm_similarity_cutoff(_jaro_winkler(s1, s2, prefix_weight), score_cutoff)


def distance(
    s1: Any,
    s2: Any,
    *,
    prefix_weight: float = DEFAULT_PREFIX_WEIGHT,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """
    Calculates the Jaro-Winkler distance, ``1 - similarity``.
    """
    s1, s2 = _preprocess(s1, s2, processor)
    dist = 1.0 - _jaro_winkler(s1, s2, prefix_weight)
    return _norm_distance_cutoff(dist, score_cutoff)


normalized_similarity = similarity
normalized_distance = distance

__all__ = [
    "distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
    "BOOST_THRESHOLD",
    "MAX_PREFIX",
    "DEFAULT_PREFIX_WEIGHT",
]
