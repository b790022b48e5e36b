from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Hashable, Sequence
from typing import Any

from ._initialize import _norm_similarity_cutoff, _preprocess


def _ngrams(s: Sequence[Hashable], n: int) -> Counter[tuple[Hashable, ...]]:
    """Multiset of the overlapping n-grams of *s*; duplicates are counted."""
    return Counter(tuple(s[i : i + n]) for i in range(len(s) - n + 1))


def _check_n(n: int) -> None:
    if n < 1:
        raise ValueError(f"n must be a positive integer, got {n!r}")


def sorensen_dice(
    s1: Any,
    s2: Any,
    *,
    n: int = 2,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """Calculates the Sorensen-Dice coefficient between two sequences based on n-grams."""
    _check_n(n)
    s1, s2 = _preprocess(s1, s2, processor)
    if tuple(s1) == tuple(s2):
        return _norm_similarity_cutoff(1.0, score_cutoff)

    grams1 = _ngrams(s1, n)
    grams2 = _ngrams(s2, n)
    total = sum(grams1.values()) + sum(grams2.values())
    if not total:
        return _norm_similarity_cutoff(0.0, score_cutoff)

    common = sum((grams1 & grams2).values())
    return _norm_similarity_cutoff(2 * common / total, score_cutoff)


def jaccard(
    s1: Any,
    s2: Any,
    *,
    n: int = 2,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """Calculates the Jaccard similarity between two sequences based on n-gram multisets."""
    _check_n(n)
    s1, s2 = _preprocess(s1, s2, processor)
    if tuple(s1) == tuple(s2):
        return _norm_similarity_cutoff(1.0, score_cutoff)

    grams1 = _ngrams(s1, n)
    grams2 = _ngrams(s2, n)
    union = sum((grams1 | grams2).values())
    if not union:
        return _norm_similarity_cutoff(0.0, score_cutoff)

    common = sum((grams1 & grams2).values())
    return _norm_similarity_cutoff(common / union, score_cutoff)


__all__ = ["sorensen_dice", "jaccard"]
