"""
seqsim.distance._initialize — shared error type and scorer helpers.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any


class LengthMismatch(ValueError):
    """Raised when a metric that needs equal-length inputs gets unequal ones."""

    def __init__(self, len1: int, len2: int) -> None:
        self.len1 = len1
        self.len2 = len2
        super().__init__(
            f"Sequences must have equal length, got {len1} and {len2}. "
            "Pass pad=True to count the missing positions as mismatches."
        )


def _as_sequence(s: Any) -> Sequence[Any]:
    """Return *s* unchanged if it is indexable, else materialise it as a tuple."""
    if isinstance(s, Sequence):
        return s
    return tuple(s)


def _preprocess(
    s1: Any, s2: Any, processor: Callable[..., Any] | None
) -> tuple[Sequence[Any], Sequence[Any]]:
    if processor is not None:
        s1 = processor(s1)
        s2 = processor(s2)
    return _as_sequence(s1), _as_sequence(s2)


def _norm_distance(dist: float, maximum: int) -> float:
    # two empty inputs are identical
    return dist / maximum if maximum else 0.0


def _distance_cutoff(dist: Any, score_cutoff: Any) -> Any:
    return dist if score_cutoff is None or dist <= score_cutoff else score_cutoff + 1


def _similarity_cutoff(sim: Any, score_cutoff: Any) -> Any:
    return sim if score_cutoff is None or sim >= score_cutoff else 0


def _norm_distance_cutoff(dist: float, score_cutoff: float | None) -> float:
    return dist if score_cutoff is None or dist <= score_cutoff else 1.0


def _norm_similarity_cutoff(sim: float, score_cutoff: float | None) -> float:
    return sim if score_cutoff is None or sim >= score_cutoff else 0.0


__all__ = ["LengthMismatch"]
