"""
seqsim.distance — edit distance and similarity metrics.
"""

from __future__ import annotations

from . import (  # noqa: F401
    OSA,
    DamerauLevenshtein,
    Hamming,
    Jaro,
    JaroWinkler,
    Levenshtein,
    NGram,
)
from ._initialize import LengthMismatch

__all__ = [
    "LengthMismatch",
    "DamerauLevenshtein",
    "Hamming",
    "Jaro",
    "JaroWinkler",
    "Levenshtein",
    "NGram",
    "OSA",
]
