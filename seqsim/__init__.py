"""
seqsim — similarity and distance metrics for pairs of sequences.
"""

from __future__ import annotations

from . import distance
from .distance import (
    OSA,
    DamerauLevenshtein,
    Hamming,
    Jaro,
    JaroWinkler,
    Levenshtein,
    NGram,
)
from .distance._initialize import LengthMismatch

# Flat entry points under their classic names.
hamming = Hamming.distance
levenshtein = Levenshtein.distance
normalized_levenshtein = Levenshtein.normalized_similarity
osa_distance = OSA.distance
damerau_levenshtein = DamerauLevenshtein.distance
normalized_damerau_levenshtein = DamerauLevenshtein.normalized_similarity
jaro = Jaro.similarity
jaro_winkler = JaroWinkler.similarity
sorensen_dice = NGram.sorensen_dice

__version__: str = "0.1.0"

__all__ = [
    "distance",
    "LengthMismatch",
    "hamming",
    "levenshtein",
    "normalized_levenshtein",
    "osa_distance",
    "damerau_levenshtein",
    "normalized_damerau_levenshtein",
    "jaro",
    "jaro_winkler",
    "sorensen_dice",
    "__version__",
]
