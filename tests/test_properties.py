"""Property-based tests for seqsim using Hypothesis."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from seqsim.distance import (
    OSA,
    DamerauLevenshtein,
    Hamming,
    Jaro,
    JaroWinkler,
    LengthMismatch,
    Levenshtein,
    NGram,
)

# Small alphabets make shared elements, and so transpositions, likely.
small_text = st.text(alphabet="abcd", max_size=12)
small_ints = st.lists(st.integers(min_value=0, max_value=3), max_size=12)

EDIT_METRICS = [Levenshtein, OSA, DamerauLevenshtein]
METRICS = [Levenshtein, DamerauLevenshtein]

# ---------------------------------------------------------------------------
# Edit distance Properties
# ---------------------------------------------------------------------------

@given(st.text())
def test_distance_identity(s: str) -> None:
    """The distance of a sequence to itself should be 0, and normalized metrics bounded perfectly."""
    for metric in EDIT_METRICS:
        assert metric.distance(s, s) == 0
        assert metric.normalized_distance(s, s) == 0.0
        assert metric.normalized_similarity(s, s) == 1.0


@given(st.text(), st.text())
def test_distance_bounds(s1: str, s2: str) -> None:
    """Distances should be non-negative and normalized bounds should be [0.0, 1.0]."""
    for metric in EDIT_METRICS:
        dist = metric.distance(s1, s2)
        assert abs(len(s1) - len(s2)) <= dist <= max(len(s1), len(s2))
        assert 0.0 <= metric.normalized_distance(s1, s2) <= 1.0
        assert 0.0 <= metric.normalized_similarity(s1, s2) <= 1.0


@given(st.text())
def test_distance_empty(s: str) -> None:
    for metric in EDIT_METRICS:
        assert metric.distance(s, "") == len(s)
        assert metric.distance("", s) == len(s)


@given(small_text, small_text)
def test_distance_symmetry(s1: str, s2: str) -> None:
    for metric in EDIT_METRICS:
        assert metric.distance(s1, s2) == metric.distance(s2, s1)


@given(small_text, small_text)
def test_transposition_ordering(s1: str, s2: str) -> None:
    """Each added transposition rule can only lower the distance."""
    dl = DamerauLevenshtein.distance(s1, s2)
    osa = OSA.distance(s1, s2)
    lev = Levenshtein.distance(s1, s2)
    assert dl <= osa <= lev


@pytest.mark.parametrize("metric", METRICS)
@given(s1=small_text, s2=small_text, s3=small_text)
def test_triangle_inequality(metric, s1: str, s2: str, s3: str) -> None:
    d12 = metric.distance(s1, s2)
    d23 = metric.distance(s2, s3)
    d13 = metric.distance(s1, s3)
    assert d13 <= d12 + d23


@given(small_ints, small_ints)
def test_generic_matches_text(l1: list[int], l2: list[int]) -> None:
    """Integer sequences score the same as the equivalent strings."""
    t1 = "".join("abcd"[i] for i in l1)
    t2 = "".join("abcd"[i] for i in l2)
    for metric in EDIT_METRICS:
        assert metric.distance(l1, l2) == metric.distance(t1, t2)
        assert metric.distance(bytes(l1), bytes(l2)) == metric.distance(t1, t2)


# ---------------------------------------------------------------------------
# Hamming Properties
# ---------------------------------------------------------------------------

@given(st.text())
def test_hamming_identity(s: str) -> None:
    """Hamming distance of a sequence to itself should be 0."""
    assert Hamming.distance(s, s) == 0
    assert Hamming.normalized_similarity(s, s) == 1.0


@given(st.text(), st.text())
def test_hamming_length_mismatch(s1: str, s2: str) -> None:
    if len(s1) == len(s2):
        assert Hamming.distance(s1, s2) == sum(a != b for a, b in zip(s1, s2))
    else:
        with pytest.raises(LengthMismatch):
            Hamming.distance(s1, s2)


@given(st.text(), st.text())
def test_hamming_pad_bounds(s1: str, s2: str) -> None:
    dist = Hamming.distance(s1, s2, pad=True)
    assert abs(len(s1) - len(s2)) <= dist <= max(len(s1), len(s2))
    assert Levenshtein.distance(s1, s2) <= dist


# ---------------------------------------------------------------------------
# Jaro / JaroWinkler Properties
# ---------------------------------------------------------------------------

@given(st.text())
def test_jaro_identity(s: str) -> None:
    """Jaro metrics for identical sequences should be 1.0, the empty sequence included."""
    assert Jaro.similarity(s, s) == 1.0
    assert JaroWinkler.similarity(s, s) == 1.0
    assert Jaro.distance(s, s) == 0.0


@given(st.text(), st.text())
def test_jaro_bounds(s1: str, s2: str) -> None:
    """Jaro similarities should be bounded between 0.0 and 1.0."""
    jaro = Jaro.similarity(s1, s2)
    jw = JaroWinkler.similarity(s1, s2)
    assert 0.0 <= jaro <= 1.0
    assert 0.0 <= jw <= 1.0
    assert jaro <= jw


@pytest.mark.parametrize(
    ("s1", "s2"),
    [
        ("MARTHA", "MARHTA"),
        ("DWAYNE", "DUANE"),
        ("DIXON", "DICKSONX"),
        ("Friedrich Nietzsche", "Jean-Paul Sartre"),
        ("abcd", "bcda"),
    ],
)
def test_jaro_symmetry(s1: str, s2: str) -> None:
    assert Jaro.similarity(s1, s2) == pytest.approx(Jaro.similarity(s2, s1))
    assert JaroWinkler.similarity(s1, s2) == pytest.approx(JaroWinkler.similarity(s2, s1))


# ---------------------------------------------------------------------------
# N-gram Properties
# ---------------------------------------------------------------------------

@given(st.text())
def test_dice_identity(s: str) -> None:
    assert NGram.sorensen_dice(s, s) == 1.0
    assert NGram.jaccard(s, s) == 1.0


@given(st.text(), st.text())
def test_dice_bounds_and_symmetry(s1: str, s2: str) -> None:
    dice = NGram.sorensen_dice(s1, s2)
    assert 0.0 <= dice <= 1.0
    assert dice == NGram.sorensen_dice(s2, s1)
    assert NGram.jaccard(s1, s2) <= dice
