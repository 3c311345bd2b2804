# tests/test_scanning_delimiters.py
from __future__ import annotations

import pytest

from string_tokenizer.constants import DEFAULT_DELIMITERS
from string_tokenizer.scanning import delimiters as D

GRIN = "\U0001F600"
GRIN_PAIR = "\ud83d\ude00"  # U+1F600 as a UTF-16 surrogate pair


# ─────────────────────────────────────────────────────────────────────────────
# code_point_at / iter_code_points
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "text,position,expected",
    [
        ("a", 0, (0x61, 1)),
        (GRIN, 0, (0x1F600, 1)),            # already one str character
        (GRIN_PAIR, 0, (0x1F600, 2)),       # high+low combined
        ("\ud83d", 0, (0xD83D, 1)),         # unpaired high at end of text
        ("\ud83dx", 0, (0xD83D, 1)),        # high followed by non-surrogate
        ("\ude00\ud83d", 0, (0xDE00, 1)),   # low before high is not a pair
        (f"x{GRIN_PAIR}", 1, (0x1F600, 2)),
    ],
)
def test_code_point_at(text, position, expected):
    assert D.code_point_at(text, position) == expected


def test_iter_code_points_pairs_surrogates():
    assert list(D.iter_code_points(f"a{GRIN_PAIR}b{GRIN}")) == [0x61, 0x1F600, 0x62, 0x1F600]


# ─────────────────────────────────────────────────────────────────────────────
# DelimiterSet analysis
# ─────────────────────────────────────────────────────────────────────────────

def test_default_set_analysis():
    ds = D.DelimiterSet.from_string(DEFAULT_DELIMITERS)
    assert ds.code_points == frozenset({0x20, 0x09, 0x0A, 0x0D, 0x0C})
    assert ds.max_code_point == 0x20
    assert ds.has_surrogates is False
    assert len(ds) == 5


def test_empty_set_analysis():
    ds = D.DelimiterSet.from_string("")
    assert ds.max_code_point == 0
    assert ds.has_surrogates is False
    assert len(ds) == 0


@pytest.mark.parametrize("delims", [GRIN, GRIN_PAIR, "\ud83d", "\ude00", f",{GRIN}"])
def test_surrogate_flag(delims):
    assert D.DelimiterSet.from_string(delims).has_surrogates is True


def test_pair_and_single_char_spellings_are_the_same_code_point():
    a = D.DelimiterSet.from_string(GRIN)
    b = D.DelimiterSet.from_string(GRIN_PAIR)
    assert a.code_points == b.code_points == frozenset({0x1F600})
    assert a.max_code_point == b.max_code_point == 0x1F600


def test_duplicates_collapse():
    assert len(D.DelimiterSet.from_string(",,;,")) == 2


def test_analysis_is_cached_per_string():
    assert D.DelimiterSet.from_string(",;") is D.DelimiterSet.from_string(",;")


def test_non_string_rejected():
    with pytest.raises(TypeError, match="delimiters must be a str"):
        D.DelimiterSet.from_string([","])  # type: ignore[arg-type]


def test_contains():
    ds = D.DelimiterSet.from_string(f" {GRIN}")
    assert " " in ds
    assert GRIN in ds
    assert GRIN_PAIR in ds
    assert "\ud83d" not in ds
    assert "x" not in ds
    assert "  " not in ds
    assert 32 not in ds


def test_frozen():
    ds = D.DelimiterSet.from_string(",")
    with pytest.raises(AttributeError):
        ds.max_code_point = 99  # type: ignore[misc]


# ─────────────────────────────────────────────────────────────────────────────
# Classification paths
# ─────────────────────────────────────────────────────────────────────────────

def test_classifier_selects_fast_path_for_bmp_sets():
    ds = D.DelimiterSet.from_string(" \t")
    assert ds.classifier() == ds.classify_fast
    assert ds.classify_fast("a b", 1) == (True, 1)
    assert ds.classify_fast("a b", 0) == (False, 1)
    # above max_code_point: rejected without a membership test
    assert ds.classify_fast("\u3000", 0) == (False, 1)


def test_classifier_selects_surrogate_path():
    ds = D.DelimiterSet.from_string(GRIN)
    assert ds.classifier() == ds.classify_surrogate_aware
    assert ds.classify_surrogate_aware(f"a{GRIN_PAIR}", 1) == (True, 2)
    assert ds.classify_surrogate_aware(f"a{GRIN}", 1) == (True, 1)
    assert ds.classify_surrogate_aware("a\ud83d", 1) == (False, 1)
    assert ds.classify_surrogate_aware(f"b{GRIN_PAIR}", 0) == (False, 1)
