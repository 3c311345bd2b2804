# string_tokenizer/scanning/delimiters.py

"""
delimiters.py.

Does: Analyse a delimiter string once (code points, highest code point,
      surrogate flag) and classify the character at a text position as
      delimiter / non-delimiter together with its width in ``str`` units.
Returns: DelimiterSet (immutable, cached per delimiter string) and the
         code_point_at() decoder.
Used by: Tokenizer skip/scan loops and count_remaining_tokens().
"""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from functools import lru_cache

from string_tokenizer.constants import (
    MAX_HIGH_SURROGATE,
    MAX_LOW_SURROGATE,
    MIN_HIGH_SURROGATE,
    MIN_LOW_SURROGATE,
    MIN_SUPPLEMENTARY_CODE_POINT,
)

__all__ = [
    "DelimiterSet",
    "code_point_at",
    "iter_code_points",
]


# ─────────────────────────────────────────────────────────────────────────────
# Code point decoding
# ─────────────────────────────────────────────────────────────────────────────


def code_point_at(text: str, position: int) -> tuple[int, int]:
    """
    Does: Decode the code point starting at `position`, combining a
          high+low surrogate pair into one supplementary code point.
    Returns: (code_point, width) where width is 2 for a combined pair,
             else 1. Unpaired surrogates keep their raw value.
    """
    c = ord(text[position])
    if MIN_HIGH_SURROGATE <= c <= MAX_HIGH_SURROGATE and position + 1 < len(text):
        low = ord(text[position + 1])
        if MIN_LOW_SURROGATE <= low <= MAX_LOW_SURROGATE:
            cp = ((c - MIN_HIGH_SURROGATE) << 10) + (low - MIN_LOW_SURROGATE)
            return cp + MIN_SUPPLEMENTARY_CODE_POINT, 2
    return c, 1


def iter_code_points(text: str) -> Iterator[int]:
    """Yield the code points of `text`, pairing surrogates."""
    position = 0
    end = len(text)
    while position < end:
        cp, width = code_point_at(text, position)
        yield cp
        position += width


def _needs_surrogate_path(cp: int) -> bool:
    return cp >= MIN_SUPPLEMENTARY_CODE_POINT or MIN_HIGH_SURROGATE <= cp <= MAX_LOW_SURROGATE


# ─────────────────────────────────────────────────────────────────────────────
# Delimiter set
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class DelimiterSet:
    """
    Immutable, analysed set of delimiter code points.

    Attributes:
        source: the delimiter string the set was built from.
        chars: single ``str`` characters of `source` (fast-path membership).
        code_points: delimiter code points, surrogate pairs combined.
        max_code_point: highest delimiter code point, 0 when empty. Any
            character above it cannot be a delimiter.
        has_surrogates: True when a delimiter is supplementary or lies in
            the surrogate range, which requires pair-aware comparison.
    """

    source: str
    chars: frozenset[str]
    code_points: frozenset[int]
    max_code_point: int
    has_surrogates: bool

    @classmethod
    def from_string(cls, delimiters: str) -> DelimiterSet:
        if not isinstance(delimiters, str):
            raise TypeError(
                f"delimiters must be a str, got {type(delimiters).__name__}"
            )
        return _analyse_cached(delimiters)

    def __len__(self) -> int:
        return len(self.code_points)

    def __contains__(self, char: object) -> bool:
        if not isinstance(char, str) or not char:
            return False
        cp, width = code_point_at(char, 0)
        return width == len(char) and cp in self.code_points

    # ── Classification (one of the two is picked per delimiter assignment) ──

    def classify_fast(self, text: str, position: int) -> tuple[bool, int]:
        """Single ``str`` unit membership; valid only when `has_surrogates` is False."""
        c = text[position]
        return (ord(c) <= self.max_code_point and c in self.chars), 1

    def classify_surrogate_aware(self, text: str, position: int) -> tuple[bool, int]:
        """Decode the (possibly paired) code point and compare code points."""
        cp, width = code_point_at(text, position)
        return (cp <= self.max_code_point and cp in self.code_points), width

    def classifier(self):
        """
        Does: Select the membership path for this set.
        Returns: Bound classify_* method taking (text, position) and
                 returning (is_delimiter, width).
        """
        if self.has_surrogates:
            return self.classify_surrogate_aware
        return self.classify_fast


@lru_cache(maxsize=128)
def _analyse_cached(delimiters: str) -> DelimiterSet:
    code_points = frozenset(iter_code_points(delimiters))
    return DelimiterSet(
        source=delimiters,
        chars=frozenset(delimiters),
        code_points=code_points,
        max_code_point=max(code_points, default=0),
        has_surrogates=any(_needs_surrogate_path(cp) for cp in code_points),
    )
