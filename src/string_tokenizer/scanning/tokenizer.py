# string_tokenizer/scanning/tokenizer.py

"""
tokenizer.py.

Does: Lazily split a resident string into tokens separated by runs of
      delimiter characters, optionally returning each delimiter as its
      own one-character token. The delimiter set may be switched between
      tokens; the switch only affects boundaries from the current position on.
Returns: Tokenizer (stateful cursor), NoMoreTokens, tokenize().
Used by: The demo CLI and any caller that consumes tokens one at a time.
"""
from __future__ import annotations

import logging

from string_tokenizer.constants import DEFAULT_DELIMITERS
from string_tokenizer.scanning.delimiters import DelimiterSet

__all__ = [
    "NoMoreTokens",
    "Tokenizer",
    "tokenize",
]

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)


# ── Exceptions ───────────────────────────────────────────────────────────────
class NoMoreTokens(LookupError):
    """Raise when next_token() is called after the last token was returned."""


def _as_delimiter_set(delimiters: str | DelimiterSet) -> DelimiterSet:
    if isinstance(delimiters, DelimiterSet):
        # derived fields recomputed from source
        return DelimiterSet.from_string(delimiters.source)
    return DelimiterSet.from_string(delimiters)


class Tokenizer:
    """
    Delimiter-based token scanner over a string.

    Tokens are maximal runs of non-delimiter code points. With
    `return_delimiters` set, every delimiter occurrence is also returned,
    one per token, and delimiter runs are never merged.

    Quick start:
        tk = Tokenizer("ABCD\\tEFG\\fHIJKLM PQR")
        while tk.has_more_tokens():
            print(tk.next_token())

    Notes:
    - Supplementary delimiters also match text carrying them as UTF-16
      surrogate pairs (e.g. decoded with ``errors="surrogatepass"``).
    - Not thread-safe; callers serialise access.
    """

    def __init__(
        self,
        text: str,
        delimiters: str | DelimiterSet = DEFAULT_DELIMITERS,
        return_delimiters: bool = False,
    ) -> None:
        if not isinstance(text, str):
            raise TypeError(f"text must be a str, got {type(text).__name__}")
        self._text = text
        self._max_position = len(text)
        self._return_delimiters = bool(return_delimiters)
        self._current_position = 0
        # Boundary found by the last has_more_tokens(); cleared by next_token()
        # and by every delimiter assignment.
        self._cached_boundary: int | None = None
        self._assign_delimiters(delimiters)

    # ---- state ----
    @property
    def text(self) -> str:
        return self._text

    @property
    def delimiters(self) -> DelimiterSet:
        return self._delimiters

    @property
    def return_delimiters(self) -> bool:
        return self._return_delimiters

    @property
    def current_position(self) -> int:
        return self._current_position

    @property
    def max_delimiter_code_point(self) -> int:
        return self._delimiters.max_code_point

    @property
    def has_surrogate_delimiters(self) -> bool:
        return self._delimiters.has_surrogates

    def __repr__(self) -> str:
        return (
            f"Tokenizer(position={self._current_position}/{self._max_position}, "
            f"delimiters={self._delimiters.source!r}, "
            f"return_delimiters={self._return_delimiters})"
        )

    def _assign_delimiters(self, delimiters: str | DelimiterSet) -> None:
        self._delimiters = _as_delimiter_set(delimiters)
        self._classify = self._delimiters.classifier()
        self._cached_boundary = None

    # ---- scanning ----
    def _skip_delimiters(self, start: int) -> int:
        """
        Does: Skip the delimiter run at `start`.
        Returns: First non-delimiter position at or after `start` (or the
                 text length); `start` itself in return-delimiters mode.
        """
        if self._return_delimiters:
            return start
        text, end, classify = self._text, self._max_position, self._classify
        position = start
        while position < end:
            is_delimiter, width = classify(text, position)
            if not is_delimiter:
                break
            position += width
        return position

    def _scan_token(self, start: int) -> int:
        """
        Does: Scan to the end of the token starting at `start`.
        Returns: Position of the next delimiter, or the text length. In
                 return-delimiters mode a delimiter at `start` is consumed
                 as a token of its own.
        """
        text, end, classify = self._text, self._max_position, self._classify
        position = start
        while position < end:
            is_delimiter, width = classify(text, position)
            if is_delimiter:
                if self._return_delimiters and position == start:
                    position += width
                break
            position += width
        return position

    # ---- public api ----
    def has_more_tokens(self) -> bool:
        """True iff a following next_token() call (without new delimiters) succeeds."""
        self._cached_boundary = self._skip_delimiters(self._current_position)
        return self._cached_boundary < self._max_position

    def next_token(self, delimiters: str | DelimiterSet | None = None) -> str:
        """
        Does: Return the next token and advance past it. When `delimiters`
              is given, it replaces the delimiter set first and stays in
              effect for all later calls.
        Returns: Non-empty token string.
        Raises: NoMoreTokens when the text is exhausted.
        """
        if delimiters is not None:
            self._assign_delimiters(delimiters)
            log.debug(
                "Delimiters switched at position %d: %r (surrogate-aware=%s)",
                self._current_position,
                self._delimiters.source,
                self._delimiters.has_surrogates,
            )

        if self._cached_boundary is not None:
            start = self._cached_boundary
        else:
            start = self._skip_delimiters(self._current_position)
        self._cached_boundary = None
        self._current_position = start

        if start >= self._max_position:
            log.debug(
                "No more tokens at position %d (text length %d)", start, self._max_position
            )
            raise NoMoreTokens(
                f"No more tokens at position {start} (text length {self._max_position})"
            )
        self._current_position = self._scan_token(start)
        return self._text[start : self._current_position]

    def count_remaining_tokens(self) -> int:
        """
        Does: Count how many times next_token() can still succeed with the
              current delimiter set.
        Returns: Non-negative int; the cursor and cache are left untouched.
        """
        count = 0
        position = self._current_position
        while position < self._max_position:
            position = self._skip_delimiters(position)
            if position >= self._max_position:
                break
            position = self._scan_token(position)
            count += 1
        return count

    # Enumeration-style aliases
    def has_more_elements(self) -> bool:
        return self.has_more_tokens()

    def next_element(self) -> str:
        return self.next_token()

    # ---- iterator protocol ----
    def __iter__(self) -> Tokenizer:
        return self

    def __next__(self) -> str:
        if not self.has_more_tokens():
            raise StopIteration
        return self.next_token()

    def __length_hint__(self) -> int:
        return self.count_remaining_tokens()


def tokenize(
    text: str,
    delimiters: str | DelimiterSet = DEFAULT_DELIMITERS,
    return_delimiters: bool = False,
) -> list[str]:
    """Does: Split `text` eagerly. Returns: list of every token."""
    return [token for token in Tokenizer(text, delimiters, return_delimiters)]
