# constants.py
# ============

"""
constants.
=========

Does: Define the immutable scanner constants (default delimiter set,
      UTF-16 surrogate bounds, debug-topic environment variable).
Used By: DelimiterSet analysis, Tokenizer construction, the debug logger and the demo CLI.
Returns: Pure data only (no side effects).
"""

# ── 1) Delimiters ────────────────────────────────────────────────────────────

# space, horizontal tab, line feed, carriage return, form feed
DEFAULT_DELIMITERS: str = " \t\n\r\f"


# ── 2) UTF-16 surrogates ─────────────────────────────────────────────────────

MIN_HIGH_SURROGATE = 0xD800
MAX_HIGH_SURROGATE = 0xDBFF
MIN_LOW_SURROGATE = 0xDC00
MAX_LOW_SURROGATE = 0xDFFF

# First code point that needs two UTF-16 code units
MIN_SUPPLEMENTARY_CODE_POINT = 0x10000


# ── 3) Debug output ──────────────────────────────────────────────────────────

DEBUG_TOPICS_ENV = "STRING_TOKENIZER_DEBUG_TOPICS"
TOKENIZER_TOPIC = "tokenizer"

# Sample line scanned by the demo when no text is given
DEMO_TEXT = "ABCD\tEFG\fHIJKLM PQR"

__all__ = [
    "DEFAULT_DELIMITERS",
    "MIN_HIGH_SURROGATE",
    "MAX_HIGH_SURROGATE",
    "MIN_LOW_SURROGATE",
    "MAX_LOW_SURROGATE",
    "MIN_SUPPLEMENTARY_CODE_POINT",
    "DEBUG_TOPICS_ENV",
    "TOKENIZER_TOPIC",
    "DEMO_TEXT",
]
