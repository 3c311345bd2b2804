"""
string_tokenizer
================

Does: Root package for the delimiter-based lazy string tokenizer.
Returns: Re-exports the scanner API (`Tokenizer`, `tokenize`, `NoMoreTokens`,
         `DelimiterSet`) and `DEFAULT_DELIMITERS`.
Used by: All imports starting from `string_tokenizer.*`.
"""

from .constants import DEFAULT_DELIMITERS
from .scanning import DelimiterSet, NoMoreTokens, Tokenizer, tokenize
from .types import TokenSource

__all__: list[str] = [
    "DEFAULT_DELIMITERS",
    "DelimiterSet",
    "NoMoreTokens",
    "TokenSource",
    "Tokenizer",
    "tokenize",
]
__docformat__ = "google"
