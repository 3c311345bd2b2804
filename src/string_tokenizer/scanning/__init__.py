# string_tokenizer/scanning/__init__.py
"""
scanning.
========

Does: Provide the delimiter-based lazy token scanner and its delimiter-set analysis.
Exports: Tokenizer, NoMoreTokens, tokenize, DelimiterSet, code_point_at
Used by: The package root, the demo CLI and tests.
"""

from __future__ import annotations

from .delimiters import (
    DelimiterSet,
    code_point_at,
)
from .tokenizer import (
    NoMoreTokens,
    Tokenizer,
    tokenize,
)

__all__ = [
    # tokenizer
    "Tokenizer",
    "NoMoreTokens",
    "tokenize",
    # delimiters
    "DelimiterSet",
    "code_point_at",
]
