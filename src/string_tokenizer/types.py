# string_tokenizer/types.py
from __future__ import annotations

from typing import Protocol, runtime_checkable

"""
types.py.

Does: Define the structural Protocol for enumeration-style token sources.
"""


@runtime_checkable
class TokenSource(Protocol):
    """
    Structural contract for anything handing out tokens one at a time.

    - has_more_tokens(): True iff the next next_token() call succeeds.
    - next_token(): Return the next token, raising when exhausted.
    """

    def has_more_tokens(self) -> bool: ...
    def next_token(self) -> str: ...


__all__ = ["TokenSource"]

__docformat__ = "google"
