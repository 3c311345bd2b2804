# string_tokenizer/utils/__init__.py
"""

Does: Provide the lightweight, environment-gated debug printer.
Returns: Public API via debug/enable_topics/reload_topics/topic_enabled.
Used by: The demo CLI and tests.
"""

from __future__ import annotations

from .log import (
    debug,
    enable_topics,
    reload_topics,
    topic_enabled,
)

__all__ = [
    "debug",
    "enable_topics",
    "reload_topics",
    "topic_enabled",
]
