"""
log.py.

Does: Lightweight debug printer gated by STRING_TOKENIZER_DEBUG_TOPICS (comma-sep or 'all').
Returns: Prints timestamped lines with topic + level. Used by the demo CLI and tests.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

from string_tokenizer.constants import DEBUG_TOPICS_ENV, TOKENIZER_TOPIC

__all__ = ["debug", "enable_topics", "reload_topics", "topic_enabled"]


def _load_topics() -> set[str]:
    raw = os.getenv(DEBUG_TOPICS_ENV, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Reload topics from the STRING_TOKENIZER_DEBUG_TOPICS environment variable."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def enable_topics(*topics: str) -> None:
    """Does: Turn on extra topics for this process without touching the environment."""
    _DEBUG_TOPICS.update(t.strip().lower() for t in topics if t.strip())


def topic_enabled(topic: str) -> bool:
    topic_key = topic.lower().strip()
    return "all" in _DEBUG_TOPICS or topic_key in _DEBUG_TOPICS


def debug(
    msg: str,
    topic: str = TOKENIZER_TOPIC,
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped debug line with topic and level
    if the topic is enabled via STRING_TOKENIZER_DEBUG_TOPICS.
    """
    if not topic_enabled(topic):
        return
    if stream is None:
        stream = sys.stderr
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic.lower().strip()}][{level.upper()}] {msg}", file=stream)
