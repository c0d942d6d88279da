"""Keyword extraction from raw idea text."""

import re
from typing import Any

MAX_KEYWORDS = 10
MIN_KEYWORD_LENGTH = 3

# Tags like #seed or #project; the tag path after a slash survives as a word.
TAG_PATTERN = re.compile(r"#[A-Za-z0-9_]+")

# Anything that is not an ASCII word character, whitespace or a Hangul syllable.
DISALLOWED_CHARS = re.compile(r"[^A-Za-z0-9_\s가-힣]")

STOP_WORDS = frozenset({
    # Korean filler used in idea capture
    "아이디어", "생각", "방법", "도구", "시스템", "서비스", "앱", "웹",
    # English equivalents
    "idea", "ideas", "thought", "method", "tool", "tools", "system",
    "service", "app", "web",
})


def is_stop_word(word: str) -> bool:
    return word in STOP_WORDS


def extract_keywords(content: Any) -> list[str]:
    """Extract up to ``MAX_KEYWORDS`` lowercase keywords from idea text.

    Keywords keep their order of first occurrence. Content that is not a
    string (missing or malformed records) yields no keywords.
    """
    if not isinstance(content, str):
        return []

    text = TAG_PATTERN.sub("", content)
    text = DISALLOWED_CHARS.sub(" ", text)

    keywords = [
        word for word in text.lower().split()
        if len(word) >= MIN_KEYWORD_LENGTH and not is_stop_word(word)
    ]
    return keywords[:MAX_KEYWORDS]
