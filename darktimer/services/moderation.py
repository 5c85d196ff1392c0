"""Block-list content filter for player taunt messages."""

from __future__ import annotations

import re
from typing import FrozenSet, Iterable, Optional

DEFAULT_BLOCKED_WORDS: FrozenSet[str] = frozenset(
    {
        "asshole",
        "bastard",
        "bitch",
        "cunt",
        "dick",
        "fag",
        "faggot",
        "fuck",
        "fucker",
        "fucking",
        "motherfucker",
        "nazi",
        "nigga",
        "nigger",
        "retard",
        "shit",
        "slut",
        "whore",
    }
)

_LEET = str.maketrans(
    {"0": "o", "1": "i", "3": "e", "4": "a", "5": "s", "7": "t", "@": "a", "$": "s"}
)
_WORD = re.compile(r"[a-z]+")
_HTML_TAG = re.compile(r"<[^>]*>")
_CONTROL = re.compile(r"[\x00-\x1f\x7f-\x9f\u200b-\u200f\u2028-\u202f\u2060-\u206f\ufeff]")


class ContentFilter:
    """Stateless predicate over a static block-list."""

    def __init__(self, blocked_words: Optional[Iterable[str]] = None):
        words = DEFAULT_BLOCKED_WORDS if blocked_words is None else blocked_words
        self.blocked_words: FrozenSet[str] = frozenset(
            word.strip().lower() for word in words if word and word.strip()
        )

    def is_allowed(self, text: str) -> bool:
        if _HTML_TAG.search(text) or _CONTROL.search(text):
            return False
        normalized = text.lower().translate(_LEET)
        return not any(word in self.blocked_words for word in _WORD.findall(normalized))

    def __call__(self, text: str) -> bool:
        return self.is_allowed(text)


def build_content_filter(extra_words: Iterable[str] = ()) -> ContentFilter:
    """Default block-list plus any configured extras."""

    return ContentFilter([*DEFAULT_BLOCKED_WORDS, *extra_words])


__all__ = ["ContentFilter", "DEFAULT_BLOCKED_WORDS", "build_content_filter"]
