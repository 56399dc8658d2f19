"""Word-list cleanup applied to words typed or read from files."""

from __future__ import annotations

import re
from typing import Iterable, List

WHITESPACE_RE = re.compile(r"\s+")


def clean_word(text: str) -> str:
    """Return ``text`` lowercased with all whitespace removed."""

    if not text:
        return ""
    return WHITESPACE_RE.sub("", text).lower()


def clean_words(entries: Iterable[str]) -> List[str]:
    """Clean every entry, dropping blanks and repeated words while keeping order."""

    seen = set()
    words: List[str] = []
    for entry in entries:
        word = clean_word(entry)
        if not word or word in seen:
            continue
        seen.add(word)
        words.append(word)
    return words


__all__ = ["clean_word", "clean_words"]
