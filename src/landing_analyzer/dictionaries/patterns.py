"""Pattern definitions kept as data and compiled on demand."""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Pattern


_FLAG_MAP = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
}


@dataclass(frozen=True)
class PatternDefinition:
    """Regex source plus single-letter flags ("i", "m", "s")."""

    pattern: str
    flags: str = ""

    def compile(self) -> Pattern:
        return _compile(self.pattern, self.flags)

    def search(self, text: str) -> bool:
        return bool(self.compile().search(text or ""))


@lru_cache(maxsize=512)
def _compile(pattern: str, flags: str) -> Pattern:
    compiled_flags = 0
    for flag in flags:
        compiled_flags |= _FLAG_MAP[flag]
    return re.compile(pattern, compiled_flags)


def matches_any(text: str, patterns: Iterable[PatternDefinition]) -> bool:
    """True if any pattern matches anywhere in text."""
    return any(definition.search(text) for definition in patterns)


@lru_cache(maxsize=1024)
def phrase_to_boundary_regex(phrase: str) -> Pattern:
    """Build a word-boundary regex for a possibly multi-word phrase.

    'get started' -> \\bget\\s+started\\b (case-insensitive)
    """
    tokens = [re.escape(token) for token in phrase.strip().split()]
    return re.compile(r"\b" + r"\s+".join(tokens) + r"\b", re.IGNORECASE)


def contains_any_phrase(text: str, phrases: Iterable[str]) -> bool:
    """True if text contains any phrase as whole words."""
    return any(phrase_to_boundary_regex(phrase).search(text or "") for phrase in phrases)


def find_phrases(text: str, phrases: Iterable[str]) -> list:
    """Return the phrases that occur in text as whole words, in lexicon order."""
    return [phrase for phrase in phrases if phrase_to_boundary_regex(phrase).search(text or "")]
