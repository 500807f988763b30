"""
Classification Dictionaries.

Static keyword and pattern tables consumed by the analyzers. Regex patterns
are stored as PatternDefinition(pattern, flags) so they can be reviewed and
tested as data.
"""

from .patterns import (
    PatternDefinition,
    matches_any,
    phrase_to_boundary_regex,
    contains_any_phrase,
    find_phrases,
)
from . import cta, fonts, social_proof

__all__ = [
    "PatternDefinition",
    "matches_any",
    "phrase_to_boundary_regex",
    "contains_any_phrase",
    "find_phrases",
    "cta",
    "fonts",
    "social_proof",
]
