"""
Recommendation types.

Recommendations are grounded in measured page data, phrased as actions, and
drawn from several wordings per condition so repeated reports do not read
identically.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

IMPACT_LEVELS = ("High", "Medium", "Low")

CATEGORIES = ("fonts", "images", "cta", "speed", "whitespace", "social-proof")

# Named signals an analyzer computed, e.g. {"ctaCount": 3, "url": "..."}
RecommendationContext = Dict[str, Any]


def ctx_number(ctx: RecommendationContext, key: str, default: float = 0) -> float:
    """Numeric context value; missing or None reads as default."""
    value = ctx.get(key)
    if value is None:
        return default
    if isinstance(value, bool):
        return int(value)
    return value


def ctx_bool(ctx: RecommendationContext, key: str) -> bool:
    """Boolean context value; missing reads as False."""
    return bool(ctx.get(key, False))


def ctx_list(ctx: RecommendationContext, key: str) -> list:
    """List context value; missing or None reads as an empty list."""
    value = ctx.get(key)
    return list(value) if value else []


@dataclass
class RecommendationTemplate:
    """A recommendation rule with one or more wordings."""

    id: str
    category: str
    impact: str
    condition: Callable[[RecommendationContext], bool]
    templates: List[str]
    affected_area: Optional[str] = None

    def __post_init__(self):
        if not self.templates:
            raise ValueError(f"Recommendation template {self.id!r} has no wordings")
        if self.impact not in IMPACT_LEVELS:
            raise ValueError(f"Unknown impact {self.impact!r} for {self.id!r}")
        if self.category not in CATEGORIES:
            raise ValueError(f"Unknown category {self.category!r} for {self.id!r}")


@dataclass
class GeneratedRecommendation:
    """A rendered recommendation ready for display."""

    id: str
    text: str
    impact: str
    category: str
    affected_area: Optional[str] = None


@dataclass
class RecommendationOutput:
    recommendations: List[GeneratedRecommendation] = field(default_factory=list)
    legacy_strings: List[str] = field(default_factory=list)
