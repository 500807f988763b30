"""Keyword-based impact categorization for issue and recommendation text."""

from typing import Dict, List, Tuple

from landing_analyzer.constants import IMPACT_ORDER

HIGH_IMPACT_KEYWORDS = (
    "slow", "loading", "speed", "performance", "critical", "major", "significant",
    "conversion", "cta", "call-to-action", "above fold", "primary", "user experience",
    "accessibility", "mobile", "responsive", "broken", "error", "failed",
    "social proof", "trust", "credibility", "testimonial", "review",
)

MEDIUM_IMPACT_KEYWORDS = (
    "optimize", "improve", "enhance", "reduce", "compress", "minify",
    "font", "image", "alt text", "spacing", "whitespace", "layout",
    "consistency", "modern", "format", "webp", "avif",
)

LOW_IMPACT_KEYWORDS = (
    "consider", "minor", "small", "slight", "optional", "nice to have",
    "polish", "refinement", "tweak", "adjustment",
)

# (text, impact)
CategorizedItem = Tuple[str, str]


def _contains_any(text: str, keywords) -> bool:
    lower = text.lower()
    return any(keyword in lower for keyword in keywords)


def categorize_by_impact(text: str) -> str:
    """High, Medium or Low by keyword; text with no signal is Medium."""
    if _contains_any(text, HIGH_IMPACT_KEYWORDS):
        return "High"
    if _contains_any(text, MEDIUM_IMPACT_KEYWORDS):
        return "Medium"
    if _contains_any(text, LOW_IMPACT_KEYWORDS):
        return "Low"
    return "Medium"


def get_impact_from_text(text: str) -> str:
    """Like categorize_by_impact, but text with no signal is Low."""
    if _contains_any(text, HIGH_IMPACT_KEYWORDS):
        return "High"
    if _contains_any(text, MEDIUM_IMPACT_KEYWORDS):
        return "Medium"
    return "Low"


def _sorted_by_impact(items: List[CategorizedItem]) -> List[CategorizedItem]:
    return sorted(items, key=lambda item: IMPACT_ORDER[item[1]])


def categorize_content(
    issues: List[str] = None,
    recommendations: List[str] = None,
) -> Dict[str, List[CategorizedItem]]:
    """
    Tag each issue and recommendation with its impact.

    Returns:
        {"issues": [...], "recommendations": [...]}, each a list of
        (text, impact) sorted High, Medium, Low with input order kept
        within a level
    """
    return {
        "issues": _sorted_by_impact([(text, categorize_by_impact(text)) for text in issues or []]),
        "recommendations": _sorted_by_impact(
            [(text, categorize_by_impact(text)) for text in recommendations or []]
        ),
    }


def group_by_impact(items: List[CategorizedItem]) -> Dict[str, List[str]]:
    grouped: Dict[str, List[str]] = {}
    for text, impact in items:
        grouped.setdefault(impact, []).append(text)
    return grouped
