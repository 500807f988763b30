"""
Issue-Fix Pairer

Matches each issue to the recommendation that shares the most topic
keywords with it, so reports can show a problem next to its fix.
"""

from typing import Dict, List, Set

from landing_analyzer.constants import IMPACT_ORDER
from landing_analyzer.impact_analyzer import get_impact_from_text
from landing_analyzer.models import IssueFix

MATCHING_KEYWORDS = (
    # CTA
    "cta", "button", "call-to-action", "action", "click", "primary", "secondary",
    # Speed
    "load", "speed", "performance", "slow", "fast", "lcp", "fcp", "cls", "cache", "compress",
    # Images
    "image", "img", "alt", "webp", "avif", "jpeg", "png", "resize", "optimize", "lazy",
    # Fonts
    "font", "typeface", "typography", "text", "family", "weight",
    # Social proof
    "testimonial", "review", "rating", "trust", "badge", "social", "proof", "customer",
    # Whitespace
    "whitespace", "spacing", "clutter", "density", "margin", "padding", "layout",
    # General
    "above fold", "below fold", "mobile", "desktop", "accessibility", "contrast",
)


def extract_keywords(text: str) -> Set[str]:
    lower = text.lower()
    return {keyword for keyword in MATCHING_KEYWORDS if keyword in lower}


def match_score(issue_keywords: Set[str], fix_keywords: Set[str]) -> int:
    return len(issue_keywords & fix_keywords)


def pair_issues_with_fixes(
    issues: List[str] = None,
    recommendations: List[str] = None,
) -> List[IssueFix]:
    """
    Pair issues with their most relevant recommendation.

    A recommendation may fix several issues. Recommendations that matched no
    issue are appended as fix-only pairs. The result is sorted High, Medium,
    Low, keeping input order within a level.
    """
    issues = issues or []
    recommendations = recommendations or []
    fix_keywords = [extract_keywords(rec) for rec in recommendations]

    pairs: List[IssueFix] = []
    used = set()

    for issue in issues:
        issue_keywords = extract_keywords(issue)
        best_index, best_score = None, 0
        for index, keywords in enumerate(fix_keywords):
            score = match_score(issue_keywords, keywords)
            if score > best_score:
                best_index, best_score = index, score

        fix = None
        if best_index is not None:
            fix = recommendations[best_index]
            used.add(best_index)

        pairs.append(IssueFix(issue=issue, fix=fix, impact=get_impact_from_text(issue)))

    for index, rec in enumerate(recommendations):
        if index not in used:
            pairs.append(IssueFix(issue=None, fix=rec, impact=get_impact_from_text(rec)))

    return sorted(pairs, key=lambda pair: IMPACT_ORDER[pair.impact])


def group_pairs_by_impact(pairs: List[IssueFix]) -> Dict[str, List[IssueFix]]:
    grouped: Dict[str, List[IssueFix]] = {}
    for pair in pairs:
        grouped.setdefault(pair.impact, []).append(pair)
    return grouped
