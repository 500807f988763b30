"""
Priority Insight

Ranks the six sections to find the single most important thing to fix, and
the top few fixes across sections.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

from landing_analyzer.constants import COLLAPSE_THRESHOLD, DEFAULT_TOP_FIXES
from landing_analyzer.impact_analyzer import categorize_content
from landing_analyzer.models import AnalysisResult, PriorityFix, PriorityInsight, SectionResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SectionInfo:
    key: str
    name: str
    anchor: str
    icon: str
    weight: int


# Weights: higher is more important to conversion
SECTIONS = (
    SectionInfo("cta", "CTA", "cta-section", "🎯", 25),
    SectionInfo("page_speed", "Page Speed", "speed-section", "⚡", 25),
    SectionInfo("social_proof", "Social Proof", "social-section", "⭐", 20),
    SectionInfo("whitespace", "Whitespace", "whitespace-section", "📐", 15),
    SectionInfo("images", "Images", "images-section", "🖼️", 10),
    SectionInfo("fonts", "Fonts", "fonts-section", "🔤", 5),
)

SectionsInput = Union[AnalysisResult, Mapping[str, Union[SectionResult, Dict[str, Any]]]]


@dataclass
class _RankedSection:
    info: SectionInfo
    score: int
    issues: List[str]
    recommendations: List[str]
    has_high_impact: bool


def get_impact_level(score: int) -> str:
    if score < 50:
        return "Critical"
    if score < 70:
        return "High"
    return "Medium"


def _section_fields(section: Union[SectionResult, Dict[str, Any]]):
    if isinstance(section, SectionResult):
        return section.score, section.issues, section.recommendations
    return section.get("score") or 0, section.get("issues") or [], section.get("recommendations") or []


def _lookup(result: SectionsInput) -> Dict[str, Any]:
    if isinstance(result, AnalysisResult):
        return result.sections()
    return dict(result or {})


def _rank_sections(result: SectionsInput, max_score: Optional[int] = None) -> List[_RankedSection]:
    """
    Sections sorted by score ascending, then sections with a High-impact
    issue first, then weight descending.
    """
    sections = _lookup(result)
    ranked = []
    for info in SECTIONS:
        section = sections.get(info.key)
        if section is None:
            continue
        score, issues, recommendations = _section_fields(section)
        if max_score is not None and score >= max_score:
            continue
        categorized = categorize_content(issues, [])["issues"]
        ranked.append(
            _RankedSection(
                info=info,
                score=score,
                issues=list(issues),
                recommendations=list(recommendations),
                has_high_impact=any(impact == "High" for _, impact in categorized),
            )
        )

    ranked.sort(key=lambda s: (s.score, not s.has_high_impact, -s.info.weight))
    return ranked


def get_primary_issue(issues: List[str]) -> str:
    """First High-impact issue, else the first issue after impact sorting."""
    if not issues:
        return ""
    categorized = categorize_content(issues, [])["issues"]
    for text, impact in categorized:
        if impact == "High":
            return text
    return categorized[0][0]


def get_primary_recommendation(recommendations: List[str]) -> str:
    if not recommendations:
        return ""
    categorized = categorize_content([], recommendations)["recommendations"]
    for text, impact in categorized:
        if impact == "High":
            return text
    return categorized[0][0]


def generate_priority_insight(result: SectionsInput) -> Optional[PriorityInsight]:
    """
    The one section to fix first.

    Args:
        result: AnalysisResult, or a mapping of section key to SectionResult
            or to a dict with score, issues and recommendations

    Returns:
        PriorityInsight, or None when no section is present
    """
    ranked = _rank_sections(result)
    if not ranked:
        return None

    top = ranked[0]
    primary_issue = get_primary_issue(top.issues) or (
        f"Your {top.info.name.lower()} score is {top.score}/100"
    )
    logger.debug(f"Priority section: {top.info.name} ({top.score})")

    return PriorityInsight(
        section_name=top.info.name,
        section_id=top.info.anchor,
        section_score=top.score,
        section_icon=top.info.icon,
        primary_issue=primary_issue,
        impact_level=get_impact_level(top.score),
    )


def get_top_priority_fixes(
    result: SectionsInput,
    limit: int = DEFAULT_TOP_FIXES,
    collapse_threshold: int = COLLAPSE_THRESHOLD,
) -> List[PriorityFix]:
    """Up to limit fixes in priority order, skipping sections at or above the collapse threshold."""
    fixes = []
    for section in _rank_sections(result, max_score=collapse_threshold)[:limit]:
        recommendation = (
            get_primary_recommendation(section.recommendations)
            or get_primary_issue(section.issues)
            or f"Improve your {section.info.name.lower()} score"
        )
        fixes.append(
            PriorityFix(
                section_name=section.info.name,
                section_id=section.info.anchor,
                section_score=section.score,
                section_icon=section.info.icon,
                recommendation=recommendation,
                severity=get_impact_level(section.score),
            )
        )
    return fixes
