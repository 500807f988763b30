"""
Recommendation Generator

Turns a template registry and an analysis context into rendered
recommendations:
- condition evaluation per template
- deterministic wording selection per (url, template)
- {{name}} interpolation from the context
"""

import logging
import re
from typing import Dict, Iterable, List

from landing_analyzer.constants import IMPACT_ORDER
from landing_analyzer.recommendations.types import (
    GeneratedRecommendation,
    RecommendationContext,
    RecommendationOutput,
    RecommendationTemplate,
)

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")

# 32-bit FNV-1a
FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619


def fnv1a_32(text: str) -> int:
    """32-bit FNV-1a hash of the UTF-8 bytes of text."""
    value = FNV_OFFSET_BASIS
    for byte in text.encode("utf-8"):
        value ^= byte
        value = (value * FNV_PRIME) & 0xFFFFFFFF
    return value


def select_variant(variants: List[str], url: str, template_id: str) -> str:
    """Pick a wording that is stable for the same url and template."""
    if len(variants) == 1:
        return variants[0]
    index = fnv1a_32((url or "") + template_id) % len(variants)
    return variants[index]


def _format_value(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return f"{value:.2f}"
    if isinstance(value, (list, tuple)):
        return ", ".join(str(item) for item in value)
    return str(value)


def interpolate(template: str, ctx: RecommendationContext) -> str:
    """Replace {{name}} with the context value; missing names render as 0."""
    def replace(match):
        value = ctx.get(match.group(1))
        if value is None:
            return "0"
        return _format_value(value)

    return _PLACEHOLDER.sub(replace, template)


def _condition_holds(template: RecommendationTemplate, ctx: RecommendationContext) -> bool:
    try:
        return bool(template.condition(ctx))
    except Exception as e:
        logger.debug(f"Condition for {template.id} raised {type(e).__name__}: {e}")
        return False


def generate_recommendations(
    templates: Iterable[RecommendationTemplate],
    ctx: RecommendationContext,
) -> RecommendationOutput:
    """
    Generate recommendations from a registry of templates.

    Args:
        templates: Templates to evaluate, in registry order
        ctx: Analysis context used by conditions and interpolation

    Returns:
        RecommendationOutput sorted High, Medium, Low (stable within a level)
    """
    url = ctx.get("url") or ""
    recommendations = []

    for template in templates:
        if not _condition_holds(template, ctx):
            continue

        text = interpolate(select_variant(template.templates, url, template.id), ctx)
        recommendations.append(GeneratedRecommendation(
            id=template.id,
            text=text,
            impact=template.impact,
            category=template.category,
            affected_area=template.affected_area,
        ))

    recommendations.sort(key=lambda rec: IMPACT_ORDER[rec.impact])

    return RecommendationOutput(
        recommendations=recommendations,
        legacy_strings=[rec.text for rec in recommendations],
    )


def generate_category_recommendations(
    templates: Iterable[RecommendationTemplate],
    ctx: RecommendationContext,
    category: str,
) -> RecommendationOutput:
    """Generate recommendations using only the templates of one category."""
    return generate_recommendations(
        [template for template in templates if template.category == category], ctx
    )


def group_by_impact(
    recommendations: Iterable[GeneratedRecommendation],
) -> Dict[str, List[GeneratedRecommendation]]:
    """Group recommendations by impact level, keeping their order."""
    grouped: Dict[str, List[GeneratedRecommendation]] = {}
    for rec in recommendations:
        grouped.setdefault(rec.impact, []).append(rec)
    return grouped
