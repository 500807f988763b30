"""
Recommendations System

Context-aware, action-oriented recommendations for every analysis dimension.
Impact levels are declared on each template rather than inferred from text,
and several wordings per rule keep reports from reading identically.
"""

from landing_analyzer.recommendations.types import (
    CATEGORIES,
    IMPACT_LEVELS,
    GeneratedRecommendation,
    RecommendationContext,
    RecommendationOutput,
    RecommendationTemplate,
    ctx_bool,
    ctx_list,
    ctx_number,
)
from landing_analyzer.recommendations.generator import (
    fnv1a_32,
    generate_category_recommendations,
    generate_recommendations,
    group_by_impact,
    interpolate,
    select_variant,
)
from landing_analyzer.recommendations.templates import (
    CTA_TEMPLATES,
    FONT_TEMPLATES,
    IMAGE_TEMPLATES,
    SOCIAL_PROOF_TEMPLATES,
    SPEED_TEMPLATES,
    WHITESPACE_TEMPLATES,
)

# Complete registry, in report order
ALL_TEMPLATES = [
    *FONT_TEMPLATES,
    *IMAGE_TEMPLATES,
    *CTA_TEMPLATES,
    *SPEED_TEMPLATES,
    *WHITESPACE_TEMPLATES,
    *SOCIAL_PROOF_TEMPLATES,
]


def get_font_recommendations(ctx: RecommendationContext) -> RecommendationOutput:
    return generate_category_recommendations(ALL_TEMPLATES, ctx, "fonts")


def get_image_recommendations(ctx: RecommendationContext) -> RecommendationOutput:
    return generate_category_recommendations(ALL_TEMPLATES, ctx, "images")


def get_cta_recommendations(ctx: RecommendationContext) -> RecommendationOutput:
    return generate_category_recommendations(ALL_TEMPLATES, ctx, "cta")


def get_speed_recommendations(ctx: RecommendationContext) -> RecommendationOutput:
    return generate_category_recommendations(ALL_TEMPLATES, ctx, "speed")


def get_whitespace_recommendations(ctx: RecommendationContext) -> RecommendationOutput:
    return generate_category_recommendations(ALL_TEMPLATES, ctx, "whitespace")


def get_social_proof_recommendations(ctx: RecommendationContext) -> RecommendationOutput:
    return generate_category_recommendations(ALL_TEMPLATES, ctx, "social-proof")


def get_all_recommendations(ctx: RecommendationContext) -> RecommendationOutput:
    """Evaluate every template across all categories."""
    return generate_recommendations(ALL_TEMPLATES, ctx)


__all__ = [
    "ALL_TEMPLATES",
    "CATEGORIES",
    "IMPACT_LEVELS",
    "CTA_TEMPLATES",
    "FONT_TEMPLATES",
    "IMAGE_TEMPLATES",
    "SOCIAL_PROOF_TEMPLATES",
    "SPEED_TEMPLATES",
    "WHITESPACE_TEMPLATES",
    "GeneratedRecommendation",
    "RecommendationContext",
    "RecommendationOutput",
    "RecommendationTemplate",
    "ctx_bool",
    "ctx_list",
    "ctx_number",
    "fnv1a_32",
    "generate_category_recommendations",
    "generate_recommendations",
    "group_by_impact",
    "interpolate",
    "select_variant",
    "get_font_recommendations",
    "get_image_recommendations",
    "get_cta_recommendations",
    "get_speed_recommendations",
    "get_whitespace_recommendations",
    "get_social_proof_recommendations",
    "get_all_recommendations",
]
