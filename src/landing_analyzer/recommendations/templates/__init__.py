"""Recommendation template tables, one module per analysis dimension."""

from landing_analyzer.recommendations.templates.cta import CTA_TEMPLATES
from landing_analyzer.recommendations.templates.fonts import FONT_TEMPLATES
from landing_analyzer.recommendations.templates.images import IMAGE_TEMPLATES
from landing_analyzer.recommendations.templates.social_proof import SOCIAL_PROOF_TEMPLATES
from landing_analyzer.recommendations.templates.speed import SPEED_TEMPLATES
from landing_analyzer.recommendations.templates.whitespace import WHITESPACE_TEMPLATES

__all__ = [
    "CTA_TEMPLATES",
    "FONT_TEMPLATES",
    "IMAGE_TEMPLATES",
    "SOCIAL_PROOF_TEMPLATES",
    "SPEED_TEMPLATES",
    "WHITESPACE_TEMPLATES",
]
