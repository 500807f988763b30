"""Whitespace and layout recommendations."""

from landing_analyzer.recommendations.types import RecommendationTemplate, ctx_number


def _ratio(ctx):
    return ctx_number(ctx, "whitespaceRatio")


def _density(ctx):
    return ctx_number(ctx, "contentDensity")


def _line_height(ctx):
    return ctx_number(ctx, "avgLineHeight")


WHITESPACE_TEMPLATES = [
    RecommendationTemplate(
        id="whitespace-severely-cluttered",
        category="whitespace",
        impact="High",
        condition=lambda ctx: _ratio(ctx) < 0.25,
        templates=[
            "Page is severely cluttered ({{whitespaceRatio}} whitespace ratio). Remove non-essential elements to improve focus.",
            "Only {{whitespaceRatio}} whitespace detected. Cluttered layouts overwhelm visitors - aim for 40%+ whitespace.",
            "Critical density issue: {{whitespaceRatio}} whitespace. Prioritize content and add breathing room between sections.",
        ],
        affected_area="page layout",
    ),
    RecommendationTemplate(
        id="whitespace-too-dense",
        category="whitespace",
        impact="High",
        condition=lambda ctx: 0.25 <= _ratio(ctx) < 0.35,
        templates=[
            "Increase whitespace from {{whitespaceRatio}} to at least 40%. Dense layouts reduce comprehension and conversions.",
            "Layout is too dense at {{whitespaceRatio}} whitespace. Add padding around sections and increase margins.",
        ],
    ),
    RecommendationTemplate(
        id="whitespace-poor-line-height",
        category="whitespace",
        impact="High",
        condition=lambda ctx: _line_height(ctx) < 1.3,
        templates=[
            "Line height of {{avgLineHeight}} is too tight. Increase to 1.5-1.6 for body text readability.",
            "Text is cramped with {{avgLineHeight}} line-height. Set body text to line-height: 1.5 minimum.",
        ],
        affected_area="body text",
    ),
    RecommendationTemplate(
        id="whitespace-moderate-density",
        category="whitespace",
        impact="Medium",
        condition=lambda ctx: 0.35 <= _ratio(ctx) < 0.4,
        templates=[
            "Whitespace ratio of {{whitespaceRatio}} is adequate but could improve. Target 40-50% for optimal readability.",
            "Add more whitespace around key elements. Current {{whitespaceRatio}} ratio is functional but dense.",
        ],
    ),
    RecommendationTemplate(
        id="whitespace-improve-line-height",
        category="whitespace",
        impact="Medium",
        condition=lambda ctx: 1.3 <= _line_height(ctx) < 1.4,
        templates=[
            "Increase line height from {{avgLineHeight}} to 1.5 for improved readability on paragraphs.",
            "Body text line-height of {{avgLineHeight}} is slightly tight. Set to 1.5-1.6 for comfortable reading.",
        ],
        affected_area="typography",
    ),
    RecommendationTemplate(
        id="whitespace-section-spacing",
        category="whitespace",
        impact="Medium",
        condition=lambda ctx: _density(ctx) > 0.6,
        templates=[
            "Add more vertical spacing between page sections. Use consistent padding (64px+) to create visual breathing room.",
            "Increase margins between content blocks. Clear section boundaries improve scanning and comprehension.",
            "Content sections are too close together. Add 48-80px vertical padding between major sections.",
        ],
        affected_area="section dividers",
    ),
    RecommendationTemplate(
        id="whitespace-headline-spacing",
        category="whitespace",
        impact="Medium",
        condition=lambda ctx: ctx_number(ctx, "clutterScore") > 50,
        templates=[
            "Increase whitespace around headlines. Add minimum 24px top margin and 16px bottom margin.",
            "Give headlines more breathing room. Adequate spacing improves visual hierarchy.",
        ],
        affected_area="headlines",
    ),
    RecommendationTemplate(
        id="whitespace-cta-spacing",
        category="whitespace",
        impact="Medium",
        condition=lambda ctx: _ratio(ctx) < 0.45 and _density(ctx) > 0.5,
        templates=[
            "Add more whitespace around CTA buttons (minimum 20px margins). Isolated CTAs draw more attention.",
            "Increase padding around call-to-action buttons. CTAs surrounded by whitespace get more clicks.",
        ],
        affected_area="CTA buttons",
    ),
    RecommendationTemplate(
        id="whitespace-content-width",
        category="whitespace",
        impact="Low",
        condition=lambda ctx: _density(ctx) > 0.4,
        templates=[
            "Limit paragraph width to 65-75 characters for optimal reading comfort.",
            "Consider a narrower content column. Wide text blocks are harder to read.",
        ],
        affected_area="content columns",
    ),
    RecommendationTemplate(
        id="whitespace-consistent-spacing",
        category="whitespace",
        impact="Low",
        condition=lambda ctx: _ratio(ctx) < 0.5,
        templates=[
            "Establish a consistent spacing scale (8px base unit). Use multiples for all margins and padding.",
            "Create a spacing system with defined values. Consistent spacing creates visual rhythm.",
        ],
    ),
]
