"""Font usage recommendations."""

from landing_analyzer.recommendations.types import RecommendationTemplate, ctx_number


def _web(ctx):
    return ctx_number(ctx, "webFontCount")


def _system(ctx):
    return ctx_number(ctx, "systemFontCount")


FONT_TEMPLATES = [
    RecommendationTemplate(
        id="fonts-too-many-web",
        category="fonts",
        impact="High",
        condition=lambda ctx: _web(ctx) > 2,
        templates=[
            "Reduce web fonts from {{webFontCount}} to 2 or fewer. Each additional web font adds ~100-300ms to page load time.",
            "Cut web font count from {{webFontCount}} to maximum 2. Extra fonts block rendering and hurt conversions.",
            "Consolidate {{webFontCount}} web fonts down to 2. Users abandon pages that take too long to render text.",
        ],
        affected_area="typography",
    ),
    RecommendationTemplate(
        id="fonts-excessive-web",
        category="fonts",
        impact="High",
        condition=lambda ctx: _web(ctx) > 3,
        templates=[
            "Audit font usage immediately - {{webFontCount}} web fonts severely impacts performance. Target 1-2 fonts maximum.",
            "Font bloat detected: {{webFontCount}} web fonts. Prioritize reducing to 2 fonts to prevent visitor drop-off.",
        ],
    ),
    RecommendationTemplate(
        id="fonts-use-system-for-body",
        category="fonts",
        impact="Medium",
        condition=lambda ctx: 2 <= _web(ctx) <= 3,
        templates=[
            "Switch body text to system fonts (system-ui, -apple-system) and reserve web fonts for headings only.",
            "Use system font stack for paragraphs. Keep web fonts for brand elements and headlines.",
            "Replace body web font with system-ui stack. This maintains readability while cutting load time.",
        ],
        affected_area="body text",
    ),
    RecommendationTemplate(
        id="fonts-system-inconsistency",
        category="fonts",
        impact="Medium",
        condition=lambda ctx: _system(ctx) > 3 and _web(ctx) <= 2,
        templates=[
            "Standardize on fewer system fonts. {{systemFontCount}} different font stacks creates visual inconsistency.",
            "Reduce system font variety from {{systemFontCount}} to 2-3 for a more cohesive design.",
        ],
        affected_area="typography",
    ),
    RecommendationTemplate(
        id="fonts-too-many-system",
        category="fonts",
        impact="Medium",
        condition=lambda ctx: _system(ctx) > 5,
        templates=[
            "Consolidate {{systemFontCount}} system font declarations. Use CSS variables for consistent typography.",
            "Too many font-family declarations ({{systemFontCount}}). Create a typography scale with 2-3 base stacks.",
        ],
    ),
    RecommendationTemplate(
        id="fonts-use-weights",
        category="fonts",
        impact="Low",
        condition=lambda ctx: _web(ctx) > 0 or _system(ctx) > 2,
        templates=[
            "Create text hierarchy with font weights (400, 600, 700) rather than adding font families.",
            "Use font-weight variations instead of multiple families for visual distinction.",
            "Leverage font-weight and font-style for variety instead of loading additional typefaces.",
        ],
    ),
    RecommendationTemplate(
        id="fonts-preload",
        category="fonts",
        impact="Low",
        condition=lambda ctx: 0 < _web(ctx) <= 2,
        templates=[
            'Add <link rel="preload"> for web fonts to eliminate render-blocking delays.',
            "Preload web fonts in <head> with font-display: swap for faster text rendering.",
        ],
        affected_area="document head",
    ),
    RecommendationTemplate(
        id="fonts-fallbacks",
        category="fonts",
        impact="Low",
        condition=lambda ctx: _web(ctx) > 0,
        templates=[
            "Ensure web fonts have matching system font fallbacks to prevent layout shift during loading.",
            "Add size-adjusted fallback fonts to minimize Cumulative Layout Shift (CLS) from font swapping.",
        ],
    ),
]
