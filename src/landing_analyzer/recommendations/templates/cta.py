"""CTA recommendations, focused on conversion."""

from landing_analyzer.recommendations.types import (
    RecommendationTemplate,
    ctx_bool,
    ctx_list,
    ctx_number,
)


CTA_TEMPLATES = [
    RecommendationTemplate(
        id="cta-no-primary",
        category="cta",
        impact="High",
        condition=lambda ctx: not ctx_bool(ctx, "primaryCtaDetected"),
        templates=[
            "Add a prominent primary CTA button. Visitors need a clear next step to convert.",
            "Create a standout primary CTA with contrasting color and compelling action text.",
            "Missing primary CTA. Add a visually distinct button that tells visitors exactly what to do next.",
        ],
        affected_area="hero section",
    ),
    RecommendationTemplate(
        id="cta-none-above-fold",
        category="cta",
        impact="High",
        condition=lambda ctx: ctx_number(ctx, "ctasAboveFold") == 0,
        templates=[
            "Place at least one CTA above the fold. Most visitors never scroll, so capture them immediately.",
            "Add a CTA visible without scrolling. Above-fold CTAs capture visitors before they bounce.",
            "No CTA visible on initial page load. Move your primary action into the hero section.",
        ],
        affected_area="above the fold",
    ),
    RecommendationTemplate(
        id="cta-weak-action-words",
        category="cta",
        impact="High",
        condition=lambda ctx: len(ctx_list(ctx, "weakActionWords")) > 0,
        templates=[
            'Replace weak CTA text with action verbs. Use "Start", "Get", "Join", or "Try" instead of generic labels.',
            'Strengthen CTA copy. Action-oriented text like "Start Free Trial" outperforms "Submit" or "Click Here".',
            'Upgrade CTA language from passive to active. "Get Started Now" converts better than "Learn More".',
        ],
    ),
    RecommendationTemplate(
        id="cta-none-found",
        category="cta",
        impact="High",
        condition=lambda ctx: ctx_number(ctx, "ctaCount") == 0,
        templates=[
            "Add call-to-action buttons. Without CTAs, visitors have no clear path to convert.",
            "Critical: No CTAs detected. Every landing page needs clear action buttons to drive conversions.",
        ],
        affected_area="entire page",
    ),
    RecommendationTemplate(
        id="cta-add-more",
        category="cta",
        impact="Medium",
        condition=lambda ctx: (
            ctx_number(ctx, "ctaCount") == 1 and ctx_bool(ctx, "primaryCtaDetected")
        ),
        templates=[
            "Add secondary CTAs throughout the page. Repeat your offer as visitors scroll through content.",
            "Include CTAs after each major section. Give visitors multiple opportunities to convert.",
            "Place additional CTAs at scroll milestones. One CTA limits conversion opportunities.",
        ],
    ),
    RecommendationTemplate(
        id="cta-improve-visibility",
        category="cta",
        impact="Medium",
        condition=lambda ctx: (
            ctx_bool(ctx, "primaryCtaDetected") and ctx_number(ctx, "ctasAboveFold") >= 1
        ),
        templates=[
            "Increase CTA button contrast. The primary action should be the most visually prominent element.",
            "Make CTAs stand out with larger size, bolder color, or added whitespace around them.",
            "Ensure CTA buttons have at least 3:1 contrast ratio against surrounding elements.",
        ],
        affected_area="CTA buttons",
    ),
    RecommendationTemplate(
        id="cta-add-value-prop",
        category="cta",
        impact="Medium",
        condition=lambda ctx: ctx_bool(ctx, "primaryCtaDetected"),
        templates=[
            'Add supporting text near your CTA explaining the benefit: "Start free trial - no credit card required".',
            'Include a micro-copy below CTAs addressing objections: "Cancel anytime" or "14-day free trial".',
            "Place benefit-focused text adjacent to CTAs to reduce friction and increase clicks.",
        ],
    ),
    RecommendationTemplate(
        id="cta-mobile-touch-targets",
        category="cta",
        impact="Medium",
        condition=lambda ctx: ctx_number(ctx, "ctaCount") > 0,
        templates=[
            "Ensure CTA buttons are at least 44x44 pixels for mobile tap targets.",
            "Increase CTA button padding to minimum 12px for comfortable mobile tapping.",
            "Verify CTA touch targets meet 48px minimum height on mobile devices.",
        ],
        affected_area="mobile CTAs",
    ),
    RecommendationTemplate(
        id="cta-personalize-copy",
        category="cta",
        impact="Low",
        condition=lambda ctx: ctx_number(ctx, "ctaCount") >= 2,
        templates=[
            'Test first-person CTA copy: "Start My Free Trial" often outperforms "Start Your Free Trial".',
            'Experiment with specific CTA text: "Get My Report" vs generic "Download Now".',
        ],
    ),
    RecommendationTemplate(
        id="cta-add-sticky",
        category="cta",
        impact="Low",
        condition=lambda ctx: ctx_number(ctx, "ctaCount") >= 1,
        templates=[
            "Consider a sticky header or floating CTA button to keep the action visible while scrolling.",
            "Add a persistent CTA that follows users as they scroll through longer content.",
        ],
    ),
]
