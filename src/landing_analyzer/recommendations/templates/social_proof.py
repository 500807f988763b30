"""Social proof recommendations: credibility and trust signals."""

from landing_analyzer.recommendations.types import (
    RecommendationTemplate,
    ctx_bool,
    ctx_number,
)


def _testimonials(ctx):
    return ctx_number(ctx, "testimonialCount")


def _reviews(ctx):
    return ctx_number(ctx, "reviewCount")


def _badges(ctx):
    return ctx_number(ctx, "trustBadgeCount")


def _any_proof(ctx):
    return _testimonials(ctx) > 0 or _reviews(ctx) > 0 or _badges(ctx) > 0


SOCIAL_PROOF_TEMPLATES = [
    RecommendationTemplate(
        id="social-no-proof",
        category="social-proof",
        impact="High",
        condition=lambda ctx: not _any_proof(ctx),
        templates=[
            "Add social proof immediately. Pages with testimonials convert 34% better than those without.",
            "Missing all social proof elements. Add customer testimonials, reviews, or trust badges to build credibility.",
            "No social proof detected. Include at least one form: testimonials, customer logos, reviews, or usage stats.",
        ],
        affected_area="entire page",
    ),
    RecommendationTemplate(
        id="social-none-above-fold",
        category="social-proof",
        impact="High",
        condition=lambda ctx: not ctx_bool(ctx, "hasAboveFoldProof") and _any_proof(ctx),
        templates=[
            "Move social proof above the fold. Trust indicators visible without scrolling increase conversions.",
            "Add a testimonial or trust badge to the hero section. First impressions need credibility signals.",
            "Place customer logos or a key testimonial in the above-fold area to build immediate trust.",
        ],
        affected_area="hero section",
    ),
    RecommendationTemplate(
        id="social-no-testimonials",
        category="social-proof",
        impact="High",
        condition=lambda ctx: (
            _testimonials(ctx) == 0 and (_reviews(ctx) > 0 or _badges(ctx) > 0)
        ),
        templates=[
            "Add customer testimonials. Quotes from real customers are more persuasive than badges alone.",
            "Include 2-3 specific customer testimonials with names, titles, and companies.",
            "Missing testimonials. Collect and display quotes from satisfied customers for stronger social proof.",
        ],
        affected_area="testimonials section",
    ),
    RecommendationTemplate(
        id="social-improve-testimonials",
        category="social-proof",
        impact="Medium",
        condition=lambda ctx: 0 < _testimonials(ctx) < 3,
        templates=[
            "Add more testimonials. With {{testimonialCount}} testimonial(s), aim for 3-5 for credibility.",
            "Expand testimonial section from {{testimonialCount}} to at least 3 with specific results and outcomes.",
            "Strengthen social proof: {{testimonialCount}} testimonial(s) is a start, but 3+ creates stronger validation.",
        ],
    ),
    RecommendationTemplate(
        id="social-add-attribution",
        category="social-proof",
        impact="Medium",
        condition=lambda ctx: _testimonials(ctx) > 0,
        templates=[
            "Include full names, job titles, and company names with testimonials for authenticity.",
            "Add photos to testimonials. Faces increase trust and make quotes more believable.",
            "Verify testimonials include specific details: name, role, company, and ideally a photo.",
        ],
    ),
    RecommendationTemplate(
        id="social-add-trust-badges",
        category="social-proof",
        impact="Medium",
        condition=lambda ctx: (
            _badges(ctx) == 0 and (_testimonials(ctx) > 0 or _reviews(ctx) > 0)
        ),
        templates=[
            "Add trust badges: security seals, payment icons, or certification logos near CTAs.",
            'Include trust indicators like "Secure checkout", SSL badges, or industry certifications.',
            "Add credibility badges (awards, certifications, guarantees) to complement testimonials.",
        ],
        affected_area="near CTAs",
    ),
    RecommendationTemplate(
        id="social-add-customer-counts",
        category="social-proof",
        impact="Medium",
        condition=lambda ctx: _testimonials(ctx) > 0 or _badges(ctx) > 0,
        templates=[
            'Display customer counts or usage statistics: "Join 10,000+ customers" adds social validation.',
            'Add specific numbers: "Trusted by 500+ companies" or "1M+ downloads" provides scale evidence.',
            'Include a customer counter or "As seen in" logo strip to demonstrate market traction.',
        ],
    ),
    RecommendationTemplate(
        id="social-add-results",
        category="social-proof",
        impact="Medium",
        condition=lambda ctx: _testimonials(ctx) >= 2,
        templates=[
            'Include specific results in testimonials: "Increased conversions by 40%" is more persuasive than "Great product".',
            "Ask customers for measurable outcomes to quote. Specific numbers build stronger credibility.",
            "Feature case study snippets with concrete metrics alongside testimonials.",
        ],
    ),
    RecommendationTemplate(
        id="social-add-video",
        category="social-proof",
        impact="Low",
        condition=lambda ctx: _testimonials(ctx) >= 3,
        templates=[
            "Consider video testimonials for higher engagement. Video reviews are perceived as more authentic.",
            "Add 1-2 video testimonials. They often outperform text quotes for trust-building.",
        ],
    ),
    RecommendationTemplate(
        id="social-add-reviews",
        category="social-proof",
        impact="Low",
        condition=lambda ctx: _reviews(ctx) == 0 and _testimonials(ctx) > 0,
        templates=[
            "Integrate third-party reviews (G2, Capterra, Trustpilot). External reviews add independent validation.",
            "Embed reviews from platforms like Google, Yelp, or industry review sites for third-party credibility.",
        ],
    ),
    RecommendationTemplate(
        id="social-add-logos",
        category="social-proof",
        impact="Low",
        condition=lambda ctx: _testimonials(ctx) > 0 or _badges(ctx) > 0,
        templates=[
            "Add a customer logo strip to the hero section. Recognizable brands boost credibility instantly.",
            'Include "Trusted by" section with customer logos below the hero area.',
        ],
        affected_area="hero section",
    ),
]
