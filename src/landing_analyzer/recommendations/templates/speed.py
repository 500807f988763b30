"""Page speed recommendations, keyed to Core Web Vitals thresholds."""

from landing_analyzer.recommendations.types import RecommendationTemplate, ctx_number


def _metric(ctx, key):
    return ctx_number(ctx, key)


SPEED_TEMPLATES = [
    RecommendationTemplate(
        id="speed-poor-lcp",
        category="speed",
        impact="High",
        condition=lambda ctx: _metric(ctx, "lcp") > 4000,
        templates=[
            "Reduce Largest Contentful Paint from {{lcp}}ms to under 2500ms. Slow LCP causes 53% of visitors to abandon.",
            "LCP of {{lcp}}ms is critically slow. Optimize hero images, preload key resources, and reduce server response time.",
            "Fix {{lcp}}ms LCP immediately. Pages loading over 4s lose half their visitors before seeing content.",
        ],
        affected_area="largest content element",
    ),
    RecommendationTemplate(
        id="speed-improve-lcp",
        category="speed",
        impact="High",
        condition=lambda ctx: 2500 < _metric(ctx, "lcp") <= 4000,
        templates=[
            "Improve LCP from {{lcp}}ms to under 2500ms. Optimize your largest visible element (hero image or headline).",
            "LCP of {{lcp}}ms needs work. Preload hero images and inline critical CSS to hit the 2.5s target.",
        ],
        affected_area="hero section",
    ),
    RecommendationTemplate(
        id="speed-slow-fcp",
        category="speed",
        impact="High",
        condition=lambda ctx: _metric(ctx, "fcp") > 3000,
        templates=[
            "First Contentful Paint of {{fcp}}ms is too slow. Reduce render-blocking resources to show content faster.",
            "Cut FCP from {{fcp}}ms to under 1800ms. Inline critical CSS and defer non-essential scripts.",
        ],
        affected_area="initial render",
    ),
    RecommendationTemplate(
        id="speed-poor-cls",
        category="speed",
        impact="High",
        condition=lambda ctx: _metric(ctx, "cls") > 0.25,
        templates=[
            "Fix layout shift (CLS: {{cls}}). Set explicit dimensions on images and embeds to prevent content jumping.",
            "CLS of {{cls}} is poor. Reserve space for dynamic content to stop the page from shifting while loading.",
            "Layout instability ({{cls}} CLS) frustrates users. Add width/height to images and preload fonts.",
        ],
    ),
    RecommendationTemplate(
        id="speed-moderate-cls",
        category="speed",
        impact="Medium",
        condition=lambda ctx: 0.1 < _metric(ctx, "cls") <= 0.25,
        templates=[
            "Reduce layout shift from {{cls}} to under 0.1. Add aspect-ratio or explicit sizes to media elements.",
            "CLS of {{cls}} needs improvement. Identify and fix elements causing layout jumps during page load.",
        ],
    ),
    RecommendationTemplate(
        id="speed-slow-ttfb",
        category="speed",
        impact="High",
        condition=lambda ctx: _metric(ctx, "ttfb") > 800,
        templates=[
            "Server response time (TTFB) of {{ttfb}}ms is slow. Consider caching, CDN, or server optimization.",
            "TTFB of {{ttfb}}ms delays everything. Enable server-side caching and use a CDN for static assets.",
        ],
        affected_area="server response",
    ),
    RecommendationTemplate(
        id="speed-fcp-needs-work",
        category="speed",
        impact="Medium",
        condition=lambda ctx: 1800 < _metric(ctx, "fcp") <= 3000,
        templates=[
            "Improve FCP from {{fcp}}ms toward the 1800ms target. Move critical CSS inline and defer JavaScript.",
            "First paint at {{fcp}}ms can be faster. Eliminate render-blocking resources in the document head.",
        ],
    ),
    RecommendationTemplate(
        id="speed-optimize-resources",
        category="speed",
        impact="Medium",
        # A zero or missing score reads as 100 here
        condition=lambda ctx: 50 <= (_metric(ctx, "speedScore") or 100) < 90,
        templates=[
            "Enable text compression (gzip/brotli) for HTML, CSS, and JavaScript files.",
            "Minify and combine CSS/JS files to reduce the number of network requests.",
            "Set up browser caching with appropriate Cache-Control headers for static assets.",
        ],
    ),
    RecommendationTemplate(
        id="speed-optimize-images",
        category="speed",
        impact="Medium",
        condition=lambda ctx: _metric(ctx, "lcp") > 2000,
        templates=[
            "Optimize and compress images, especially the hero image that determines LCP.",
            "Convert images to WebP and add srcset for responsive loading to improve paint times.",
        ],
        affected_area="images",
    ),
    RecommendationTemplate(
        id="speed-fine-tune",
        category="speed",
        impact="Low",
        condition=lambda ctx: _metric(ctx, "speedScore") >= 90 and _metric(ctx, "lcp") > 1500,
        templates=[
            "Consider preconnecting to third-party origins to reduce connection setup time.",
            "Implement resource hints (preload, prefetch) for critical above-fold resources.",
        ],
    ),
    RecommendationTemplate(
        id="speed-preload-modules",
        category="speed",
        impact="Low",
        condition=lambda ctx: _metric(ctx, "speedScore") < 95,
        templates=[
            "Add modulepreload for critical JavaScript modules to improve script loading.",
            'Use <link rel="preload"> for fonts and critical images in the document head.',
        ],
        affected_area="document head",
    ),
]
