"""Image optimization recommendations."""

from landing_analyzer.recommendations.types import RecommendationTemplate, ctx_number


IMAGE_TEMPLATES = [
    RecommendationTemplate(
        id="images-missing-alt",
        category="images",
        impact="High",
        condition=lambda ctx: ctx_number(ctx, "imagesWithoutAlt") > 0,
        templates=[
            "Add descriptive alt text to {{imagesWithoutAlt}} images. Screen readers need this for accessibility, and it improves SEO.",
            "Fix {{imagesWithoutAlt}} images missing alt attributes. This is a WCAG compliance issue affecting 15% of users.",
            "{{imagesWithoutAlt}} images lack alt text. Add descriptions that convey the image purpose for accessibility.",
        ],
        affected_area="images",
    ),
    RecommendationTemplate(
        id="images-many-missing-alt",
        category="images",
        impact="High",
        condition=lambda ctx: ctx_number(ctx, "imagesWithoutAlt") > 5,
        templates=[
            "Accessibility alert: {{imagesWithoutAlt}} images without alt text. Audit all images and add meaningful descriptions.",
            "Critical: {{imagesWithoutAlt}} images need alt attributes. This impacts both accessibility compliance and search rankings.",
        ],
    ),
    RecommendationTemplate(
        id="images-oversized",
        category="images",
        impact="High",
        condition=lambda ctx: ctx_number(ctx, "oversizedImages") > 0,
        templates=[
            "Resize {{oversizedImages}} oversized images to their display dimensions. Serving larger images than needed wastes bandwidth.",
            "Compress {{oversizedImages}} images that exceed their container size. This directly impacts page load speed.",
            "{{oversizedImages}} images are larger than displayed. Resize to actual dimensions to cut page weight.",
        ],
        affected_area="images",
    ),
    RecommendationTemplate(
        id="images-use-modern-formats",
        category="images",
        impact="High",
        condition=lambda ctx: ctx_number(ctx, "nonModernFormatCount") > 3,
        templates=[
            "Convert {{nonModernFormatCount}} images from JPG/PNG to WebP format. WebP provides 25-35% better compression.",
            "Switch {{nonModernFormatCount}} legacy format images to WebP or AVIF. Modern formats load significantly faster.",
            "Migrate {{nonModernFormatCount}} images to WebP. This single change can reduce image payload by 30%.",
        ],
        affected_area="images",
    ),
    RecommendationTemplate(
        id="images-consider-modern-formats",
        category="images",
        impact="Medium",
        condition=lambda ctx: 0 < ctx_number(ctx, "nonModernFormatCount") <= 3,
        templates=[
            "Convert remaining {{nonModernFormatCount}} JPG/PNG images to WebP for better compression.",
            "Use WebP format for {{nonModernFormatCount}} more images to optimize load time.",
        ],
    ),
    RecommendationTemplate(
        id="images-add-srcset",
        category="images",
        impact="Medium",
        condition=lambda ctx: ctx_number(ctx, "totalImages") > 3,
        templates=[
            "Add srcset and sizes attributes to serve appropriately sized images for each device.",
            "Implement responsive images with srcset to avoid loading desktop-sized images on mobile.",
            "Use srcset to provide multiple image resolutions. Mobile users should not download 2000px images.",
        ],
        affected_area="images",
    ),
    RecommendationTemplate(
        id="images-lazy-load",
        category="images",
        impact="Medium",
        condition=lambda ctx: ctx_number(ctx, "totalImages") > 5,
        templates=[
            'Add loading="lazy" to below-fold images. With {{totalImages}} images, lazy loading significantly improves initial load.',
            "Implement lazy loading for images below the fold. Only load what users will see first.",
            'Use native lazy loading (loading="lazy") for {{totalImages}} images to defer off-screen image loading.',
        ],
    ),
    RecommendationTemplate(
        id="images-blur-placeholder",
        category="images",
        impact="Low",
        condition=lambda ctx: ctx_number(ctx, "totalImages") > 3,
        templates=[
            "Add blur-up placeholders or dominant color backgrounds while images load.",
            "Use LQIP (Low Quality Image Placeholders) to improve perceived loading speed.",
        ],
    ),
    RecommendationTemplate(
        id="images-use-cdn",
        category="images",
        impact="Low",
        condition=lambda ctx: ctx_number(ctx, "totalImages") > 10,
        templates=[
            "Consider an image CDN (Cloudinary, imgix) to automatically optimize and serve images at optimal quality.",
            "With {{totalImages}} images, an image CDN can automate format selection, resizing, and compression.",
        ],
    ),
]
