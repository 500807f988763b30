"""
Image Optimization Analyzer

Inspects every rendered img element for alt text, delivery format and
whether its intrinsic size exceeds the box it is displayed in.
"""

import logging
import posixpath
from collections import Counter
from typing import Any, Dict, List
from urllib.parse import parse_qs, urlparse

from landing_analyzer.constants import (
    ALT_TEXT_PENALTY,
    FORMAT_PENALTY,
    MODERN_IMAGE_FORMATS,
    OPTIMIZED_IMAGE_FORMATS,
)
from landing_analyzer.models import ImageInfo, SectionResult
from landing_analyzer.recommendations import get_image_recommendations

logger = logging.getLogger(__name__)


IMAGES_SCRIPT = """
() => Array.from(document.querySelectorAll('img')).map(img => {
    const rect = img.getBoundingClientRect();
    return {
        src: img.currentSrc || img.src || img.getAttribute('src') || '',
        naturalWidth: img.naturalWidth || 0,
        naturalHeight: img.naturalHeight || 0,
        width: rect.width || 0,
        height: rect.height || 0,
        alt: img.getAttribute('alt') || '',
        loading: img.getAttribute('loading') || 'auto',
        hasSrcset: Boolean(img.getAttribute('srcset')),
        isAboveFold: rect.top < window.innerHeight && rect.top + rect.height > 0
    };
}).filter(img => img.src !== '')
"""

_FORMAT_ALIASES = {"jpe": "jpeg", "jfif": "jpeg", "svgz": "svg"}


def detect_image_format(src: str) -> str:
    """
    Infer an image format from its URL.

    The path extension wins (query strings ignored), then a format= or fm=
    query parameter as used by image CDNs. Anything else is "unknown".
    """
    if not src:
        return "unknown"
    if src.startswith("data:image/"):
        subtype = src[len("data:image/"):].split(";", 1)[0].split(",", 1)[0]
        return subtype.lower().replace("svg+xml", "svg") or "unknown"

    parsed = urlparse(src)
    extension = posixpath.splitext(parsed.path)[1].lstrip(".").lower()
    if extension and extension.isalnum():
        return _FORMAT_ALIASES.get(extension, extension)

    query = parse_qs(parsed.query)
    for key in ("format", "fm"):
        if query.get(key):
            return query[key][0].lower()

    return "unknown"


def to_image_info(raw: Dict[str, Any]) -> ImageInfo:
    src = raw.get("src") or ""
    return ImageInfo(
        src=src,
        format=detect_image_format(src),
        natural_width=int(raw.get("naturalWidth") or 0),
        natural_height=int(raw.get("naturalHeight") or 0),
        rendered_width=float(raw.get("width") or 0),
        rendered_height=float(raw.get("height") or 0),
        alt=(raw.get("alt") or "").strip(),
    )


def calculate_image_score(images: List[ImageInfo]) -> int:
    missing_alt = sum(1 for image in images if not image.alt)
    unoptimized = sum(1 for image in images if image.format not in OPTIMIZED_IMAGE_FORMATS)
    return max(0, 100 - ALT_TEXT_PENALTY * missing_alt - FORMAT_PENALTY * unoptimized)


def image_issues(images: List[ImageInfo]) -> List[str]:
    issues = []
    for image in images:
        if not image.alt:
            issues.append(f"Missing alt text for image: {image.src}")
        if image.format not in OPTIMIZED_IMAGE_FORMATS:
            issues.append(f"Unoptimized format for image: {image.src}")

    oversized = sum(1 for image in images if image.is_oversized)
    if oversized:
        issues.append(
            f"{oversized} images are served larger than their displayed size"
        )
    return issues


class ImageAnalyzer:
    """Image optimization analysis on a loaded page."""

    async def collect(self, page) -> List[Dict[str, Any]]:
        return await page.evaluate(IMAGES_SCRIPT) or []

    def evaluate(self, raw_images: List[Dict[str, Any]], url: str = "") -> SectionResult:
        images = [to_image_info(raw) for raw in raw_images]
        formats = Counter(image.format for image in images)

        context = {
            "totalImages": len(images),
            "imagesWithoutAlt": sum(1 for image in images if not image.alt),
            "nonModernFormatCount": sum(
                1 for image in images if image.format not in MODERN_IMAGE_FORMATS
            ),
            "oversizedImages": sum(1 for image in images if image.is_oversized),
            "imageFormats": sorted(formats),
            "url": url,
        }

        return SectionResult(
            score=calculate_image_score(images),
            issues=image_issues(images),
            recommendations=get_image_recommendations(context).legacy_strings,
            metrics={
                "images": [image.to_dict() for image in images],
                "format_breakdown": dict(formats),
                "lazy_loaded": sum(1 for raw in raw_images if raw.get("loading") == "lazy"),
                "responsive": sum(1 for raw in raw_images if raw.get("hasSrcset")),
                "context": context,
            },
        )

    async def analyze(self, page, url: str = "") -> SectionResult:
        raw_images = await self.collect(page)
        logger.info(f"Found {len(raw_images)} images to analyze")
        return self.evaluate(raw_images, url)
