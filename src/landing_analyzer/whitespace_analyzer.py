"""
Whitespace Analyzer

Measures how crowded the first viewport is: element density, a per-cell
density grid, visible whitespace after overlapping content is merged,
spacing around headlines, CTAs and content blocks, and line height.

The section score comes from element density alone. The remaining
measurements drive issues and the severity of the recommendations.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from landing_analyzer.config import ScoringThresholds, default_thresholds
from landing_analyzer.constants import (
    CONTENT_DENSITY_DIVISOR,
    DEFAULT_LINE_HEIGHT,
    DENSITY_ADJUSTMENTS,
    DENSITY_AREA_UNIT,
)
from landing_analyzer.models import SectionResult
from landing_analyzer.recommendations import get_whitespace_recommendations

logger = logging.getLogger(__name__)


# One pass over the viewport; args carries the grid size
WHITESPACE_SCRIPT = """
(args) => {
    const viewportWidth = window.innerWidth;
    const viewportHeight = window.innerHeight;
    const skipped = ['html', 'body', 'head', 'script', 'style', 'meta', 'link', 'title'];
    const media = ['img', 'video', 'canvas', 'svg', 'button', 'input', 'iframe'];

    const visible = Array.from(document.querySelectorAll('*')).filter(el => {
        const rect = el.getBoundingClientRect();
        return rect.width > 0 && rect.height > 0 && rect.top >= 0 && rect.top < viewportHeight;
    });

    const cellWidth = viewportWidth / args.columns;
    const cellHeight = viewportHeight / args.rows;
    const grid = new Array(args.columns * args.rows).fill(0);
    visible.forEach(el => {
        const rect = el.getBoundingClientRect();
        const col = Math.floor((rect.left + rect.width / 2) / cellWidth);
        const row = Math.floor((rect.top + rect.height / 2) / cellHeight);
        if (col >= 0 && col < args.columns && row >= 0 && row < args.rows) {
            grid[row * args.columns + col] += 1;
        }
    });

    const contentRects = [];
    visible.forEach(el => {
        const tag = el.tagName.toLowerCase();
        if (skipped.includes(tag)) return;
        const rect = el.getBoundingClientRect();
        const text = (el.textContent || '').trim();
        const isLargeContainer = rect.width / viewportWidth > 0.8 && rect.height / viewportHeight > 0.5;
        if (isLargeContainer && !text) return;
        const isMedia = media.includes(tag);
        const hasText = text.length > 3;
        if (!(hasText || isMedia) || rect.width <= 10 || rect.height <= 10) return;
        contentRects.push({
            x: rect.left,
            y: rect.top,
            width: rect.width,
            height: rect.height,
            textLength: isMedia ? 0 : text.length
        });
    });

    const parentSpacing = (el) => {
        const parent = el.parentElement;
        const style = parent ? window.getComputedStyle(parent) : null;
        return {
            gap: style ? (parseFloat(style.rowGap || style.gap) || 0) : 0,
            padTop: style ? (parseFloat(style.paddingTop) || 0) : 0,
            padBottom: style ? (parseFloat(style.paddingBottom) || 0) : 0
        };
    };

    const average = (values) => values.length ? values.reduce((a, b) => a + b, 0) / values.length : 0;

    const headlineTops = [];
    const headlineBottoms = [];
    document.querySelectorAll('h1, h2, h3, h4, h5, h6').forEach(el => {
        const style = window.getComputedStyle(el);
        const p = parentSpacing(el);
        const top = (parseFloat(style.marginTop) || 0) + p.gap * 0.5 + p.padTop * 0.5;
        const bottom = (parseFloat(style.marginBottom) || 0) + p.gap * 0.5 + p.padBottom * 0.5;
        if (top > 0 || bottom > 0) {
            headlineTops.push(top);
            headlineBottoms.push(bottom);
        }
    });

    const ctaTops = [];
    const ctaBottoms = [];
    document.querySelectorAll('button, [class*="cta"], [class*="btn"], input[type="submit"]').forEach(el => {
        const style = window.getComputedStyle(el);
        const p = parentSpacing(el);
        ctaTops.push((parseFloat(style.marginTop) || 0) + p.gap * 0.5 + p.padTop * 0.5);
        ctaBottoms.push((parseFloat(style.marginBottom) || 0) + p.gap * 0.5 + p.padBottom * 0.5);
    });

    const blockSpacing = [];
    document.querySelectorAll('div, section, article, p').forEach(el => {
        const style = window.getComputedStyle(el);
        const p = parentSpacing(el);
        const effective = (parseFloat(style.marginBottom) || 0) + p.gap + (parseFloat(style.paddingBottom) || 0) * 0.5;
        if (effective > 0) blockSpacing.push(effective);
    });

    const lineHeights = [];
    document.querySelectorAll('p, div, span, li, td, th').forEach(el => {
        if (!el.textContent || el.textContent.trim().length <= 20) return;
        const style = window.getComputedStyle(el);
        const fontSize = parseFloat(style.fontSize) || 16;
        if (style.lineHeight === 'normal') {
            lineHeights.push(1.2);
        } else if (style.lineHeight.includes('px')) {
            lineHeights.push(parseFloat(style.lineHeight) / fontSize);
        } else {
            lineHeights.push(parseFloat(style.lineHeight) || 1.2);
        }
    });

    return {
        viewportWidth: viewportWidth,
        viewportHeight: viewportHeight,
        totalElements: visible.length,
        gridDensity: grid,
        contentRects: contentRects,
        headlineSpacing: {top: average(headlineTops), bottom: average(headlineBottoms)},
        ctaSpacing: {top: average(ctaTops), bottom: average(ctaBottoms)},
        contentBlockSpacing: average(blockSpacing),
        lineHeights: lineHeights
    };
}
"""

ESTIMATED_CHARS_PER_LINE = 80
ESTIMATED_LINE_PX = 20


@dataclass
class SpacingAdequacy:
    headline: bool = False
    cta: bool = False
    content_block: bool = False
    line_height: bool = False

    def to_dict(self) -> Dict[str, bool]:
        return {
            "headline": self.headline,
            "cta": self.cta,
            "content_block": self.content_block,
            "line_height": self.line_height,
        }


@dataclass
class WhitespaceMetrics:
    """Derived whitespace measurements for one viewport."""

    element_density: float = 0.0
    whitespace_ratio: float = 0.0
    grid_density: List[int] = field(default_factory=list)
    content_density: float = 0.0
    avg_line_height: float = DEFAULT_LINE_HEIGHT
    spacing: SpacingAdequacy = field(default_factory=SpacingAdequacy)
    clutter_score: int = 0

    @property
    def max_grid_density(self) -> int:
        return max(self.grid_density) if self.grid_density else 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "element_density": self.element_density,
            "whitespace_ratio": self.whitespace_ratio,
            "grid_density": self.grid_density,
            "max_grid_density": self.max_grid_density,
            "content_density": self.content_density,
            "avg_line_height": self.avg_line_height,
            "spacing": self.spacing.to_dict(),
            "clutter_score": self.clutter_score,
        }


def element_density(total_elements: int, viewport_width: float, viewport_height: float) -> float:
    """Elements per 10,000 px² of viewport."""
    units = (viewport_width * viewport_height) / DENSITY_AREA_UNIT
    if units <= 0:
        return 0.0
    return total_elements / units


def density_adjustment(density: float) -> int:
    for threshold, adjustment in DENSITY_ADJUSTMENTS:
        if density > threshold:
            return adjustment
    return 0


def calculate_whitespace_score(density: float) -> int:
    return max(0, min(100, 100 + density_adjustment(density)))


def content_rect(raw: Dict[str, Any]) -> Dict[str, float]:
    """
    Normalize a raw rect. Text blocks are shortened to an estimated rendered
    height of ceil(len / 80) lines of 20px, capped at the box height.
    """
    width = float(raw.get("width") or 0)
    height = float(raw.get("height") or 0)
    text_length = raw.get("textLength") or 0
    if text_length:
        lines = math.ceil(text_length / ESTIMATED_CHARS_PER_LINE)
        height = min(height, lines * ESTIMATED_LINE_PX)
    return {
        "x": float(raw.get("x") or 0),
        "y": float(raw.get("y") or 0),
        "width": width,
        "height": height,
        "area": width * height,
    }


def _overlap(a: Dict[str, float], b: Dict[str, float]) -> float:
    overlap_x = max(0.0, min(a["x"] + a["width"], b["x"] + b["width"]) - max(a["x"], b["x"]))
    overlap_y = max(0.0, min(a["y"] + a["height"], b["y"] + b["height"]) - max(a["y"], b["y"]))
    return overlap_x * overlap_y


def whitespace_ratio(rects: List[Dict[str, float]], viewport_area: float) -> float:
    """
    Share of the viewport not covered by content.

    Rects are processed largest first; each contributes its area minus its
    overlap with rects already counted.
    """
    if viewport_area <= 0:
        return 0.0

    content_area = 0.0
    processed: List[Dict[str, float]] = []
    for rect in sorted(rects, key=lambda r: r["area"], reverse=True):
        overlap = sum(_overlap(rect, other) for other in processed)
        content_area += max(0.0, rect["area"] - overlap)
        processed.append(rect)

    return round(max(0.0, viewport_area - content_area) / viewport_area, 4)


def average_line_height(values: List[float]) -> float:
    kept = [value for value in values if 0.8 < value < 3]
    if not kept:
        return DEFAULT_LINE_HEIGHT
    return sum(kept) / len(kept)


def assess_spacing(raw: Dict[str, Any], avg_line_height: float) -> SpacingAdequacy:
    headline = raw.get("headlineSpacing") or {}
    cta = raw.get("ctaSpacing") or {}
    return SpacingAdequacy(
        headline=headline.get("top", 0) >= 16 and headline.get("bottom", 0) >= 12,
        cta=cta.get("top", 0) >= 20 and cta.get("bottom", 0) >= 20,
        content_block=(raw.get("contentBlockSpacing") or 0) >= 16,
        line_height=avg_line_height >= 1.4,
    )


def calculate_clutter_score(ratio: float, max_density: int, spacing: SpacingAdequacy) -> int:
    """Higher is more cluttered, 0-100."""
    clutter = 0

    if ratio < 0.25:
        clutter += 60
    elif ratio < 0.35:
        clutter += 40
    elif ratio < 0.45:
        clutter += 20
    elif ratio < 0.55:
        clutter += 5

    if max_density > 50:
        clutter += 25
    elif max_density > 30:
        clutter += 15
    elif max_density > 20:
        clutter += 8

    if not spacing.headline:
        clutter += 4
    if not spacing.cta:
        clutter += 5
    if not spacing.content_block:
        clutter += 3
    if not spacing.line_height:
        clutter += 3

    return max(0, min(100, clutter))


def compute_metrics(raw: Dict[str, Any]) -> WhitespaceMetrics:
    width = raw.get("viewportWidth") or 0
    height = raw.get("viewportHeight") or 0
    grid = [int(count) for count in raw.get("gridDensity") or []]
    rects = [content_rect(r) for r in raw.get("contentRects") or []]

    line_height = average_line_height(raw.get("lineHeights") or [])
    spacing = assess_spacing(raw, line_height)
    ratio = whitespace_ratio(rects, width * height)
    average_grid = sum(grid) / len(grid) if grid else 0.0

    metrics = WhitespaceMetrics(
        element_density=element_density(raw.get("totalElements") or 0, width, height),
        whitespace_ratio=ratio,
        grid_density=grid,
        content_density=average_grid / CONTENT_DENSITY_DIVISOR,
        avg_line_height=line_height,
        spacing=spacing,
    )
    metrics.clutter_score = calculate_clutter_score(ratio, metrics.max_grid_density, spacing)
    return metrics


def whitespace_issues(metrics: WhitespaceMetrics, dense_threshold: float = 3.0) -> List[str]:
    issues = []

    if metrics.element_density > dense_threshold:
        issues.append(
            f"High element density ({metrics.element_density:.1f} elements per 10,000px²)"
        )

    if metrics.clutter_score > 70:
        issues.append("Page layout appears cluttered")
    elif metrics.clutter_score > 50:
        issues.append("Page layout shows signs of clutter")

    if not metrics.spacing.headline:
        issues.append("Insufficient spacing around headlines")
    if not metrics.spacing.cta:
        issues.append("CTA elements lack adequate spacing")
    if not metrics.spacing.content_block:
        issues.append("Insufficient spacing between content blocks")
    if not metrics.spacing.line_height:
        issues.append("Line height too tight for optimal readability")

    percent = round(metrics.whitespace_ratio * 100)
    if metrics.whitespace_ratio < 0.25:
        issues.append(f"Very low whitespace ratio ({percent}%)")
    elif metrics.whitespace_ratio < 0.35:
        issues.append(f"Low whitespace ratio ({percent}%)")
    elif metrics.whitespace_ratio < 0.4:
        issues.append(f"Moderate whitespace ratio ({percent}%)")

    return issues


class WhitespaceAnalyzer:
    """Layout whitespace analysis on a loaded page."""

    def __init__(self, thresholds: Optional[ScoringThresholds] = None):
        self.thresholds = thresholds or default_thresholds

    async def collect(self, page, grid_columns: Optional[int] = None, grid_rows: Optional[int] = None) -> Dict[str, Any]:
        args = {
            "columns": grid_columns or self.thresholds.whitespace_grid_columns,
            "rows": grid_rows or self.thresholds.whitespace_grid_rows,
        }
        return await page.evaluate(WHITESPACE_SCRIPT, args) or {}

    def evaluate(self, raw: Dict[str, Any], url: str = "") -> SectionResult:
        metrics = compute_metrics(raw)

        context = {
            "whitespaceRatio": metrics.whitespace_ratio,
            "contentDensity": metrics.content_density,
            "avgLineHeight": metrics.avg_line_height,
            "clutterScore": metrics.clutter_score,
            "elementDensity": metrics.element_density,
            "url": url,
        }

        logger.info(
            f"Whitespace: density {metrics.element_density:.2f}, "
            f"ratio {metrics.whitespace_ratio}, clutter {metrics.clutter_score}"
        )

        return SectionResult(
            score=calculate_whitespace_score(metrics.element_density),
            issues=whitespace_issues(metrics, self.thresholds.whitespace_dense_threshold),
            recommendations=get_whitespace_recommendations(context).legacy_strings,
            metrics={**metrics.to_dict(), "context": context},
        )

    async def analyze(self, page, url: str = "") -> SectionResult:
        raw = await self.collect(page)
        return self.evaluate(raw, url)
