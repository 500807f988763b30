"""
Social Proof Analyzer

Detects testimonials, reviews, ratings, trust badges, customer counts,
social media signals, certifications, partner logos, case studies and press
mentions.

The page script sweeps typed selector groups, then a second text sweep, and
returns raw candidates together with any JSON-LD blocks. Classification,
boilerplate filtering, credibility scoring and de-duplication happen here.
"""

import json
import logging
import re
from typing import Any, Dict, Iterable, List, Optional

from landing_analyzer.constants import (
    DEFAULT_VIEWPORT,
    MAX_SOCIAL_PROOF_TEXT_LENGTH,
    SOCIAL_PROOF_POINTS_PER_ELEMENT,
)
from landing_analyzer.dictionaries.patterns import matches_any
from landing_analyzer.dictionaries.social_proof import (
    ACCESSIBILITY_ATTRIBUTES,
    ADDITIONAL_TEXT_TAGS,
    DEFAULT_LENGTH_BOUNDS,
    GENERIC_CONTENT,
    LENGTH_BOUNDS,
    LOGO_INDICATOR_SELECTORS,
    QUOTE_DETECTION,
    RATING_INDICATOR_QUERIES,
    SELECTOR_GROUPS,
    SOCIAL_PROOF_TYPES,
    TEXT_PATTERNS,
    TYPE_RULES,
)
from landing_analyzer.models import SectionResult, SocialProofElement
from landing_analyzer.recommendations import get_social_proof_recommendations

logger = logging.getLogger(__name__)


SOCIAL_PROOF_SCRIPT = """
(args) => {
    const viewport = args.viewport;
    const processed = new Set();
    const candidates = [];

    const normalize = (value) => value ? value.replace(/\\s+/g, ' ').trim() : '';

    const matchesAny = (element, selectors) => selectors.some(selector => {
        try {
            return element.matches(selector) || Boolean(element.querySelector(selector));
        } catch (e) {
            return false;
        }
    });

    const collectText = (element) => {
        const chunks = new Set();
        const push = (value) => {
            const normalized = normalize(value);
            if (normalized) chunks.add(normalized);
        };
        push(element.textContent);
        args.accessibilityAttributes.forEach(attr => push(element.getAttribute(attr)));
        const labelledBy = element.getAttribute('aria-labelledby');
        if (labelledBy) {
            labelledBy.split(/\\s+/).forEach(id => {
                const ref = document.getElementById(id);
                if (ref) push(ref.textContent);
            });
        }
        element.querySelectorAll('img, svg, picture, figure, [aria-label], [title], [data-company], [data-client], [data-partner]').forEach(node => {
            if (node.tagName === 'IMG') {
                push(node.alt);
                push(node.title);
                ['aria-label', 'data-name', 'data-company', 'data-client', 'data-partner'].forEach(attr => push(node.getAttribute(attr)));
            } else {
                push(node.getAttribute('aria-label'));
                push(node.getAttribute('title'));
            }
        });
        return Array.from(chunks).join(' • ');
    };

    const logoText = (element) => {
        const names = new Set();
        const push = (value) => {
            const normalized = normalize(value);
            if (normalized) names.add(normalized);
        };
        element.querySelectorAll('img').forEach(img => {
            push(img.alt);
            push(img.getAttribute('data-name'));
            push(img.getAttribute('data-company'));
            if (!img.alt) {
                const src = img.src || img.getAttribute('data-src') || '';
                const filename = src.split(/[/?#]/).pop() || '';
                push(filename.replace(/\\.[a-z0-9]+$/i, '').replace(/[-_]/g, ' '));
            }
        });
        if (names.size === 0) {
            push(element.getAttribute('aria-label') || element.getAttribute('title'));
        }
        return Array.from(names).join(' • ');
    };

    const determineContext = (element) => {
        if (element.closest('header, nav, .header, .navigation')) return 'header';
        if (element.closest('footer, .footer')) return 'footer';
        if (element.closest('.hero, .banner, .jumbotron')) return 'hero';
        if (element.closest('aside, .sidebar')) return 'sidebar';
        return 'content';
    };

    const describe = (element, text, groupType, sweep, hasLogoVisuals) => {
        const rect = element.getBoundingClientRect();
        const style = window.getComputedStyle(element);
        if (style.display === 'none' || style.visibility === 'hidden' || rect.width === 0 || rect.height === 0) {
            return null;
        }
        const selectorMatches = {};
        args.ruleSelectors.forEach(rule => {
            selectorMatches[rule.type] = matchesAny(element, rule.selectors);
        });
        return {
            text: text,
            groupType: groupType,
            sweep: sweep,
            className: element.className ? element.className.toString() : '',
            hasLogoVisuals: hasLogoVisuals,
            hasRatingElement: matchesAny(element, args.ratingQueries),
            hasNameElement: Boolean(element.querySelector('.name, .author, [class*="name"], [class*="author"]')),
            hasCompanyElement: Boolean(element.querySelector('.company, .title, [class*="company"], [class*="title"]')),
            hasImage: Boolean(element.querySelector('img, .avatar, [class*="avatar"], [class*="photo"]')),
            selectorMatches: selectorMatches,
            rect: {top: rect.top, left: rect.left, width: rect.width, height: rect.height},
            fontSize: parseInt(style.fontSize || '16', 10) || 16,
            isAboveFold: rect.top < viewport.height,
            context: determineContext(element)
        };
    };

    args.groups.forEach(group => {
        document.querySelectorAll(group.selector).forEach(element => {
            if (processed.has(element)) return;
            const hasLogoVisuals = matchesAny(element, args.logoSelectors);
            let text = collectText(element);
            if (!text && hasLogoVisuals) {
                text = logoText(element);
                if (!text && group.type === 'partnership') {
                    const logoCount = element.querySelectorAll('img, svg').length;
                    text = logoCount > 0 ? `Partner logos (${logoCount})` : 'Partner logos';
                }
            }
            if (!text) return;
            const candidate = describe(element, text, group.type, 'selector', hasLogoVisuals);
            if (candidate) {
                candidates.push(candidate);
                processed.add(element);
            }
        });
    });

    const prefilters = args.textPrefilters.map(p => new RegExp(p.pattern, p.flags));
    document.querySelectorAll(args.textTags).forEach(element => {
        if (processed.has(element)) return;
        const text = collectText(element);
        if (text.length < args.minTextLength) return;
        if (!prefilters.some(pattern => pattern.test(text))) return;
        const candidate = describe(element, text, null, 'text', false);
        if (candidate) {
            candidates.push(candidate);
            processed.add(element);
        }
    });

    const structuredData = Array.from(document.querySelectorAll('script[type="application/ld+json"]'))
        .map(script => script.textContent || '')
        .filter(Boolean);

    return {candidates: candidates, structuredData: structuredData};
}
"""

NAME_PATTERN = re.compile(r"[A-Z][a-z]+ [A-Z][a-z]+")
TITLE_PATTERN = re.compile(r"\b(CEO|CTO|Manager|Director|VP|President|Founder)\b", re.IGNORECASE)

TEXT_SWEEP_MIN_LENGTH = 30
TEXT_SWEEP_MAX_QUOTE_LENGTH = 600

# Types that count toward variety
VARIETY_TYPES = ("testimonial", "review", "trust-badge", "customer-count", "certification")


def match_pattern(key: str, text: str) -> bool:
    return matches_any(text or "", TEXT_PATTERNS.get(key, ()))


def has_rating_indicator(text: str, has_rating_element: bool = False) -> bool:
    return match_pattern("rating", text) or has_rating_element


def word_count(text: str) -> int:
    return len((text or "").split())


def passes_length_bounds(text: str, element_type: str, has_visual_evidence: bool = False) -> bool:
    """Word-count bounds per type. Empty text passes only with logo visuals."""
    words = word_count(text)
    if words == 0:
        return has_visual_evidence
    bounds = LENGTH_BOUNDS.get(element_type, DEFAULT_LENGTH_BOUNDS)
    return bounds.min_words <= words <= bounds.max_words


def is_generic_content(text: str, element_type: str) -> bool:
    """
    True for navigation, footer and self-promotional boilerplate.

    Allow-listed types (partnership, news-mention) are never generic.
    """
    if element_type in GENERIC_CONTENT.allowed_types:
        return False
    trimmed = (text or "").strip()
    if not trimmed:
        return True
    lower = trimmed.lower()
    if any(lower.startswith(prefix) for prefix in GENERIC_CONTENT.prefixes):
        return True
    if any(keyword in lower for keyword in GENERIC_CONTENT.keywords):
        return True
    if any(arrow in trimmed for arrow in GENERIC_CONTENT.arrow_characters):
        return True
    return bool(GENERIC_CONTENT.emoji_pattern.search(trimmed))


def is_testimonial_quote(text: str, max_length: Optional[int] = None) -> bool:
    """
    A customer quote: bounded length, positive sentiment, and no
    self-referential wording near the start (which marks the site's own copy).
    """
    text = text or ""
    max_length = max_length or QUOTE_DETECTION.max_length
    if not QUOTE_DETECTION.min_length <= len(text) <= max_length:
        return False
    if not match_pattern(QUOTE_DETECTION.positive_pattern_key, text):
        return False
    window = text[:QUOTE_DETECTION.negative_prefix_window]
    return not match_pattern(QUOTE_DETECTION.negative_prefix_key, window)


def classify_element(
    class_name: str,
    text: str,
    has_rating: bool,
    selector_matches: Optional[Dict[str, bool]] = None,
) -> str:
    """Apply the type rules in order, then the quote rule; "other" if nothing fits."""
    class_lower = (class_name or "").lower()
    selector_matches = selector_matches or {}

    for rule in TYPE_RULES:
        class_match = any(keyword in class_lower for keyword in rule.class_keywords)
        text_match = any(match_pattern(key, text) for key in rule.text_pattern_keys)
        selector_match = bool(rule.selector_queries) and selector_matches.get(rule.type, False)

        if not (class_match or text_match or selector_match):
            continue
        if rule.requires_rating_indicator and not has_rating:
            continue
        return rule.type

    if is_testimonial_quote(text):
        return "testimonial"
    return "other"


def calculate_credibility_score(
    text: str,
    element_type: str,
    has_name: bool = False,
    has_company: bool = False,
    has_image: bool = False,
    has_rating: bool = False,
) -> int:
    score = 50

    if has_name:
        score += 15
    if has_company:
        score += 20
    if has_image:
        score += 10
    if has_rating:
        score += 15

    if element_type == "testimonial" and has_name and has_company:
        score += 10
    if element_type == "review" and has_rating:
        score += 10
    if element_type in ("trust-badge", "certification"):
        score += 20

    if 100 < len(text) < 500:
        score += 10
    if len(text.split(" ")) > 15:
        score += 5

    if len(text) < 20:
        score -= 20
    if match_pattern("suspiciousContent", text):
        score -= 30

    return max(0, min(100, score))


def analyze_visibility(font_size: float, width: float, height: float) -> str:
    if font_size >= 14 and width > 200 and height > 50:
        return "high"
    if font_size < 12 or width < 100 or height < 30:
        return "low"
    return "medium"


def _truncate(text: str) -> str:
    if len(text) > MAX_SOCIAL_PROOF_TEXT_LENGTH:
        return text[:MAX_SOCIAL_PROOF_TEXT_LENGTH] + "..."
    return text


def _sweep_type(text: str) -> Optional[str]:
    """Type for a text-sweep candidate, or None when it is not social proof."""
    if match_pattern("customerCount", text):
        return "customer-count"
    if match_pattern("trustIndicator", text):
        return "trust-badge"
    if is_testimonial_quote(text, max_length=TEXT_SWEEP_MAX_QUOTE_LENGTH):
        return "testimonial"
    return None


def build_element(candidate: Dict[str, Any]) -> Optional[SocialProofElement]:
    """Classify and filter one raw candidate. None when it is rejected."""
    text = candidate.get("text") or ""
    has_rating = has_rating_indicator(text, candidate.get("hasRatingElement", False))
    from_text_sweep = candidate.get("sweep") == "text"

    if from_text_sweep:
        element_type = _sweep_type(text)
        if element_type is None:
            return None
        has_name = bool(NAME_PATTERN.search(text))
        has_company = bool(TITLE_PATTERN.search(text))
        has_visuals = False
    else:
        classified = classify_element(
            candidate.get("className") or "",
            text,
            has_rating,
            candidate.get("selectorMatches"),
        )
        element_type = candidate.get("groupType") if classified == "other" else classified
        if not element_type or element_type == "other":
            return None
        has_name = bool(NAME_PATTERN.search(text)) or candidate.get("hasNameElement", False)
        has_company = bool(TITLE_PATTERN.search(text)) or candidate.get("hasCompanyElement", False)
        has_visuals = candidate.get("hasLogoVisuals", False)

    # Customer quotes are bounded by characters in is_testimonial_quote, not by words
    is_quote = element_type == "testimonial" and is_testimonial_quote(
        text, max_length=TEXT_SWEEP_MAX_QUOTE_LENGTH
    )
    if not is_quote and not passes_length_bounds(text, element_type, has_visual_evidence=has_visuals):
        return None
    if is_generic_content(text, element_type):
        return None

    has_image = candidate.get("hasImage", False)
    credibility = calculate_credibility_score(
        text, element_type, has_name, has_company, has_image, has_rating
    )
    rect = candidate.get("rect") or {}

    return SocialProofElement(
        type=element_type,
        text=_truncate(text),
        dom_origin=candidate.get("sweep") or "selector",
        score=credibility,
        credibility_score=credibility,
        is_above_fold=candidate.get("isAboveFold", False),
        has_image=has_image,
        has_name=has_name,
        has_company=has_company,
        has_rating=has_rating,
        visibility=analyze_visibility(
            candidate.get("fontSize", 16), rect.get("width", 0), rect.get("height", 0)
        ),
        context=candidate.get("context") or "content",
        position={
            "top": rect.get("top", 0),
            "left": rect.get("left", 0),
            "width": rect.get("width", 0),
            "height": rect.get("height", 0),
        },
    )


def _structured_element(
    text: str,
    element_type: str,
    has_image: bool = False,
    has_name: bool = False,
    has_company: bool = False,
    has_rating: bool = False,
) -> Optional[SocialProofElement]:
    text = " ".join(text.split())
    if not text:
        return None
    if not passes_length_bounds(text, element_type):
        return None
    if is_generic_content(text, element_type):
        return None

    # Credibility comes from the text alone, as there is no DOM element
    credibility = calculate_credibility_score(text, element_type)
    return SocialProofElement(
        type=element_type,
        text=_truncate(text),
        dom_origin="json-ld",
        score=credibility,
        credibility_score=credibility,
        has_image=has_image,
        has_name=has_name,
        has_company=has_company,
        has_rating=has_rating,
        visibility="medium",
        context="other",
        position={"top": 0, "left": 0, "width": 0, "height": 0},
    )


def _name_of(value: Any) -> str:
    if not value:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        return value.get("name") or value.get("alternateName") or ""
    return ""


def _walk_structured(entry: Any, found: List[SocialProofElement]) -> None:
    if not entry:
        return
    if isinstance(entry, list):
        for item in entry:
            _walk_structured(item, found)
        return
    if not isinstance(entry, dict):
        return

    if entry.get("@graph"):
        _walk_structured(entry["@graph"], found)

    type_field = entry.get("@type")
    type_names = type_field if isinstance(type_field, list) else [type_field]

    for type_name in type_names:
        if not type_name:
            continue
        lower = str(type_name).lower()

        if lower in ("review", "testimonial"):
            body = entry.get("reviewBody") or entry.get("description") or entry.get("name") or ""
            if not body:
                continue
            author = _name_of(entry.get("author"))
            company = _name_of(entry.get("publisher")) or _name_of(entry.get("itemReviewed"))
            rating = (entry.get("reviewRating") or {}).get("ratingValue") or (
                entry.get("aggregateRating") or {}
            ).get("ratingValue")
            scale = (entry.get("reviewRating") or {}).get("bestRating")

            text = body
            if rating:
                text = f"{body} (Rated {rating}{f'/{scale}' if scale else ''})"
            if author:
                text = f"{text} - {author}"
            if company:
                text = f"{text}, {company}"

            element = _structured_element(
                text,
                "review" if rating else "testimonial",
                has_image=bool(entry.get("image")),
                has_name=bool(author),
                has_company=bool(company),
                has_rating=bool(rating),
            )
            if element:
                found.append(element)
            return

        if lower == "aggregaterating":
            rating = entry.get("ratingValue") or entry.get("rating")
            best = entry.get("bestRating") or entry.get("ratingScale")
            count = entry.get("reviewCount") or entry.get("ratingCount")
            if rating or count:
                parts = []
                if rating:
                    parts.append(f"Average rating {rating}{f'/{best}' if best else ''}")
                if count:
                    parts.append(f"based on {count} reviews")
                element = _structured_element(" ".join(parts), "rating", has_rating=bool(rating))
                if element:
                    found.append(element)
            return

        if lower in ("newsarticle", "article", "blogposting"):
            publisher = _name_of(entry.get("publisher"))
            headline = entry.get("headline") or entry.get("name") or entry.get("alternativeHeadline")
            if publisher or headline:
                text = f"Featured in {publisher}" if publisher else "Media mention"
                if headline:
                    text = f'{text} - "{headline}"'
                element = _structured_element(text, "news-mention", has_company=bool(publisher))
                if element:
                    found.append(element)
            return

        if lower in ("organization", "brand"):
            _walk_structured(entry.get("aggregateRating"), found)
            _walk_structured(entry.get("review"), found)
            awards = entry.get("award")
            if awards:
                for award in awards if isinstance(awards, list) else [awards]:
                    element = _structured_element(
                        f"{entry.get('name') or 'This company'} awarded {award}",
                        "trust-badge",
                        has_company=bool(entry.get("name")),
                    )
                    if element:
                        found.append(element)
            return

    _walk_structured(entry.get("review"), found)
    _walk_structured(entry.get("aggregateRating"), found)
    _walk_structured(entry.get("testimonial"), found)


def parse_structured_data(blocks: Iterable[str]) -> List[SocialProofElement]:
    """Social proof from JSON-LD script bodies. Malformed blocks are skipped."""
    found: List[SocialProofElement] = []
    for block in blocks:
        try:
            payload = json.loads(block)
        except (TypeError, ValueError) as e:
            logger.debug(f"Skipping malformed JSON-LD block: {e}")
            continue
        _walk_structured(payload, found)
    return found


def deduplicate_elements(elements: List[SocialProofElement]) -> List[SocialProofElement]:
    """Collapse elements whose texts contain one another, keeping the more credible."""
    unique: List[SocialProofElement] = []
    for element in elements:
        text = element.text.lower().strip()
        for index, existing in enumerate(unique):
            other = existing.text.lower().strip()
            if text == other or text in other or other in text:
                if element.credibility_score > existing.credibility_score:
                    unique[index] = element
                break
        else:
            unique.append(element)
    return unique


def summarize(elements: List[SocialProofElement]) -> Dict[str, int]:
    summary = {element_type: 0 for element_type in SOCIAL_PROOF_TYPES}
    for element in elements:
        summary[element.type] = summary.get(element.type, 0) + 1
    summary["total"] = len(elements)
    summary["above_fold"] = sum(1 for element in elements if element.is_above_fold)
    return summary


def calculate_social_proof_score(elements: List[SocialProofElement]) -> int:
    if not elements:
        return 0
    return min(100, SOCIAL_PROOF_POINTS_PER_ELEMENT * len(elements))


def social_proof_issues(elements: List[SocialProofElement], summary: Dict[str, int]) -> List[str]:
    if not elements:
        return ["No social proof elements found on the page"]

    issues = []
    if summary["above_fold"] == 0:
        issues.append("No social proof elements above the fold")

    types_present = sum(1 for element_type in VARIETY_TYPES if summary.get(element_type))
    if types_present < 2:
        issues.append("Limited variety of social proof types")

    if not any(element.credibility_score >= 70 for element in elements):
        issues.append("Social proof elements lack credibility indicators")

    testimonials = [element for element in elements if element.type == "testimonial"]
    if testimonials:
        credible = [t for t in testimonials if t.has_name and t.credibility_score >= 60]
        if len(credible) / len(testimonials) < 0.5:
            issues.append("Testimonials lack names or credibility indicators")

    low_visibility = sum(1 for element in elements if element.visibility == "low")
    if low_visibility > len(elements) * 0.3:
        issues.append("Some social proof elements have low visibility")

    if any(
        element.credibility_score < 30 or match_pattern("suspiciousContent", element.text)
        for element in elements
    ):
        issues.append("Some social proof elements appear generic or low-quality")

    return issues


class SocialProofAnalyzer:
    """Social proof detection on a loaded page."""

    async def collect(self, page, viewport: Optional[Dict[str, int]] = None) -> Dict[str, Any]:
        args = {
            "viewport": viewport or DEFAULT_VIEWPORT,
            "groups": [{"type": g.type, "selector": g.selector} for g in SELECTOR_GROUPS],
            "ruleSelectors": [
                {"type": rule.type, "selectors": list(rule.selector_queries)}
                for rule in TYPE_RULES
                if rule.selector_queries
            ],
            "accessibilityAttributes": list(ACCESSIBILITY_ATTRIBUTES),
            "logoSelectors": list(LOGO_INDICATOR_SELECTORS),
            "ratingQueries": list(RATING_INDICATOR_QUERIES),
            "textTags": ", ".join(ADDITIONAL_TEXT_TAGS),
            "minTextLength": TEXT_SWEEP_MIN_LENGTH,
            "textPrefilters": [
                {"pattern": definition.pattern, "flags": definition.flags}
                for key in ("customerCount", "trustIndicator", QUOTE_DETECTION.positive_pattern_key)
                for definition in TEXT_PATTERNS[key]
            ],
        }
        return await page.evaluate(SOCIAL_PROOF_SCRIPT, args) or {}

    def evaluate(self, raw: Dict[str, Any], url: str = "") -> SectionResult:
        candidates = raw.get("candidates") or []
        elements = [e for e in (build_element(c) for c in candidates) if e is not None]
        elements.extend(parse_structured_data(raw.get("structuredData") or []))
        elements = deduplicate_elements(elements)
        summary = summarize(elements)

        context = {
            "testimonialCount": summary["testimonial"],
            "reviewCount": summary["review"] + summary["rating"],
            "trustBadgeCount": summary["trust-badge"] + summary["certification"],
            "hasAboveFoldProof": summary["above_fold"] > 0,
            "customerCountElements": summary["customer-count"],
            "url": url,
        }

        logger.info(
            f"Social proof: {len(elements)} elements from {len(candidates)} candidates"
        )

        return SectionResult(
            score=calculate_social_proof_score(elements),
            issues=social_proof_issues(elements, summary),
            recommendations=get_social_proof_recommendations(context).legacy_strings,
            metrics={
                "elements": [element.to_dict() for element in elements],
                "summary": summary,
                "context": context,
            },
        )

    async def analyze(self, page, url: str = "", viewport: Optional[Dict[str, int]] = None) -> SectionResult:
        raw = await self.collect(page, viewport)
        return self.evaluate(raw, url)
