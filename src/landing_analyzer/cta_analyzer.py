"""
Call-to-Action Analyzer

Finds conversion actions on the page, filters out navigation, logos,
pagination and testimonial signatures, classifies what survives and scores
the above-the-fold CTA layout.

The page script only gathers raw candidates with their geometry and computed
style. Filtering, classification and scoring are pure functions below.
"""

import logging
from typing import Any, Dict, List, Optional

from landing_analyzer.config import ScoringThresholds, default_thresholds
from landing_analyzer.constants import DEFAULT_VIEWPORT
from landing_analyzer.dictionaries.cta import (
    ACTION_PHRASES,
    ADDITIONAL_CLICKABLE_SELECTOR,
    CONVERSION_VERBS,
    CTA_SELECTORS,
    DECORATIVE_PATTERNS,
    GUARANTEE_WORDS,
    LOGO_PATTERNS,
    NAME_PATTERNS,
    NAVIGATION_PHRASES,
    NAVIGATION_WORDS,
    PRIMARY_CTA_CLASSES,
    PRIMARY_CTA_CLASS_PATTERNS,
    PRIMARY_CTA_PHRASES,
    STRONG_ACTION_WORDS,
    URGENCY_PATTERNS,
    URGENCY_WORDS,
    VALUE_PROPOSITION_WORDS,
    WEAK_ACTION_WORDS,
)
from landing_analyzer.dictionaries.patterns import (
    contains_any_phrase,
    find_phrases,
    matches_any,
)
from landing_analyzer.models import CTAElement, SectionResult
from landing_analyzer.recommendations import get_cta_recommendations

logger = logging.getLogger(__name__)


# Returns raw candidates; the argument carries selectors, viewport and action phrases
CTA_CANDIDATES_SCRIPT = """
(args) => {
    const viewport = args.viewport;
    const processed = new Set();
    const candidates = [];

    const determineContext = (element) => {
        if (element.closest('.hero, .banner, .jumbotron, .main-hero, [class*="hero"], [class*="banner"]')) {
            return 'hero';
        }
        const rect = element.getBoundingClientRect();
        const inMainArea = rect.top > 100 && rect.top < viewport.height * 0.8;
        if (inMainArea
            && !element.closest('nav, .nav, .navigation, .menu')
            && !element.closest('footer, .footer')
            && !element.closest('header, .header')) {
            return 'hero';
        }
        if (element.closest('header, nav, .header, .navigation, .nav, .menu')) return 'header';
        if (element.closest('footer, .footer')) return 'footer';
        if (element.closest('aside, .sidebar')) return 'sidebar';
        if (element.closest('form')) return 'form';
        return 'content';
    };

    const surroundingText = (element) => {
        const parent = element.parentElement;
        if (!parent) return '';
        return Array.from(parent.children)
            .filter(child => child !== element)
            .map(child => (child.textContent || '').trim())
            .join(' ')
            .toLowerCase();
    };

    const textOf = (element) => {
        let text = (element.textContent || '').trim();
        if (element.tagName === 'INPUT' && element.value) {
            text = element.value.trim();
        }
        return text;
    };

    const describe = (element, text, selectorType, sweep) => {
        const rect = element.getBoundingClientRect();
        const style = window.getComputedStyle(element);
        if (style.display === 'none' || style.visibility === 'hidden' || rect.width === 0 || rect.height === 0) {
            return null;
        }
        const className = typeof element.className === 'string' ? element.className : '';
        return {
            text: text,
            selectorType: selectorType,
            sweep: sweep,
            tagName: element.tagName,
            inputType: element.getAttribute('type') || '',
            className: className,
            inForm: Boolean(element.closest('form')),
            hasHref: element.hasAttribute('href'),
            hasOnclick: element.hasAttribute('onclick'),
            roleButton: element.getAttribute('role') === 'button',
            hasLogo: className.toLowerCase().includes('logo')
                || Boolean(element.closest('[class*="logo"], [alt*="logo"], [title*="logo"]')),
            rect: {top: rect.top, left: rect.left, width: rect.width, height: rect.height},
            style: {
                fontSize: parseFloat(style.fontSize) || 16,
                padding: parseFloat(style.padding) || 0,
                backgroundColor: style.backgroundColor || '',
                borderRadius: parseFloat(style.borderRadius) || 0,
                border: style.border || '',
                minHeight: parseFloat(style.minHeight) || 0,
                width: parseFloat(style.width) || 0
            },
            surroundingText: surroundingText(element),
            context: determineContext(element)
        };
    };

    for (const group of args.selectors) {
        document.querySelectorAll(group.selector).forEach(element => {
            if (processed.has(element)) return;
            const text = textOf(element);
            if (!text) return;
            const candidate = describe(element, text, group.type, 'selector');
            if (candidate) {
                candidates.push(candidate);
                processed.add(element);
            }
        });
    }

    document.querySelectorAll(args.clickableSelector).forEach(element => {
        if (processed.has(element)) return;
        const text = textOf(element);
        if (text.length < 2 || text.length > 200) return;
        const lower = text.toLowerCase();
        if (!args.actionPhrases.some(phrase => lower.includes(phrase))) return;
        const candidate = describe(element, text, 'secondary', 'clickable');
        if (candidate) {
            candidates.push(candidate);
            processed.add(element);
        }
    });

    return candidates;
}
"""

_TRANSPARENT = ("rgba(0, 0, 0, 0)", "transparent", "")
_CONVERSION_TEXT = ("checkout", "purchase", "cart")
_SWEEP_MAX_LENGTH = 200
_SWEEP_DISPLAY_LENGTH = 100


def has_action_language(text: str) -> bool:
    """True when text carries an action word, action phrase or conversion verb."""
    return (
        contains_any_phrase(text, STRONG_ACTION_WORDS)
        or contains_any_phrase(text, WEAK_ACTION_WORDS)
        or contains_any_phrase(text, PRIMARY_CTA_PHRASES)
        or contains_any_phrase(text, ACTION_PHRASES)
        or contains_any_phrase(text, CONVERSION_VERBS)
    )


def is_decorative(text: str) -> bool:
    return matches_any(text, DECORATIVE_PATTERNS)


def is_logo_text(text: str) -> bool:
    return matches_any(text, LOGO_PATTERNS)


def is_person_name(text: str) -> bool:
    """Testimonial signatures and initials, unless the text reads as an action."""
    if has_action_language(text):
        return False
    return matches_any(text, NAME_PATTERNS)


def is_navigation(text: str) -> bool:
    return (
        contains_any_phrase(text, NAVIGATION_WORDS)
        or contains_any_phrase(text, NAVIGATION_PHRASES)
    )


def is_candidate_text(
    text: str,
    min_length: int = 2,
    max_length: int = 150,
    sweep: bool = False,
) -> bool:
    """
    Text-level false-positive filter for CTA candidates.

    Order: length, decorative controls, logo text, person names, then
    navigation. Candidates from the action-phrase sweep skip the
    decorative and navigation checks since they already matched an action.
    """
    text = (text or "").strip()
    if len(text) < min_length or len(text) > (_SWEEP_MAX_LENGTH if sweep else max_length):
        return False

    if not sweep and is_decorative(text):
        return False
    if is_logo_text(text):
        return False
    if is_person_name(text):
        return False
    if sweep:
        return True

    lower = text.lower()
    if len(text) > 80 and "start" not in lower and "get" not in lower:
        return False
    if is_navigation(text):
        return False
    return True


def analyze_action_strength(text: str) -> str:
    if contains_any_phrase(text, STRONG_ACTION_WORDS):
        return "strong"
    if contains_any_phrase(text, WEAK_ACTION_WORDS):
        return "weak"
    return "medium"


def analyze_urgency(text: str) -> str:
    if contains_any_phrase(text, URGENCY_WORDS) or matches_any(text, URGENCY_PATTERNS):
        return "high"
    if contains_any_phrase(text, ("free", "trial")):
        return "medium"
    return "low"


def _has_background(style: Dict[str, Any]) -> bool:
    return (style.get("backgroundColor") or "") not in _TRANSPARENT


def analyze_visibility(candidate: Dict[str, Any]) -> str:
    """Rate how prominent the element is from its computed style and size."""
    style = candidate.get("style") or {}
    rect = candidate.get("rect") or {}
    tag = (candidate.get("tagName") or "").upper()

    font_size = style.get("fontSize", 16)
    padding = style.get("padding", 0)
    border = style.get("border") or ""
    width, height = rect.get("width", 0), rect.get("height", 0)

    is_button = (
        tag == "BUTTON"
        or (tag == "A" and _has_background(style))
        or candidate.get("roleButton", False)
    )

    score = 0
    if font_size >= 16:
        score += 25
    elif font_size >= 14:
        score += 15
    elif font_size >= 12:
        score += 5

    if padding >= 12:
        score += 20
    elif padding >= 8:
        score += 15
    elif padding >= 4:
        score += 10

    if _has_background(style):
        score += 20
    if style.get("borderRadius", 0) > 0:
        score += 10
    if border and not border.startswith("none") and "0px" not in border:
        score += 10
    if is_button:
        score += 20

    if width >= 120 and height >= 40:
        score += 15
    elif width >= 80 and height >= 32:
        score += 10

    if style.get("minHeight", 0) >= 40 or height >= 40:
        score += 10

    if score >= 70:
        return "high"
    if score >= 40:
        return "medium"
    return "low"


def is_mobile_optimized(candidate: Dict[str, Any], viewport_width: int) -> bool:
    if viewport_width > 768:
        return True
    style = candidate.get("style") or {}
    width = style.get("width", 0)
    return (
        style.get("fontSize", 16) >= 16
        and style.get("padding", 0) >= 8
        and (width >= 44 or width == 0)
    )


def _class_tokens(class_name: str) -> List[str]:
    return (class_name or "").split()


def refine_cta_type(candidate: Dict[str, Any], initial_type: str) -> str:
    """Upgrade or reclassify the selector-derived type using element signals."""
    class_name = candidate.get("className") or ""
    tag = (candidate.get("tagName") or "").upper()
    text = candidate.get("text") or ""

    if any(token in PRIMARY_CTA_CLASSES for token in _class_tokens(class_name)):
        return "primary"
    if matches_any(class_name, PRIMARY_CTA_CLASS_PATTERNS):
        return "primary"

    if tag == "INPUT" and (candidate.get("inputType") or "").lower() == "submit":
        return "form-submit"
    if tag == "BUTTON" and candidate.get("inForm"):
        return "form-submit"

    is_interactive = (
        tag == "BUTTON"
        or (tag == "A" and candidate.get("hasHref"))
        or candidate.get("hasOnclick")
        or candidate.get("roleButton")
    )

    if is_interactive and contains_any_phrase(text, PRIMARY_CTA_PHRASES):
        return "primary"

    background = (candidate.get("style") or {}).get("backgroundColor") or ""
    prominent = _has_background(candidate.get("style") or {}) and (
        "rgb" in background or "#" in background
    )
    if (
        initial_type == "secondary"
        and is_interactive
        and prominent
        and contains_any_phrase(text, STRONG_ACTION_WORDS)
    ):
        return "primary"

    return initial_type


def build_cta(candidate: Dict[str, Any], viewport: Dict[str, int]) -> CTAElement:
    """Classify a filtered raw candidate into a CTAElement."""
    text = candidate["text"].strip()
    if candidate.get("sweep") == "clickable" and len(text) > _SWEEP_DISPLAY_LENGTH:
        display_text = text[:_SWEEP_DISPLAY_LENGTH] + "..."
    else:
        display_text = text

    rect = candidate.get("rect") or {}
    surrounding = candidate.get("surroundingText") or ""
    urgency = analyze_urgency(text)

    return CTAElement(
        type="cta",
        text=display_text,
        dom_origin=candidate.get("sweep") or "selector",
        element_type=refine_cta_type(candidate, candidate.get("selectorType") or "other"),
        is_above_fold=rect.get("top", 0) < viewport["height"],
        action_strength=analyze_action_strength(text),
        urgency=urgency,
        visibility=analyze_visibility(candidate),
        context=candidate.get("context") or "content",
        has_value_proposition=contains_any_phrase(surrounding, VALUE_PROPOSITION_WORDS),
        has_urgency=urgency == "high",
        has_guarantee=contains_any_phrase(surrounding, GUARANTEE_WORDS),
        mobile_optimized=is_mobile_optimized(candidate, viewport["width"]),
        position={
            "top": rect.get("top", 0),
            "left": rect.get("left", 0),
            "width": rect.get("width", 0),
            "height": rect.get("height", 0),
        },
    )


def deduplicate_ctas(ctas: List[CTAElement]) -> List[CTAElement]:
    """Collapse CTAs whose texts are equal or contain one another, keeping the shorter."""
    unique: List[CTAElement] = []
    for cta in ctas:
        text = cta.text.lower().strip()
        for index, existing in enumerate(unique):
            other = existing.text.lower().strip()
            if text == other or text in other or other in text:
                if len(cta.text) < len(existing.text):
                    unique[index] = cta
                break
        else:
            unique.append(cta)
    return unique


def score_cta_priority(cta: CTAElement) -> int:
    score = 0
    lower = cta.text.lower()

    if cta.context == "hero":
        score += 50
    if cta.element_type == "form-submit":
        score += 40
    if any(word in lower for word in _CONVERSION_TEXT):
        score += 35
    if cta.element_type == "primary":
        score += 30
    if cta.is_above_fold:
        score += 20

    if cta.action_strength == "strong":
        score += 15
    elif cta.action_strength == "medium":
        score += 10

    if cta.visibility == "high":
        score += 15
    elif cta.visibility == "medium":
        score += 10

    # Header links are usually navigation unless they start something
    if cta.context == "header" and "start" not in lower and "get" not in lower:
        score -= 10
    if cta.context == "content":
        score += 8
    if cta.urgency == "high":
        score += 5

    return score


def identify_primary_cta(ctas: List[CTAElement]) -> Optional[CTAElement]:
    """Highest-priority CTA; the earliest wins a tie."""
    best, best_score = None, None
    for cta in ctas:
        score = score_cta_priority(cta)
        if best_score is None or score > best_score:
            best, best_score = cta, score
    return best


def calculate_cta_score(ctas: List[CTAElement], max_above_fold: int = 2) -> int:
    above_fold = sum(1 for cta in ctas if cta.is_above_fold)
    score = 100
    if above_fold == 0:
        score -= 50
    if above_fold > max_above_fold:
        score -= 20
    return max(0, min(100, score))


def weak_action_words(ctas: List[CTAElement]) -> List[str]:
    """Distinct weak action words used by weak CTAs, in lexicon order."""
    found = []
    for cta in ctas:
        if cta.action_strength != "weak":
            continue
        for word in find_phrases(cta.text, WEAK_ACTION_WORDS):
            if word not in found:
                found.append(word)
    return found


def cta_issues(ctas: List[CTAElement], weak_words: List[str], max_above_fold: int = 2) -> List[str]:
    issues = []
    above_fold = sum(1 for cta in ctas if cta.is_above_fold)

    if not ctas:
        issues.append("No CTAs found on page")
    elif above_fold == 0:
        issues.append("No clear CTA above the fold")

    if above_fold > max_above_fold:
        issues.append(
            f"Too many competing CTAs above the fold ({above_fold} found) - "
            "focus on 1-2 primary actions"
        )
    if weak_words:
        issues.append(f"Weak action words detected in CTAs: {', '.join(weak_words)}")
    if len(ctas) == 1:
        issues.append("Only one CTA found on the page")

    return issues


class CTAAnalyzer:
    """Call-to-action analysis on a loaded page."""

    def __init__(self, thresholds: Optional[ScoringThresholds] = None):
        self.thresholds = thresholds or default_thresholds

    async def collect(self, page, viewport: Optional[Dict[str, int]] = None) -> List[Dict[str, Any]]:
        viewport = viewport or DEFAULT_VIEWPORT
        args = {
            "viewport": viewport,
            "selectors": [{"selector": s, "type": t} for s, t in CTA_SELECTORS],
            "clickableSelector": ADDITIONAL_CLICKABLE_SELECTOR,
            "actionPhrases": list(ACTION_PHRASES),
        }
        return await page.evaluate(CTA_CANDIDATES_SCRIPT, args) or []

    def filter_candidates(self, candidates: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        kept = []
        for candidate in candidates:
            sweep = candidate.get("sweep") == "clickable"
            text = candidate.get("text") or ""
            if candidate.get("hasLogo"):
                continue
            if not is_candidate_text(
                text,
                min_length=self.thresholds.cta_min_text_length,
                max_length=self.thresholds.cta_max_text_length,
                sweep=sweep,
            ):
                continue
            if sweep and not contains_any_phrase(text, ACTION_PHRASES):
                continue
            kept.append(candidate)
        return kept

    def evaluate(
        self,
        candidates: List[Dict[str, Any]],
        viewport: Optional[Dict[str, int]] = None,
        url: str = "",
    ) -> SectionResult:
        viewport = viewport or DEFAULT_VIEWPORT
        kept = self.filter_candidates(candidates)
        ctas = deduplicate_ctas([build_cta(candidate, viewport) for candidate in kept])
        primary = identify_primary_cta(ctas)
        weak_words = weak_action_words(ctas)
        max_above_fold = self.thresholds.cta_max_above_fold

        context = {
            "ctaCount": len(ctas),
            "ctasAboveFold": sum(1 for cta in ctas if cta.is_above_fold),
            "primaryCtaDetected": primary is not None,
            "weakActionWords": weak_words,
            "url": url,
        }

        logger.info(
            f"CTA analysis: {len(ctas)} CTAs kept from {len(candidates)} candidates"
        )

        return SectionResult(
            score=calculate_cta_score(ctas, max_above_fold),
            issues=cta_issues(ctas, weak_words, max_above_fold),
            recommendations=get_cta_recommendations(context).legacy_strings,
            metrics={
                "ctas": [cta.to_dict() for cta in ctas],
                "primary_cta": primary.to_dict() if primary else None,
                "candidate_count": len(candidates),
                "context": context,
            },
        )

    async def analyze(self, page, url: str = "", viewport: Optional[Dict[str, int]] = None) -> SectionResult:
        candidates = await self.collect(page, viewport)
        return self.evaluate(candidates, viewport, url)
