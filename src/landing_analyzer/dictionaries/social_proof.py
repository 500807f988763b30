"""Selector groups, type rules and text patterns for social proof detection."""

from dataclasses import dataclass, field
from typing import Dict, Tuple

from .patterns import PatternDefinition


@dataclass(frozen=True)
class SelectorGroup:
    type: str
    selectors: Tuple[str, ...]

    @property
    def selector(self) -> str:
        return ", ".join(self.selectors)


@dataclass(frozen=True)
class TypeRule:
    type: str
    class_keywords: Tuple[str, ...] = ()
    text_pattern_keys: Tuple[str, ...] = ()
    selector_queries: Tuple[str, ...] = ()
    requires_rating_indicator: bool = False


@dataclass(frozen=True)
class LengthBounds:
    min_words: int
    max_words: int


@dataclass(frozen=True)
class QuoteDetection:
    min_length: int = 30
    max_length: int = 300
    positive_pattern_key: str = "testimonialPositive"
    negative_prefix_key: str = "testimonialNegativePrefix"
    negative_prefix_window: int = 80


@dataclass(frozen=True)
class GenericContent:
    prefixes: Tuple[str, ...]
    keywords: Tuple[str, ...]
    arrow_characters: Tuple[str, ...]
    emoji_pattern: PatternDefinition
    allowed_types: Tuple[str, ...] = field(default_factory=tuple)


ACCESSIBILITY_ATTRIBUTES = (
    "aria-label",
    "title",
    "data-name",
    "data-company",
    "data-client",
    "data-partner",
    "data-brand",
    "data-source",
)

SELECTOR_GROUPS = (
    SelectorGroup("testimonial", (
        ".testimonial", ".quote", ".client-quote",
        '[class*="testimonial"]', '[class*="quote"]', "blockquote",
    )),
    SelectorGroup("review", (
        ".review", ".rating", ".stars",
        '[class*="review"]', '[class*="rating"]', '[class*="star"]',
    )),
    SelectorGroup("trust-badge", (
        ".trust-badge", ".security", ".ssl", ".certified",
        '[class*="trust"]', '[class*="secure"]', '[class*="ssl"]',
    )),
    SelectorGroup("customer-count", (
        ".stats", ".counter", ".customer-count",
        '[class*="stats"]', '[class*="counter"]', '[class*="customer"]',
    )),
    SelectorGroup("social-media", (
        ".social", ".followers", '[class*="social"]', '[class*="follow"]',
    )),
    SelectorGroup("partnership", (
        ".logo", ".Logo", ".partner", ".featured", ".UserLogo", ".LogoGrid",
        '[class*="logo" i]', '[class*="partner" i]', '[class*="featured" i]',
    )),
    SelectorGroup("case-study", (
        ".case-study", ".success-story", '[class*="case"]', '[class*="success"]',
    )),
    SelectorGroup("news-mention", (
        ".press", ".media", ".news",
        '[class*="press"]', '[class*="media"]', '[class*="news"]',
    )),
)

# Tried in order; first match wins
TYPE_RULES = (
    TypeRule("testimonial", ("testimonial", "quote", "client-quote"), ("testimonial",)),
    TypeRule("review", ("review",), ("review",), requires_rating_indicator=True),
    TypeRule("rating", (), ("rating",), requires_rating_indicator=True),
    TypeRule("trust-badge", ("trust", "badge", "secure", "ssl", "certified"), ("trustBadge",)),
    TypeRule("customer-count", ("stats", "counter", "customer-count"), ("customerCount",)),
    TypeRule(
        "social-media",
        ("social", "follow"),
        ("socialMedia",),
        selector_queries=(
            '[class*="social"]', '[class*="facebook"]',
            '[class*="twitter"]', '[class*="instagram"]',
        ),
    ),
    TypeRule("certification", ("certification", "compliance"), ("certification",)),
    TypeRule("partnership", ("partner", "featured", "logo"), ("partnership",)),
    TypeRule("case-study", ("case-study", "success"), ("caseStudy",)),
    TypeRule("news-mention", ("press", "media", "news"), ("newsMention",)),
)

TEXT_PATTERNS: Dict[str, Tuple[PatternDefinition, ...]] = {
    "testimonial": (PatternDefinition("testimonial", "i"),),
    "review": (PatternDefinition("review", "i"),),
    "rating": (PatternDefinition(r"★|⭐|stars?|rating|\d+/\d+|\d+\.\d+/\d+", "i"),),
    "trustBadge": (PatternDefinition("ssl|secure|verified|trusted|guarantee|certified|award", "i"),),
    "certification": (PatternDefinition(r"certified|accredited|compliant|gdpr|hipaa|soc\s?\d+", "i"),),
    "customerCount": (
        PatternDefinition(
            r"\d+[,\.]?\d*\s*(customers?|users?|clients?|companies?|businesses?|people|members?)", "i"
        ),
        PatternDefinition(r"over\s+\d+|more than\s+\d+|\d+\+\s*(customers?|users?|clients?)", "i"),
    ),
    "socialMedia": (
        PatternDefinition("followers?|likes?|shares?|facebook|twitter|instagram|linkedin|youtube", "i"),
    ),
    "partnership": (PatternDefinition("partner|partnership|powered by|featured in|trusted by", "i"),),
    "caseStudy": (PatternDefinition("case study|success story|customer story|client story", "i"),),
    "newsMention": (
        PatternDefinition("featured in|mentioned in|press|news|media|forbes|techcrunch|reuters", "i"),
    ),
    "testimonialPositive": (
        PatternDefinition(
            r"\b(amazing|excellent|great|fantastic|wonderful|outstanding|love|recommend|best"
            r"|helped|improved|transformed|changed my|saved us|increased our)\b",
            "i",
        ),
    ),
    "testimonialNegativePrefix": (
        PatternDefinition(
            r"\b(we|our|us|you|your|lansky|tech|build|design|development|service|solution|offer|provide)\b",
            "i",
        ),
    ),
    "trustIndicator": (
        PatternDefinition("ssl|secure|verified|trusted|guarantee|certified|award|safe|protected", "i"),
    ),
    "suspiciousContent": (PatternDefinition("lorem ipsum|placeholder|sample|test", "i"),),
}

# Boilerplate navigation, footer and self-promotional copy
GENERIC_CONTENT = GenericContent(
    prefixes=(
        "home", "about", "contact", "services", "portfolio", "blog",
        "get started", "learn more", "our", "we", "you", "your",
        "build", "design", "develop", "create", "solution", "offer",
        "provide", "built", "terms", "privacy", "policy",
    ),
    keywords=(
        "click", "button", "link", "menu", "navigation", "header", "footer",
        "sidebar", "copyright", "reserved", "policy", "terms", "lansky",
        "tech", "founder", "web development", "done right",
    ),
    arrow_characters=("→", "↓"),
    emoji_pattern=PatternDefinition("^\\s*[💡👩🏻‍💻💰😤]"),
    allowed_types=("partnership", "news-mention"),
)

# Word-count bounds per element type
LENGTH_BOUNDS: Dict[str, LengthBounds] = {
    "testimonial": LengthBounds(10, 180),
    "review": LengthBounds(5, 120),
    "rating": LengthBounds(5, 120),
    "case-study": LengthBounds(25, 400),
    "customer-count": LengthBounds(3, 80),
    "trust-badge": LengthBounds(2, 60),
    "certification": LengthBounds(2, 60),
    "partnership": LengthBounds(1, 40),
    "news-mention": LengthBounds(3, 120),
}
DEFAULT_LENGTH_BOUNDS = LengthBounds(3, 250)

ADDITIONAL_TEXT_TAGS = ("p", "div", "span", "h1", "h2", "h3", "h4", "h5", "h6")

LOGO_INDICATOR_SELECTORS = (
    "img", "svg", "[data-logo]", '[class*="logo" i]', ".Logo", ".UserLogo", ".LogoGrid",
)

QUOTE_DETECTION = QuoteDetection()

RATING_INDICATOR_QUERIES = (".rating", ".stars", '[class*="rating"]', '[class*="star"]')

# Types counted by the summary, in report order
SOCIAL_PROOF_TYPES = (
    "testimonial", "review", "rating", "trust-badge", "customer-count",
    "social-media", "certification", "partnership", "case-study", "news-mention",
)
