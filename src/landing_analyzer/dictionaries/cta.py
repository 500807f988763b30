"""Word lists and filter patterns for call-to-action detection."""

from .patterns import PatternDefinition


# Strong action verbs indicating conversion intent (incentives excluded)
STRONG_ACTION_WORDS = (
    "buy", "purchase", "order", "get", "start", "begin", "join",
    "sign up", "register", "download", "grab", "claim", "unlock",
    "access", "discover", "try", "create", "book", "request",
    "apply", "enroll", "schedule",
)

# Weak action words suggesting lower conversion intent
WEAK_ACTION_WORDS = (
    "learn", "read", "view", "see", "browse", "explore",
    "submit", "send", "click",
)

INCENTIVES = (
    "free", "trial", "demo", "no credit card", "no credit card required", "no cc required",
)

# Primary CTA phrases common on SaaS and e-commerce pages
PRIMARY_CTA_PHRASES = (
    "start your project", "get started", "try free", "start free",
    "sign up free", "start trial", "book demo", "request demo",
    "buy now", "add to cart", "purchase", "order now", "shop now",
    "get access", "join now", "start building", "create account",
    "start today", "join waitlist", "join the waitlist",
    "talk to sales", "schedule a demo", "see pricing", "view plans",
    "start for free", "get a quote", "book a call", "start now",
    "start your free trial",
)

# Single-word conversion actions that would otherwise read as a capitalised name
CONVERSION_VERBS = (
    "subscribe", "donate", "checkout", "continue", "upgrade", "install",
    "contribute", "pay", "reserve", "cart",
)

URGENCY_WORDS = (
    "now", "today", "instant", "immediately", "limited", "exclusive",
    "urgent", "hurry", "fast", "quick", "deadline", "expires",
    "last chance", "ending", "ends soon",
)

# Token-aware urgency, e.g. "only 3 left"
URGENCY_PATTERNS = (
    PatternDefinition(r"\bonly\s+\d+\s+left\b", "i"),
    PatternDefinition(r"\b\d+\s+(spots|seats|slots)\s+left\b", "i"),
    PatternDefinition(r"\blimited\s+time\b", "i"),
)

VALUE_PROPOSITION_WORDS = (
    "free", "save", "discount", "offer", "deal", "benefit", "advantage",
    "result", "outcome", "guarantee", "promise", "increase", "improve",
    "boost", "double", "triple", "roi", "return", "profit",
)

GUARANTEE_WORDS = (
    "guarantee", "money back", "refund", "risk free", "no risk",
    "satisfaction guaranteed", "promise", "assured",
)

# Navigation labels that are not CTAs
NAVIGATION_WORDS = (
    "home", "about", "contact", "help", "faq", "blog", "news",
    "terms", "privacy", "documentation", "docs", "support",
    "community", "resources", "company", "careers", "partners",
    "investors", "press", "legal",
    "pricing", "features", "solutions",
)

NAVIGATION_PHRASES = (
    "learn more about", "read more about", "more information", "find out more",
    "see pricing", "view plans", "view pricing", "compare plans",
)

# Phrases that promote a plain clickable element to a CTA candidate
ACTION_PHRASES = (
    "build your", "get started", "start free", "join now", "sign up",
    "try free", "buy now", "learn more", "contact", "demo", "subscribe",
    "start your project", "request demo", "book demo", "start trial",
    "add to cart", "shop now", "order now", "start building",
    "create account", "get access", "join waitlist", "join the waitlist",
    "talk to sales", "schedule a demo", "see pricing", "view plans",
    "start for free", "get a quote", "book a call", "start now",
    "start your free trial",
)

# Exact class tokens marking a primary CTA
PRIMARY_CTA_CLASSES = (
    "btn-primary", "cta-primary", "primary-button", "main-cta",
    "btn--primary", "button--primary", "button-primary", "Button--cta",
    "btn-cta", "bg-primary", "is-primary",
)

PRIMARY_CTA_CLASS_PATTERNS = (
    PatternDefinition(r"(btn|button|cta|action)[-_]?primary[-_]?\d*", "i"),
    PatternDefinition(r"\bbg-primary\b", "i"),
    PatternDefinition(r"\bButton[^\s]*__[^\s]*\bprimary\b", "i"),
)

# Pagination and carousel controls
DECORATIVE_PATTERNS = (
    PatternDefinition(r"^(next|previous|prev)$", "i"),
    PatternDefinition(r"^(slide|tab) \d+$", "i"),
    PatternDefinition(r"^\d+/\d+$"),
    PatternDefinition(r"^page \d+$", "i"),
)

LOGO_PATTERNS = (
    PatternDefinition(r"logo$", "i"),
    PatternDefinition(r"^[A-Z][a-z]+ logo$", "i"),
    PatternDefinition(r"^[A-Z]+ logo$", "i"),
    PatternDefinition(r"^[A-Z]{2,}$"),  # All-caps brands: IBM, NASA
    PatternDefinition(r"^[A-Z][a-z]+\s+[A-Z][a-z]+\s+(Inc|LLC|Corp|Ltd)$", "i"),
)

# Testimonial signatures and initials
NAME_PATTERNS = (
    PatternDefinition(r"^[A-Z][a-z]+ ?[A-Z]?\.?$"),
    PatternDefinition(r"^[A-Z][a-z]+$"),
    PatternDefinition(r"^[A-Z]{1,3}$"),
)

# Candidate selector groups in priority order, with the base type they imply
CTA_SELECTORS = (
    ('.cta-button, [class*="cta-button"], .cta, [class*="cta"]', "primary"),
    ('a[href*="checkout"], a[href*="cart"], a[href*="purchase"], a[href*="buy"]', "primary"),
    ('a[href*="signup"], a[href*="register"], a[href*="trial"], a[href*="order"]', "primary"),
    ('button[class*="primary"], .btn-primary, .button-primary', "primary"),
    ('input[type="submit"], button[type="submit"]', "form-submit"),
    (".btn, .button, button", "secondary"),
    ('[role="button"]', "secondary"),
    ("[onclick]", "other"),
)

ADDITIONAL_CLICKABLE_SELECTOR = 'a, button, input[type="submit"], [onclick], [role="button"]'
