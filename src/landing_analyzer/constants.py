# src/landing_analyzer/constants.py
"""Centralized constants for the landing page analyzer.

This module contains magic numbers and fixed tables that are used across
multiple modules. For user-configurable thresholds, see config.py and
ScoringThresholds.
"""

# =============================================================================
# Browser Constants
# =============================================================================

DEFAULT_VIEWPORT = {"width": 1920, "height": 1080}

# Navigation timeout bounds (milliseconds)
DEFAULT_NAVIGATION_TIMEOUT_MS = 30000
MAX_NAVIGATION_TIMEOUT_MS = 60000


# =============================================================================
# Speed Constants
# =============================================================================

# Hard timeout for a single performance audit (seconds)
AUDIT_TIMEOUT_SECONDS = 60

# Lighthouse audit ids for the metrics we report
LCP_AUDIT = "largest-contentful-paint"
FCP_AUDIT = "first-contentful-paint"
CLS_AUDIT = "cumulative-layout-shift"
TBT_AUDIT = "total-blocking-time"
TTFB_AUDIT = "server-response-time"
SPEED_INDEX_AUDIT = "speed-index"

SLOW_TTFB_MS = 800

# Fallback score penalties: (threshold, penalty), first match wins per metric
LCP_PENALTIES = [(4000, 25), (2500, 15), (1500, 5)]
FCP_PENALTIES = [(3000, 15), (1800, 10), (1000, 3)]
CLS_PENALTIES = [(0.25, 25), (0.1, 15), (0.05, 5)]
TBT_PENALTIES = [(600, 25), (300, 15), (150, 5)]
SPEED_INDEX_PENALTIES = [(5800, 10), (4300, 5)]

# Letter grade floors
GRADE_FLOORS = [(90, "A"), (80, "B"), (70, "C"), (60, "D")]


# =============================================================================
# Image Constants
# =============================================================================

# Formats that do not lower the image score
OPTIMIZED_IMAGE_FORMATS = {"webp", "avif", "jpg", "jpeg", "png"}

# Formats counted as modern for recommendation context
MODERN_IMAGE_FORMATS = {"webp", "avif"}

ALT_TEXT_PENALTY = 5
FORMAT_PENALTY = 10


# =============================================================================
# Whitespace Constants
# =============================================================================

# Density is measured per this many square pixels
DENSITY_AREA_UNIT = 10000

# Score adjustment by element density: (threshold, adjustment), first match wins
DENSITY_ADJUSTMENTS = [(8, -60), (5, -40), (3, -20), (2, -10)]

# Grid density is divided by this to normalise content density to 0-1
CONTENT_DENSITY_DIVISOR = 20

DEFAULT_LINE_HEIGHT = 1.2


# =============================================================================
# Social Proof Constants
# =============================================================================

# Score contributed by each detected social proof element
SOCIAL_PROOF_POINTS_PER_ELEMENT = 20

# Detected text is truncated to this many characters
MAX_SOCIAL_PROOF_TEXT_LENGTH = 300


# =============================================================================
# Priority Constants
# =============================================================================

COLLAPSE_THRESHOLD = 85
DEFAULT_TOP_FIXES = 3

# Ordering used wherever impact-tagged items are sorted
IMPACT_ORDER = {"High": 0, "Medium": 1, "Low": 2}
