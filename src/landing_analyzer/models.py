"""Data models for landing page analysis."""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Dict, List, Optional
from urllib.parse import urlparse


SECTION_KEYS = (
    "page_speed",
    "fonts",
    "images",
    "cta",
    "whitespace",
    "social_proof",
)

ANALYSIS_STATUSES = ("pending", "completed", "failed")


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3)."""
    return int(value + 0.5) if value >= 0 else -int(-value + 0.5)


def validate_url(url: str) -> str:
    """Validate that a URL is absolute and uses http or https.

    Args:
        url: Candidate URL

    Returns:
        The URL stripped of surrounding whitespace

    Raises:
        ValueError: If the URL is not an absolute http(s) URL
    """
    candidate = (url or "").strip()
    parsed = urlparse(candidate)
    if parsed.scheme not in ("http", "https"):
        raise ValueError(f"Unsupported URL scheme for {candidate!r}; use http or https")
    if not parsed.netloc:
        raise ValueError(f"URL {candidate!r} has no host")
    return candidate


@dataclass
class AnalysisRequest:
    """A single page to analyze."""

    url: str

    def __post_init__(self):
        self.url = validate_url(self.url)


@dataclass
class SectionResult:
    """Uniform result produced by every dimension analyzer."""

    score: int = 0
    issues: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)
    metrics: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.score = max(0, min(100, int(self.score)))

    @property
    def context(self) -> Dict[str, Any]:
        """Recommendation context the analyzer computed, if any."""
        return self.metrics.get("context", {})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "issues": list(self.issues),
            "recommendations": list(self.recommendations),
            "metrics": self.metrics,
        }


@dataclass
class AnalysisResult:
    """Combined result for one analyzed page."""

    url: str
    page_speed: SectionResult = field(default_factory=SectionResult)
    fonts: SectionResult = field(default_factory=SectionResult)
    images: SectionResult = field(default_factory=SectionResult)
    cta: SectionResult = field(default_factory=SectionResult)
    whitespace: SectionResult = field(default_factory=SectionResult)
    social_proof: SectionResult = field(default_factory=SectionResult)
    overall_score: int = 0
    status: str = "pending"
    error: Optional[str] = None
    analyzed_at: datetime = field(default_factory=datetime.now)
    screenshot: Optional["ScreenshotResult"] = None
    page_metadata: Optional["PageMetadata"] = None

    def sections(self) -> Dict[str, SectionResult]:
        """Return the six sections keyed by section name, in report order."""
        return {key: getattr(self, key) for key in SECTION_KEYS}

    def compute_overall_score(self) -> int:
        """Average the six section scores, rounding halves up."""
        scores = [section.score for section in self.sections().values()]
        self.overall_score = calculate_overall_score(scores)
        return self.overall_score

    def to_dict(self) -> Dict[str, Any]:
        data = {key: section.to_dict() for key, section in self.sections().items()}
        data.update({
            "url": self.url,
            "overall_score": self.overall_score,
            "status": self.status,
            "error": self.error,
            "analyzed_at": self.analyzed_at.isoformat(),
            "screenshot": self.screenshot.to_dict() if self.screenshot else None,
            "page_metadata": self.page_metadata.to_dict() if self.page_metadata else None,
        })
        return data


def calculate_overall_score(scores: List[int]) -> int:
    """Mean of the section scores, rounded half up. Empty input scores 0."""
    if not scores:
        return 0
    return round_half_up(sum(scores) / len(scores))


@dataclass
class DetectedElement:
    """An element picked out of the DOM by a classifier. Never persisted."""

    type: str
    text: str
    dom_origin: str = ""  # selector group or sweep that produced it


@dataclass
class CTAElement(DetectedElement):
    """A call-to-action candidate that survived filtering."""

    element_type: str = "other"  # primary, secondary, form-submit, text-link, other
    is_above_fold: bool = False
    action_strength: str = "medium"  # strong, medium, weak
    urgency: str = "low"
    visibility: str = "medium"
    context: str = "content"  # hero, header, content, sidebar, footer, form
    has_value_proposition: bool = False
    has_urgency: bool = False
    has_guarantee: bool = False
    mobile_optimized: bool = True
    position: Dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class SocialProofElement(DetectedElement):
    """A social proof signal (testimonial, review, badge, ...)."""

    score: int = 0
    credibility_score: int = 0
    is_above_fold: bool = False
    has_image: bool = False
    has_name: bool = False
    has_company: bool = False
    has_rating: bool = False
    visibility: str = "medium"
    context: str = "other"
    position: Dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ImageInfo:
    """An img element as rendered on the page."""

    src: str
    format: str = "unknown"
    natural_width: int = 0
    natural_height: int = 0
    rendered_width: float = 0.0
    rendered_height: float = 0.0
    alt: str = ""

    @property
    def is_oversized(self) -> bool:
        """Natural pixels exceed the rendered box."""
        if self.rendered_width <= 0 or self.rendered_height <= 0:
            return False
        return (
            self.natural_width > self.rendered_width
            or self.natural_height > self.rendered_height
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class IssueFix:
    """An issue paired with the recommendation that addresses it."""

    issue: Optional[str]
    fix: Optional[str]
    impact: str = "Low"

    def __post_init__(self):
        if self.issue is None and self.fix is None:
            raise ValueError("IssueFix needs an issue, a fix, or both")


@dataclass
class PriorityInsight:
    """The single most important section to work on."""

    section_name: str
    section_id: str
    section_score: int
    section_icon: str
    primary_issue: str
    impact_level: str  # Critical, High, Medium


@dataclass
class PriorityFix:
    """One entry of the top-N priority fix list."""

    section_name: str
    section_id: str
    section_score: int
    section_icon: str
    recommendation: str
    severity: str


@dataclass
class ScreenshotResult:
    """Metadata returned by the screenshot storage collaborator."""

    url: str
    blob_url: str
    pathname: str
    download_url: str
    size: int
    uploaded_at: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["uploaded_at"] = self.uploaded_at.isoformat()
        return data


@dataclass
class PageMetadata:
    """Title, description and Organization/WebSite schema read from the page."""

    title: str = ""
    description: str = ""
    url: str = ""
    schema: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
