"""Landing page conversion analyzer."""

__version__ = "0.1.0"

from landing_analyzer.orchestrator import LandingPageAnalyzer, analyze_landing_page
from landing_analyzer.browser_session import BrowserSession
from landing_analyzer.browser_config import BrowserConfig
from landing_analyzer.speed_analyzer import SpeedAnalyzer
from landing_analyzer.font_analyzer import FontAnalyzer
from landing_analyzer.image_analyzer import ImageAnalyzer
from landing_analyzer.cta_analyzer import CTAAnalyzer
from landing_analyzer.whitespace_analyzer import WhitespaceAnalyzer
from landing_analyzer.social_proof_analyzer import SocialProofAnalyzer
from landing_analyzer.issue_fix_pairer import pair_issues_with_fixes
from landing_analyzer.priority_insight import (
    generate_priority_insight,
    get_top_priority_fixes,
)
from landing_analyzer.verdict import get_verdict
from landing_analyzer.exceptions import AuditFailure, NavigationError
from landing_analyzer.models import (
    AnalysisRequest,
    AnalysisResult,
    SectionResult,
    IssueFix,
    PriorityInsight,
    PriorityFix,
)
from landing_analyzer.config import Config, ScoringThresholds, settings

__all__ = [
    # Core
    "LandingPageAnalyzer",
    "analyze_landing_page",
    "BrowserSession",
    "BrowserConfig",
    # Analyzers
    "SpeedAnalyzer",
    "FontAnalyzer",
    "ImageAnalyzer",
    "CTAAnalyzer",
    "WhitespaceAnalyzer",
    "SocialProofAnalyzer",
    # Synthesis
    "pair_issues_with_fixes",
    "generate_priority_insight",
    "get_top_priority_fixes",
    "get_verdict",
    # Errors
    "AuditFailure",
    "NavigationError",
    # Models
    "AnalysisRequest",
    "AnalysisResult",
    "SectionResult",
    "IssueFix",
    "PriorityInsight",
    "PriorityFix",
    # Config
    "Config",
    "ScoringThresholds",
    "settings",
]
