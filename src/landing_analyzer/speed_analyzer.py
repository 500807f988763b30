"""
Page Speed Analyzer

Runs a performance-only Lighthouse audit against the URL, either remotely via
Browserless or locally via the Lighthouse CLI, and scores it. The audit loads
the page itself and never touches the shared analysis page.
"""

import asyncio
import logging
import math
from typing import Any, Dict, List, Optional

from landing_analyzer.browser_session import select_backend
from landing_analyzer.config import Config, ScoringThresholds, default_thresholds
from landing_analyzer.config import settings as default_settings
from landing_analyzer.constants import (
    CLS_AUDIT,
    CLS_PENALTIES,
    FCP_AUDIT,
    FCP_PENALTIES,
    GRADE_FLOORS,
    LCP_AUDIT,
    LCP_PENALTIES,
    SLOW_TTFB_MS,
    SPEED_INDEX_AUDIT,
    SPEED_INDEX_PENALTIES,
    TBT_AUDIT,
    TBT_PENALTIES,
    TTFB_AUDIT,
)
from landing_analyzer.exceptions import AuditFailure
from landing_analyzer.external.browserless_performance import BrowserlessPerformanceAPI
from landing_analyzer.lighthouse_runner import LighthouseRunner
from landing_analyzer.models import SectionResult, round_half_up
from landing_analyzer.recommendations import get_speed_recommendations

logger = logging.getLogger(__name__)


def _as_number(value) -> Optional[float]:
    """Float for numeric values and numeric strings, else None."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            return None
        return number if math.isfinite(number) else None
    return None


def _numeric_value(audits: Dict[str, Any], audit_id: str) -> float:
    audit = audits.get(audit_id)
    if not isinstance(audit, dict):
        return 0
    value = _as_number(audit.get("numericValue"))
    return value if value is not None else 0


def calculate_fallback_score(metrics: Dict[str, float]) -> int:
    """Score from raw metrics when the report carries no category score.

    One tiered penalty per metric, subtracted from 100 and floored at 0.
    """
    score = 100
    for key, penalties in (
        ("lcp", LCP_PENALTIES),
        ("fcp", FCP_PENALTIES),
        ("cls", CLS_PENALTIES),
        ("tbt", TBT_PENALTIES),
        ("speed_index", SPEED_INDEX_PENALTIES),
    ):
        value = metrics.get(key, 0)
        for threshold, penalty in penalties:
            if value > threshold:
                score -= penalty
                break
    return max(0, round_half_up(score))


def extract_speed_metrics(lhr: Dict[str, Any]) -> Dict[str, Any]:
    """
    Pull Core Web Vitals and the performance score out of a Lighthouse result.

    Missing or non-numeric audits count as 0. Times are rounded to whole
    milliseconds and CLS to three decimals.

    Raises:
        AuditFailure: If lhr is not a JSON object
    """
    if not isinstance(lhr, dict):
        raise AuditFailure(f"Malformed Lighthouse result: {type(lhr).__name__}")

    audits = lhr.get("audits")
    if not isinstance(audits, dict):
        audits = {}

    raw = {
        "lcp": _numeric_value(audits, LCP_AUDIT),
        "fcp": _numeric_value(audits, FCP_AUDIT),
        "cls": _numeric_value(audits, CLS_AUDIT),
        "tbt": _numeric_value(audits, TBT_AUDIT),
        "ttfb": _numeric_value(audits, TTFB_AUDIT),
        "speed_index": _numeric_value(audits, SPEED_INDEX_AUDIT),
    }

    categories = lhr.get("categories")
    performance = categories.get("performance") if isinstance(categories, dict) else None
    category_score = _as_number(performance.get("score")) if isinstance(performance, dict) else None
    if category_score is not None:
        performance_score = min(100, max(0, round_half_up(category_score * 100)))
    else:
        performance_score = calculate_fallback_score(raw)

    return {
        "lcp": round_half_up(raw["lcp"]),
        "fcp": round_half_up(raw["fcp"]),
        "cls": round(raw["cls"], 3),
        "tbt": round_half_up(raw["tbt"]),
        "ttfb": round_half_up(raw["ttfb"]),
        "speed_index": round_half_up(raw["speed_index"]),
        "performance_score": performance_score,
    }


def get_letter_grade(score: int) -> str:
    for floor, grade in GRADE_FLOORS:
        if score >= floor:
            return grade
    return "F"


def speed_issues(metrics: Dict[str, Any], slow_ttfb_ms: int = SLOW_TTFB_MS) -> List[str]:
    """Lighthouse-style issue strings for metrics outside their targets."""
    issues = []
    lcp, fcp, cls = metrics["lcp"], metrics["fcp"], metrics["cls"]
    tbt, speed_index, ttfb = metrics["tbt"], metrics["speed_index"], metrics["ttfb"]

    if lcp > 4000:
        issues.append(f"Poor LCP: {lcp}ms (should be ≤ 2500ms)")
    elif lcp > 2500:
        issues.append(f"Slow LCP: {lcp}ms (should be ≤ 2500ms)")

    if fcp > 3000:
        issues.append(f"Poor FCP: {fcp}ms (should be ≤ 1800ms)")
    elif fcp > 1800:
        issues.append(f"Slow FCP: {fcp}ms (should be ≤ 1800ms)")

    if cls > 0.25:
        issues.append(f"Poor CLS: {cls:.3f} (should be ≤ 0.1)")
    elif cls > 0.1:
        issues.append(f"High CLS: {cls:.3f} (should be ≤ 0.1)")

    if tbt > 600:
        issues.append(f"Poor TBT: {tbt}ms (should be ≤ 200ms)")
    elif tbt > 300:
        issues.append(f"High TBT: {tbt}ms (should be ≤ 200ms)")

    if speed_index > 5800:
        issues.append(f"Poor Speed Index: {speed_index}ms (should be ≤ 3400ms)")
    elif speed_index > 3400:
        issues.append(f"Slow Speed Index: {speed_index}ms (should be ≤ 3400ms)")

    if ttfb > slow_ttfb_ms:
        issues.append(f"Slow server response (TTFB): {ttfb}ms")

    return issues


class SpeedAnalyzer:
    """Performance audit for a single URL."""

    def __init__(
        self,
        config: Optional[Config] = None,
        settings=None,
        lighthouse: Optional[LighthouseRunner] = None,
        browserless: Optional[BrowserlessPerformanceAPI] = None,
        thresholds: Optional[ScoringThresholds] = None,
    ):
        self.config = config or Config()
        self.settings = settings or default_settings
        self.thresholds = thresholds or default_thresholds
        self.backend = select_backend(
            self.settings.APP_ENV, self.settings.BROWSERLESS_TOKEN
        )
        self._lighthouse = lighthouse
        self._browserless = browserless

    @property
    def lighthouse(self) -> LighthouseRunner:
        if self._lighthouse is None:
            self._lighthouse = LighthouseRunner(
                lighthouse_path=self.settings.LIGHTHOUSE_PATH,
                timeout=self.config.audit_timeout_s,
            )
        return self._lighthouse

    @property
    def browserless(self) -> BrowserlessPerformanceAPI:
        if self._browserless is None:
            self._browserless = BrowserlessPerformanceAPI(
                token=self.settings.BROWSERLESS_TOKEN,
                api_url=self.settings.BROWSERLESS_PERFORMANCE_URL,
                timeout=self.config.audit_timeout_s,
            )
        return self._browserless

    async def run_audit(self, url: str) -> Dict[str, Any]:
        """Fetch a Lighthouse result from the selected backend.

        Raises:
            AuditFailure: If the backend fails
        """
        if self.backend == "remote":
            return await self.browserless.run_audit(url)
        return await asyncio.to_thread(self.lighthouse.run_lighthouse, url)

    async def analyze(self, url: str) -> SectionResult:
        """
        Audit url and build the page speed section. Never raises on audit failure.

        Returns:
            SectionResult with metrics["values"], metrics["grade"] and context
        """
        logger.info(f"Starting page speed analysis for {url} ({self.backend})")

        try:
            lhr = await self.run_audit(url)
            values = extract_speed_metrics(lhr)
        except AuditFailure as e:
            logger.warning(f"Page speed analysis unavailable for {url}: {e}")
            return self._unavailable(url)

        return self.build_result(url, values)

    def build_result(self, url: str, values: Dict[str, Any]) -> SectionResult:
        score = values["performance_score"]
        context = self.build_context(url, values)

        result = SectionResult(
            score=score,
            issues=speed_issues(values, self.thresholds.slow_ttfb_ms),
            recommendations=get_speed_recommendations(context).legacy_strings,
            metrics={
                "values": values,
                "grade": get_letter_grade(score),
                "backend": self.backend,
                "context": context,
            },
        )
        logger.info(f"Page speed score for {url}: {score} ({result.metrics['grade']})")
        return result

    @staticmethod
    def build_context(url: str, values: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "lcp": values.get("lcp", 0),
            "fcp": values.get("fcp", 0),
            "cls": values.get("cls", 0),
            "tbt": values.get("tbt", 0),
            "ttfb": values.get("ttfb", 0),
            "speedIndex": values.get("speed_index", 0),
            "speedScore": values.get("performance_score", 0),
            "url": url,
        }

    def _unavailable(self, url: str) -> SectionResult:
        return SectionResult(
            score=0,
            issues=["Page speed analysis unavailable"],
            recommendations=[],
            metrics={
                "values": {},
                "grade": "F",
                "backend": self.backend,
                "context": {"url": url},
            },
        )
