# tests/test_speed_analyzer.py
"""Tests for the page speed analyzer."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from landing_analyzer.config import ScoringThresholds
from landing_analyzer.exceptions import AuditFailure
from landing_analyzer.speed_analyzer import (
    SpeedAnalyzer,
    calculate_fallback_score,
    extract_speed_metrics,
    get_letter_grade,
    speed_issues,
)


def make_lhr(performance=0.72, **overrides):
    audits = {
        "largest-contentful-paint": {"numericValue": 2600.4},
        "first-contentful-paint": {"numericValue": 1000.6},
        "cumulative-layout-shift": {"numericValue": 0.12345},
        "total-blocking-time": {"numericValue": 350},
        "server-response-time": {"numericValue": 900},
        "speed-index": {"numericValue": 3500},
    }
    audits.update(overrides)
    lhr = {"audits": audits}
    if performance is not None:
        lhr["categories"] = {"performance": {"score": performance}}
    return lhr


def make_settings(env="development", token=None):
    return MagicMock(
        APP_ENV=env,
        BROWSERLESS_TOKEN=token,
        BROWSERLESS_PERFORMANCE_URL="https://example.test/performance",
        LIGHTHOUSE_PATH="lighthouse",
    )


class TestMetricExtraction:
    """Tests for reading Lighthouse results."""

    def test_extract_with_category_score(self):
        """Test metrics and score when the report has a category score."""
        metrics = extract_speed_metrics(make_lhr())

        assert metrics == {
            "lcp": 2600,
            "fcp": 1001,
            "cls": 0.123,
            "tbt": 350,
            "ttfb": 900,
            "speed_index": 3500,
            "performance_score": 72,
        }

    def test_extract_fallback_score(self):
        """Test the penalty-based score when the category score is missing."""
        # LCP -15, FCP -3, CLS -15, TBT -15
        assert extract_speed_metrics(make_lhr(performance=None))["performance_score"] == 52

    def test_missing_audits_read_as_zero(self):
        """Test that absent audits count as 0."""
        metrics = extract_speed_metrics({"audits": {}})
        assert metrics["lcp"] == 0
        assert metrics["cls"] == 0
        assert metrics["performance_score"] == 100

    def test_malformed_values_are_coerced(self):
        """Test that wrong JSON types read as 0 or are parsed when numeric."""
        metrics = extract_speed_metrics({
            "audits": {
                "largest-contentful-paint": {"numericValue": "2600"},
                "first-contentful-paint": [],
                "total-blocking-time": {"numericValue": "n/a"},
            },
            "categories": {"performance": {"score": "0.9"}},
        })

        assert metrics["lcp"] == 2600
        assert metrics["fcp"] == 0
        assert metrics["tbt"] == 0
        assert metrics["performance_score"] == 90

    def test_audits_not_an_object(self):
        """Test that a non-object audits value counts as no audits."""
        metrics = extract_speed_metrics({"audits": [], "categories": []})
        assert metrics["lcp"] == 0
        assert metrics["performance_score"] == 100

    def test_result_not_an_object(self):
        """Test that a non-object result raises AuditFailure."""
        with pytest.raises(AuditFailure):
            extract_speed_metrics(["not", "a", "report"])

    def test_fallback_floor(self):
        """Test that the fallback score never drops below zero."""
        worst = {"lcp": 9000, "fcp": 9000, "cls": 1, "tbt": 9000, "speed_index": 9000}
        assert calculate_fallback_score(worst) == 0

    @pytest.mark.parametrize("score,grade", [(95, "A"), (90, "A"), (85, "B"), (72, "C"), (60, "D"), (59, "F")])
    def test_letter_grade(self, score, grade):
        """Test grade bands."""
        assert get_letter_grade(score) == grade


class TestSpeedIssues:
    """Tests for metric issue messages."""

    def test_moderate_page(self):
        """Test messages for metrics just outside their targets."""
        assert speed_issues(extract_speed_metrics(make_lhr())) == [
            "Slow LCP: 2600ms (should be ≤ 2500ms)",
            "High CLS: 0.123 (should be ≤ 0.1)",
            "High TBT: 350ms (should be ≤ 200ms)",
            "Slow Speed Index: 3500ms (should be ≤ 3400ms)",
            "Slow server response (TTFB): 900ms",
        ]

    def test_poor_page(self):
        """Test messages for metrics far outside their targets."""
        metrics = {"lcp": 5000, "fcp": 3500, "cls": 0.3, "tbt": 700, "speed_index": 6000, "ttfb": 100}
        assert speed_issues(metrics) == [
            "Poor LCP: 5000ms (should be ≤ 2500ms)",
            "Poor FCP: 3500ms (should be ≤ 1800ms)",
            "Poor CLS: 0.300 (should be ≤ 0.1)",
            "Poor TBT: 700ms (should be ≤ 200ms)",
            "Poor Speed Index: 6000ms (should be ≤ 3400ms)",
        ]

    def test_fast_page(self):
        """Test that a fast page has no issues."""
        metrics = {"lcp": 1200, "fcp": 800, "cls": 0.01, "tbt": 50, "speed_index": 1500, "ttfb": 200}
        assert speed_issues(metrics) == []

    def test_ttfb_threshold_configurable(self):
        """Test that the slow TTFB limit comes from the thresholds."""
        metrics = {"lcp": 1200, "fcp": 800, "cls": 0.01, "tbt": 50, "speed_index": 1500, "ttfb": 900}
        assert speed_issues(metrics) == ["Slow server response (TTFB): 900ms"]
        assert speed_issues(metrics, slow_ttfb_ms=1000) == []


class TestSpeedAnalyzer:
    """Tests for SpeedAnalyzer backend selection and results."""

    @pytest.mark.asyncio
    async def test_local_backend(self):
        """Test that development runs the Lighthouse CLI."""
        runner = MagicMock()
        runner.run_lighthouse = MagicMock(return_value=make_lhr())
        analyzer = SpeedAnalyzer(settings=make_settings(), lighthouse=runner)

        result = await analyzer.analyze("https://example.com")

        assert analyzer.backend == "local"
        runner.run_lighthouse.assert_called_once_with("https://example.com")
        assert result.score == 72
        assert result.metrics["grade"] == "C"
        assert result.metrics["values"]["lcp"] == 2600
        assert result.context["speedScore"] == 72
        assert result.context["speedIndex"] == 3500
        assert len(result.issues) == 5

    @pytest.mark.asyncio
    async def test_remote_backend(self):
        """Test that production with a token uses Browserless."""
        browserless = MagicMock()
        browserless.run_audit = AsyncMock(return_value=make_lhr(performance=0.95))
        analyzer = SpeedAnalyzer(settings=make_settings("production", "token"), browserless=browserless)

        result = await analyzer.analyze("https://example.com")

        assert analyzer.backend == "remote"
        browserless.run_audit.assert_awaited_once_with("https://example.com")
        assert result.score == 95
        assert result.metrics["backend"] == "remote"

    def test_production_without_token_is_local(self):
        """Test that a missing token keeps audits local."""
        assert SpeedAnalyzer(settings=make_settings("production", None)).backend == "local"

    @pytest.mark.asyncio
    async def test_audit_failure(self):
        """Test that a failed audit yields a zero score instead of raising."""
        runner = MagicMock()
        runner.run_lighthouse = MagicMock(side_effect=AuditFailure("Lighthouse timeout after 60s"))
        analyzer = SpeedAnalyzer(settings=make_settings(), lighthouse=runner)

        result = await analyzer.analyze("https://example.com")

        assert result.score == 0
        assert result.issues == ["Page speed analysis unavailable"]
        assert result.recommendations == []
        assert result.metrics["grade"] == "F"

    @pytest.mark.asyncio
    async def test_malformed_remote_body(self):
        """Test that an oddly typed remote body is scored instead of raising."""
        browserless = MagicMock()
        browserless.run_audit = AsyncMock(return_value={"audits": [], "categories": {"performance": {"score": "0.9"}}})
        analyzer = SpeedAnalyzer(settings=make_settings("production", "token"), browserless=browserless)

        result = await analyzer.analyze("https://example.com")

        assert result.score == 90
        assert result.metrics["grade"] == "A"

    @pytest.mark.asyncio
    async def test_non_object_body_is_unavailable(self):
        """Test that a body that is not a report yields the unavailable section."""
        browserless = MagicMock()
        browserless.run_audit = AsyncMock(return_value="<html>quota exceeded</html>")
        analyzer = SpeedAnalyzer(settings=make_settings("production", "token"), browserless=browserless)

        result = await analyzer.analyze("https://example.com")

        assert result.score == 0
        assert result.issues == ["Page speed analysis unavailable"]

    def test_thresholds_reach_issues(self):
        """Test that SpeedAnalyzer applies its configured TTFB threshold."""
        analyzer = SpeedAnalyzer(settings=make_settings(), thresholds=ScoringThresholds(slow_ttfb_ms=1000))
        values = extract_speed_metrics(make_lhr())

        result = analyzer.build_result("https://example.com", values)

        assert "Slow server response (TTFB): 900ms" not in result.issues
        assert len(result.issues) == 4

    def test_recommendations_for_slow_page(self):
        """Test that a slow page gets speed recommendations."""
        analyzer = SpeedAnalyzer(settings=make_settings())
        values = {"lcp": 5200, "fcp": 3500, "cls": 0.3, "tbt": 900, "ttfb": 1500, "speed_index": 7000, "performance_score": 25}

        result = analyzer.build_result("https://example.com", values)

        assert result.score == 25
        assert result.recommendations
        assert result.metrics["grade"] == "F"
