# tests/test_orchestrator.py
"""Tests for the landing page analysis orchestrator."""

import asyncio
from contextlib import asynccontextmanager

import pytest
from unittest.mock import AsyncMock, MagicMock

from landing_analyzer.config import ScoringThresholds
from landing_analyzer.exceptions import NavigationError
from landing_analyzer.models import ScreenshotResult, SectionResult
from landing_analyzer.orchestrator import LandingPageAnalyzer, analyze_landing_page, failed_section


class FakeSession:
    """BrowserSession stand-in that yields a mock page or fails navigation."""

    instances = []

    def __init__(self, config, settings, fail_navigation=False):
        self.config = config
        self.settings = settings
        self.fail_navigation = fail_navigation
        self.page = MagicMock()
        self.page.screenshot = AsyncMock(return_value=b"\x89PNG")
        self.entered = False
        self.exited = False
        FakeSession.instances.append(self)

    async def __aenter__(self):
        self.entered = True
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.exited = True

    @asynccontextmanager
    async def open_page(self, url):
        if self.fail_navigation:
            raise NavigationError(url, "net::ERR_NAME_NOT_RESOLVED")
        yield self.page


def failing_session(config, settings):
    return FakeSession(config, settings, fail_navigation=True)


def stub_analyzers(analyzer, scores):
    """Replace each analyzer's analyze() with an AsyncMock returning the given score."""
    for key, attr in (
        ("fonts", "fonts"),
        ("images", "images"),
        ("cta", "cta"),
        ("whitespace", "whitespace"),
        ("social_proof", "social_proof"),
    ):
        getattr(analyzer, attr).analyze = AsyncMock(
            return_value=SectionResult(score=scores[key], metrics={"context": {}})
        )


SCORES = {
    "page_speed": 80,
    "fonts": 80,
    "images": 90,
    "cta": 70,
    "whitespace": 100,
    "social_proof": 60,
}


class TestLandingPageAnalyzer:
    """Test suite for LandingPageAnalyzer."""

    @pytest.fixture(autouse=True)
    def reset_sessions(self):
        """Forget sessions created by earlier tests."""
        FakeSession.instances = []

    @pytest.fixture
    def speed(self):
        """Speed analyzer stand-in."""
        speed = MagicMock()
        speed.analyze = AsyncMock(return_value=SectionResult(score=SCORES["page_speed"], metrics={"context": {}}))
        return speed

    @pytest.fixture
    def analyzer(self, speed):
        """Orchestrator wired to fakes."""
        analyzer = LandingPageAnalyzer(speed_analyzer=speed, session_factory=FakeSession)
        stub_analyzers(analyzer, SCORES)
        return analyzer

    @pytest.mark.asyncio
    async def test_completed_analysis(self, analyzer, speed):
        """Test a successful run fills every section and the overall score."""
        result = await analyzer.analyze("https://example.com")

        assert result.status == "completed"
        assert result.error is None
        assert {key: s.score for key, s in result.sections().items()} == SCORES
        assert result.overall_score == 80
        speed.analyze.assert_awaited_once_with("https://example.com")

    @pytest.mark.asyncio
    async def test_analyzers_share_one_page(self, analyzer):
        """Test that all DOM analyzers receive the same page."""
        await analyzer.analyze("https://example.com")

        assert len(FakeSession.instances) == 1
        session = FakeSession.instances[0]
        assert session.entered and session.exited
        for attr in ("fonts", "images", "cta", "whitespace", "social_proof"):
            assert getattr(analyzer, attr).analyze.call_args[0][0] is session.page

    def test_thresholds_shared_with_analyzers(self):
        """Test that one thresholds object configures speed, CTA and whitespace."""
        thresholds = ScoringThresholds(slow_ttfb_ms=1200, cta_max_above_fold=3)

        analyzer = LandingPageAnalyzer(thresholds=thresholds, session_factory=FakeSession)

        assert analyzer.speed.thresholds is thresholds
        assert analyzer.cta.thresholds is thresholds
        assert analyzer.whitespace.thresholds is thresholds

    @pytest.mark.asyncio
    async def test_browser_config_from_config(self, analyzer):
        """Test the session receives the configured viewport."""
        await analyzer.analyze("https://example.com")

        config = FakeSession.instances[0].config
        assert config.viewport == {"width": 1920, "height": 1080}
        assert analyzer.cta.analyze.call_args[0][2] == {"width": 1920, "height": 1080}

    @pytest.mark.asyncio
    async def test_navigation_failure(self, speed):
        """Test that a page that cannot load fails the whole request."""
        analyzer = LandingPageAnalyzer(speed_analyzer=speed, session_factory=failing_session)
        stub_analyzers(analyzer, SCORES)

        result = await analyzer.analyze("https://does-not-exist.example")

        assert result.status == "failed"
        assert "ERR_NAME_NOT_RESOLVED" in result.error
        assert result.overall_score == 0
        analyzer.cta.analyze.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_navigation_failure_cancels_speed_audit(self):
        """Test that an in-flight speed audit is cancelled on navigation failure."""
        started = asyncio.Event()
        cancelled = []

        async def slow_audit(url):
            started.set()
            try:
                await asyncio.sleep(60)
            except asyncio.CancelledError:
                cancelled.append(url)
                raise

        speed = MagicMock()
        speed.analyze = slow_audit

        @asynccontextmanager
        async def open_page(url):
            await started.wait()
            raise NavigationError(url, "timed out after 30000ms")
            yield

        def session_factory(config, settings):
            session = FakeSession(config, settings)
            session.open_page = open_page
            return session

        analyzer = LandingPageAnalyzer(speed_analyzer=speed, session_factory=session_factory)
        result = await analyzer.analyze("https://example.com")

        assert result.status == "failed"
        assert cancelled == ["https://example.com"]

    @pytest.mark.asyncio
    async def test_analyzer_failure_is_isolated(self, analyzer):
        """Test that one failing analyzer only zeroes its own section."""
        analyzer.cta.analyze = AsyncMock(side_effect=RuntimeError("script error"))

        result = await analyzer.analyze("https://example.com")

        assert result.status == "completed"
        assert result.cta.score == 0
        assert result.cta.issues == ["CTA analysis failed"]
        assert result.fonts.score == 80
        assert result.overall_score == 68

    @pytest.mark.asyncio
    async def test_speed_failure_is_isolated(self, analyzer, speed):
        """Test that an unexpected speed error only zeroes page speed."""
        speed.analyze = AsyncMock(side_effect=RuntimeError("boom"))

        result = await analyzer.analyze("https://example.com")

        assert result.status == "completed"
        assert result.page_speed.score == 0
        assert result.page_speed.issues == ["Page Speed analysis failed"]

    @pytest.mark.asyncio
    async def test_invalid_url(self, analyzer, speed):
        """Test that invalid URLs are rejected before any work starts."""
        with pytest.raises(ValueError):
            await analyzer.analyze("ftp://example.com")
        speed.analyze.assert_not_awaited()
        assert FakeSession.instances == []

    @pytest.mark.asyncio
    async def test_screenshot_stored(self, speed):
        """Test that a configured store receives a viewport screenshot."""
        stored = ScreenshotResult(
            url="https://example.com",
            blob_url="file:///tmp/x.png",
            pathname="/tmp/x.png",
            download_url="file:///tmp/x.png",
            size=4,
        )
        store = MagicMock()
        store.store = AsyncMock(return_value=stored)
        analyzer = LandingPageAnalyzer(speed_analyzer=speed, session_factory=FakeSession, screenshot_store=store)
        stub_analyzers(analyzer, SCORES)

        result = await analyzer.analyze("https://example.com")

        store.store.assert_awaited_once_with("https://example.com", b"\x89PNG")
        assert result.screenshot is stored

    @pytest.mark.asyncio
    async def test_screenshot_failure_does_not_fail_analysis(self, speed):
        """Test that a storage error is logged, not raised."""
        store = MagicMock()
        store.store = AsyncMock(side_effect=OSError("disk full"))
        analyzer = LandingPageAnalyzer(speed_analyzer=speed, session_factory=FakeSession, screenshot_store=store)
        stub_analyzers(analyzer, SCORES)

        result = await analyzer.analyze("https://example.com")

        assert result.status == "completed"
        assert result.screenshot is None

    @pytest.mark.asyncio
    async def test_analyze_landing_page(self, speed):
        """Test the convenience wrapper."""
        result = await analyze_landing_page(
            "https://example.com", speed_analyzer=speed, session_factory=failing_session
        )
        assert result.status == "failed"

    @pytest.mark.asyncio
    async def test_page_metadata_read_from_shared_page(self, speed):
        """Test that title, description and schema are read from the analyzed page."""
        def session_factory(config, settings):
            session = FakeSession(config, settings)
            session.page.evaluate = AsyncMock(return_value={
                "title": "Acme",
                "description": "Rockets",
                "url": "https://example.com/",
                "jsonLd": ['{"@type": "Organization", "name": "Acme"}'],
            })
            return session

        analyzer = LandingPageAnalyzer(speed_analyzer=speed, session_factory=session_factory)
        stub_analyzers(analyzer, SCORES)

        result = await analyzer.analyze("https://example.com")

        assert result.page_metadata.title == "Acme"
        assert result.page_metadata.schema["name"] == "Acme"
        assert result.to_dict()["page_metadata"]["description"] == "Rockets"

    @pytest.mark.asyncio
    async def test_page_metadata_failure_does_not_fail_analysis(self, speed):
        """Test that a metadata script error is logged, not raised."""
        def session_factory(config, settings):
            session = FakeSession(config, settings)
            session.page.evaluate = AsyncMock(side_effect=RuntimeError("script error"))
            return session

        analyzer = LandingPageAnalyzer(speed_analyzer=speed, session_factory=session_factory)
        stub_analyzers(analyzer, SCORES)

        result = await analyzer.analyze("https://example.com")

        assert result.status == "completed"
        assert result.page_metadata is None
        assert result.to_dict()["page_metadata"] is None

    def test_failed_section(self):
        """Test the placeholder for a failed analyzer."""
        section = failed_section("social_proof")
        assert section.score == 0
        assert section.issues == ["Social Proof analysis failed"]
        assert section.recommendations == []
