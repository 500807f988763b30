"""
Landing page analysis orchestrator.

One request gets one browser session and one navigated page. The five DOM
analyzers share that page concurrently, while the speed audit loads the URL
on its own and starts before navigation. A navigation failure fails the
whole request; any other analyzer failure only zeroes that analyzer's
section.
"""

import asyncio
import logging
from typing import Callable, Dict, Optional

from landing_analyzer.browser_config import BrowserConfig
from landing_analyzer.browser_session import BrowserSession
from landing_analyzer.config import Config, ScoringThresholds, default_thresholds
from landing_analyzer.config import settings as default_settings
from landing_analyzer.cta_analyzer import CTAAnalyzer
from landing_analyzer.exceptions import NavigationError
from landing_analyzer.font_analyzer import FontAnalyzer
from landing_analyzer.image_analyzer import ImageAnalyzer
from landing_analyzer.models import AnalysisResult, SectionResult, validate_url
from landing_analyzer.page_metadata import extract_page_metadata
from landing_analyzer.priority_insight import SECTIONS
from landing_analyzer.screenshot import ScreenshotStore, capture_screenshot
from landing_analyzer.social_proof_analyzer import SocialProofAnalyzer
from landing_analyzer.speed_analyzer import SpeedAnalyzer
from landing_analyzer.whitespace_analyzer import WhitespaceAnalyzer

logger = logging.getLogger(__name__)

SECTION_NAMES: Dict[str, str] = {info.key: info.name for info in SECTIONS}


def failed_section(key: str) -> SectionResult:
    """Placeholder for a section whose analyzer raised."""
    return SectionResult(
        score=0,
        issues=[f"{SECTION_NAMES.get(key, key)} analysis failed"],
        recommendations=[],
        metrics={"context": {}},
    )


class LandingPageAnalyzer:
    """Runs all six analyses for one URL and combines them."""

    def __init__(
        self,
        config: Optional[Config] = None,
        settings=None,
        thresholds: Optional[ScoringThresholds] = None,
        browser_config: Optional[BrowserConfig] = None,
        speed_analyzer: Optional[SpeedAnalyzer] = None,
        session_factory: Optional[Callable[..., BrowserSession]] = None,
        screenshot_store: Optional[ScreenshotStore] = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            config: Runtime configuration (viewport, timeouts, headless)
            settings: Environment settings (backend selection, tokens)
            thresholds: Scoring thresholds shared by the analyzers
            browser_config: Overrides the browser settings derived from config
            speed_analyzer: Pre-built speed analyzer, mainly for tests
            session_factory: Callable returning a BrowserSession-like async
                context manager, mainly for tests
            screenshot_store: Where to store a viewport screenshot, if anywhere
        """
        self.config = config or Config()
        self.settings = settings or default_settings
        self.thresholds = thresholds or default_thresholds
        self.browser_config = browser_config or BrowserConfig(
            headless=self.config.headless,
            viewport_width=self.config.viewport_width,
            viewport_height=self.config.viewport_height,
            timeout=self.config.navigation_timeout_ms,
        )
        self.session_factory = session_factory or BrowserSession
        self.screenshot_store = screenshot_store

        self.speed = speed_analyzer or SpeedAnalyzer(
            self.config, self.settings, thresholds=self.thresholds
        )
        self.fonts = FontAnalyzer()
        self.images = ImageAnalyzer()
        self.cta = CTAAnalyzer(self.thresholds)
        self.whitespace = WhitespaceAnalyzer(self.thresholds)
        self.social_proof = SocialProofAnalyzer()

    async def analyze(self, url: str) -> AnalysisResult:
        """
        Analyze a landing page.

        Args:
            url: Absolute http(s) URL

        Returns:
            AnalysisResult with status "completed", or "failed" with an error
            message and no sections when the page could not be loaded

        Raises:
            ValueError: If url is not an absolute http(s) URL
        """
        url = validate_url(url)
        result = AnalysisResult(url=url)
        logger.info(f"Starting landing page analysis for {url}")

        speed_task = asyncio.create_task(self._run_speed(url))

        try:
            sections = await self._analyze_page(url, result)
        except NavigationError as e:
            await self._cancel(speed_task)
            logger.error(f"Analysis failed for {url}: {e}")
            result.status = "failed"
            result.error = str(e)
            return result
        except BaseException:
            await self._cancel(speed_task)
            raise

        result.page_speed = await speed_task
        for key, section in sections.items():
            setattr(result, key, section)

        result.compute_overall_score()
        result.status = "completed"
        logger.info(f"Analysis complete for {url}: overall score {result.overall_score}")
        return result

    async def _run_speed(self, url: str) -> SectionResult:
        try:
            return await self.speed.analyze(url)
        except Exception as e:
            logger.error(f"Page speed analysis raised for {url}: {e}", exc_info=True)
            return failed_section("page_speed")

    async def _analyze_page(self, url: str, result: AnalysisResult) -> Dict[str, SectionResult]:
        viewport = self.browser_config.viewport

        async with self.session_factory(self.browser_config, self.settings) as session:
            async with session.open_page(url) as page:
                sections = await self._run_dom_analyzers(page, url, viewport)
                await self._read_metadata(page, url, result)
                if self.screenshot_store is not None:
                    await self._store_screenshot(page, url, result)
        return sections

    async def _run_dom_analyzers(self, page, url: str, viewport) -> Dict[str, SectionResult]:
        """Run the five page-based analyzers concurrently; failures stay per section."""
        runs = {
            "fonts": self.fonts.analyze(page, url),
            "images": self.images.analyze(page, url),
            "cta": self.cta.analyze(page, url, viewport),
            "whitespace": self.whitespace.analyze(page, url),
            "social_proof": self.social_proof.analyze(page, url, viewport),
        }
        outcomes = await asyncio.gather(*runs.values(), return_exceptions=True)

        sections = {}
        for key, outcome in zip(runs, outcomes):
            if isinstance(outcome, Exception):
                logger.error(
                    f"{SECTION_NAMES[key]} analysis failed for {url}: {outcome}",
                    exc_info=outcome,
                )
                sections[key] = failed_section(key)
            elif isinstance(outcome, BaseException):
                raise outcome
            else:
                sections[key] = outcome
        return sections

    async def _read_metadata(self, page, url: str, result: AnalysisResult) -> None:
        try:
            result.page_metadata = await extract_page_metadata(page, url)
        except Exception as e:
            logger.warning(f"Page metadata extraction failed for {url}: {e}")

    async def _store_screenshot(self, page, url: str, result: AnalysisResult) -> None:
        try:
            image = await capture_screenshot(page)
            result.screenshot = await self.screenshot_store.store(url, image)
        except Exception as e:
            logger.warning(f"Screenshot capture failed for {url}: {e}")

    @staticmethod
    async def _cancel(task: asyncio.Task) -> None:
        if task.done():
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            logger.debug("Page speed task cancelled")


async def analyze_landing_page(url: str, **kwargs) -> AnalysisResult:
    """Convenience wrapper: LandingPageAnalyzer(**kwargs).analyze(url)."""
    return await LandingPageAnalyzer(**kwargs).analyze(url)
