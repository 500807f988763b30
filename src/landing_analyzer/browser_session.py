"""
Browser session management for landing page analysis.

This module provides a BrowserSession class that owns one Playwright browser
for the duration of an analysis request, either launched locally or attached
to a remote Browserless instance over CDP:

    async with BrowserSession(config) as session:
        async with session.open_page("https://example.com") as page:
            ...
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from playwright.async_api import async_playwright

from landing_analyzer.browser_config import BrowserConfig, DEFAULT_CONFIG
from landing_analyzer.config import settings as default_settings
from landing_analyzer.exceptions import NavigationError

logger = logging.getLogger(__name__)


def select_backend(environment: Optional[str], token: Optional[str]) -> str:
    """Choose where browsers and audits run.

    Returns "remote" only for production with a Browserless token configured.
    """
    if environment == "production" and token:
        return "remote"
    return "local"


class BrowserSession:
    """
    Playwright browser lifecycle for a single analysis request.

    The browser is released on every exit path of the async context manager,
    and every page opened through open_page() is closed together with its
    context.
    """

    def __init__(self, config: Optional[BrowserConfig] = None, settings=None):
        """
        Initialize the session.

        Args:
            config: BrowserConfig instance with browser settings
            settings: Settings object (defaults to the module-level settings)
        """
        self._config = config or DEFAULT_CONFIG
        self._settings = settings or default_settings
        self._playwright = None
        self._browser = None
        self.backend = select_backend(
            self._settings.APP_ENV, self._settings.BROWSERLESS_TOKEN
        )

        logger.debug(f"BrowserSession initialized (backend={self.backend})")

    @property
    def config(self) -> BrowserConfig:
        return self._config

    def remote_endpoint(self) -> str:
        """CDP websocket URL including the Browserless token."""
        base = self._config.remote_endpoint or self._settings.BROWSERLESS_WS_URL
        return f"{base}?token={self._settings.BROWSERLESS_TOKEN}"

    async def __aenter__(self) -> "BrowserSession":
        """Enter async context manager, acquiring a browser."""
        self._playwright = await async_playwright().start()

        try:
            if self.backend == "remote":
                logger.info("Connecting to remote browser (Browserless)")
                self._browser = await self._playwright.chromium.connect_over_cdp(
                    self.remote_endpoint()
                )
            else:
                logger.info(
                    f"Launching {self._config.browser_type} browser "
                    f"(headless={self._config.headless})"
                )
                browser_launcher = getattr(self._playwright, self._config.browser_type)

                launch_options = {"headless": self._config.headless}
                if self._config.launch_args:
                    launch_options["args"] = self._config.launch_args

                self._browser = await browser_launcher.launch(**launch_options)
        except Exception:
            await self._playwright.stop()
            self._playwright = None
            raise

        logger.info("Browser launched successfully")
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context manager, closing browser."""
        if self._browser:
            logger.info("Closing browser")
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

        logger.info("Browser closed successfully")

    async def _create_context(self):
        """Create a new, isolated browser context with the configured viewport."""
        options = {
            "viewport": self._config.viewport,
            "java_script_enabled": True,
        }
        if self._config.user_agent:
            options["user_agent"] = self._config.user_agent
        if self._config.extra_http_headers:
            options["extra_http_headers"] = self._config.extra_http_headers

        return await self._browser.new_context(**options)

    @asynccontextmanager
    async def open_page(self, url: str) -> AsyncIterator:
        """
        Open a fresh page, navigate to url and yield it.

        Args:
            url: Absolute URL to load

        Yields:
            Loaded Playwright page

        Raises:
            RuntimeError: If the session has not been entered
            NavigationError: If navigation fails or times out
        """
        if not self._browser:
            raise RuntimeError(
                "Browser is not running. Use BrowserSession as an async context manager: "
                "async with BrowserSession(config) as session:"
            )

        context = await self._create_context()
        page = None

        try:
            page = await context.new_page()

            if self._config.block_resources:
                await page.route(
                    "**/*",
                    lambda route: (
                        route.abort()
                        if route.request.resource_type in self._config.block_resources
                        else route.continue_()
                    )
                )

            logger.info(f"Navigating to {url}")
            try:
                await page.goto(
                    url,
                    wait_until=self._config.wait_until,
                    timeout=self._config.timeout
                )
            except PlaywrightTimeoutError as e:
                logger.error(f"Navigation timed out for {url}: {e}")
                raise NavigationError(
                    url, f"timed out after {self._config.timeout}ms"
                ) from e
            except PlaywrightError as e:
                logger.error(f"Navigation failed for {url}: {e}")
                raise NavigationError(url, str(e)) from e

            yield page

        finally:
            if page is not None:
                await page.close()
            # Always close context to ensure isolation
            await context.close()
