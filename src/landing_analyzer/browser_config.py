"""
Browser configuration for Playwright-based page analysis.

This module provides a validated Pydantic configuration model for all browser-related
settings and pre-configured instances for common use cases.
"""
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from landing_analyzer.constants import (
    DEFAULT_NAVIGATION_TIMEOUT_MS,
    DEFAULT_VIEWPORT,
    MAX_NAVIGATION_TIMEOUT_MS,
)


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class BrowserConfig(BaseModel):
    """
    Configuration for the Playwright-based BrowserSession.

    All fields are validated by Pydantic to ensure type safety and valid values.
    """

    headless: bool = Field(
        default=True,
        description="Run browser in headless mode (no visible UI)"
    )

    browser_type: Literal["chromium", "firefox", "webkit"] = Field(
        default="chromium",
        description="Browser engine used for local sessions"
    )

    viewport_width: int = Field(
        default=DEFAULT_VIEWPORT["width"],
        description="Viewport width in CSS pixels",
        ge=320,
        le=3840
    )

    viewport_height: int = Field(
        default=DEFAULT_VIEWPORT["height"],
        description="Viewport height in CSS pixels; defines the fold",
        ge=320,
        le=2160
    )

    timeout: int = Field(
        default=DEFAULT_NAVIGATION_TIMEOUT_MS,
        description="Page navigation timeout in milliseconds",
        ge=DEFAULT_NAVIGATION_TIMEOUT_MS,
        le=MAX_NAVIGATION_TIMEOUT_MS
    )

    wait_until: Literal["load", "domcontentloaded", "networkidle", "commit"] = Field(
        default="networkidle",
        description="When to consider navigation complete"
    )

    launch_args: List[str] = Field(
        default_factory=lambda: ["--no-sandbox", "--disable-dev-shm-usage"],
        description="Additional browser launch arguments for local sessions"
    )

    user_agent: Optional[str] = Field(
        default=DEFAULT_USER_AGENT,
        description="User agent for new contexts. None keeps the browser default."
    )

    remote_endpoint: Optional[str] = Field(
        default=None,
        description="CDP websocket endpoint for remote sessions. None uses settings."
    )

    extra_http_headers: Dict[str, str] = Field(
        default_factory=dict,
        description="Headers sent with every request from the page"
    )

    block_resources: List[str] = Field(
        default_factory=list,
        description="Resource types to block (e.g., 'media', 'websocket')"
    )

    class Config:
        """Pydantic model configuration."""
        frozen = False
        validate_assignment = True

    @property
    def viewport(self) -> Dict[str, int]:
        """Viewport dict in the shape Playwright expects."""
        return {"width": self.viewport_width, "height": self.viewport_height}


# --- Pre-configured Instances for Common Use Cases ---

DEFAULT_CONFIG = BrowserConfig()
"""
Default configuration for analysis runs.

Headless Chromium at 1920x1080, waiting for network idle up to 30 seconds.
"""

DEBUG_CONFIG = BrowserConfig(
    headless=False,
    timeout=60000,
    launch_args=[],
)
"""
Debug configuration with a visible browser.

Best for watching what the analyzers see on a troublesome page.
"""
