"""
Browserless Performance API Client

Runs a Lighthouse performance audit on Browserless infrastructure through its
/performance REST endpoint. Returns the raw Lighthouse result.
API Documentation: https://docs.browserless.io/rest-apis/performance
"""

import logging
from typing import Any, Dict, Optional

import httpx

from landing_analyzer.constants import AUDIT_TIMEOUT_SECONDS, DEFAULT_VIEWPORT
from landing_analyzer.exceptions import AuditFailure

logger = logging.getLogger(__name__)


class BrowserlessPerformanceAPI:
    """Client for the Browserless /performance endpoint"""

    API_URL = "https://production-sfo.browserless.io/performance"

    def __init__(
        self,
        token: str,
        api_url: Optional[str] = None,
        timeout: float = AUDIT_TIMEOUT_SECONDS,
    ):
        """
        Initialize Browserless performance client.

        Args:
            token: Browserless API token
            api_url: Override the performance endpoint
            timeout: Hard timeout for the whole audit in seconds
        """
        self.token = token
        self.api_url = api_url or self.API_URL
        self.timeout = timeout

    def build_payload(self, url: str) -> Dict[str, Any]:
        """Request body for a desktop, performance-only Lighthouse run."""
        return {
            "url": url,
            "config": {
                "extends": "lighthouse:default",
                "settings": {
                    "onlyCategories": ["performance"],
                    "formFactor": "desktop",
                    "screenEmulation": {
                        "mobile": False,
                        "width": DEFAULT_VIEWPORT["width"],
                        "height": DEFAULT_VIEWPORT["height"],
                        "deviceScaleFactor": 1,
                    },
                },
            },
        }

    async def run_audit(self, url: str) -> Dict[str, Any]:
        """
        Run a performance audit for url.

        Args:
            url: URL to audit

        Returns:
            Lighthouse result with "audits" and usually "categories"

        Raises:
            AuditFailure: On timeout, HTTP error or an unusable response
        """
        try:
            async with httpx.AsyncClient(timeout=httpx.Timeout(self.timeout)) as client:
                logger.info(f"[Browserless] Fetching performance metrics for {url}")
                response = await client.post(
                    self.api_url,
                    params={"token": self.token},
                    json=self.build_payload(url),
                    headers={"Content-Type": "application/json"},
                )
                response.raise_for_status()
                data = response.json()

        except httpx.TimeoutException as e:
            logger.error(f"[Browserless] Timeout analyzing {url} (>{self.timeout}s)")
            raise AuditFailure(
                f"Browserless performance API timeout after {self.timeout}s"
            ) from e

        except httpx.HTTPStatusError as e:
            logger.error(
                f"[Browserless] API error {e.response.status_code} for {url}: {e.response.text}"
            )
            raise AuditFailure(
                f"Browserless API error ({e.response.status_code})"
            ) from e

        except (httpx.HTTPError, ValueError) as e:
            error_msg = str(e) if str(e) else type(e).__name__
            logger.error(f"[Browserless] Error analyzing {url}: {error_msg}")
            raise AuditFailure(error_msg) from e

        if not isinstance(data, dict) or "audits" not in data:
            logger.error(f"[Browserless] Response for {url} has no audits")
            raise AuditFailure("Browserless response has no audits")

        logger.info("[Browserless] Performance metrics retrieved successfully")
        return data
