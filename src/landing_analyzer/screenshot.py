"""Screenshot capture and the storage contract it hands images to."""

import base64
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Protocol
from urllib.parse import urlparse

from landing_analyzer.models import ScreenshotResult

logger = logging.getLogger(__name__)


class ScreenshotStore(Protocol):
    """Anything that can persist a screenshot and report where it went."""

    async def store(self, url: str, image: bytes) -> ScreenshotResult:
        ...


async def capture_screenshot(page, full_page: bool = False) -> bytes:
    """PNG of the current viewport (or the whole page)."""
    return await page.screenshot(type="png", full_page=full_page)


def screenshot_filename(url: str, timestamp: Optional[datetime] = None, extension: str = "png") -> str:
    """screenshot-<url hash>-<timestamp>.png, safe for any filesystem."""
    timestamp = timestamp or datetime.now()
    url_hash = base64.urlsafe_b64encode(url.encode("utf-8")).decode("ascii").rstrip("=")[:10]
    return f"screenshot-{url_hash}-{timestamp.strftime('%Y-%m-%d_%H%M%S')}.{extension}"


class FileScreenshotStore:
    """Stores screenshots on local disk, one directory per domain."""

    def __init__(self, base_dir: str = "screenshots"):
        self.base_dir = Path(base_dir)

    async def store(self, url: str, image: bytes) -> ScreenshotResult:
        domain = urlparse(url).netloc.replace(":", "_") or "unknown"
        directory = self.base_dir / domain
        directory.mkdir(parents=True, exist_ok=True)

        uploaded_at = datetime.now()
        path = directory / screenshot_filename(url, uploaded_at)
        path.write_bytes(image)
        logger.info(f"Saved screenshot for {url} to {path} ({len(image)} bytes)")

        location = path.resolve().as_uri()
        return ScreenshotResult(
            url=url,
            blob_url=location,
            pathname=str(path),
            download_url=location,
            size=len(image),
            uploaded_at=uploaded_at,
        )
