# tests/test_screenshot.py
"""Tests for screenshot capture and local storage."""

from datetime import datetime
from pathlib import Path

import pytest
from unittest.mock import AsyncMock, MagicMock

from landing_analyzer.screenshot import FileScreenshotStore, capture_screenshot, screenshot_filename


class TestScreenshotFilename:
    """Tests for screenshot_filename."""

    def test_filename_format(self):
        """Test the hash prefix and timestamp layout."""
        name = screenshot_filename("https://example.com", datetime(2024, 3, 5, 14, 7, 9))
        # base64url("https://example.com") starts with "aHR0cHM6Ly"
        assert name == "screenshot-aHR0cHM6Ly-2024-03-05_140709.png"

    def test_filename_is_filesystem_safe(self):
        """Test that URL characters never leak into the name."""
        name = screenshot_filename("https://example.com/?q=a/b+c", datetime(2024, 1, 1))
        assert "/" not in name
        assert "+" not in name
        assert "=" not in name


class TestCapture:
    """Tests for capture_screenshot."""

    @pytest.mark.asyncio
    async def test_viewport_png(self):
        """Test that the viewport is captured as PNG by default."""
        page = MagicMock()
        page.screenshot = AsyncMock(return_value=b"png-bytes")

        image = await capture_screenshot(page)

        assert image == b"png-bytes"
        page.screenshot.assert_awaited_once_with(type="png", full_page=False)


class TestFileScreenshotStore:
    """Tests for FileScreenshotStore."""

    @pytest.mark.asyncio
    async def test_store(self, tmp_path):
        """Test that images are written under a per-domain directory."""
        store = FileScreenshotStore(str(tmp_path))

        result = await store.store("http://localhost:8000/landing", b"\x89PNG data")

        path = Path(result.pathname)
        assert path.parent == tmp_path / "localhost_8000"
        assert path.read_bytes() == b"\x89PNG data"
        assert path.name.startswith("screenshot-")
        assert result.size == 9
        assert result.url == "http://localhost:8000/landing"
        assert result.blob_url.startswith("file://")
        assert result.download_url == result.blob_url
