# tests/test_image_analyzer.py
"""Tests for the image optimization analyzer."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from landing_analyzer.image_analyzer import (
    ImageAnalyzer,
    calculate_image_score,
    detect_image_format,
    image_issues,
    to_image_info,
)
from landing_analyzer.models import ImageInfo


class TestImageFormat:
    """Tests for format detection from URLs."""

    @pytest.mark.parametrize("src,fmt", [
        ("https://cdn.example.com/hero.webp", "webp"),
        ("/img/photo.JPG?v=3", "jpg"),
        ("photo.jpe", "jpeg"),
        ("logo.svg#icon", "svg"),
        ("https://images.example.com/abc?fm=avif&w=800", "avif"),
        ("https://images.example.com/abc?format=png", "png"),
        ("data:image/svg+xml;base64,PHN2Zz4=", "svg"),
        ("data:image/gif;base64,R0lGOD", "gif"),
        ("https://images.example.com/abc", "unknown"),
        ("", "unknown"),
    ])
    def test_detect_image_format(self, src, fmt):
        """Test extension, query parameter and data URI detection."""
        assert detect_image_format(src) == fmt


class TestImageScoring:
    """Tests for the image score and issues."""

    @pytest.fixture
    def images(self):
        """A mix of optimized and unoptimized images."""
        return [
            ImageInfo(src="hero.webp", format="webp", alt="Product dashboard"),
            ImageInfo(src="team.jpg", format="jpg", alt=""),
            ImageInfo(src="badge.gif", format="gif", alt=""),
            ImageInfo(src="logo.svg", format="svg", alt="Acme"),
        ]

    def test_score(self, images):
        """Test 5 points per missing alt and 10 per unoptimized format."""
        assert calculate_image_score(images) == 100 - 2 * 5 - 2 * 10

    def test_score_no_images(self):
        """Test that a page without images scores 100."""
        assert calculate_image_score([]) == 100

    def test_score_floor(self):
        """Test that the score never drops below zero."""
        images = [ImageInfo(src=f"{i}.gif", format="gif") for i in range(10)]
        assert calculate_image_score(images) == 0

    def test_issues(self, images):
        """Test one issue per missing alt and unoptimized format."""
        assert image_issues(images) == [
            "Missing alt text for image: team.jpg",
            "Missing alt text for image: badge.gif",
            "Unoptimized format for image: badge.gif",
            "Unoptimized format for image: logo.svg",
        ]

    def test_oversized_issue(self):
        """Test the oversized image summary."""
        images = [ImageInfo(src="big.png", format="png", alt="Big", natural_width=3000, natural_height=2000, rendered_width=600, rendered_height=400)]
        assert image_issues(images) == ["1 images are served larger than their displayed size"]


class TestImageAnalyzer:
    """Test suite for ImageAnalyzer."""

    @pytest.fixture
    def analyzer(self):
        """Create an ImageAnalyzer instance."""
        return ImageAnalyzer()

    @pytest.fixture
    def raw_images(self):
        """Image records as returned by the page script."""
        return [
            {"src": "https://example.com/hero.avif", "naturalWidth": 1600, "naturalHeight": 900, "width": 800, "height": 450, "alt": "Hero", "loading": "eager", "hasSrcset": True},
            {"src": "https://example.com/team.png", "naturalWidth": 400, "naturalHeight": 400, "width": 400, "height": 400, "alt": "  ", "loading": "lazy", "hasSrcset": False},
            {"src": "https://example.com/spacer.gif", "naturalWidth": 1, "naturalHeight": 1, "width": 1, "height": 1, "alt": "", "loading": "lazy", "hasSrcset": False},
        ]

    def test_to_image_info(self, raw_images):
        """Test conversion of a raw record."""
        info = to_image_info(raw_images[1])

        assert info.format == "png"
        assert info.alt == ""
        assert info.rendered_width == 400.0

    def test_evaluate(self, analyzer, raw_images):
        """Test the section result and recommendation context."""
        result = analyzer.evaluate(raw_images, "https://example.com")

        assert result.score == 100 - 2 * 5 - 10
        assert result.context["totalImages"] == 3
        assert result.context["imagesWithoutAlt"] == 2
        assert result.context["nonModernFormatCount"] == 2
        assert result.context["oversizedImages"] == 1
        assert result.context["imageFormats"] == ["avif", "gif", "png"]
        assert result.metrics["lazy_loaded"] == 2
        assert result.metrics["responsive"] == 1
        assert result.metrics["format_breakdown"] == {"avif": 1, "png": 1, "gif": 1}
        assert result.recommendations

    def test_evaluate_no_images(self, analyzer):
        """Test a page without images."""
        result = analyzer.evaluate([])

        assert result.score == 100
        assert result.issues == []
        assert result.context["totalImages"] == 0

    @pytest.mark.asyncio
    async def test_analyze_collects_from_page(self, analyzer, raw_images):
        """Test that images are read through page.evaluate."""
        page = MagicMock()
        page.evaluate = AsyncMock(return_value=raw_images)

        result = await analyzer.analyze(page, "https://example.com")

        assert len(result.metrics["images"]) == 3
        page.evaluate.assert_awaited_once()
