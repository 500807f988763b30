# tests/test_models.py
"""Tests for the data models."""

from datetime import datetime

import pytest

from landing_analyzer.models import (
    AnalysisRequest,
    AnalysisResult,
    ImageInfo,
    ScreenshotResult,
    SectionResult,
    SECTION_KEYS,
    calculate_overall_score,
    round_half_up,
    validate_url,
)


class TestValidateUrl:
    """Tests for URL validation."""

    def test_accepts_http_and_https(self):
        """Test absolute http(s) URLs are accepted."""
        assert validate_url("https://example.com") == "https://example.com"
        assert validate_url("  http://example.com/landing?a=1 ") == "http://example.com/landing?a=1"

    @pytest.mark.parametrize("url", ["", "example.com", "ftp://example.com", "https://", "javascript:alert(1)"])
    def test_rejects_invalid(self, url):
        """Test relative, empty and non-http URLs are rejected."""
        with pytest.raises(ValueError):
            validate_url(url)

    def test_request_validates(self):
        """Test that AnalysisRequest validates its URL."""
        assert AnalysisRequest(url="https://example.com").url == "https://example.com"
        with pytest.raises(ValueError):
            AnalysisRequest(url="/relative/path")


class TestScores:
    """Tests for score arithmetic."""

    def test_round_half_up(self):
        """Test halves round up."""
        assert round_half_up(2.5) == 3
        assert round_half_up(82.5) == 83
        assert round_half_up(82.49) == 82

    def test_overall_score(self):
        """Test the overall score is the rounded mean of six sections."""
        assert calculate_overall_score([85, 90, 75, 80, 95, 70]) == 83
        assert calculate_overall_score([]) == 0

    def test_section_score_clamped(self):
        """Test section scores are clamped to 0-100."""
        assert SectionResult(score=150).score == 100
        assert SectionResult(score=-20).score == 0

    def test_compute_overall_score(self):
        """Test that the result averages its six sections."""
        result = AnalysisResult(url="https://example.com")
        for key, score in zip(SECTION_KEYS, [85, 90, 75, 80, 95, 70]):
            setattr(result, key, SectionResult(score=score))

        assert result.compute_overall_score() == 83
        assert result.overall_score == 83


class TestAnalysisResult:
    """Tests for the combined result."""

    def test_defaults(self):
        """Test a new result is pending with empty sections."""
        result = AnalysisResult(url="https://example.com")

        assert result.status == "pending"
        assert result.error is None
        assert list(result.sections()) == list(SECTION_KEYS)
        assert all(section.score == 0 for section in result.sections().values())

    def test_to_dict(self):
        """Test serialization of a completed result."""
        result = AnalysisResult(
            url="https://example.com",
            cta=SectionResult(score=70, issues=["Only one CTA found on the page"], metrics={"context": {}}),
            status="completed",
        )
        result.screenshot = ScreenshotResult(
            url="https://example.com",
            blob_url="file:///tmp/s.png",
            pathname="/tmp/s.png",
            download_url="file:///tmp/s.png",
            size=10,
            uploaded_at=datetime(2024, 5, 1, 12, 0, 0),
        )

        data = result.to_dict()

        assert data["status"] == "completed"
        assert data["cta"]["score"] == 70
        assert data["cta"]["issues"] == ["Only one CTA found on the page"]
        assert data["screenshot"]["uploaded_at"] == "2024-05-01T12:00:00"
        assert data["screenshot"]["size"] == 10
        assert isinstance(data["analyzed_at"], str)

    def test_section_context(self):
        """Test the context accessor."""
        assert SectionResult(metrics={"context": {"ctaCount": 2}}).context == {"ctaCount": 2}
        assert SectionResult().context == {}


class TestImageInfo:
    """Tests for the rendered image model."""

    def test_oversized(self):
        """Test natural size larger than the rendered box."""
        image = ImageInfo(src="a.jpg", natural_width=2000, natural_height=1000, rendered_width=800, rendered_height=400)
        assert image.is_oversized

    def test_not_oversized(self):
        """Test images displayed at or above natural size."""
        assert not ImageInfo(src="a.jpg", natural_width=400, natural_height=200, rendered_width=400, rendered_height=200).is_oversized

    def test_hidden_image_not_oversized(self):
        """Test that images with no rendered box are ignored."""
        assert not ImageInfo(src="a.jpg", natural_width=400, natural_height=200).is_oversized
