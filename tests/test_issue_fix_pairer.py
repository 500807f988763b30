# tests/test_issue_fix_pairer.py
"""Tests for impact categorization and issue-fix pairing."""

import pytest

from landing_analyzer.impact_analyzer import (
    categorize_by_impact,
    categorize_content,
    get_impact_from_text,
    group_by_impact,
)
from landing_analyzer.issue_fix_pairer import (
    extract_keywords,
    group_pairs_by_impact,
    pair_issues_with_fixes,
)
from landing_analyzer.models import IssueFix


class TestImpactCategorization:
    """Test keyword-based impact levels."""

    @pytest.mark.parametrize("text,impact", [
        ("Slow LCP: 3000ms (should be ≤ 2500ms)", "High"),
        ("No clear CTA above the fold", "High"),
        ("Add testimonials with photos", "High"),
        ("Compress hero images", "Medium"),
        ("Insufficient spacing around headlines", "Medium"),
        ("Consider a slight tweak to colors", "Low"),
        ("Nothing notable here", "Medium"),
    ])
    def test_categorize_by_impact(self, text, impact):
        """Test impact levels, with Medium as the default."""
        assert categorize_by_impact(text) == impact

    def test_get_impact_from_text_defaults_low(self):
        """Test that unmatched text is Low for pairing."""
        assert get_impact_from_text("Nothing notable here") == "Low"
        assert get_impact_from_text("Consider a slight tweak to colors") == "Low"
        assert get_impact_from_text("Page speed is slow") == "High"

    def test_categorize_content_sorted_stably(self):
        """Test sorting High, Medium, Low with input order kept within a level."""
        categorized = categorize_content(
            issues=["Consider polish", "Improve fonts", "Slow server", "Broken layout"],
            recommendations=["Optimize images"],
        )
        assert categorized["issues"] == [
            ("Slow server", "High"),
            ("Broken layout", "High"),
            ("Improve fonts", "Medium"),
            ("Consider polish", "Low"),
        ]
        assert categorized["recommendations"] == [("Optimize images", "Medium")]

    def test_categorize_content_empty(self):
        """Test empty inputs."""
        assert categorize_content() == {"issues": [], "recommendations": []}

    def test_group_by_impact(self):
        """Test grouping keeps order within a level."""
        grouped = group_by_impact([("a", "High"), ("b", "Low"), ("c", "High")])
        assert grouped == {"High": ["a", "c"], "Low": ["b"]}


class TestIssueFixPairer:
    """Test pairing of issues with recommendations."""

    def test_extract_keywords(self):
        """Test keyword extraction is case-insensitive substring matching."""
        assert extract_keywords("Slow LCP on mobile") == {"slow", "lcp", "mobile"}

    def test_pairs_best_match(self):
        """Test that an issue gets the recommendation sharing most keywords."""
        pairs = pair_issues_with_fixes(
            ["Slow LCP: 3000ms (should be ≤ 2500ms)"],
            ["Optimize images to improve LCP", "Add testimonials from real customers"],
        )
        assert pairs == [
            IssueFix(
                issue="Slow LCP: 3000ms (should be ≤ 2500ms)",
                fix="Optimize images to improve LCP",
                impact="High",
            ),
            IssueFix(issue=None, fix="Add testimonials from real customers", impact="High"),
        ]

    def test_unmatched_issue_has_no_fix(self):
        """Test that an issue without shared keywords stays unpaired."""
        pairs = pair_issues_with_fixes(["Nothing notable here"], ["Compress your fonts"])
        assert pairs[0] == IssueFix(issue=None, fix="Compress your fonts", impact="Medium")
        assert pairs[1] == IssueFix(issue="Nothing notable here", fix=None, impact="Low")

    def test_tie_goes_to_first_recommendation(self):
        """Test that the earliest recommendation wins a tie."""
        pairs = pair_issues_with_fixes(
            ["Page is slow on mobile"],
            ["Reduce slow scripts", "Check the mobile layout"],
        )
        assert pairs[0].fix == "Reduce slow scripts"
        assert pairs[1].issue is None
        assert pairs[1].fix == "Check the mobile layout"

    def test_one_fix_for_many_issues(self):
        """Test that a recommendation can fix several issues."""
        pairs = pair_issues_with_fixes(
            ["CTA button is hard to find", "Secondary CTA competes"],
            ["Make the primary CTA button stand out"],
        )
        assert [pair.fix for pair in pairs] == ["Make the primary CTA button stand out"] * 2

    def test_idempotent(self):
        """Test that pairing is deterministic."""
        issues = ["Slow LCP", "Missing alt text for image: hero.png"]
        recs = ["Add descriptive alt text to images", "Lazy load offscreen images"]
        assert pair_issues_with_fixes(issues, recs) == pair_issues_with_fixes(issues, recs)

    def test_empty_inputs(self):
        """Test that no input yields no pairs."""
        assert pair_issues_with_fixes([], []) == []
        assert pair_issues_with_fixes() == []

    def test_group_pairs_by_impact(self):
        """Test grouping pairs by impact."""
        pairs = pair_issues_with_fixes(["Slow LCP"], ["Consider a small tweak"])
        grouped = group_pairs_by_impact(pairs)
        assert [pair.issue for pair in grouped["High"]] == ["Slow LCP"]
        assert [pair.fix for pair in grouped["Low"]] == ["Consider a small tweak"]

    def test_issue_fix_requires_content(self):
        """Test that an empty pair is rejected."""
        with pytest.raises(ValueError):
            IssueFix(issue=None, fix=None)
