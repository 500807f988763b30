# tests/test_lighthouse_runner.py
"""Tests for the local Lighthouse CLI runner."""

import json
import subprocess

import pytest
from unittest.mock import MagicMock, patch

from landing_analyzer.exceptions import AuditFailure
from landing_analyzer.lighthouse_runner import LighthouseRunner


REPORT = {
    "audits": {"largest-contentful-paint": {"numericValue": 1800}},
    "categories": {"performance": {"score": 0.91}},
}


def fake_run(report, returncode=0):
    """subprocess.run stand-in that writes report to the --output-path file."""
    def run(cmd, **kwargs):
        output_path = next(arg.split("=", 1)[1] for arg in cmd if arg.startswith("--output-path="))
        with open(output_path, "w") as f:
            f.write(report if isinstance(report, str) else json.dumps(report))
        return MagicMock(returncode=returncode, stderr="lighthouse error output")
    return run


class TestLighthouseRunner:
    """Test suite for LighthouseRunner."""

    @pytest.fixture
    def runner(self):
        """Create a LighthouseRunner instance."""
        return LighthouseRunner(timeout=5)

    def test_build_command(self, runner):
        """Test the CLI invocation is a performance-only audit."""
        cmd = runner.build_command("https://example.com", "/tmp/out.json")

        assert cmd[:2] == ["lighthouse", "https://example.com"]
        assert "--output=json" in cmd
        assert "--output-path=/tmp/out.json" in cmd
        assert "--only-categories=performance" in cmd
        assert "--preset=desktop" in cmd
        assert "--chrome-flags=--headless --no-sandbox" in cmd

    def test_run_returns_report(self, runner):
        """Test a successful run returns the parsed report."""
        with patch("landing_analyzer.lighthouse_runner.subprocess.run", side_effect=fake_run(REPORT)) as run:
            report = runner.run_lighthouse("https://example.com")

        assert report == REPORT
        assert run.call_args.kwargs["timeout"] == 5

    def test_nonzero_exit(self, runner):
        """Test that a failing CLI raises AuditFailure."""
        with patch("landing_analyzer.lighthouse_runner.subprocess.run", side_effect=fake_run(REPORT, returncode=1)):
            with pytest.raises(AuditFailure, match="exited with code 1"):
                runner.run_lighthouse("https://example.com")

    def test_timeout(self, runner):
        """Test that a timeout raises AuditFailure."""
        error = subprocess.TimeoutExpired(cmd="lighthouse", timeout=5)
        with patch("landing_analyzer.lighthouse_runner.subprocess.run", side_effect=error):
            with pytest.raises(AuditFailure, match="timeout"):
                runner.run_lighthouse("https://example.com")

    def test_missing_executable(self, runner):
        """Test that a missing Lighthouse binary raises AuditFailure."""
        with patch("landing_analyzer.lighthouse_runner.subprocess.run", side_effect=FileNotFoundError("lighthouse")):
            with pytest.raises(AuditFailure):
                runner.run_lighthouse("https://example.com")

    def test_invalid_report(self, runner):
        """Test that unreadable JSON raises AuditFailure."""
        with patch("landing_analyzer.lighthouse_runner.subprocess.run", side_effect=fake_run("{broken")):
            with pytest.raises(AuditFailure, match="Invalid Lighthouse report"):
                runner.run_lighthouse("https://example.com")

    def test_report_without_audits(self, runner):
        """Test that a report with no audits raises AuditFailure."""
        with patch("landing_analyzer.lighthouse_runner.subprocess.run", side_effect=fake_run({"categories": {}})):
            with pytest.raises(AuditFailure, match="no audits"):
                runner.run_lighthouse("https://example.com")
