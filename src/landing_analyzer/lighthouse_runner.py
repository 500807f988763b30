"""
Lighthouse Performance Runner

Runs Google Lighthouse via CLI to collect a performance-only audit of a page.
Used as the local backend when no remote Browserless service is configured.
"""

import json
import subprocess
import tempfile
from pathlib import Path
from typing import Optional, Dict, Any
import logging

from landing_analyzer.constants import AUDIT_TIMEOUT_SECONDS
from landing_analyzer.exceptions import AuditFailure

logger = logging.getLogger(__name__)


class LighthouseRunner:
    """Runs Lighthouse performance audits and returns the raw report."""

    def __init__(
        self,
        lighthouse_path: str = "lighthouse",
        chrome_flags: Optional[list[str]] = None,
        timeout: int = AUDIT_TIMEOUT_SECONDS,
        preset: str = "desktop",
    ):
        """
        Initialize the Lighthouse runner.

        Args:
            lighthouse_path: Lighthouse executable
            chrome_flags: Additional Chrome flags (e.g., ['--headless'])
            timeout: Hard timeout for Lighthouse execution in seconds
            preset: Lighthouse config preset (desktop, perf)
        """
        self.lighthouse_path = lighthouse_path
        self.chrome_flags = chrome_flags or ["--headless", "--no-sandbox"]
        self.timeout = timeout
        self.preset = preset

    def build_command(self, url: str, output_path: str) -> list[str]:
        """Build the Lighthouse CLI invocation for a performance-only audit."""
        return [
            self.lighthouse_path,
            url,
            "--output=json",
            f"--output-path={output_path}",
            "--quiet",
            "--only-categories=performance",
            f"--preset={self.preset}",
            "--chrome-flags=" + " ".join(self.chrome_flags),
        ]

    def run_lighthouse(self, url: str) -> Dict[str, Any]:
        """
        Run Lighthouse on a URL and return the Lighthouse result (lhr).

        The subprocess is killed when the timeout expires.

        Args:
            url: The URL to audit

        Returns:
            Lighthouse report JSON

        Raises:
            AuditFailure: If Lighthouse fails, times out or writes no report
        """
        logger.info(f"[Lighthouse] Running performance audit on {url}")

        # Create temporary file for output
        with tempfile.NamedTemporaryFile(
            mode="w", suffix=".json", delete=False
        ) as tmp_file:
            output_path = tmp_file.name

        try:
            result = subprocess.run(
                self.build_command(url, output_path),
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )

            if result.returncode != 0:
                logger.error(f"[Lighthouse] Failed for {url}: {result.stderr}")
                raise AuditFailure(
                    f"Lighthouse exited with code {result.returncode}"
                )

            with open(output_path, "r") as f:
                lighthouse_data = json.load(f)

        except subprocess.TimeoutExpired as e:
            logger.error(f"[Lighthouse] Timeout for {url} after {self.timeout}s")
            raise AuditFailure(f"Lighthouse timeout after {self.timeout}s") from e
        except FileNotFoundError as e:
            logger.error(f"[Lighthouse] Executable or report not found: {e}")
            raise AuditFailure(str(e)) from e
        except json.JSONDecodeError as e:
            logger.error(f"[Lighthouse] Unreadable report for {url}: {e}")
            raise AuditFailure(f"Invalid Lighthouse report: {e}") from e
        finally:
            Path(output_path).unlink(missing_ok=True)

        if not isinstance(lighthouse_data, dict) or "audits" not in lighthouse_data:
            raise AuditFailure("Lighthouse report has no audits")

        logger.info(f"[Lighthouse] Completed successfully for {url}")
        return lighthouse_data
