"""Clients for external performance-audit services."""

from landing_analyzer.external.browserless_performance import BrowserlessPerformanceAPI

__all__ = ["BrowserlessPerformanceAPI"]
