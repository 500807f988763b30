"""Exceptions raised by the landing page analyzer."""


class NavigationError(Exception):
    """The page could not be loaded. Fatal to the analysis request."""

    def __init__(self, url: str, message: str):
        self.url = url
        self.message = message
        super().__init__(f"Failed to load {url}: {message}")


class AuditFailure(Exception):
    """A performance audit backend failed or timed out."""
