"""Exceptions raised while building a weekly report.

Every error here is fatal for a run: the CLI catches ``ReportError`` at its
boundary and exits non-zero instead of printing a partial report.
"""


class ReportError(Exception):
    """Base class for errors that abort report generation."""


class ConfigurationError(ReportError):
    """Raised when the token, user or report window cannot be resolved."""


class EventDecodeError(ReportError):
    """Raised when an event payload does not match the shape of its type."""

    def __init__(self, event_type: str, message: str):
        self.event_type = event_type
        super().__init__(f"Unable to decode {event_type} payload: {message}")


class PullRequestURLError(ReportError):
    """Raised when a pull request URL cannot be split into coordinates."""

    def __init__(self, url: str, reason: str):
        self.url = url
        super().__init__(f"{reason}: {url!r}")


class RemoteQueryError(ReportError):
    """Raised when a GitHub API call fails."""
