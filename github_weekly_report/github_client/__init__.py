"""GitHub client package for API interaction."""

from .client import GitHubClient
from .events import DecodedEvent, decode_event
from .models import (
    ActivityEvent,
    GitHubIssue,
    GitHubLabel,
    GitHubPullRequest,
    GitHubUser,
)

__all__ = [
    "GitHubClient",
    "ActivityEvent",
    "DecodedEvent",
    "GitHubUser",
    "GitHubLabel",
    "GitHubIssue",
    "GitHubPullRequest",
    "decode_event",
]
