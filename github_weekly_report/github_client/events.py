"""Decoding of activity event payloads into typed models.

Each event type the report understands has a payload model tagged with a
``kind`` literal. Types the report deliberately skips decode to
``IgnoredEvent`` and anything else to ``UnrecognizedEvent``, which keeps the
raw payload for logging.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError

from ..errors import EventDecodeError
from .models import ActivityEvent, GitHubIssue, GitHubPullRequest


class IssueCommentEvent(BaseModel):
    """A comment was created, edited or deleted on an issue or pull request."""

    kind: Literal["IssueCommentEvent"] = "IssueCommentEvent"
    action: str | None = None
    issue: GitHubIssue
    comment: dict[str, Any] | None = None


class IssuesEvent(BaseModel):
    """An issue was opened, closed, reopened, labeled, etc."""

    kind: Literal["IssuesEvent"] = "IssuesEvent"
    action: str | None = None
    issue: GitHubIssue


class PullRequestEvent(BaseModel):
    """A pull request was opened, closed, synchronized, etc."""

    kind: Literal["PullRequestEvent"] = "PullRequestEvent"
    action: str | None = None
    number: int | None = None
    pull_request: GitHubPullRequest


class PullRequestReviewCommentEvent(BaseModel):
    """A review comment was left on a pull request diff."""

    kind: Literal["PullRequestReviewCommentEvent"] = "PullRequestReviewCommentEvent"
    action: str | None = None
    pull_request: GitHubPullRequest
    comment: dict[str, Any] | None = None


class IgnoredEvent(BaseModel):
    """A known event type that does not reference issues or pull requests."""

    kind: Literal["ignored"] = "ignored"
    event_type: str


class UnrecognizedEvent(BaseModel):
    """An event type the report has no handling for."""

    kind: Literal["unrecognized"] = "unrecognized"
    event_type: str
    payload: dict[str, Any] = Field(default_factory=dict)


DecodedEvent = (
    IssueCommentEvent
    | IssuesEvent
    | PullRequestEvent
    | PullRequestReviewCommentEvent
    | IgnoredEvent
    | UnrecognizedEvent
)

PAYLOAD_MODELS: dict[str, type[BaseModel]] = {
    "IssueCommentEvent": IssueCommentEvent,
    "IssuesEvent": IssuesEvent,
    "PullRequestEvent": PullRequestEvent,
    "PullRequestReviewCommentEvent": PullRequestReviewCommentEvent,
}

IGNORED_EVENT_TYPES = frozenset(
    {"CommitCommentEvent", "CreateEvent", "PushEvent", "DeleteEvent"}
)


def decode_event(event: ActivityEvent) -> DecodedEvent:
    """Decode an event's payload according to its type.

    Args:
        event: Raw activity event

    Returns:
        One of the ``DecodedEvent`` variants

    Raises:
        EventDecodeError: If a payload does not match the model of its type
    """
    if event.type in IGNORED_EVENT_TYPES:
        return IgnoredEvent(event_type=event.type)

    model = PAYLOAD_MODELS.get(event.type)
    if model is None:
        return UnrecognizedEvent(event_type=event.type, payload=event.payload)

    try:
        decoded = model.model_validate(event.payload)
    except ValidationError as e:
        raise EventDecodeError(event.type, str(e)) from e
    return decoded  # type: ignore[return-value]
