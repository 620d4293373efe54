"""Pydantic models for GitHub data structures.

These models map to the parts of GitHub's REST API v3 responses the report
needs: user activity events, the issues and pull requests embedded in their
payloads, and the current state of a single pull request.
API Reference: https://docs.github.com/en/rest/activity/events
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator


class GitHubUser(BaseModel):
    """GitHub user model representing a user account.

    Maps to GitHub REST API User object.
    API Reference: https://docs.github.com/en/rest/users/users
    """

    login: str = Field(..., description="GitHub username/login (string)")
    id: int = Field(..., description="Unique user identifier (integer)")


class GitHubLabel(BaseModel):
    """GitHub label model representing repository labels.

    Maps to GitHub REST API Label object.
    API Reference: https://docs.github.com/en/rest/issues/labels
    """

    name: str = Field(..., description="Name of the label (string)")
    color: str | None = Field(
        None, description="Hexadecimal color code without leading # (string)"
    )
    description: str | None = Field(
        None, description="Short description of the label (string, max 100 characters)"
    )


class GitHubIssue(BaseModel):
    """Issue embedded in an IssuesEvent or IssueCommentEvent payload.

    GitHub's issues API also returns pull requests; those carry a
    ``pull_request`` member pointing at the pull request resources.
    API Reference: https://docs.github.com/en/rest/issues/issues
    """

    number: int = Field(..., description="Issue number within the repository (integer)")
    title: str | None = Field(None, description="Title of the issue (string)")
    html_url: str = Field(..., description="Web URL of the issue (string)")
    state: str | None = Field(None, description="State: 'open' or 'closed' (string)")
    pull_request: dict[str, Any] | None = Field(
        None, description="Present when the issue is actually a pull request"
    )

    @property
    def is_pull_request(self) -> bool:
        """Whether this issue represents a pull request."""
        return self.pull_request is not None


class GitHubPullRequest(BaseModel):
    """GitHub pull request model.

    Event payloads carry a snapshot taken when the event happened, so only
    ``html_url`` is guaranteed there. Pull requests fetched through the pulls
    API fill in every field.
    API Reference: https://docs.github.com/en/rest/pulls/pulls
    """

    number: int = Field(..., description="Pull request number (integer)")
    title: str | None = Field(None, description="Title of the pull request (string)")
    html_url: str = Field(..., description="Web URL of the pull request (string)")
    state: str | None = Field(None, description="State: 'open' or 'closed' (string)")
    merged: bool = Field(False, description="Whether the pull request was merged")
    user: GitHubUser | None = Field(None, description="Author of the pull request")
    labels: list[GitHubLabel] = Field(
        default_factory=list, description="Labels attached to the pull request"
    )

    @field_validator("merged", mode="before")
    @classmethod
    def _null_merged(cls, value: Any) -> Any:
        # Event snapshots report merged as null for unmerged pull requests.
        return False if value is None else value

    @field_validator("labels", mode="before")
    @classmethod
    def _null_labels(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def author_login(self) -> str | None:
        """Login of the pull request author, if known."""
        return self.user.login if self.user is not None else None

    def has_label(self, name: str) -> bool:
        """Check whether a label with exactly ``name`` is attached."""
        return any(label.name == name for label in self.labels)


class ActivityEvent(BaseModel):
    """Raw GitHub activity event with an undecoded payload.

    Maps to GitHub REST API Event object.
    API Reference: https://docs.github.com/en/rest/using-the-rest-api/github-event-types
    """

    id: str | None = Field(None, description="Unique event identifier (string)")
    type: str = Field(..., description="Event type, e.g. 'PullRequestEvent'")
    created_at: datetime = Field(..., description="Timestamp of the event (ISO 8601)")
    repo_name: str | None = Field(
        None, description="Full name of the repository the event happened in"
    )
    payload: dict[str, Any] = Field(
        default_factory=dict, description="Type-specific event payload"
    )
