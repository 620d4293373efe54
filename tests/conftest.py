"""Test configuration and fixtures."""

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any
from unittest.mock import Mock

import pytest

from github_weekly_report.config import ReportConfig
from github_weekly_report.github_client.client import GitHubClient
from github_weekly_report.github_client.models import (
    ActivityEvent,
    GitHubLabel,
    GitHubPullRequest,
    GitHubUser,
)

ME = "octocat"
WIP = "do-not-merge/work-in-progress"


@pytest.fixture
def config() -> ReportConfig:
    """Report config for the acting user over one week."""
    return ReportConfig(
        user=ME,
        start=datetime(2024, 1, 8, tzinfo=timezone.utc),
        end=datetime(2024, 1, 15, tzinfo=timezone.utc),
        wip_label=WIP,
    )


@pytest.fixture
def issue_payload() -> Callable[..., dict[str, Any]]:
    """Factory for the issue member of IssuesEvent/IssueCommentEvent payloads."""
    return _issue_payload


def _issue_payload(
    url: str, title: str = "An issue", is_pull_request: bool = False
) -> dict[str, Any]:
    """Build the issue member of an IssuesEvent/IssueCommentEvent payload."""
    issue: dict[str, Any] = {
        "number": int(url.rsplit("/", 1)[1]),
        "title": title,
        "html_url": url,
        "state": "open",
    }
    if is_pull_request:
        issue["pull_request"] = {"html_url": url}
    return issue


@pytest.fixture
def pull_request_payload() -> Callable[..., dict[str, Any]]:
    """Factory for the pull_request member of PullRequestEvent payloads."""
    return _pull_request_payload


def _pull_request_payload(url: str, title: str = "A pull request") -> dict[str, Any]:
    """Build the pull_request member of a PullRequestEvent payload."""
    return {
        "number": int(url.rsplit("/", 1)[1]),
        "title": title,
        "html_url": url,
        "state": "open",
    }


@pytest.fixture
def make_event() -> Callable[..., ActivityEvent]:
    """Factory for raw activity events."""

    def _make(
        event_type: str,
        payload: dict[str, Any] | None = None,
        created_at: datetime | None = None,
    ) -> ActivityEvent:
        return ActivityEvent(
            type=event_type,
            created_at=created_at or datetime(2024, 1, 10, tzinfo=timezone.utc),
            payload=payload or {},
        )

    return _make


@pytest.fixture
def make_pull_request() -> Callable[..., GitHubPullRequest]:
    """Factory for pull requests as returned by GitHubClient.get_pull_request."""
    return _make_pull_request


def _make_pull_request(
    url: str,
    title: str = "A pull request",
    author: str = ME,
    state: str = "open",
    merged: bool = False,
    labels: list[str] | None = None,
) -> GitHubPullRequest:
    """Build a pull request as returned by GitHubClient.get_pull_request."""
    return GitHubPullRequest(
        number=int(url.rsplit("/", 1)[1]),
        title=title,
        html_url=url,
        state=state,
        merged=merged,
        user=GitHubUser(login=author, id=1),
        labels=[GitHubLabel(name=name) for name in labels or []],
    )


@pytest.fixture
def mock_client() -> Mock:
    """GitHubClient stand-in with no canned responses."""
    return Mock(spec=GitHubClient)
