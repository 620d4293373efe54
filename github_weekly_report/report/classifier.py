"""Discovery of issues and pull requests referenced by activity events."""

import logging
from collections.abc import Iterable

from ..config import DEFAULT_WEB_ROOT
from ..github_client.events import DecodedEvent, decode_event
from ..github_client.models import ActivityEvent, GitHubIssue, GitHubPullRequest
from .registry import NameRegistry
from .urls import PullRequestRef, parse_pull_request_url

logger = logging.getLogger(__name__)


class DiscoveredItems:
    """Everything the classifier learned from one event stream.

    Attributes:
        names: Display name per URL, first seen wins
        issues: URLs of plain issues, in discovery order
        pull_requests: Coordinates per pull request URL, in discovery order
    """

    def __init__(self) -> None:
        self.names = NameRegistry()
        self.issues: dict[str, GitHubIssue] = {}
        self.pull_requests: dict[str, PullRequestRef] = {}


class DiscoveryClassifier:
    """Routes decoded events into a ``DiscoveredItems`` result."""

    def __init__(self, web_root: str = DEFAULT_WEB_ROOT):
        self.web_root = web_root

    def classify(self, events: Iterable[ActivityEvent]) -> DiscoveredItems:
        """Classify events, which must be ordered newest first.

        Raises:
            EventDecodeError: If an event payload cannot be decoded
            PullRequestURLError: If a pull request URL is malformed
        """
        # Decode everything up front so a bad payload aborts before any routing.
        decoded = [decode_event(event) for event in events]

        discovered = DiscoveredItems()
        for event in decoded:
            self._route(discovered, event)

        logger.info(
            "Discovered %d issues and %d pull requests",
            len(discovered.issues),
            len(discovered.pull_requests),
        )
        return discovered

    def _route(self, discovered: DiscoveredItems, event: DecodedEvent) -> None:
        if event.kind == "IssueCommentEvent" or event.kind == "IssuesEvent":
            self._add_issue(discovered, event.issue)
        elif (
            event.kind == "PullRequestEvent"
            or event.kind == "PullRequestReviewCommentEvent"
        ):
            self._add_pull_request(discovered, event.pull_request)
        elif event.kind == "ignored":
            if event.event_type == "CommitCommentEvent":
                logger.info("Hit a CommitCommentEvent")
            else:
                logger.debug("Ignoring %s", event.event_type)
        else:
            logger.info("Hit some other event type: %s", event.event_type)

    def _add_issue(self, discovered: DiscoveredItems, issue: GitHubIssue) -> None:
        url = discovered.names.record_first_seen(issue)
        if issue.is_pull_request:
            if url not in discovered.pull_requests:
                discovered.pull_requests[url] = parse_pull_request_url(
                    issue.html_url, self.web_root
                )
        elif url not in discovered.issues:
            discovered.issues[url] = issue

    def _add_pull_request(
        self, discovered: DiscoveredItems, pull_request: GitHubPullRequest
    ) -> None:
        url = discovered.names.record_first_seen(pull_request)
        if url not in discovered.pull_requests:
            discovered.pull_requests[url] = parse_pull_request_url(
                pull_request.html_url, self.web_root
            )
