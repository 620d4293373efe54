"""GitHub API client using PyGitHub."""

import logging
from collections.abc import Iterator

from github import Github
from github.Event import Event
from github.GithubException import GithubException
from github.Label import Label
from github.NamedUser import NamedUser
from github.PullRequest import PullRequest
from rich.console import Console

from ..errors import RemoteQueryError
from .models import ActivityEvent, GitHubLabel, GitHubPullRequest, GitHubUser

logger = logging.getLogger(__name__)
console = Console(stderr=True)

LOW_RATE_LIMIT = 10


class GitHubClient:
    """GitHub API client for listing activity and fetching pull requests."""

    def __init__(self, token: str):
        """Initialize GitHub client with authentication.

        Args:
            token: GitHub personal access token.
        """
        if not token:
            raise ValueError("GitHub token is required.")

        self.token = token
        self.github = Github(self.token)
        self._check_rate_limit()

    def _check_rate_limit(self) -> None:
        """Report the remaining core rate limit."""
        try:
            rate_limit = self.github.get_rate_limit()
            remaining = rate_limit.core.remaining

            console.print(f"GitHub API rate limit: {remaining} requests remaining")

            if remaining < LOW_RATE_LIMIT:
                console.print(
                    f"Warning: rate limit low, resets at {rate_limit.core.reset:%H:%M:%S}"
                )

        except Exception as e:
            console.print(f"Warning: Could not check rate limit: {e}")

    def _convert_user(self, github_user: NamedUser) -> GitHubUser:
        """Convert PyGitHub user to our model."""
        return GitHubUser(login=github_user.login, id=github_user.id)

    def _convert_label(self, github_label: Label) -> GitHubLabel:
        """Convert PyGitHub label to our model."""
        return GitHubLabel(
            name=github_label.name,
            color=github_label.color,
            description=github_label.description,
        )

    def _convert_pull_request(self, github_pr: PullRequest) -> GitHubPullRequest:
        """Convert PyGitHub pull request to our model."""
        return GitHubPullRequest(
            number=github_pr.number,
            title=github_pr.title,
            html_url=github_pr.html_url,
            state=github_pr.state,
            merged=bool(github_pr.merged),
            user=self._convert_user(github_pr.user) if github_pr.user else None,
            labels=[self._convert_label(label) for label in github_pr.labels],
        )

    def _convert_event(self, github_event: Event) -> ActivityEvent:
        """Convert PyGitHub event to our model."""
        repo = github_event.raw_data.get("repo") or {}
        return ActivityEvent(
            id=github_event.id,
            type=github_event.type,
            created_at=github_event.created_at,
            repo_name=repo.get("name"),
            payload=github_event.payload or {},
        )

    def list_user_events(
        self, user: str, public_only: bool = True
    ) -> Iterator[ActivityEvent]:
        """List events performed by a user, newest first.

        PyGitHub follows the pagination links until GitHub reports no next
        page.

        Args:
            user: GitHub login whose events to list
            public_only: List only public events

        Yields:
            ActivityEvent objects in the order GitHub returns them

        Raises:
            RemoteQueryError: If any page cannot be fetched
        """
        try:
            named_user = self.github.get_user(user)
            events = (
                named_user.get_public_events()
                if public_only
                else named_user.get_events()
            )
            for github_event in events:
                yield self._convert_event(github_event)
        except GithubException as e:
            raise RemoteQueryError(f"Unable to list events for {user}: {e}") from e

    def get_pull_request(self, owner: str, repo: str, number: int) -> GitHubPullRequest:
        """Get the current state of a pull request.

        Raises:
            RemoteQueryError: If the repository or pull request cannot be fetched
        """
        logger.debug("Fetching pull request %s/%s#%d", owner, repo, number)
        try:
            repository = self.github.get_repo(f"{owner}/{repo}")
            github_pr = repository.get_pull(number)
            return self._convert_pull_request(github_pr)
        except GithubException as e:
            raise RemoteQueryError(
                f"Unable to get pull request {owner}/{repo}#{number}: {e}"
            ) from e
