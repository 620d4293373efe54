"""Reconciliation of discovered pull requests against their live state."""

import logging
from enum import Enum
from typing import TYPE_CHECKING

from ..config import ReportConfig
from ..github_client.models import GitHubPullRequest
from .classifier import DiscoveredItems
from .registry import NameRegistry

if TYPE_CHECKING:
    from ..github_client.client import GitHubClient

logger = logging.getLogger(__name__)


class Category(str, Enum):
    """Report categories in rendering order."""

    MERGED = "Merged"
    ABANDONED = "Abandoned"
    UNDER_REVIEW = "Under Review"
    IN_PROGRESS = "In Progress"
    REVIEWED = "Reviewed"
    ISSUES = "Issues"
    UNKNOWN_STATE = "Unknown State"


class CategoryPartition:
    """Disjoint, insertion-ordered sets of URLs, one per category."""

    def __init__(self, names: NameRegistry):
        self.names = names
        self._members: dict[Category, dict[str, None]] = {
            category: {} for category in Category
        }
        self._assigned: dict[str, Category] = {}

    def assign(self, url: str, category: Category) -> None:
        """Place ``url`` in ``category``.

        Raises:
            ValueError: If the URL already belongs to a category
        """
        existing = self._assigned.get(url)
        if existing is not None:
            raise ValueError(f"{url} is already categorized as {existing.value}")
        self._assigned[url] = category
        self._members[category][url] = None

    def members(self, category: Category) -> list[str]:
        return list(self._members[category])

    @property
    def merged(self) -> list[str]:
        return self.members(Category.MERGED)

    @property
    def abandoned(self) -> list[str]:
        return self.members(Category.ABANDONED)

    @property
    def under_review(self) -> list[str]:
        return self.members(Category.UNDER_REVIEW)

    @property
    def in_progress(self) -> list[str]:
        return self.members(Category.IN_PROGRESS)

    @property
    def reviewed(self) -> list[str]:
        return self.members(Category.REVIEWED)

    @property
    def issues(self) -> list[str]:
        return self.members(Category.ISSUES)

    @property
    def unknown_state(self) -> list[str]:
        return self.members(Category.UNKNOWN_STATE)

    def __len__(self) -> int:
        return len(self._assigned)


def categorize_pull_request(
    pull_request: GitHubPullRequest, config: ReportConfig
) -> Category:
    """Pick the category for a pull request from its current state.

    Authorship decides first: anything the user did not author counts as
    reviewed, whatever its state.
    """
    if pull_request.author_login != config.user:
        return Category.REVIEWED

    if pull_request.state == "open":
        if pull_request.has_label(config.wip_label):
            return Category.IN_PROGRESS
        return Category.UNDER_REVIEW

    if pull_request.state == "closed":
        if pull_request.merged:
            return Category.MERGED
        return Category.ABANDONED

    logger.warning(
        "Pull request %s is in an unknown state: %r",
        pull_request.html_url,
        pull_request.state,
    )
    return Category.UNKNOWN_STATE


class ReconciliationEngine:
    """Queries each discovered pull request and sorts it into a category."""

    def __init__(self, client: "GitHubClient", config: ReportConfig):
        self.client = client
        self.config = config

    def reconcile(self, discovered: DiscoveredItems) -> CategoryPartition:
        """Build the category partition for everything discovered.

        The fetched title replaces the event-derived name for every pull
        request. Plain issues are copied into ``Issues`` without a query.

        Raises:
            RemoteQueryError: If any pull request cannot be fetched
        """
        partition = CategoryPartition(discovered.names)

        for url, ref in discovered.pull_requests.items():
            pull_request = self.client.get_pull_request(
                ref.owner, ref.repository, ref.number
            )
            discovered.names.force_override(url, pull_request)
            category = categorize_pull_request(pull_request, self.config)
            logger.debug("%s -> %s", url, category.value)
            partition.assign(url, category)

        for url in discovered.issues:
            partition.assign(url, Category.ISSUES)

        return partition
