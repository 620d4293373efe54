"""Decomposition of pull request URLs into API coordinates."""

from pydantic import BaseModel, Field

from ..config import DEFAULT_WEB_ROOT
from ..errors import PullRequestURLError


class PullRequestRef(BaseModel):
    """Coordinates used to address a pull request through the pulls API."""

    owner: str = Field(..., description="Repository owner (user or organization)")
    repository: str = Field(..., description="Repository name")
    number: int = Field(..., description="Pull request number")


def parse_pull_request_url(url: str, web_root: str = DEFAULT_WEB_ROOT) -> PullRequestRef:
    """Split ``https://github.com/owner/repo/pull/42`` into its coordinates.

    Issue URLs of pull requests (``.../issues/42``) parse the same way.

    Args:
        url: Web URL of the pull request
        web_root: Expected URL prefix, including the trailing slash

    Returns:
        PullRequestRef with owner, repository and number

    Raises:
        PullRequestURLError: If the prefix, segment count or number is wrong
    """
    if not url.startswith(web_root):
        raise PullRequestURLError(url, "Bad prefix")

    segments = url.removeprefix(web_root).split("/")
    if len(segments) < 4:
        raise PullRequestURLError(url, "Incorrect number of path segments")

    if not (segments[3].isascii() and segments[3].isdigit()):
        raise PullRequestURLError(url, "Unable to parse the pull request number")
    number = int(segments[3])
    if number <= 0:
        raise PullRequestURLError(url, "Pull request number must be positive")

    return PullRequestRef(owner=segments[0], repository=segments[1], number=number)
