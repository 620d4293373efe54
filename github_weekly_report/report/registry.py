"""Registry of display names keyed by issue or pull request URL."""

from typing import Protocol


class Nameable(Protocol):
    """Anything with a title and a canonical web URL."""

    @property
    def title(self) -> str | None: ...

    @property
    def html_url(self) -> str: ...


def format_display_name(title: str | None, url: str) -> str:
    """Format a Markdown link for an item."""
    return f"[{title or ''}]({url})"


class NameRegistry:
    """Maps each discovered URL to exactly one display name."""

    def __init__(self) -> None:
        self._names: dict[str, str] = {}

    def record_first_seen(self, item: Nameable) -> str:
        """Register ``item``'s name unless its URL is already known.

        Events are traversed newest first, so the first title seen for a URL
        is the most recent one.

        Returns:
            The item's URL
        """
        url = item.html_url
        if url not in self._names:
            self.force_override(url, item)
        return url

    def force_override(self, url: str, item: Nameable) -> None:
        """Replace the name stored for ``url``."""
        self._names[url] = format_display_name(item.title, item.html_url)

    def get(self, url: str) -> str | None:
        return self._names.get(url)

    def __contains__(self, url: object) -> bool:
        return url in self._names

    def __len__(self) -> int:
        return len(self._names)
