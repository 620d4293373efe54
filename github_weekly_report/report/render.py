"""Markdown rendering of a category partition."""

import logging

from .reconcile import Category, CategoryPartition

logger = logging.getLogger(__name__)

REPORT_HEADING = "GitHub"
INDENT = "    "


def render_section(partition: CategoryPartition, category: Category) -> list[str]:
    """Render one category as a heading plus one line per member.

    Empty categories render to nothing. Members without a registered name
    are skipped.
    """
    members = partition.members(category)
    if not members:
        return []

    lines = [f"{INDENT}* {category.value}"]
    for url in members:
        name = partition.names.get(url)
        if name is None:
            logger.warning("Did not have a name for: %r", url)
            continue
        lines.append(f"{INDENT * 2}* {name}")
    return lines


def render_report(partition: CategoryPartition) -> str:
    """Render the full report as a nested Markdown list."""
    lines = [f"* {REPORT_HEADING}"]
    for category in Category:
        lines.extend(render_section(partition, category))
    return "\n".join(lines)
