"""Standardized CLI option definitions for consistent shorthand mappings.

This module provides centralized option definitions to ensure consistent
shorthand options across commands.
"""

from pathlib import Path

import typer

from ..config import DEFAULT_DAYS, DEFAULT_WIP_LABEL

# Identity and window options
USER_OPTION = typer.Option(
    ...,
    "--user",
    "-u",
    envvar="GITHUB_USER",
    help="GitHub user name the report is for",
)

START_OPTION = typer.Option(
    None,
    "--start",
    "-s",
    help="Start date, e.g. 1-15-2024 or 2024-01-15 "
    "(defaults to Monday of the last completed week)",
)

DAYS_OPTION = typer.Option(
    DEFAULT_DAYS, "--days", help="Number of days the report covers"
)

WIP_LABEL_OPTION = typer.Option(
    DEFAULT_WIP_LABEL,
    "--wip-label",
    help="Label marking your pull requests as work in progress",
)

INCLUDE_PRIVATE_OPTION = typer.Option(
    False,
    "--include-private/--public-only",
    help="Include private events (requires a token for the same user)",
)

# Authentication options
TOKEN_OPTION = typer.Option(
    None, "--token", help="GitHub API token (defaults to GITHUB_TOKEN env var)"
)

TOKEN_FILE_OPTION = typer.Option(
    None,
    "--token-file",
    help="Path to a file containing the GitHub API token",
    dir_okay=False,
)

# Output options
OUTPUT_OPTION = typer.Option(
    None, "--output", "-O", help="Write the report to this file instead of stdout"
)

VERBOSE_OPTION = typer.Option(
    False, "--verbose", "-v", help="Show diagnostic logging"
)
