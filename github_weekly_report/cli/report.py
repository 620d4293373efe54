"""CLI command for generating the weekly activity report."""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..config import ReportConfig, resolve_token
from ..errors import ConfigurationError, ReportError
from ..github_client.client import GitHubClient
from ..report import DiscoveryClassifier, ReconciliationEngine, render_report
from ..report.reconcile import Category
from ..utils.date_parser import (
    filter_events_for_window,
    format_date,
    last_completed_week_monday,
    parse_date_input,
)
from .options import (
    DAYS_OPTION,
    INCLUDE_PRIVATE_OPTION,
    OUTPUT_OPTION,
    START_OPTION,
    TOKEN_FILE_OPTION,
    TOKEN_OPTION,
    USER_OPTION,
    VERBOSE_OPTION,
    WIP_LABEL_OPTION,
)

console = Console(stderr=True)


def configure_logging(verbose: bool) -> None:
    """Send diagnostic logging to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def build_config(
    user: str,
    start: str | None,
    days: int,
    wip_label: str,
    include_private: bool,
) -> ReportConfig:
    """Turn raw option values into a ReportConfig."""
    if start is None:
        start_dt = last_completed_week_monday()
    else:
        try:
            start_dt = parse_date_input(start)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

    return ReportConfig.for_window(
        user=user,
        start=start_dt,
        days=days,
        wip_label=wip_label,
        public_only=not include_private,
    )


def generate_report(client: GitHubClient, config: ReportConfig) -> str:
    """Run discovery, reconciliation and rendering for one window."""
    events = filter_events_for_window(
        client.list_user_events(config.user, public_only=config.public_only),
        config.start,
        config.end,
    )
    discovered = DiscoveryClassifier(web_root=config.web_root).classify(events)
    partition = ReconciliationEngine(client, config).reconcile(discovered)

    summary = Table(title="Report Summary")
    summary.add_column("Category", style="cyan")
    summary.add_column("Items", justify="right", style="green")
    for category in Category:
        summary.add_row(category.value, str(len(partition.members(category))))
    console.print(summary)

    return render_report(partition)


def report(
    user: str = USER_OPTION,
    start: str | None = START_OPTION,
    days: int = DAYS_OPTION,
    wip_label: str = WIP_LABEL_OPTION,
    include_private: bool = INCLUDE_PRIVATE_OPTION,
    token: str | None = TOKEN_OPTION,
    token_file: Path | None = TOKEN_FILE_OPTION,
    output: Path | None = OUTPUT_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Generate a Markdown report of your GitHub activity for one week.

    Examples:
        github-weekly-report report --user octocat
        github-weekly-report report -u octocat --start 3-4-2024 --days 14
        github-weekly-report report -u octocat --token-file ~/.gh_token -O week.md
    """
    configure_logging(verbose)

    try:
        config = build_config(user, start, days, wip_label, include_private)
        console.print(
            f"🔎 Searching for events between {format_date(config.start)} "
            f"and {format_date(config.end)}"
        )
        client = GitHubClient(token=resolve_token(token, token_file))
        markdown = generate_report(client, config)
    except ReportError as e:
        console.print(f"❌ Error: {e}", markup=False)
        raise typer.Exit(1)

    if output is not None:
        try:
            output.write_text(markdown + "\n")
        except OSError as e:
            console.print(
                f"❌ Error: Unable to write report to {output}: {e}", markup=False
            )
            raise typer.Exit(1)
        console.print(f"💾 Report written to {output}")
    else:
        typer.echo(markdown)
