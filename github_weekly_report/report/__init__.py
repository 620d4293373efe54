"""Discovery, reconciliation and rendering of weekly activity reports."""

from .classifier import DiscoveredItems, DiscoveryClassifier
from .reconcile import (
    Category,
    CategoryPartition,
    ReconciliationEngine,
    categorize_pull_request,
)
from .registry import NameRegistry, format_display_name
from .render import render_report
from .urls import PullRequestRef, parse_pull_request_url

__all__ = [
    "Category",
    "CategoryPartition",
    "DiscoveredItems",
    "DiscoveryClassifier",
    "NameRegistry",
    "PullRequestRef",
    "ReconciliationEngine",
    "categorize_pull_request",
    "format_display_name",
    "parse_pull_request_url",
    "render_report",
]
