"""Report configuration and token resolution."""

import os
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, model_validator

from .errors import ConfigurationError

DEFAULT_WIP_LABEL = "do-not-merge/work-in-progress"
DEFAULT_WEB_ROOT = "https://github.com/"
DEFAULT_DAYS = 7


class ReportConfig(BaseModel):
    """Settings threaded into discovery and reconciliation.

    Nothing in the report package reads process state directly; the CLI
    builds one of these and hands it down.
    """

    user: str = Field(..., description="GitHub login the report is written for")
    start: datetime = Field(..., description="Window start (exclusive)")
    end: datetime = Field(..., description="Window end (exclusive)")
    wip_label: str = Field(
        DEFAULT_WIP_LABEL,
        description="Label marking a pull request as not ready for review",
    )
    web_root: str = Field(
        DEFAULT_WEB_ROOT, description="Prefix of issue and pull request URLs"
    )
    public_only: bool = Field(
        True, description="Only list the user's public events"
    )

    @model_validator(mode="after")
    def _check_window(self) -> "ReportConfig":
        if not self.user:
            raise ValueError("user must not be empty")
        if self.start >= self.end:
            raise ValueError(
                f"Start ({self.start:%Y-%m-%d}) must be before end ({self.end:%Y-%m-%d})"
            )
        return self

    @classmethod
    def for_window(
        cls, user: str, start: datetime, days: int = DEFAULT_DAYS, **kwargs: Any
    ) -> "ReportConfig":
        """Build a config covering ``days`` days from ``start``."""
        if days <= 0:
            raise ConfigurationError("Days must be a positive integer")
        try:
            return cls(
                user=user, start=start, end=start + timedelta(days=days), **kwargs
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid report configuration: {e}") from e


def read_token_file(path: Path) -> str:
    """Read a token from ``path``, dropping a single trailing newline."""
    try:
        content = path.read_text()
    except OSError as e:
        raise ConfigurationError(f"Unable to read token file '{path}': {e}") from e
    return content.removesuffix("\n")


def resolve_token(token: str | None = None, token_file: Path | None = None) -> str:
    """Pick the GitHub token from the option, the token file or GITHUB_TOKEN."""
    if token:
        return token
    if token_file is not None:
        file_token = read_token_file(token_file)
        if file_token:
            return file_token
        raise ConfigurationError(f"Token file '{token_file}' is empty")

    env_token = os.getenv("GITHUB_TOKEN")
    if not env_token:
        raise ConfigurationError(
            "GitHub token is required. Use --token, --token-file or set "
            "GITHUB_TOKEN environment variable."
        )
    return env_token
