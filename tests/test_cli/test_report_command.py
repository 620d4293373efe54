"""Tests for the report CLI command."""

import os
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import Mock, patch

from typer.testing import CliRunner

from github_weekly_report.cli.main import app
from github_weekly_report.cli.report import build_config
from github_weekly_report.errors import RemoteQueryError
from github_weekly_report.github_client.models import ActivityEvent

runner = CliRunner()

PR_URL = "https://github.com/octo/repo/pull/7"


def pull_request_event(day: int) -> ActivityEvent:
    return ActivityEvent(
        type="PullRequestEvent",
        created_at=datetime(2024, 1, day, tzinfo=timezone.utc),
        payload={
            "action": "opened",
            "pull_request": {"number": 7, "title": "Old", "html_url": PR_URL},
        },
    )


class TestBuildConfig:
    """Test option handling."""

    def test_default_start(self) -> None:
        """Test the default start is a Monday."""
        config = build_config("octocat", None, 7, "wip", False)
        assert config.start.weekday() == 0
        assert (config.end - config.start).days == 7

    def test_explicit_start(self) -> None:
        """Test the start option is parsed."""
        config = build_config("octocat", "1-8-2024", 14, "wip", True)
        assert config.start == datetime(2024, 1, 8, tzinfo=timezone.utc)
        assert config.end == datetime(2024, 1, 22, tzinfo=timezone.utc)
        assert config.public_only is False


class TestReportCommand:
    """Test the report command end to end with a mocked client."""

    @patch.dict(os.environ, {"GITHUB_TOKEN": "test_token"})
    @patch("github_weekly_report.cli.report.GitHubClient")
    def test_report_to_stdout(
        self, mock_client_class: Mock, make_pull_request
    ) -> None:
        """Test the rendered report is printed."""
        mock_client = Mock()
        mock_client.list_user_events.return_value = [
            pull_request_event(20),  # outside the window
            pull_request_event(10),
        ]
        mock_client.get_pull_request.return_value = make_pull_request(
            PR_URL, title="Live", author="octocat", state="closed", merged=True
        )
        mock_client_class.return_value = mock_client

        result = runner.invoke(
            app, ["report", "--user", "octocat", "--start", "1-8-2024"]
        )

        assert result.exit_code == 0, result.output
        assert "* GitHub" in result.stdout
        assert "    * Merged" in result.stdout
        assert f"        * [Live]({PR_URL})" in result.stdout
        mock_client_class.assert_called_once_with(token="test_token")
        mock_client.list_user_events.assert_called_once_with(
            "octocat", public_only=True
        )

    @patch("github_weekly_report.cli.report.GitHubClient")
    def test_report_to_file(
        self, mock_client_class: Mock, tmp_path: Path
    ) -> None:
        """Test --output writes the report to a file."""
        mock_client = Mock()
        mock_client.list_user_events.return_value = []
        mock_client_class.return_value = mock_client
        token_file = tmp_path / "token"
        token_file.write_text("file_token\n")
        output = tmp_path / "week.md"

        result = runner.invoke(
            app,
            [
                "report",
                "-u",
                "octocat",
                "--token-file",
                str(token_file),
                "-O",
                str(output),
            ],
        )

        assert result.exit_code == 0, result.output
        assert output.read_text() == "* GitHub\n"
        mock_client_class.assert_called_once_with(token="file_token")

    @patch.dict(os.environ, {"GITHUB_TOKEN": "test_token"})
    @patch("github_weekly_report.cli.report.GitHubClient")
    def test_remote_failure_exits(self, mock_client_class: Mock) -> None:
        """Test API failures exit non-zero without a report."""
        mock_client = Mock()
        mock_client.list_user_events.side_effect = RemoteQueryError("rate limited")
        mock_client_class.return_value = mock_client

        result = runner.invoke(app, ["report", "--user", "octocat"])

        assert result.exit_code == 1
        assert "❌ Error: rate limited" in result.output
        assert "* GitHub" not in result.output

    @patch.dict(os.environ, {"GITHUB_TOKEN": "test_token"})
    def test_invalid_start_exits(self) -> None:
        """Test an unparseable start date exits non-zero."""
        result = runner.invoke(
            app, ["report", "--user", "octocat", "--start", "yesterday"]
        )

        assert result.exit_code == 1
        assert "Unable to parse date" in result.output

    @patch.dict(os.environ, {"GITHUB_TOKEN": "test_token"})
    def test_invalid_days_exits(self) -> None:
        """Test a non-positive window exits non-zero."""
        result = runner.invoke(app, ["report", "--user", "octocat", "--days", "0"])

        assert result.exit_code == 1
        assert "positive" in result.output

    @patch.dict(os.environ, {}, clear=True)
    def test_missing_token_exits(self) -> None:
        """Test a missing token exits non-zero."""
        result = runner.invoke(app, ["report", "--user", "octocat"])

        assert result.exit_code == 1
        assert "GitHub token is required" in result.output

    @patch.dict(os.environ, {"GITHUB_TOKEN": "test_token"})
    @patch("github_weekly_report.cli.report.GitHubClient")
    def test_unwritable_output_exits(
        self, mock_client_class: Mock, tmp_path: Path
    ) -> None:
        """Test a bad --output path exits non-zero with an error message."""
        mock_client = Mock()
        mock_client.list_user_events.return_value = []
        mock_client_class.return_value = mock_client
        output = tmp_path / "missing" / "week.md"

        result = runner.invoke(
            app, ["report", "--user", "octocat", "--output", str(output)]
        )

        assert result.exit_code == 1
        assert "❌ Error: Unable to write report" in result.output
        assert not output.exists()
