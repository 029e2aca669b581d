"""Tests for the scan command."""

import json
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, patch

import pytest
from playwright.async_api import Error as PlaywrightError
from typer.testing import CliRunner

from axe_runner.cli.main import app
from axe_runner.cli.scan import filter_issues

runner = CliRunner()


def make_row(code: str, issue_type: str) -> dict[str, Any]:
    return {
        "code": code,
        "message": f"Help for {code} (https://x/{code})",
        "type": issue_type,
        "runnerExtras": {
            "description": f"Description of {code}",
            "impact": "serious" if issue_type != "pass" else None,
            "help": f"Help for {code}",
            "helpUrl": f"https://x/{code}",
        },
        "context": "<div></div>",
    }


@pytest.fixture
def axe_bundle(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Point AXE_CORE_PATH at a stub bundle."""
    bundle = tmp_path / "axe.min.js"
    bundle.write_text("window.axe = {};")
    monkeypatch.setenv("AXE_CORE_PATH", str(bundle))
    return bundle


@pytest.fixture
def rows() -> list[dict[str, Any]]:
    return [
        make_row("image-alt", "error"),
        make_row("color-contrast", "warning"),
        make_row("document-title", "pass"),
    ]


class TestFilterIssues:
    """Test filtering reported rows by type."""

    def test_errors_only_by_default(self, rows: list[dict[str, Any]]) -> None:
        """Test warnings and passes are hidden by default."""
        assert [r["code"] for r in filter_issues(rows, False, False)] == ["image-alt"]

    def test_include_all(self, rows: list[dict[str, Any]]) -> None:
        """Test every type can be included."""
        assert len(filter_issues(rows, True, True)) == 3


class TestScanCommand:
    """Test the scan command with the browser mocked out."""

    def test_missing_bundle(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        """Test a missing axe bundle exits with status 1."""
        monkeypatch.setenv("AXE_CORE_PATH", str(tmp_path / "nope.js"))

        with patch("axe_runner.cli.scan.scan_url") as mock_scan:
            result = runner.invoke(app, ["scan", "https://example.com"])

        assert result.exit_code == 1
        assert "axe-core bundle not found" in result.stdout
        mock_scan.assert_not_called()

    def test_json_output_with_errors(
        self, axe_bundle: Path, rows: list[dict[str, Any]]
    ) -> None:
        """Test JSON output and exit status 2 when errors are reported."""
        mock_scan = AsyncMock(return_value=rows)

        with patch("axe_runner.cli.scan.scan_url", mock_scan):
            result = runner.invoke(
                app,
                [
                    "scan",
                    "https://example.com",
                    "--standard",
                    "Section508",
                    "-r",
                    "image-alt",
                    "-r",
                    "label",
                    "--root-element",
                    "main",
                    "--include-warnings",
                    "--json",
                ],
            )

        assert result.exit_code == 2
        reported = json.loads(result.stdout)
        assert [r["code"] for r in reported] == ["image-alt", "color-contrast"]

        args, kwargs = mock_scan.call_args
        assert args == ("https://example.com",)
        assert kwargs["standard"] == "Section508"
        assert kwargs["rules"] == ["image-alt", "label"]
        assert kwargs["root_selector"] == "main"
        assert kwargs["timeout_ms"] == 30000

    def test_clean_page(self, axe_bundle: Path) -> None:
        """Test a page without errors exits with status 0."""
        mock_scan = AsyncMock(return_value=[make_row("document-title", "pass")])

        with patch("axe_runner.cli.scan.scan_url", mock_scan):
            result = runner.invoke(app, ["scan", "https://example.com"])

        assert result.exit_code == 0
        assert "No issues found" in result.stdout
        assert mock_scan.call_args.kwargs["rules"] is None

    def test_table_output(self, axe_bundle: Path, rows: list[dict[str, Any]]) -> None:
        """Test the table is printed when errors are found."""
        mock_scan = AsyncMock(return_value=rows)

        with patch("axe_runner.cli.scan.scan_url", mock_scan):
            result = runner.invoke(app, ["scan", "https://example.com"])

        assert result.exit_code == 2
        assert "Issues for" in result.stdout

    def test_scan_failure(self, axe_bundle: Path) -> None:
        """Test browser errors exit with status 1."""
        mock_scan = AsyncMock(side_effect=PlaywrightError("net::ERR_NAME_NOT_RESOLVED"))

        with patch("axe_runner.cli.scan.scan_url", mock_scan):
            result = runner.invoke(app, ["scan", "https://nowhere.invalid"])

        assert result.exit_code == 1
        assert "Scan failed" in result.stdout
