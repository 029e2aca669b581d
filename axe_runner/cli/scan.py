"""CLI command for scanning a page with the axe runner."""

import asyncio
import json
from typing import Any

import typer
from playwright.async_api import Error as PlaywrightError
from rich.console import Console
from rich.table import Table

from ..adapters.playwright import scan_url
from ..config import RunnerConfig, configure_logging
from .options import (
    INCLUDE_PASSES_OPTION,
    INCLUDE_WARNINGS_OPTION,
    JSON_OPTION,
    ROOT_ELEMENT_OPTION,
    RULE_OPTION,
    STANDARD_OPTION,
    TIMEOUT_OPTION,
    VERBOSE_OPTION,
)

console = Console()

TYPE_STYLES = {"error": "red", "warning": "yellow", "pass": "green"}


def filter_issues(
    issues: list[dict[str, Any]], include_warnings: bool, include_passes: bool
) -> list[dict[str, Any]]:
    """Drop warning and pass rows unless asked for."""
    reported = {"error"}
    if include_warnings:
        reported.add("warning")
    if include_passes:
        reported.add("pass")
    return [issue for issue in issues if issue["type"] in reported]


def scan(
    url: str = typer.Argument(..., help="URL of the page to scan"),
    standard: str | None = STANDARD_OPTION,
    rules: list[str] | None = RULE_OPTION,
    root_element: str | None = ROOT_ELEMENT_OPTION,
    include_warnings: bool = INCLUDE_WARNINGS_OPTION,
    include_passes: bool = INCLUDE_PASSES_OPTION,
    json_output: bool = JSON_OPTION,
    timeout: int = TIMEOUT_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Scan a page with axe-core and report normalized issues.

    Exits with status 2 when any error is reported.

    Examples:
        # Scan against WCAG 2 AA (the default tag set)
        axe-runner scan https://example.com --standard WCAG2AA

        # Run two specific rules inside the main element
        axe-runner scan https://example.com -r image-alt -r label --root-element main
    """
    config = RunnerConfig()
    configure_logging("DEBUG" if verbose else config.log_level)

    try:
        config.validate()
    except ValueError as e:
        console.print(f"❌ [red]Error: {e}[/red]")
        raise typer.Exit(1)

    try:
        issues = asyncio.run(
            scan_url(
                url,
                standard=standard,
                rules=rules or None,
                root_selector=root_element,
                timeout_ms=timeout,
                config=config,
            )
        )
    except (ValueError, PlaywrightError) as e:
        console.print(f"❌ [red]Scan failed: {e}[/red]")
        raise typer.Exit(1)

    reported = filter_issues(issues, include_warnings, include_passes)

    if json_output:
        typer.echo(json.dumps(reported, indent=2))
    elif not reported:
        console.print(f"✅ [green]No issues found on {url}[/green]")
    else:
        table = Table(title=f"Issues for {url}")
        table.add_column("Type", style="bold")
        table.add_column("Code", style="cyan")
        table.add_column("Message")
        table.add_column("Context", style="dim")
        for issue in reported:
            style = TYPE_STYLES.get(issue["type"], "white")
            table.add_row(
                f"[{style}]{issue['type']}[/{style}]",
                issue["code"],
                issue["message"],
                issue["context"] or "",
            )
        console.print(table)

    if any(issue["type"] == "error" for issue in reported):
        raise typer.Exit(2)
