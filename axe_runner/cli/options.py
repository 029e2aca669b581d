"""Shared CLI option definitions."""

import typer

STANDARD_OPTION = typer.Option(
    None,
    "--standard",
    "-s",
    help="Standard to test against: Section508, WCAG2A, WCAG2AA or WCAG2AAA",
)

RULE_OPTION = typer.Option(
    None,
    "--rule",
    "-r",
    help="axe rule to run (can be used multiple times, overrides --standard)",
)

ROOT_ELEMENT_OPTION = typer.Option(
    None, "--root-element", help="CSS selector of the element to scan"
)

INCLUDE_WARNINGS_OPTION = typer.Option(
    False, "--include-warnings", "-w", help="Report incomplete results as warnings"
)

INCLUDE_PASSES_OPTION = typer.Option(
    False, "--include-passes", help="Report passing checks"
)

JSON_OPTION = typer.Option(False, "--json", help="Print issues as JSON")

TIMEOUT_OPTION = typer.Option(
    30000, "--timeout", help="Page load timeout in milliseconds"
)

VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Enable debug logging")
