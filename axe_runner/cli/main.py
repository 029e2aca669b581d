"""Main CLI entry point."""

import typer
from rich.console import Console
from rich.table import Table

from ..standards import DEFAULT_TAGS, list_standards
from .scan import scan

app = typer.Typer(
    name="axe-runner",
    help="Run axe-core against a page and report normalized issues",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


app.command(name="scan", context_settings={"help_option_names": ["-h", "--help"]})(
    scan
)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def standards() -> None:
    """Show the axe tags each standard runs."""
    table = Table(title="Standards")
    table.add_column("Standard", style="cyan")
    table.add_column("axe tags")
    for name, tags in list_standards().items():
        table.add_row(name, ", ".join(tags))
    table.add_row("(default)", ", ".join(DEFAULT_TAGS))
    console.print(table)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from axe_runner import __version__

    console.print(f"axe runner v{__version__}")


if __name__ == "__main__":
    app()
