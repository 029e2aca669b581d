"""Configuration for locating axe-core and setting up logging."""

import logging
import os
from pathlib import Path
from typing import Optional

from rich.logging import RichHandler

AXE_SCRIPT_NAME = "axe.min.js"
DEFAULT_AXE_CORE_DIR = Path("node_modules") / "axe-core"


class RunnerConfig:
    """Configuration class for the axe runner."""

    def __init__(self) -> None:
        """Initialize runner configuration from environment variables."""
        self.axe_core_path: Optional[str] = os.getenv("AXE_CORE_PATH")
        self.log_level: str = os.getenv("AXE_RUNNER_LOG_LEVEL", "WARNING")

    @property
    def axe_script_path(self) -> Path:
        """Path of the axe bundle to inject.

        AXE_CORE_PATH may point at the bundle itself or at an axe-core package
        directory. Without it, ./node_modules/axe-core is used.
        """
        if not self.axe_core_path:
            return Path.cwd() / DEFAULT_AXE_CORE_DIR / AXE_SCRIPT_NAME

        path = Path(self.axe_core_path).expanduser()
        if path.is_dir():
            return path / AXE_SCRIPT_NAME
        return path

    def is_configured(self) -> bool:
        """Check if the axe bundle exists."""
        return self.axe_script_path.is_file()

    def validate(self) -> None:
        """Validate configuration and raise error if invalid."""
        if not self.is_configured():
            raise ValueError(
                f"axe-core bundle not found at {self.axe_script_path}. "
                "Install it with 'npm install axe-core' or set AXE_CORE_PATH."
            )


def configure_logging(level: str | int = "WARNING") -> None:
    """Send log records through rich on the root logger."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(name)s | %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )
