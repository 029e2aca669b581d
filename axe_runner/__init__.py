"""axe-core runner that reshapes axe results into normalized issues."""

from .models import NormalizedIssue, RunConfiguration, ScanOptions
from .runner import SUPPORTS, AxeRunner, get_scripts, run

__version__ = "1.0.0"

__all__ = [
    "SUPPORTS",
    "AxeRunner",
    "NormalizedIssue",
    "RunConfiguration",
    "ScanOptions",
    "get_scripts",
    "run",
]
