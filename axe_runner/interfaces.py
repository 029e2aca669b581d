"""Collaborators the runner depends on.

The runner never reaches for a global ``document`` or ``window.axe``. The host
side supplies objects matching these protocols instead, see
``axe_runner.adapters.playwright`` for the browser-backed implementation.
"""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from .models import AxeResults


@runtime_checkable
class Document(Protocol):
    """Top-level document that can be queried by CSS selector."""

    async def query_selector(self, selector: str) -> Any | None: ...


@runtime_checkable
class AxeEngine(Protocol):
    """The injected axe engine, exposing ``axe.run``."""

    async def run(
        self, context: Any | None, options: dict[str, Any]
    ) -> Mapping[str, Any] | AxeResults: ...
