"""Test configuration and fixtures."""

from collections.abc import Callable
from typing import Any
from unittest.mock import AsyncMock

import pytest


class FakeElement:
    """Stand-in for a DOM element handle."""

    def __init__(self, selector: str) -> None:
        self.selector = selector

    def __repr__(self) -> str:
        return f"FakeElement({self.selector!r})"


class FakeDocument:
    """Document answering selector queries from a fixed table."""

    def __init__(self, elements: dict[str, Any] | None = None) -> None:
        self.elements = elements or {}
        self.queries: list[str] = []

    async def query_selector(self, selector: str) -> Any | None:
        self.queries.append(selector)
        return self.elements.get(selector)


def build_finding(
    finding_id: str,
    targets: list[list[Any]] | None = None,
    help: str = "Help text",
    impact: str | None = "serious",
) -> dict[str, Any]:
    """Build an axe finding in the engine's raw shape."""
    return {
        "id": finding_id,
        "help": help,
        "helpUrl": f"https://x/{finding_id}",
        "description": f"Description of {finding_id}",
        "impact": impact,
        "tags": ["wcag2a"],
        "nodes": [
            {"target": target, "html": "<div></div>", "failureSummary": "Fix it"}
            for target in (targets or [])
        ],
    }


@pytest.fixture
def fake_document() -> FakeDocument:
    """Document where a few common selectors resolve."""
    return FakeDocument(
        {
            "img.logo": FakeElement("img.logo"),
            "#main": FakeElement("#main"),
            "a.nav": FakeElement("a.nav"),
        }
    )


@pytest.fixture
def make_document() -> type[FakeDocument]:
    """Factory for documents with a given selector table."""
    return FakeDocument


@pytest.fixture
def make_element() -> type[FakeElement]:
    """Factory for element stand-ins."""
    return FakeElement


@pytest.fixture
def make_finding() -> Callable[..., dict[str, Any]]:
    """Factory for raw axe findings."""
    return build_finding


@pytest.fixture
def sample_results() -> dict[str, Any]:
    """axe results with findings in every category."""
    return {
        "url": "https://example.com/",
        "testEngine": {"name": "axe-core", "version": "4.10.0"},
        "violations": [
            build_finding(
                "image-alt",
                [["img.logo"]],
                help="Images must have alt text",
            ),
            build_finding("link-name", [["a.nav"], ["a.missing"]]),
        ],
        "incomplete": [build_finding("color-contrast", [["#main"]])],
        "passes": [build_finding("document-title", [], impact=None)],
        "inapplicable": [build_finding("video-caption")],
    }


@pytest.fixture
def mock_engine(sample_results: dict[str, Any]) -> AsyncMock:
    """Engine whose run returns the sample results."""
    engine = AsyncMock()
    engine.run.return_value = sample_results
    return engine
