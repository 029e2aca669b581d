"""Resolve axe node targets to elements of the scanned document."""

import logging
from collections.abc import Sequence
from typing import Any

from .interfaces import Document
from .models import AxeNode

logger = logging.getLogger(__name__)


def selector_to_string(target: Sequence[str | Sequence[str]]) -> str:
    """Join an axe selector path into a single selector string.

    Nested fragments (shadow-DOM paths) are flattened one level, then every
    fragment is joined with a space. The result is queried against the
    top-level document only, so elements inside iframes are not reachable.
    """
    parts: list[str] = []
    for fragment in target:
        if isinstance(fragment, str):
            parts.append(fragment)
        else:
            parts.extend(fragment)
    return " ".join(parts)


async def resolve_element(
    document: Document, target: Sequence[str | Sequence[str]]
) -> Any | None:
    """Query the document for the element an axe target points at."""
    selector = selector_to_string(target)
    if not selector:
        logger.debug("Empty axe target, no element to resolve")
        return None

    element = await document.query_selector(selector)
    if element is None:
        logger.debug(f"No element matched selector: {selector}")
    return element


async def resolve_elements(
    document: Document, nodes: list[AxeNode]
) -> list[Any | None]:
    """Resolve every node of a finding, in order.

    A finding without nodes still yields a single unresolved entry.
    """
    if not nodes:
        return [None]
    return [await resolve_element(document, node.target) for node in nodes]
