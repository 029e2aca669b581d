"""Playwright implementations of the document and engine interfaces.

These play the host's part: inject the runner's scripts into a page, expose
``window.axe.run`` and ``document.querySelector`` to the runner, and turn the
resulting issues into plain rows once the page is still alive.
"""

import logging
from typing import Any

from playwright.async_api import ElementHandle, Page, async_playwright
from playwright.async_api import Error as PlaywrightError

from ..config import RunnerConfig
from ..models import NormalizedIssue, RunConfiguration
from ..runner import AxeRunner

logger = logging.getLogger(__name__)

AXE_RUN_SCRIPT = """async ([context, options]) => {
    return await window.axe.run(context || document, options);
}"""

# outerHTML of the element, cut to 300 characters
ELEMENT_CONTEXT_SCRIPT = """(element) => {
    const html = element.outerHTML;
    return html.length > 300 ? html.substring(0, 300) + '...' : html;
}"""


class PlaywrightDocument:
    """Top-level document of a Playwright page."""

    def __init__(self, page: Page) -> None:
        self.page = page

    async def query_selector(self, selector: str) -> ElementHandle | None:
        # css= keeps Playwright from reading axe selectors as text or xpath
        try:
            return await self.page.query_selector(f"css={selector}")
        except PlaywrightError as e:
            logger.debug(f"Selector could not be queried: {selector}: {e}")
            return None


class PlaywrightAxeEngine:
    """axe-core running inside a Playwright page."""

    def __init__(self, page: Page) -> None:
        self.page = page

    async def run(self, context: Any | None, options: dict[str, Any]) -> dict[str, Any]:
        return await self.page.evaluate(AXE_RUN_SCRIPT, [context, options])


async def inject_scripts(page: Page, scripts: list[str]) -> None:
    """Add each script to the page, in order."""
    for script in scripts:
        logger.debug(f"Injecting script: {script}")
        await page.add_script_tag(path=script)


async def describe_issue(issue: NormalizedIssue) -> dict[str, Any]:
    """Convert an issue to a plain dict, replacing the element with its HTML."""
    row = issue.to_dict()
    element = row.pop("element")
    row["context"] = (
        await element.evaluate(ELEMENT_CONTEXT_SCRIPT) if element is not None else None
    )
    return row


async def scan_url(
    url: str,
    *,
    standard: str | None = None,
    rules: list[str] | None = None,
    root_selector: str | None = None,
    timeout_ms: int = 30000,
    config: RunnerConfig | None = None,
) -> list[dict[str, Any]]:
    """Load a URL in headless Chromium, run axe on it and describe the issues.

    Raises:
        ValueError: If root_selector matches no element
    """
    config = config or RunnerConfig()
    async with async_playwright() as p:
        browser = await p.chromium.launch(headless=True)
        try:
            page = await browser.new_page()
            logger.info(f"Loading {url}")
            await page.goto(url, wait_until="load", timeout=timeout_ms)

            runner = AxeRunner(
                engine=PlaywrightAxeEngine(page),
                document=PlaywrightDocument(page),
                config=config,
            )
            await inject_scripts(page, runner.scripts)

            root_element = None
            if root_selector:
                root_element = await page.query_selector(root_selector)
                if root_element is None:
                    raise ValueError(f"Root element not found: {root_selector}")

            configuration = RunConfiguration(
                root_element=root_element, standard=standard, rules=rules
            )
            issues = await runner.run(configuration)
            return [await describe_issue(issue) for issue in issues]
        finally:
            await browser.close()
