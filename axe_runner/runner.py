"""Runner that executes axe-core and normalizes its results.

The host loads the runner, injects ``scripts`` into the page, then awaits
``run``. Every axe finding becomes one issue per matched node, or a single
issue without an element when nothing matched.
"""

import logging
from collections.abc import Mapping
from typing import Any

from .config import RunnerConfig
from .interfaces import AxeEngine, Document
from .models import (
    AxeFinding,
    AxeResults,
    IssueType,
    NormalizedIssue,
    RunConfiguration,
    RunnerExtras,
)
from .selectors import resolve_elements
from .standards import build_scan_options, get_scan_context

logger = logging.getLogger(__name__)

# Host versions this runner is compatible with
SUPPORTS = "^6.0.0 || ^6.0.0-alpha || ^6.0.0-beta"


def get_scripts(config: RunnerConfig | None = None) -> list[str]:
    """Get the scripts the host must inject before calling ``run``."""
    config = config or RunnerConfig()
    return [str(config.axe_script_path)]


class AxeRunner:
    """Runs axe against a document and maps its results to normalized issues."""

    supports = SUPPORTS

    def __init__(
        self,
        engine: AxeEngine,
        document: Document,
        config: RunnerConfig | None = None,
    ) -> None:
        self.engine = engine
        self.document = document
        self.config = config or RunnerConfig()

    @property
    def scripts(self) -> list[str]:
        return get_scripts(self.config)

    async def run(
        self, configuration: RunConfiguration | Mapping[str, Any] | None = None
    ) -> list[NormalizedIssue]:
        """Run axe and return the normalized issues.

        Args:
            configuration: Runner options; a mapping is validated into a
                RunConfiguration

        Returns:
            Violations, then incomplete results, then passes, each in engine order

        Engine failures are not caught.
        """
        if configuration is None:
            configuration = RunConfiguration()
        elif not isinstance(configuration, RunConfiguration):
            configuration = RunConfiguration.model_validate(configuration)

        context = get_scan_context(configuration)
        options = build_scan_options(configuration).to_axe()
        logger.info(f"Running axe with options: {options}")

        raw_results = await self.engine.run(context, options)
        results = (
            raw_results
            if isinstance(raw_results, AxeResults)
            else AxeResults.model_validate(raw_results)
        )
        logger.info(
            f"axe reported {len(results.violations)} violations, "
            f"{len(results.incomplete)} incomplete, {len(results.passes)} passes"
        )

        issues: list[NormalizedIssue] = []
        for finding in results.violations:
            issues.extend(await self.process_violation(finding))
        for finding in results.incomplete:
            issues.extend(await self.process_incomplete(finding))
        for finding in results.passes:
            issues.extend(await self.process_pass(finding))

        logger.info(f"Normalized {len(issues)} issues")
        return issues

    async def process_violation(self, finding: AxeFinding) -> list[NormalizedIssue]:
        return await self.process_issue(finding, IssueType.ERROR)

    async def process_incomplete(self, finding: AxeFinding) -> list[NormalizedIssue]:
        return await self.process_issue(finding, IssueType.WARNING)

    async def process_pass(self, finding: AxeFinding) -> list[NormalizedIssue]:
        return await self.process_issue(finding, IssueType.PASS)

    async def process_issue(
        self, finding: AxeFinding, issue_type: IssueType
    ) -> list[NormalizedIssue]:
        """Build one issue per matched node of a finding."""
        elements = await resolve_elements(self.document, finding.nodes)
        extras = RunnerExtras(
            description=finding.description,
            impact=finding.impact,
            help=finding.help,
            help_url=finding.help_url,
        )
        return [
            NormalizedIssue(
                code=finding.id,
                message=f"{finding.help} ({finding.help_url})",
                type=issue_type,
                element=element,
                runner_extras=extras.model_copy(),
            )
            for element in elements
        ]


async def run(
    configuration: RunConfiguration | Mapping[str, Any] | None = None,
    *,
    engine: AxeEngine,
    document: Document,
) -> list[NormalizedIssue]:
    """Run axe once with the given collaborators."""
    return await AxeRunner(engine=engine, document=document).run(configuration)
