"""Map runner configuration onto axe context and options."""

from typing import Any

from .models import RuleSetting, RunConfiguration, RunOnly, ScanOptions

DEFAULT_TAGS = ["wcag2a", "wcag21a", "wcag2aa", "wcag21aa", "best-practice"]

# WCAG2AA and WCAG2AAA share the default tag set; axe has no AAA rules
STANDARD_TAGS: dict[str, list[str]] = {
    "Section508": ["section508", "best-practice"],
    "WCAG2A": ["wcag2a", "wcag21a", "best-practice"],
    "WCAG2AA": DEFAULT_TAGS,
    "WCAG2AAA": DEFAULT_TAGS,
}


def list_standards() -> dict[str, list[str]]:
    """Get the recognized standards with the tags each one runs."""
    return {name: list(tags) for name, tags in STANDARD_TAGS.items()}


def standard_to_run_only(standard: str | None) -> RunOnly:
    """Map a standard name to an axe ``runOnly`` tag filter.

    Unrecognized names fall back to the WCAG2AA tag set.
    """
    tags = STANDARD_TAGS.get(standard or "", DEFAULT_TAGS)
    return RunOnly(type="tags", values=list(tags))


def rules_to_axe(rules: list[str]) -> dict[str, RuleSetting]:
    """Map rule identifiers to an axe ``rules`` option enabling each one."""
    return {rule: RuleSetting(enabled=True) for rule in rules}


def build_scan_options(configuration: RunConfiguration) -> ScanOptions:
    """Derive axe options from the configuration.

    An explicit rule list takes precedence over the standard: when rules are
    given no tag filter is applied. With neither set the options are empty.
    """
    if configuration.rules is not None:
        return ScanOptions(rules=rules_to_axe(configuration.rules))
    if configuration.standard:
        return ScanOptions(run_only=standard_to_run_only(configuration.standard))
    return ScanOptions()


def get_scan_context(configuration: RunConfiguration) -> Any | None:
    """Get the axe context: the root element, or None for the whole document."""
    return configuration.root_element
