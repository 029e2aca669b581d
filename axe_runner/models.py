"""Pydantic models for runner configuration, axe results and normalized issues.

The axe models map the subset of the axe-core results object this runner reads.
API Reference: https://github.com/dequelabs/axe-core/blob/develop/doc/API.md#results-object
"""

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class IssueType(str, Enum):
    """Normalized issue types, one per axe result category."""

    ERROR = "error"
    WARNING = "warning"
    PASS = "pass"


class RunConfiguration(BaseModel):
    """Options the host passes to the runner."""

    model_config = ConfigDict(arbitrary_types_allowed=True, populate_by_name=True)

    root_element: Any | None = Field(
        None,
        alias="rootElement",
        description="Element to scan instead of the whole document",
    )
    standard: str | None = Field(
        None, description="Named standard, e.g. 'WCAG2AA' or 'Section508'"
    )
    rules: list[str] | None = Field(
        None, description="Rule identifiers to enable explicitly"
    )

    @field_validator("standard", mode="before")
    @classmethod
    def coerce_standard(cls, value: Any) -> Any:
        # Non-string standards are unrecognized names, not errors
        if value is None or isinstance(value, str):
            return value
        return str(value) if value else None

    @field_validator("rules", mode="before")
    @classmethod
    def drop_non_sequence_rules(cls, value: Any) -> Any:
        # Anything other than a real list of rule names is ignored, never an error
        if isinstance(value, (list, tuple)):
            return [rule for rule in value if isinstance(rule, str)]
        return None


class RunOnly(BaseModel):
    """axe ``runOnly`` tag filter."""

    type: Literal["tags"] = "tags"
    values: list[str] = Field(default_factory=list)


class RuleSetting(BaseModel):
    enabled: bool = True


class ScanOptions(BaseModel):
    """Options object handed to ``axe.run``."""

    model_config = ConfigDict(populate_by_name=True)

    run_only: RunOnly | None = Field(None, alias="runOnly")
    rules: dict[str, RuleSetting] | None = None

    def to_axe(self) -> dict[str, Any]:
        """Serialize to the engine's option shape, leaving unset fields out."""
        return self.model_dump(by_alias=True, exclude_none=True)


class AxeNode(BaseModel):
    """One matched node of an axe finding.

    ``target`` is a selector path. Fragments that cross a shadow-DOM boundary
    are reported by axe as nested lists of selectors.
    """

    target: list[str | list[str]] = Field(default_factory=list)


class AxeFinding(BaseModel):
    """A single rule result as reported by axe."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Rule identifier, e.g. 'image-alt'")
    help: str = Field("", description="Short help text for the rule")
    help_url: str = Field("", alias="helpUrl", description="Deque University URL")
    description: str = Field("", description="Longer description of the rule")
    impact: str | None = Field(
        None, description="minor, moderate, serious, critical or null"
    )
    tags: list[str] = Field(default_factory=list)
    nodes: list[AxeNode] = Field(default_factory=list)


class AxeResults(BaseModel):
    """Result categories returned by ``axe.run``."""

    violations: list[AxeFinding] = Field(default_factory=list)
    incomplete: list[AxeFinding] = Field(default_factory=list)
    passes: list[AxeFinding] = Field(default_factory=list)


class RunnerExtras(BaseModel):
    """axe specific fields carried through to the host verbatim."""

    model_config = ConfigDict(populate_by_name=True)

    description: str
    impact: str | None = None
    help: str
    help_url: str = Field(..., alias="helpUrl")


class NormalizedIssue(BaseModel):
    """Issue in the shape the host tool reports."""

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        populate_by_name=True,
        use_enum_values=True,
    )

    code: str = Field(..., description="axe rule identifier")
    message: str = Field(..., description="Help text followed by the help URL")
    type: IssueType
    element: Any | None = Field(
        None, description="Resolved element, or None when no element resolved"
    )
    runner_extras: RunnerExtras = Field(..., alias="runnerExtras")

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
