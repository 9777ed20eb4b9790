"""Pydantic models for the declarative rule tables."""

import re
from typing import Annotated

from pydantic import BaseModel, Field, field_validator

from stackshift.models.migration import BreakingChange


class ContentPattern(BaseModel):
    """A regex expected in files matching a glob."""

    file: str  # glob, supports {a,b} alternation
    pattern: str
    weight: int

    @field_validator("pattern")
    @classmethod
    def _compiles(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"invalid regex {value!r}: {e}") from e
        return value


class VariantPattern(BaseModel):
    """A flavour of a framework, e.g. Next.js for React."""

    name: str
    files: list[str] = []
    dependencies: list[str] = []
    dev_dependencies: list[str] = []


class FrameworkPattern(BaseModel):
    """Detection rule for a single framework."""

    framework: str
    files: list[str] = []
    dependencies: list[str] = []
    dev_dependencies: list[str] = []
    content: list[ContentPattern] = []
    structure: list[str] = []
    priority: int = 0
    variants: list[VariantPattern] = []


class FrameworkVersion(BaseModel):
    """A framework with an optional inclusive version range."""

    framework: str
    min_version: str | None = None
    max_version: str | None = None


class BreakingChangeRule(BaseModel):
    """Breaking changes that apply when migrating from source to target."""

    source: FrameworkVersion
    target: FrameworkVersion
    changes: list[BreakingChange]


class PackageInfo(BaseModel):
    """A package reference inside a dependency mapping."""

    name: str
    version_range: str | None = None
    framework: str | None = None


class DependencyMapping(BaseModel):
    """Known replacement path for a package."""

    source: PackageInfo
    replacements: list[PackageInfo] = []
    notes: str | None = None
    breaking_changes: list[str] = []
    compatible: bool = True


class RuleSet(BaseModel):
    """Every static table the engine consults, bundled for injection."""

    version: str = "1"
    frameworks: list[FrameworkPattern] = []
    breaking_changes: list[BreakingChangeRule] = []
    dependency_mappings: list[DependencyMapping] = []
    framework_prefixes: dict[str, list[str]] = {}
    replacement_notes: dict[str, str] = {}
    framework_complexity: dict[str, dict[str, Annotated[int, Field(ge=0, le=10)]]] = {}
