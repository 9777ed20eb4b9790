"""Dependency compatibility against a target framework."""

import logging
from pathlib import Path

from stackshift.filesystem import package_dependencies, read_package_json
from stackshift.models.migration import (
    DependencyAnalysis,
    DependencyInfo,
    Effort,
    IncompatibilityInfo,
    Rating,
    ReplacementSuggestion,
    Severity,
)
from stackshift.models.rules import DependencyMapping, RuleSet
from stackshift.rules import get_default_ruleset

logger = logging.getLogger(__name__)

AGNOSTIC = "agnostic"


def package_framework(name: str) -> str:
    """Guess which framework a package belongs to from its name."""
    if name.startswith("react") or "react" in name:
        return "react"
    if name.startswith("vue") or name.startswith("@vue/"):
        return "vue"
    if name.startswith("@angular/"):
        return "angular"
    if name.startswith("svelte") or name.startswith("@sveltejs/"):
        return "svelte"
    if name.startswith("@nestjs/"):
        return "nestjs"
    if name == "next" or name.startswith("next-"):
        return "nextjs"
    if name == "express" or name.startswith("express-"):
        return "express"
    return AGNOSTIC


def find_mapping(
    name: str, source: str, mappings: list[DependencyMapping]
) -> DependencyMapping | None:
    """Mapping for a package, scoped to the source framework when the mapping is."""
    for mapping in mappings:
        if mapping.source.name == name and (
            not mapping.source.framework or mapping.source.framework == source
        ):
            return mapping
    return None


def is_framework_specific(name: str, framework: str, prefixes: dict[str, list[str]]) -> bool:
    """Whether a package is owned by the given framework."""
    return any(name.startswith(prefix) for prefix in prefixes.get(framework, []))


def incompatibility_for(
    name: str, source: str, target: str, ruleset: RuleSet
) -> IncompatibilityInfo:
    """Explain why a package will not survive the move to target."""
    mapping = find_mapping(name, source, ruleset.dependency_mappings)
    if mapping and not mapping.compatible:
        resolution = (
            "Replace with: " + ", ".join(p.name for p in mapping.replacements)
            if mapping.replacements
            else "Remove package"
        )
        return IncompatibilityInfo(
            package=name,
            reason=mapping.notes or f"Incompatible with {target}",
            severity=Severity.HIGH,
            resolution=resolution,
        )

    framework = package_framework(name)
    if framework != AGNOSTIC and framework != target:
        return IncompatibilityInfo(
            package=name,
            reason=f"{framework} package incompatible with {target}",
            severity=Severity.CRITICAL,
            resolution=f"Find {target} equivalent or remove",
        )

    return IncompatibilityInfo(
        package=name,
        reason="May not be compatible with target framework",
        severity=Severity.LOW,
        resolution="Manual review required",
    )


def replacement_effort(from_name: str, to_name: str) -> Effort:
    if from_name == to_name.split("@")[0]:
        return Effort.TRIVIAL
    if from_name in to_name or to_name in from_name:
        return Effort.SMALL
    if package_framework(from_name) != package_framework(to_name):
        return Effort.LARGE
    return Effort.MEDIUM


def replacement_confidence(
    from_name: str, to_name: str, mappings: list[DependencyMapping]
) -> Rating:
    mapping = next((m for m in mappings if m.source.name == from_name), None)
    if mapping and any(r.name == to_name for r in mapping.replacements):
        return Rating.HIGH
    if from_name in to_name or to_name in from_name:
        return Rating.MEDIUM
    return Rating.LOW


def replacements_for(
    name: str, mapping: DependencyMapping, ruleset: RuleSet
) -> list[ReplacementSuggestion]:
    return [
        ReplacementSuggestion(
            from_package=name,
            to_package=replacement.name,
            confidence=replacement_confidence(
                name, replacement.name, ruleset.dependency_mappings
            ),
            migration_effort=replacement_effort(name, replacement.name),
            notes=ruleset.replacement_notes.get(f"{name}:{replacement.name}"),
        )
        for replacement in mapping.replacements
    ]


def migration_complexity_for(total: int, incompatible: int) -> Rating:
    """Bucket the incompatible share: over half is high, over a fifth medium."""
    if total <= 0:
        return Rating.LOW
    ratio = incompatible / total
    if ratio > 0.5:
        return Rating.HIGH
    if ratio > 0.2:
        return Rating.MEDIUM
    return Rating.LOW


def classify_dependencies(
    declared: dict[str, str],
    source: str,
    target: str,
    ruleset: RuleSet | None = None,
) -> DependencyAnalysis:
    """Classify declared dependencies without touching the filesystem.

    Args:
        declared: Package name to version specifier.
        source: Source framework name, lower case.
        target: Target framework name, lower case.
        ruleset: Rule tables. Defaults to the built-in rule set.
    """
    ruleset = ruleset or get_default_ruleset()

    dependencies: list[DependencyInfo] = []
    incompatible: list[IncompatibilityInfo] = []
    replacements: list[ReplacementSuggestion] = []

    for name, version in declared.items():
        mapping = find_mapping(name, source, ruleset.dependency_mappings)
        specific = is_framework_specific(name, source, ruleset.framework_prefixes)
        compatible = not specific or source == target

        dependencies.append(
            DependencyInfo(
                name=name,
                version=version,
                framework=package_framework(name),
                is_compatible=compatible,
                has_replacement=mapping is not None,
            )
        )
        if not compatible:
            incompatible.append(incompatibility_for(name, source, target, ruleset))
        if mapping:
            replacements.extend(replacements_for(name, mapping, ruleset))

    return DependencyAnalysis(
        total_dependencies=len(dependencies),
        incompatible_count=len(incompatible),
        has_replacements=sum(1 for d in dependencies if d.has_replacement),
        migration_complexity=migration_complexity_for(len(dependencies), len(incompatible)),
        incompatible=incompatible,
        replacements=replacements,
        dependencies=dependencies,
    )


async def analyze_dependencies(
    project_dir: Path,
    source: str,
    target: str,
    ruleset: RuleSet | None = None,
) -> DependencyAnalysis:
    """Analyze package.json dependencies of a project against a target framework.

    A missing or malformed package.json yields an empty, low complexity analysis.
    """
    package_json = await read_package_json(project_dir)
    if package_json is None:
        logger.debug("No package.json in %s, skipping dependency analysis", project_dir)
        return DependencyAnalysis()

    dependencies, dev_dependencies = package_dependencies(package_json)
    analysis = classify_dependencies(
        {**dependencies, **dev_dependencies}, source, target, ruleset
    )
    logger.info(
        "Dependencies: %d total, %d incompatible (%s complexity)",
        analysis.total_dependencies,
        analysis.incompatible_count,
        analysis.migration_complexity,
    )
    return analysis
