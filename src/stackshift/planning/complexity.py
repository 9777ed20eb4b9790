"""Weighted migration complexity score."""

from stackshift.models.migration import (
    BreakingChange,
    ComplexityFactor,
    DependencyAnalysis,
    MigrationComplexity,
    MigrationRisk,
    Rating,
    Severity,
    SharedResource,
)
from stackshift.models.stack import TechStackInfo, normalize_framework
from stackshift.rules import get_default_ruleset
from stackshift.rules.complexity import DEFAULT_FRAMEWORK_COMPLEXITY

FRAMEWORK_WEIGHT = 10
SHARED_RESOURCE_WEIGHT = 5
CRITICAL_RISK_WEIGHT = 7
BREAKING_CHANGE_WEIGHT = 5
DEPENDENCY_WEIGHT = 4

MAX_IMPACT = 10

DEPENDENCY_IMPACT: dict[Rating, int] = {
    Rating.HIGH: 8,
    Rating.MEDIUM: 5,
    Rating.LOW: 2,
}


def level_for_score(score: int) -> Severity:
    """Bucket a raw score: below 30 low, below 60 medium, below 80 high."""
    if score < 30:
        return Severity.LOW
    if score < 60:
        return Severity.MEDIUM
    if score < 80:
        return Severity.HIGH
    return Severity.CRITICAL


def framework_complexity(
    source: str,
    target: str,
    matrix: dict[str, dict[str, int]] | None = None,
) -> int:
    """Distance between two frameworks, 7 for pairs the matrix does not know."""
    if matrix is None:
        matrix = get_default_ruleset().framework_complexity

    src, dst = normalize_framework(source), normalize_framework(target)
    for from_name, targets in matrix.items():
        if normalize_framework(from_name) != src:
            continue
        for to_name, value in targets.items():
            if normalize_framework(to_name) == dst:
                return value
    return DEFAULT_FRAMEWORK_COMPLEXITY


def score_complexity(
    source: TechStackInfo,
    target: TechStackInfo,
    shared_resources: list[SharedResource],
    risks: list[MigrationRisk],
    breaking_changes: list[BreakingChange] | None = None,
    dependency_analysis: DependencyAnalysis | None = None,
    matrix: dict[str, dict[str, int]] | None = None,
) -> MigrationComplexity:
    """Sum weighted factor impacts into a 0-100 score and a level.

    The level is bucketed from the raw sum before the score is capped at 100.
    """
    breaking_changes = breaking_changes or []
    factors: list[ComplexityFactor] = []
    total = 0

    if normalize_framework(source.name) != normalize_framework(target.name):
        impact = framework_complexity(source.name, target.name, matrix)
        factors.append(
            ComplexityFactor(
                name="Framework Migration",
                impact=impact,
                description=f"Migrating from {source.name} to {target.name}",
            )
        )
        total += impact * FRAMEWORK_WEIGHT

    if shared_resources:
        impact = min(len(shared_resources) * 2, MAX_IMPACT)
        factors.append(
            ComplexityFactor(
                name="Shared Resources",
                impact=impact,
                description=f"{len(shared_resources)} shared resources to maintain",
            )
        )
        total += impact * SHARED_RESOURCE_WEIGHT

    critical_risks = sum(1 for r in risks if r.impact == Severity.CRITICAL)
    impact = min(critical_risks * 3, MAX_IMPACT)
    factors.append(
        ComplexityFactor(
            name="Critical Risks",
            impact=impact,
            description=f"{critical_risks} critical risk factors identified",
        )
    )
    total += impact * CRITICAL_RISK_WEIGHT

    if breaking_changes:
        impact = min(len(breaking_changes), MAX_IMPACT)
        manual = sum(1 for c in breaking_changes if not c.automatable)
        factors.append(
            ComplexityFactor(
                name="Breaking Changes",
                impact=impact,
                description=f"{len(breaking_changes)} breaking changes ({manual} manual)",
            )
        )
        total += impact * BREAKING_CHANGE_WEIGHT

    if dependency_analysis is not None:
        impact = DEPENDENCY_IMPACT[dependency_analysis.migration_complexity]
        factors.append(
            ComplexityFactor(
                name="Dependency Migration",
                impact=impact,
                description=(
                    f"{dependency_analysis.incompatible_count}/"
                    f"{dependency_analysis.total_dependencies} incompatible dependencies"
                ),
            )
        )
        total += impact * DEPENDENCY_WEIGHT

    return MigrationComplexity(
        score=max(0, min(total, 100)),
        factors=factors,
        level=level_for_score(total),
    )
