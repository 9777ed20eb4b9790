"""Ordered migration phase synthesis and total duration estimate.

Phases are emitted in a fixed order and each phase only depends on phases
emitted before it, so the plan is a DAG by construction.
"""

import math
import re

from stackshift.models.migration import (
    BreakingChange,
    Checkpoint,
    CheckpointCategory,
    DependencyAnalysis,
    MigrationComplexity,
    MigrationPhase,
    MigrationRisk,
    Rating,
    RiskCategory,
    Severity,
)

_DAYS = re.compile(r"(\d+)-?(\d+)?\s*days?")
_WEEKS = re.compile(r"(\d+)-?(\d+)?\s*weeks?")

DEFAULT_DAY_RANGE = (7, 14)


def _setup_phase() -> MigrationPhase:
    return MigrationPhase(
        id="setup",
        name="Setup and Planning",
        description="Initialize new project structure and migration tools",
        critical_checkpoints=[
            Checkpoint(
                id="env-setup",
                name="Environment Setup",
                description="New environment configured with shared resources",
                category=CheckpointCategory.CRITICAL,
                auto_trigger=True,
                conditions=["environment", "config", "setup"],
            )
        ],
        estimated_duration="1-2 days",
        validation_criteria=[
            "New project structure created",
            "Development environment running",
            "Shared resources accessible",
        ],
    )


def _infrastructure_phase(complexity: MigrationComplexity) -> MigrationPhase:
    return MigrationPhase(
        id="infrastructure",
        name="Core Infrastructure Migration",
        description="Migrate core services, authentication, and database connections",
        critical_checkpoints=[
            Checkpoint(
                id="db-connection",
                name="Database Connection",
                description="Verify database connectivity and compatibility",
                category=CheckpointCategory.CRITICAL,
                auto_trigger=True,
                conditions=["database", "connection", "schema"],
            )
        ],
        dependencies=["setup"],
        rollback_point=True,
        estimated_duration="3-5 days",
        risks=[
            MigrationRisk(
                category=RiskCategory.COMPATIBILITY,
                description=factor.description,
                probability=Rating.MEDIUM,
                impact=Severity.HIGH,
                mitigation="Test thoroughly in staging",
            )
            for factor in complexity.factors
            if factor.name == "Shared Resources"
        ],
        validation_criteria=[
            "Database connections working",
            "Authentication system compatible",
            "Core services operational",
        ],
    )


def _breaking_changes_phase(changes: list[BreakingChange]) -> MigrationPhase:
    count = len(changes)
    automatable = sum(1 for c in changes if c.automatable)
    return MigrationPhase(
        id="breaking-changes",
        name="Breaking Changes Resolution",
        description=f"Address {count} breaking changes ({automatable} automatable)",
        critical_checkpoints=[
            Checkpoint(
                id="breaking-changes-review",
                name="Breaking Changes Review",
                description="Review and plan approach for each breaking change",
                category=CheckpointCategory.CRITICAL,
                conditions=["breaking", "changes", "documented"],
            ),
            Checkpoint(
                id="automated-changes",
                name="Automated Changes Applied",
                description="Run and verify automated migration scripts",
                category=CheckpointCategory.IMPORTANT,
                auto_trigger=True,
                conditions=["automated", "migration", "complete"],
            ),
        ],
        dependencies=["infrastructure"],
        rollback_point=True,
        estimated_duration=f"{math.ceil(count / 5)}-{math.ceil(count / 2)} days",
        risks=[
            MigrationRisk(
                category=RiskCategory.COMPATIBILITY,
                description="Breaking changes may introduce new issues",
                probability=Rating.MEDIUM,
                impact=Severity.HIGH,
                mitigation="Thorough testing after each change",
            )
        ],
        validation_criteria=[
            "All breaking changes addressed",
            "Code compiles without errors",
            "Existing tests updated",
            "No regression issues",
        ],
    )


def _dependencies_phase(count: int, after: str) -> MigrationPhase:
    return MigrationPhase(
        id="dependencies",
        name="Dependency Migration",
        description=f"Update {count} incompatible dependencies",
        critical_checkpoints=[
            Checkpoint(
                id="dependency-analysis",
                name="Dependency Analysis Review",
                description="Review replacement suggestions and migration paths",
                category=CheckpointCategory.IMPORTANT,
                conditions=["dependencies", "analyzed", "replacements"],
            ),
            Checkpoint(
                id="dependency-testing",
                name="Dependency Compatibility Test",
                description="Test new dependencies in isolation",
                category=CheckpointCategory.CRITICAL,
                auto_trigger=True,
                conditions=["dependencies", "installed", "tested"],
            ),
        ],
        dependencies=[after],
        rollback_point=True,
        estimated_duration=f"{math.ceil(count / 10)}-{math.ceil(count / 5)} days",
        risks=[
            MigrationRisk(
                category=RiskCategory.COMPATIBILITY,
                description="New dependencies may have different APIs",
                probability=Rating.MEDIUM,
                impact=Severity.MEDIUM,
                mitigation="Test each dependency replacement thoroughly",
            )
        ],
        validation_criteria=[
            "All incompatible dependencies replaced",
            "Package installation successful",
            "No version conflicts",
            "Application builds successfully",
        ],
    )


def _features_phase(after: list[str]) -> MigrationPhase:
    return MigrationPhase(
        id="features",
        name="Feature Migration",
        description="Migrate application features incrementally",
        critical_checkpoints=[
            Checkpoint(
                id="feature-parity",
                name="Feature Parity Check",
                description="Verify migrated features match original functionality",
                category=CheckpointCategory.IMPORTANT,
                conditions=["feature", "complete", "tested"],
            )
        ],
        dependencies=after,
        estimated_duration="2-4 weeks",
        validation_criteria=[
            "Core features migrated",
            "Unit tests passing",
            "Integration tests passing",
        ],
    )


def _data_phase() -> MigrationPhase:
    return MigrationPhase(
        id="data",
        name="Data Migration",
        description="Migrate or transform data structures if needed",
        critical_checkpoints=[
            Checkpoint(
                id="data-integrity",
                name="Data Integrity Check",
                description="Verify all data migrated correctly",
                category=CheckpointCategory.CRITICAL,
                auto_trigger=True,
                conditions=["data", "migration", "integrity"],
            )
        ],
        dependencies=["features"],
        rollback_point=True,
        estimated_duration="1-2 weeks",
        risks=[
            MigrationRisk(
                category=RiskCategory.DATA_LOSS,
                description="Potential data inconsistency during migration",
                probability=Rating.LOW,
                impact=Severity.CRITICAL,
                mitigation="Implement comprehensive backup and validation",
            )
        ],
        validation_criteria=[
            "Data integrity verified",
            "No data loss confirmed",
            "Performance benchmarks met",
        ],
    )


def _cutover_phase(after: list[str]) -> MigrationPhase:
    return MigrationPhase(
        id="cutover",
        name="Production Cutover",
        description="Switch production traffic to new system",
        critical_checkpoints=[
            Checkpoint(
                id="go-live",
                name="Go Live Decision",
                description="Final approval before production cutover",
                category=CheckpointCategory.CRITICAL,
                conditions=["production", "ready", "approved"],
            )
        ],
        dependencies=after,
        rollback_point=True,
        estimated_duration="1-2 days",
        risks=[
            MigrationRisk(
                category=RiskCategory.DOWNTIME,
                description="Potential service disruption during cutover",
                probability=Rating.MEDIUM,
                impact=Severity.HIGH,
                mitigation="Use blue-green deployment or gradual rollout",
            )
        ],
        validation_criteria=[
            "All systems operational",
            "Performance metrics acceptable",
            "Rollback plan tested and ready",
        ],
    )


def synthesize_phases(
    complexity: MigrationComplexity,
    breaking_changes: list[BreakingChange] | None = None,
    dependency_analysis: DependencyAnalysis | None = None,
) -> list[MigrationPhase]:
    """Build the ordered phase plan.

    setup and infrastructure always come first and cutover always comes last.
    breaking-changes, dependencies and data are only emitted when there is
    work for them.
    """
    breaking_changes = breaking_changes or []
    phases = [_setup_phase(), _infrastructure_phase(complexity)]

    if breaking_changes:
        phases.append(_breaking_changes_phase(breaking_changes))

    if dependency_analysis and dependency_analysis.incompatible_count > 0:
        after = "breaking-changes" if breaking_changes else "infrastructure"
        phases.append(_dependencies_phase(dependency_analysis.incompatible_count, after))

    phases.append(_features_phase([p.id for p in phases]))

    if any("Shared Resources" in f.name for f in complexity.factors):
        phases.append(_data_phase())

    phases.append(_cutover_phase([p.id for p in phases]))
    return phases


def parse_duration(duration: str) -> tuple[int, int]:
    """Parse 'N-M days' or 'N-M weeks' into a day range, (7, 14) if unparseable."""
    match = _DAYS.search(duration)
    if match:
        low = int(match.group(1))
        return low, int(match.group(2) or low)

    match = _WEEKS.search(duration)
    if match:
        low = int(match.group(1))
        return low * 7, int(match.group(2) or low) * 7

    return DEFAULT_DAY_RANGE


def estimate_duration(complexity: MigrationComplexity, phases: list[MigrationPhase]) -> str:
    """Sum phase midpoints, inflate by the complexity score, and humanize."""
    base = 0.0
    for phase in phases:
        low, high = parse_duration(phase.estimated_duration)
        base += (low + high) / 2

    days = math.ceil(base * (1 + complexity.score / 100))
    if days < 14:
        return f"{days} days"
    if days < 60:
        return f"{math.ceil(days / 7)} weeks"
    return f"{math.ceil(days / 30)} months"
