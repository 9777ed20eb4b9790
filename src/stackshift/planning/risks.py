"""Risk assessment from stacks, shared resources, breaking changes and dependencies."""

from stackshift.models.migration import (
    BreakingChange,
    DependencyAnalysis,
    MigrationRisk,
    Rating,
    ResourceType,
    RiskCategory,
    Severity,
    SharedResource,
)
from stackshift.models.stack import TechStackInfo, normalize_framework

# More incompatible dependencies than this makes the dependency risk critical.
CRITICAL_INCOMPATIBLE_COUNT = 10


def _has_resource(resources: list[SharedResource], kind: ResourceType) -> bool:
    return any(r.type == kind for r in resources)


def assess_risks(
    source: TechStackInfo,
    target: TechStackInfo,
    shared_resources: list[SharedResource],
    breaking_changes: list[BreakingChange] | None = None,
    dependency_analysis: DependencyAnalysis | None = None,
) -> list[MigrationRisk]:
    """Evaluate every risk rule independently, in a fixed order."""
    breaking_changes = breaking_changes or []
    risks: list[MigrationRisk] = []

    if normalize_framework(source.name) != normalize_framework(target.name):
        risks.append(
            MigrationRisk(
                category=RiskCategory.COMPATIBILITY,
                description=f"Framework migration from {source.name} to {target.name}",
                probability=Rating.HIGH,
                impact=Severity.HIGH,
                mitigation="Use adapter patterns and gradual component migration",
            )
        )

    if _has_resource(shared_resources, ResourceType.DATABASE):
        risks.append(
            MigrationRisk(
                category=RiskCategory.DATA_LOSS,
                description="Shared database requires careful schema management",
                probability=Rating.MEDIUM,
                impact=Severity.CRITICAL,
                mitigation="Use database migrations with rollback capability",
            )
        )

    if _has_resource(shared_resources, ResourceType.AUTH):
        risks.append(
            MigrationRisk(
                category=RiskCategory.SECURITY,
                description="Authentication system must remain compatible",
                probability=Rating.MEDIUM,
                impact=Severity.CRITICAL,
                mitigation="Implement session sharing or token compatibility layer",
            )
        )

    if _has_resource(shared_resources, ResourceType.API):
        risks.append(
            MigrationRisk(
                category=RiskCategory.COMPATIBILITY,
                description="API contracts must be maintained for existing consumers",
                probability=Rating.HIGH,
                impact=Severity.HIGH,
                mitigation="Version APIs or use API gateway for routing",
            )
        )

    critical = sum(1 for c in breaking_changes if c.severity == Severity.CRITICAL)
    if critical:
        risks.append(
            MigrationRisk(
                category=RiskCategory.COMPATIBILITY,
                description=f"{critical} critical breaking changes require attention",
                probability=Rating.HIGH,
                impact=Severity.CRITICAL,
                mitigation="Address all critical breaking changes before migration",
            )
        )

    manual = sum(1 for c in breaking_changes if not c.automatable)
    if manual:
        risks.append(
            MigrationRisk(
                category=RiskCategory.COMPATIBILITY,
                description=f"{manual} breaking changes require manual migration",
                probability=Rating.HIGH,
                impact=Severity.HIGH,
                mitigation="Allocate time for manual code updates and testing",
            )
        )

    if dependency_analysis and dependency_analysis.incompatible_count > 0:
        count = dependency_analysis.incompatible_count
        risks.append(
            MigrationRisk(
                category=RiskCategory.COMPATIBILITY,
                description=f"{count} incompatible dependencies detected",
                probability=Rating.HIGH,
                impact=(
                    Severity.CRITICAL if count > CRITICAL_INCOMPATIBLE_COUNT else Severity.HIGH
                ),
                mitigation="Replace incompatible packages with suggested alternatives",
            )
        )

    if dependency_analysis and dependency_analysis.migration_complexity == Rating.HIGH:
        risks.append(
            MigrationRisk(
                category=RiskCategory.COMPATIBILITY,
                description="High dependency migration complexity",
                probability=Rating.HIGH,
                impact=Severity.HIGH,
                mitigation="Plan phased dependency migration with thorough testing",
            )
        )

    # Both systems run side by side during any non big-bang migration.
    risks.append(
        MigrationRisk(
            category=RiskCategory.PERFORMANCE,
            description="Parallel run strategy may impact system performance",
            probability=Rating.MEDIUM,
            impact=Severity.MEDIUM,
            mitigation="Implement load balancing and resource monitoring",
        )
    )
    return risks
