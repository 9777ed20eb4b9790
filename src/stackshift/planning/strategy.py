"""Strategy recommendation and rollback planning."""

from stackshift.models.migration import (
    MigrationComplexity,
    MigrationPhase,
    ResourceType,
    RollbackProcedure,
    RollbackStrategy,
    RollbackTrigger,
    Severity,
    SharedResource,
    Strategy,
    TriggerAction,
    TriggerSeverity,
)

ROLLBACK_TRIGGERS = [
    RollbackTrigger(
        condition="Critical error in production",
        severity=TriggerSeverity.CRITICAL,
        action=TriggerAction.ROLLBACK,
    ),
    RollbackTrigger(
        condition="Data integrity check failed",
        severity=TriggerSeverity.CRITICAL,
        action=TriggerAction.ROLLBACK,
    ),
    RollbackTrigger(
        condition="Performance degradation > 50%",
        severity=TriggerSeverity.ERROR,
        action=TriggerAction.PAUSE,
    ),
]

VERIFICATION_POINTS = [
    "Old system responding correctly",
    "Data integrity verified",
    "No active errors in logs",
]

PROCEDURE_DURATION = "30-60 minutes"
ROLLBACK_TIME = "1-2 hours"


def recommend_strategy(
    complexity: MigrationComplexity, shared_resources: list[SharedResource]
) -> Strategy:
    """Pick big-bang, incremental or parallel-run."""
    critical_shared = any(r.criticality_level == Severity.CRITICAL for r in shared_resources)

    if complexity.level == Severity.LOW and not critical_shared:
        return Strategy.BIG_BANG
    if complexity.level == Severity.CRITICAL or critical_shared:
        return Strategy.PARALLEL_RUN
    return Strategy.INCREMENTAL


def rollback_procedure(phase: MigrationPhase, has_database: bool) -> RollbackProcedure:
    return RollbackProcedure(
        phase=phase.id,
        steps=[
            f"Stop all services for {phase.name}",
            "Restore previous configuration",
            "Execute database rollback script" if has_database else "Skip database rollback",
            "Restart services with old configuration",
            "Verify system functionality",
        ],
        verification_points=list(VERIFICATION_POINTS),
        estimated_duration=PROCEDURE_DURATION,
    )


def plan_rollback(
    phases: list[MigrationPhase], shared_resources: list[SharedResource]
) -> RollbackStrategy:
    """One manual rollback procedure per rollback-point phase.

    Rollback is never automatic; every trigger needs a human decision.
    """
    has_database = any(r.type == ResourceType.DATABASE for r in shared_resources)
    return RollbackStrategy(
        automatic=False,
        triggers=[t.model_copy() for t in ROLLBACK_TRIGGERS],
        procedures=[rollback_procedure(p, has_database) for p in phases if p.rollback_point],
        data_backup_required=has_database,
        estimated_time=ROLLBACK_TIME,
    )
