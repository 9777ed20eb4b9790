"""Pydantic models for migration analysis results."""

from enum import StrEnum

from pydantic import BaseModel, Field

from stackshift.models.stack import DetectedFramework, TechStackInfo


class Severity(StrEnum):
    """Four-level severity used for changes, impacts and criticality."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class Rating(StrEnum):
    """Three-level rating used for probability, confidence and complexity tiers."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Effort(StrEnum):
    """Effort tier for a single change."""

    TRIVIAL = "trivial"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class ChangeCategory(StrEnum):
    """Kind of breaking change."""

    API = "api"
    SYNTAX = "syntax"
    STRUCTURE = "structure"
    DEPENDENCY = "dependency"
    CONFIG = "config"
    BEHAVIOR = "behavior"


class RiskCategory(StrEnum):
    """Kind of migration risk."""

    COMPATIBILITY = "compatibility"
    DATA_LOSS = "data-loss"
    SECURITY = "security"
    PERFORMANCE = "performance"
    DOWNTIME = "downtime"


class ResourceType(StrEnum):
    """Kind of infrastructure shared between old and new systems."""

    DATABASE = "database"
    CACHE = "cache"
    AUTH = "auth"
    API = "api"


class CheckpointCategory(StrEnum):
    """How strongly a checkpoint gates progress."""

    CRITICAL = "critical"
    IMPORTANT = "important"


class TriggerSeverity(StrEnum):
    """Severity of a rollback trigger."""

    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"


class TriggerAction(StrEnum):
    """Action taken when a rollback trigger fires."""

    ROLLBACK = "rollback"
    PAUSE = "pause"
    ALERT = "alert"


class Strategy(StrEnum):
    """Overall migration strategy."""

    BIG_BANG = "big-bang"
    INCREMENTAL = "incremental"
    PARALLEL_RUN = "parallel-run"


# Breaking changes


class BreakingChange(BaseModel):
    """A known code or API difference between two frameworks."""

    id: str
    description: str
    category: ChangeCategory
    severity: Severity
    effort: Effort
    automatable: bool = False
    search_pattern: str | None = Field(default=None, description="Regex locating affected code")
    replacement: str | None = Field(default=None, description="sed-style replacement text")
    migration_guide: str | None = None


class EffortBreakdown(BaseModel):
    """Number of breaking changes per effort tier."""

    trivial: int = 0
    small: int = 0
    medium: int = 0
    large: int = 0


class BreakingChangeAnalysis(BaseModel):
    """Breaking changes applying to a source/target framework pair."""

    source: DetectedFramework
    target: DetectedFramework
    breaking_changes: list[BreakingChange] = []
    total_effort: EffortBreakdown = Field(default_factory=EffortBreakdown)
    critical_count: int = 0
    automatable_count: int = 0
    estimated_hours: float = 0.0


class BreakingChangesSummary(BaseModel):
    """Aggregate counts carried on the migration analysis."""

    total: int = 0
    critical: int = 0
    automatable: int = 0
    estimated_hours: float = 0.0


# Dependencies


class DependencyInfo(BaseModel):
    """Classification of one declared dependency."""

    name: str
    version: str
    framework: str
    is_compatible: bool
    has_replacement: bool


class IncompatibilityInfo(BaseModel):
    """Why a dependency will not survive the migration."""

    package: str
    reason: str
    severity: Severity
    resolution: str | None = None


class ReplacementSuggestion(BaseModel):
    """A suggested replacement package."""

    from_package: str
    to_package: str
    confidence: Rating
    migration_effort: Effort
    notes: str | None = None


class DependencyAnalysis(BaseModel):
    """Compatibility of a project's dependencies with the target stack."""

    total_dependencies: int = 0
    incompatible_count: int = 0
    has_replacements: int = 0
    migration_complexity: Rating = Rating.LOW
    incompatible: list[IncompatibilityInfo] = []
    replacements: list[ReplacementSuggestion] = []
    dependencies: list[DependencyInfo] = []


# Resources, risks and complexity


class SharedResource(BaseModel):
    """Infrastructure used by both systems during the transition window."""

    type: ResourceType
    name: str
    description: str
    criticality_level: Severity
    migration_strategy: str


class MigrationRisk(BaseModel):
    """A typed risk with a mitigation."""

    category: RiskCategory
    description: str
    probability: Rating
    impact: Severity
    mitigation: str


class ComplexityFactor(BaseModel):
    """One weighted contributor to the complexity score."""

    name: str
    impact: int = Field(ge=0, le=10)
    description: str


class MigrationComplexity(BaseModel):
    """Aggregated migration complexity."""

    score: int = Field(ge=0, le=100)
    factors: list[ComplexityFactor] = []
    level: Severity


# Phases and rollback


class Checkpoint(BaseModel):
    """A named milestone inside a phase that may require approval."""

    id: str
    name: str
    description: str
    category: CheckpointCategory
    auto_trigger: bool = False
    conditions: list[str] = []


class MigrationPhase(BaseModel):
    """One step of the migration plan."""

    id: str
    name: str
    description: str
    critical_checkpoints: list[Checkpoint] = []
    dependencies: list[str] = []
    rollback_point: bool = False
    estimated_duration: str
    risks: list[MigrationRisk] = []
    validation_criteria: list[str] = []


class RollbackTrigger(BaseModel):
    """Condition that should trigger a rollback decision."""

    condition: str
    severity: TriggerSeverity
    action: TriggerAction


class RollbackProcedure(BaseModel):
    """How to revert one rollback-point phase."""

    phase: str
    steps: list[str]
    verification_points: list[str] = []
    estimated_duration: str


class RollbackStrategy(BaseModel):
    """Rollback plan for the whole migration."""

    automatic: bool = False
    triggers: list[RollbackTrigger] = []
    procedures: list[RollbackProcedure] = []
    data_backup_required: bool = False
    estimated_time: str


class MigrationAnalysis(BaseModel):
    """Complete result of a migration analysis run."""

    source_stack: TechStackInfo
    target_stack: TechStackInfo
    complexity: MigrationComplexity
    risks: list[MigrationRisk] = []
    shared_resources: list[SharedResource] = []
    suggested_phases: list[MigrationPhase] = []
    estimated_duration: str
    recommended_strategy: Strategy
    breaking_changes: list[BreakingChange] = []
    breaking_changes_summary: BreakingChangesSummary | None = None
    dependency_analysis: DependencyAnalysis | None = None
    rollback_strategy: RollbackStrategy
