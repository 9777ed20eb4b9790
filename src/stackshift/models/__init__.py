"""Pydantic models for stackshift."""

from stackshift.models.migration import (
    BreakingChange,
    BreakingChangeAnalysis,
    BreakingChangesSummary,
    Checkpoint,
    ComplexityFactor,
    DependencyAnalysis,
    MigrationAnalysis,
    MigrationComplexity,
    MigrationPhase,
    MigrationRisk,
    RollbackStrategy,
    SharedResource,
)
from stackshift.models.rules import FrameworkPattern, RuleSet
from stackshift.models.stack import (
    BasicAnalysis,
    DetectedFramework,
    FrameworkDetectionResult,
    TechStackInfo,
)

__all__ = [
    "BasicAnalysis",
    "BreakingChange",
    "BreakingChangeAnalysis",
    "BreakingChangesSummary",
    "Checkpoint",
    "ComplexityFactor",
    "DependencyAnalysis",
    "DetectedFramework",
    "FrameworkDetectionResult",
    "FrameworkPattern",
    "MigrationAnalysis",
    "MigrationComplexity",
    "MigrationPhase",
    "MigrationRisk",
    "RollbackStrategy",
    "RuleSet",
    "SharedResource",
    "TechStackInfo",
]
