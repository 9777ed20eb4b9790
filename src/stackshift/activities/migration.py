"""Migration analysis activity.

Runs the detectors concurrently, then feeds their findings through the pure
planning stages to build a complete MigrationAnalysis.
"""

import asyncio
import logging
from pathlib import Path

from stackshift.activities.project import analyze_basic
from stackshift.analysis.breaking_changes import analyze_breaking_changes
from stackshift.analysis.dependencies import analyze_dependencies
from stackshift.analysis.detector import detect_frameworks
from stackshift.analysis.resources import detect_shared_resources
from stackshift.exceptions import AnalyzeError
from stackshift.filesystem import package_dependencies, read_package_json, read_requirements
from stackshift.models.migration import BreakingChange, BreakingChangesSummary, MigrationAnalysis
from stackshift.models.rules import RuleSet
from stackshift.models.stack import (
    BasicAnalysis,
    DetectedFramework,
    FrameworkDetectionResult,
    StackMetadata,
    TechStackInfo,
    normalize_framework,
)
from stackshift.planning.complexity import score_complexity
from stackshift.planning.phases import estimate_duration, synthesize_phases
from stackshift.planning.risks import assess_risks
from stackshift.planning.strategy import plan_rollback, recommend_strategy
from stackshift.progress import ProgressCallback, Severity, noop_progress
from stackshift.rules import get_default_ruleset

logger = logging.getLogger(__name__)

SOURCE_PLACEHOLDER = "Current Stack"
TARGET_PLACEHOLDER = "Target Stack"

# Basic scan labels used as a fallback source name, later entries win.
TECH_STACK_FALLBACKS = [
    ("React", "React"),
    ("Next.js", "Next.js"),
    ("Express.js", "Express"),
    ("Flask", "Flask"),
    ("Django", "Django"),
]


def complete_target_stack(
    name: str | None = None, version: str | None = None, **fields
) -> TechStackInfo:
    """Fill in defaults for a user supplied target stack."""
    return TechStackInfo(name=name or TARGET_PLACEHOLDER, version=version, **fields)


def _fallback_name(basic_analysis: BasicAnalysis) -> str:
    name = SOURCE_PLACEHOLDER
    for label, stack_name in TECH_STACK_FALLBACKS:
        if label in basic_analysis.tech_stack:
            name = stack_name
    return name


async def detect_current_stack(
    path: Path,
    detection: FrameworkDetectionResult,
    basic_analysis: BasicAnalysis,
) -> TechStackInfo:
    """Describe the source stack from detection results and manifests."""
    primary = detection.primary
    if primary:
        name, version = primary.display_name, primary.version
    else:
        name, version = _fallback_name(basic_analysis), None

    dependencies, dev_dependencies = package_dependencies(await read_package_json(path))
    declared = list(dependencies)
    requirements = await read_requirements(path)
    if requirements:
        declared = requirements

    metadata = None
    if primary:
        metadata = StackMetadata(
            confidence=primary.confidence, detected_frameworks=detection.all_detected
        )

    return TechStackInfo(
        name=name,
        version=version,
        dependencies=declared,
        dev_dependencies=list(dev_dependencies),
        metadata=metadata,
    )


def _breaking_changes(
    source: TechStackInfo, target: TechStackInfo, ruleset: RuleSet
) -> tuple[list[BreakingChange], BreakingChangesSummary | None]:
    if not source.metadata or not source.metadata.detected_frameworks:
        return [], None

    analysis = analyze_breaking_changes(
        source.metadata.detected_frameworks[0],
        DetectedFramework(
            framework=normalize_framework(target.name), version=target.version, confidence=100
        ),
        ruleset,
    )
    summary = BreakingChangesSummary(
        total=len(analysis.breaking_changes),
        critical=analysis.critical_count,
        automatable=analysis.automatable_count,
        estimated_hours=analysis.estimated_hours,
    )
    return analysis.breaking_changes, summary


async def analyze_migration(
    path: Path,
    target: TechStackInfo,
    basic_analysis: BasicAnalysis | None = None,
    ruleset: RuleSet | None = None,
    on_progress: ProgressCallback = noop_progress,
) -> MigrationAnalysis:
    """Analyze migrating the project at path to the target stack.

    Missing or malformed inputs degrade the analysis instead of failing it.

    Args:
        path: Project root.
        target: Declared target stack.
        basic_analysis: Pre-computed basic scan. Scanned when omitted.
        ruleset: Rule tables. Defaults to the built-in rule set.
        on_progress: Callback for progress messages.

    Returns:
        Complete migration analysis.

    Raises:
        AnalyzeError: If path is not a directory.
    """
    if not path.is_dir():
        raise AnalyzeError(f"Project directory not found: {path}")

    ruleset = ruleset or get_default_ruleset()
    if basic_analysis is None:
        basic_analysis = await analyze_basic(path)

    on_progress(Severity.INFO, "Detecting frameworks and shared resources...")
    detection, shared_resources = await asyncio.gather(
        detect_frameworks(path, ruleset.frameworks),
        detect_shared_resources(path),
    )

    source = await detect_current_stack(path, detection, basic_analysis)
    target = complete_target_stack(**target.model_dump(exclude_none=True))
    if source.metadata:
        on_progress(
            Severity.SUCCESS,
            f"Detected {source.name} ({source.metadata.confidence}% confidence)",
        )
    else:
        on_progress(Severity.WARNING, f"No framework detected with confidence, using {source.name}")

    on_progress(Severity.INFO, "Analyzing breaking changes and dependencies...")
    breaking_changes, summary = _breaking_changes(source, target, ruleset)

    if source.metadata and source.metadata.detected_frameworks:
        source_framework = source.metadata.detected_frameworks[0].framework
    else:
        source_framework = normalize_framework(source.name)
    dependency_analysis = await analyze_dependencies(
        path, source_framework, normalize_framework(target.name), ruleset
    )

    risks = assess_risks(source, target, shared_resources, breaking_changes, dependency_analysis)
    complexity = score_complexity(
        source,
        target,
        shared_resources,
        risks,
        breaking_changes,
        dependency_analysis,
        ruleset.framework_complexity,
    )
    phases = synthesize_phases(complexity, breaking_changes, dependency_analysis)
    strategy = recommend_strategy(complexity, shared_resources)

    logger.info(
        "Migration %s -> %s: complexity %d (%s), strategy %s",
        source.name,
        target.name,
        complexity.score,
        complexity.level,
        strategy,
    )
    on_progress(Severity.SUCCESS, f"Complexity {complexity.score}/100 ({complexity.level})")

    return MigrationAnalysis(
        source_stack=source,
        target_stack=target,
        complexity=complexity,
        risks=risks,
        shared_resources=shared_resources,
        suggested_phases=phases,
        estimated_duration=estimate_duration(complexity, phases),
        recommended_strategy=strategy,
        breaking_changes=breaking_changes,
        breaking_changes_summary=summary,
        dependency_analysis=dependency_analysis,
        rollback_strategy=plan_rollback(phases, shared_resources),
    )
