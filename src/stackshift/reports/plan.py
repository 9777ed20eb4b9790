"""Markdown migration plan."""

from stackshift.models.migration import MigrationAnalysis, Strategy

STRATEGY_DESCRIPTIONS: dict[Strategy, str] = {
    Strategy.BIG_BANG: (
        "Replace the whole system in a single release. Suitable for low complexity "
        "migrations without critical shared infrastructure."
    ),
    Strategy.INCREMENTAL: (
        "Migrate features one at a time behind a routing layer, releasing each "
        "phase independently."
    ),
    Strategy.PARALLEL_RUN: (
        "Run the old and new systems side by side against the shared resources "
        "and switch traffic once the new system is verified."
    ),
}


def render_migration_plan(analysis: MigrationAnalysis, project_name: str) -> str:
    """Convert a MigrationAnalysis to the MIGRATION_PLAN.md document.

    Args:
        analysis: Result of analyze_migration.
        project_name: Name shown in the title.

    Returns:
        Markdown string.
    """
    source, target = analysis.source_stack, analysis.target_stack
    complexity = analysis.complexity

    sections = [f"# Migration Plan: {project_name}\n"]

    sections.append("## Executive Summary\n")
    source_version = f" {source.version}" if source.version else ""
    target_version = f" {target.version}" if target.version else ""
    sections.append(f"- **Source Stack:** {source.name}{source_version}")
    sections.append(f"- **Target Stack:** {target.name}{target_version}")
    if source.metadata:
        sections.append(f"- **Detection Confidence:** {source.metadata.confidence}%")
    sections.append(f"- **Complexity:** {complexity.score}/100 ({complexity.level})")
    sections.append(f"- **Estimated Duration:** {analysis.estimated_duration}")
    sections.append(f"- **Recommended Strategy:** {analysis.recommended_strategy}")
    if analysis.breaking_changes_summary:
        summary = analysis.breaking_changes_summary
        sections.append(
            f"- **Breaking Changes:** {summary.total} "
            f"({summary.critical} critical, {summary.automatable} automatable)"
        )
    if analysis.dependency_analysis:
        deps = analysis.dependency_analysis
        sections.append(
            f"- **Incompatible Dependencies:** {deps.incompatible_count}/{deps.total_dependencies}"
        )
    sections.append("")

    sections.append("### Complexity Factors\n")
    sections.append("| Factor | Impact | Details |")
    sections.append("|--------|--------|---------|")
    for factor in complexity.factors:
        sections.append(f"| {factor.name} | {factor.impact}/10 | {factor.description} |")
    sections.append("")

    sections.append("## Strategy\n")
    strategy = analysis.recommended_strategy
    sections.append(f"**{strategy}**: {STRATEGY_DESCRIPTIONS[strategy]}")
    sections.append("")

    sections.append("## Shared Resources\n")
    if analysis.shared_resources:
        for resource in analysis.shared_resources:
            sections.append(
                f"- **{resource.name}** ({resource.type}, {resource.criticality_level}): "
                f"{resource.description}. Strategy: {resource.migration_strategy}"
            )
    else:
        sections.append("No shared resources detected.")
    sections.append("")

    sections.append("## Phases\n")
    for number, phase in enumerate(analysis.suggested_phases, start=1):
        sections.append(f"### {number}. {phase.name} (`{phase.id}`)\n")
        sections.append(phase.description + "\n")
        sections.append(f"- **Duration:** {phase.estimated_duration}")
        sections.append(f"- **Rollback Point:** {'Yes' if phase.rollback_point else 'No'}")
        if phase.dependencies:
            depends = ", ".join(f"`{d}`" for d in phase.dependencies)
            sections.append(f"- **Depends On:** {depends}")
        sections.append("")

        sections.append("**Validation Criteria:**\n")
        sections.extend(f"- [ ] {criterion}" for criterion in phase.validation_criteria)
        sections.append("")

        sections.append("**Checkpoints:**\n")
        for checkpoint in phase.critical_checkpoints:
            trigger = "automatic" if checkpoint.auto_trigger else "manual approval"
            sections.append(
                f"- **{checkpoint.name}** ({checkpoint.category}, {trigger}): "
                f"{checkpoint.description}"
            )
        sections.append("")

    sections.append("## Risks\n")
    sections.append("| Category | Risk | Probability | Impact | Mitigation |")
    sections.append("|----------|------|-------------|--------|------------|")
    for risk in analysis.risks:
        sections.append(
            f"| {risk.category} | {risk.description} | {risk.probability} | "
            f"{risk.impact} | {risk.mitigation} |"
        )
    sections.append("")

    rollback = analysis.rollback_strategy
    sections.append("## Rollback Strategy\n")
    sections.append(f"- **Automatic:** {'Yes' if rollback.automatic else 'No (manual approval)'}")
    backup = "Yes" if rollback.data_backup_required else "No"
    sections.append(f"- **Data Backup Required:** {backup}")
    sections.append(f"- **Estimated Time:** {rollback.estimated_time}")
    sections.append("")

    sections.append("### Triggers\n")
    for trigger in rollback.triggers:
        sections.append(f"- {trigger.condition} ({trigger.severity}): {trigger.action}")
    sections.append("")

    sections.append("### Procedures\n")
    for procedure in rollback.procedures:
        sections.append(f"#### `{procedure.phase}` ({procedure.estimated_duration})\n")
        sections.extend(f"{i}. {step}" for i, step in enumerate(procedure.steps, start=1))
        sections.append("")
        sections.append("Verify:")
        sections.extend(f"- {point}" for point in procedure.verification_points)
        sections.append("")

    return "\n".join(sections)
