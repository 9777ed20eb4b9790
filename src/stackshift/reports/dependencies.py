"""Dependency compatibility report."""

from stackshift.models.migration import DependencyAnalysis, Rating, Severity

RISK_NOTES: dict[Rating, tuple[str, list[str]]] = {
    Rating.HIGH: (
        "HIGH RISK",
        [
            "Over 50% of dependencies are incompatible",
            "Significant refactoring required",
            "Consider phased migration approach",
        ],
    ),
    Rating.MEDIUM: (
        "MEDIUM RISK",
        ["Moderate refactoring required", "Plan for thorough testing"],
    ),
    Rating.LOW: (
        "LOW RISK",
        ["Minimal changes required", "Standard migration approach suitable"],
    ),
}


def _percent(part: int, total: int) -> int:
    return round(part / total * 100) if total else 0


def render_dependency_report(analysis: DependencyAnalysis | None) -> str:
    """Render DEPENDENCIES.md for a dependency analysis."""
    analysis = analysis or DependencyAnalysis()
    total = analysis.total_dependencies
    share = _percent(analysis.incompatible_count, total)

    sections = ["# Dependency Analysis Report\n"]
    sections.append("## Summary\n")
    sections.append(f"- **Total Dependencies:** {total}")
    sections.append(f"- **Incompatible:** {analysis.incompatible_count} ({share}%)")
    sections.append(f"- **With Replacements:** {analysis.has_replacements}")
    sections.append(f"- **Migration Complexity:** {analysis.migration_complexity.value.upper()}")
    sections.append("")

    title, notes = RISK_NOTES[analysis.migration_complexity]
    sections.append(f"## Risk Assessment: {title}\n")
    sections.append(f"- {share}% of dependencies affected")
    sections.extend(f"- {note}" for note in notes)
    sections.append("")

    sections.append("## Incompatible Dependencies\n")
    if analysis.incompatible:
        for severity in reversed(Severity):
            for info in (i for i in analysis.incompatible if i.severity == severity):
                sections.append(f"### {info.package}\n")
                sections.append(f"- **Reason:** {info.reason}")
                sections.append(f"- **Severity:** {info.severity}")
                if info.resolution:
                    sections.append(f"- **Resolution:** {info.resolution}")
                sections.append("")
    else:
        sections.append("No incompatible dependencies found.\n")

    sections.append("## Replacement Suggestions\n")
    if analysis.replacements:
        for suggestion in analysis.replacements:
            sections.append(f"### {suggestion.from_package} → {suggestion.to_package}\n")
            sections.append(f"- **Confidence:** {suggestion.confidence}")
            sections.append(f"- **Effort:** {suggestion.migration_effort}")
            if suggestion.notes:
                sections.append(f"- **Notes:** {suggestion.notes}")
            sections.append("")
    else:
        sections.append("No replacement suggestions.\n")

    sections.append("## All Dependencies\n")
    if analysis.dependencies:
        sections.append("| Package | Version | Framework | Compatible | Replacement |")
        sections.append("|---------|---------|-----------|------------|-------------|")
        for dep in analysis.dependencies:
            compatible = "Yes" if dep.is_compatible else "No"
            replacement = "Yes" if dep.has_replacement else "-"
            sections.append(
                f"| {dep.name} | {dep.version} | {dep.framework} | {compatible} | {replacement} |"
            )
    else:
        sections.append("No dependencies declared.")
    sections.append("")

    return "\n".join(sections)
