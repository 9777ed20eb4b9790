"""Breaking changes report and manual migration guide."""

from stackshift.models.migration import (
    BreakingChange,
    ChangeCategory,
    Effort,
    MigrationAnalysis,
    Severity,
)

SEVERITY_SECTIONS = [
    (Severity.CRITICAL, "Critical Changes"),
    (Severity.HIGH, "High Priority Changes"),
    (Severity.MEDIUM, "Medium Priority Changes"),
    (Severity.LOW, "Low Priority Changes"),
]

GENERIC_STEPS: dict[ChangeCategory, list[str]] = {
    ChangeCategory.API: [
        "Update method calls to use new API",
        "Update any type definitions",
        "Test API functionality",
    ],
    ChangeCategory.SYNTAX: [
        "Update syntax to new format",
        "Ensure proper imports",
        "Check for linting errors",
    ],
    ChangeCategory.STRUCTURE: [
        "Reorganize files/folders as needed",
        "Update import paths",
        "Update build configuration",
    ],
    ChangeCategory.DEPENDENCY: [
        "Update package dependencies",
        "Install new packages",
        "Remove old packages",
        "Update import statements",
    ],
    ChangeCategory.CONFIG: [
        "Update configuration files",
        "Verify environment variables",
        "Test configuration loading",
    ],
    ChangeCategory.BEHAVIOR: [
        "Understand the behavioral change",
        "Update code to handle new behavior",
        "Add tests for edge cases",
    ],
}


def _change_section(changes: list[BreakingChange]) -> list[str]:
    if not changes:
        return ["*No changes in this category*\n"]

    lines = []
    for change in changes:
        lines.append(f"### {change.id}\n")
        lines.append(f"- **Description:** {change.description}")
        lines.append(f"- **Category:** {change.category}")
        lines.append(f"- **Effort:** {change.effort}")
        lines.append(f"- **Automatable:** {'Yes' if change.automatable else 'No'}")
        if change.search_pattern:
            lines.append(f"- **Pattern:** `{change.search_pattern}`")
        if change.replacement:
            lines.append(f"- **Replacement:** `{change.replacement}`")
        if change.migration_guide:
            lines.append(f"- **Migration Guide:** {change.migration_guide}")
        lines.append("")
    return lines


def render_breaking_changes_report(analysis: MigrationAnalysis) -> str:
    """Render BREAKING_CHANGES.md grouped by severity."""
    changes = analysis.breaking_changes
    source, target = analysis.source_stack, analysis.target_stack

    sections = ["# Breaking Changes Report\n"]
    sections.append(f"## Migration: {source.name} → {target.name}\n")

    sections.append("## Summary\n")
    sections.append(f"- **Total Breaking Changes:** {len(changes)}")
    for severity, _ in SEVERITY_SECTIONS:
        count = sum(1 for c in changes if c.severity == severity)
        sections.append(f"- **{severity.value.title()}:** {count}")
    if analysis.breaking_changes_summary:
        hours = analysis.breaking_changes_summary.estimated_hours
        sections.append(f"- **Estimated Effort:** {hours:g} hours")
    sections.append("")

    automatable = sum(1 for c in changes if c.automatable)
    sections.append("### Automation Potential\n")
    sections.append(f"- **Automatable:** {automatable}")
    sections.append(f"- **Manual Required:** {len(changes) - automatable}")
    sections.append("")

    sections.append("### Effort Estimation\n")
    for effort in Effort:
        count = sum(1 for c in changes if c.effort == effort)
        sections.append(f"- **{effort.value.title()}:** {count} changes")
    sections.append("")

    for severity, title in SEVERITY_SECTIONS:
        sections.append(f"## {title}\n")
        sections.extend(_change_section([c for c in changes if c.severity == severity]))

    sections.append("## Next Steps\n")
    sections.append("1. Review all critical changes first")
    sections.append("2. Run `scripts/auto-migrate.sh` for automated changes")
    sections.append("3. Follow `docs/manual-migration-guide.md` for manual changes")
    sections.append("4. Test thoroughly after each change")
    sections.append("5. Update tests to reflect new patterns")
    sections.append("")

    return "\n".join(sections)


def generic_steps(change: BreakingChange) -> str:
    """Numbered fallback steps for a change without a migration guide."""
    steps = ["Locate all instances of the old pattern", *GENERIC_STEPS[change.category]]
    return "\n".join(f"{i}. {step}" for i, step in enumerate(steps, start=1))


def render_manual_migration_guide(changes: list[BreakingChange]) -> str:
    """Render step-by-step instructions for changes that need a human."""
    manual = [c for c in changes if not c.automatable]

    sections = ["# Manual Migration Guide\n"]
    sections.append("## Overview\n")
    sections.append(
        f"This guide covers {len(manual)} breaking changes that require manual intervention.\n"
    )

    sections.append("## Before You Start\n")
    sections.append("1. **Backup Your Code:** Ensure you have a clean git state")
    sections.append("2. **Understand the Changes:** Read through each change before implementing")
    sections.append("3. **Test Incrementally:** Test after each major change")
    sections.append("4. **Update Tests:** Modify tests to match new patterns")
    sections.append("")

    sections.append("## Changes by Category\n")
    by_category: dict[ChangeCategory, list[BreakingChange]] = {}
    for change in manual:
        by_category.setdefault(change.category, []).append(change)
    for category, grouped in by_category.items():
        sections.append(f"### {category.value.title()} Changes ({len(grouped)})\n")
        sections.extend(f"- {c.description}" for c in grouped)
        sections.append("")

    sections.append("## Detailed Migration Steps\n")
    for number, change in enumerate(manual, start=1):
        sections.append(f"### {number}. {change.description}\n")
        sections.append(f"- **Severity:** {change.severity}")
        sections.append(f"- **Effort:** {change.effort}")
        sections.append(f"- **Category:** {change.category}")
        sections.append("")
        sections.append("#### How to Migrate\n")
        sections.append(change.migration_guide or generic_steps(change))
        sections.append("")
        if change.search_pattern:
            sections.append(f"Search for: `{change.search_pattern}`")
            sections.append("")

    sections.append("## Verification Checklist\n")
    for item in [
        "All files compile without errors",
        "Linter passes",
        "Test suite passes",
        "Application runs correctly",
        "No console errors",
        "All features work as expected",
    ]:
        sections.append(f"- [ ] {item}")
    sections.append("")

    return "\n".join(sections)
