"""Renderers turning a migration analysis into markdown and shell artifacts."""

from stackshift.reports.breaking_changes import (
    render_breaking_changes_report,
    render_manual_migration_guide,
)
from stackshift.reports.dependencies import render_dependency_report
from stackshift.reports.plan import render_migration_plan
from stackshift.reports.script import render_migration_script

__all__ = [
    "render_breaking_changes_report",
    "render_dependency_report",
    "render_manual_migration_guide",
    "render_migration_plan",
    "render_migration_script",
]
