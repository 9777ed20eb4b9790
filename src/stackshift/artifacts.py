"""Write migration analysis artifacts to an output directory."""

import asyncio
import logging
from pathlib import Path

import aiofiles
import aiofiles.os

from stackshift.exceptions import ArtifactError
from stackshift.models.migration import MigrationAnalysis
from stackshift.reports import (
    render_breaking_changes_report,
    render_dependency_report,
    render_manual_migration_guide,
    render_migration_plan,
    render_migration_script,
)
from stackshift.settings import get_settings

logger = logging.getLogger(__name__)

PLAN_FILE = "MIGRATION_PLAN.md"
DEPENDENCIES_FILE = "DEPENDENCIES.md"
BREAKING_CHANGES_FILE = "BREAKING_CHANGES.md"
MANUAL_GUIDE_FILE = "docs/manual-migration-guide.md"
SCRIPT_FILE = "scripts/auto-migrate.sh"


def get_output_dir(project_dir: Path) -> Path:
    """Default artifact directory for a project."""
    return project_dir / get_settings().output_dir


async def write_artifact(output_dir: Path, filename: str, content: str) -> Path:
    """Write one artifact file, creating parent directories.

    Raises:
        ArtifactError: If the file cannot be written.
    """
    path = output_dir / filename
    try:
        await aiofiles.os.makedirs(path.parent, exist_ok=True)
        async with aiofiles.open(path, "w", encoding="utf-8") as f:
            await f.write(content)
    except OSError as e:
        raise ArtifactError(f"Failed to write {path}: {e}") from e

    logger.debug("Wrote %s", path)
    return path


async def write_artifacts(
    output_dir: Path, analysis: MigrationAnalysis, project_name: str
) -> list[Path]:
    """Write the analysis JSON and every rendered report.

    Args:
        output_dir: Directory to write into.
        analysis: Result of analyze_migration.
        project_name: Name used in report titles.

    Returns:
        Paths of the written files.

    Raises:
        ArtifactError: If any file cannot be written.
    """
    settings = get_settings()
    outputs = [
        (settings.analysis_file, analysis.model_dump_json(indent=2) + "\n"),
        (PLAN_FILE, render_migration_plan(analysis, project_name)),
        (DEPENDENCIES_FILE, render_dependency_report(analysis.dependency_analysis)),
    ]
    if analysis.breaking_changes:
        outputs.extend(
            [
                (BREAKING_CHANGES_FILE, render_breaking_changes_report(analysis)),
                (MANUAL_GUIDE_FILE, render_manual_migration_guide(analysis.breaking_changes)),
                (SCRIPT_FILE, render_migration_script(analysis.breaking_changes)),
            ]
        )

    written = [await write_artifact(output_dir, name, content) for name, content in outputs]

    if analysis.breaking_changes:
        script = output_dir / SCRIPT_FILE
        try:
            await asyncio.to_thread(script.chmod, 0o755)
        except OSError as e:
            raise ArtifactError(f"Failed to make {script} executable: {e}") from e

    logger.info("Wrote %d artifacts to %s", len(written), output_dir)
    return written
