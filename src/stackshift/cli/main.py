"""Command-line interface for stackshift."""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from stackshift.activities.migration import analyze_migration, complete_target_stack
from stackshift.activities.project import analyze_basic
from stackshift.analysis.breaking_changes import rules_for_framework
from stackshift.analysis.detector import detect_frameworks
from stackshift.artifacts import get_output_dir, write_artifacts
from stackshift.exceptions import StackshiftError
from stackshift.models.migration import MigrationAnalysis
from stackshift.models.rules import RuleSet
from stackshift.progress import Severity
from stackshift.rules import get_default_ruleset, load_ruleset


def _setup_logging(verbose: bool = False) -> None:
    """Configure logging with Rich handler."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)],
    )
    # Quiet noisy libraries
    logging.getLogger("asyncio").setLevel(logging.WARNING)


app = typer.Typer(
    name="stackshift",
    help="Migration feasibility analysis and planning for web projects.",
)


def _validate_project_path(path: Path) -> Path:
    if not path.exists():
        raise typer.BadParameter(f"Path does not exist: {path}")
    if not path.is_dir():
        raise typer.BadParameter(f"Path is not a directory: {path}")
    return path.resolve()


def _load_rules(rules_file: Path | None) -> RuleSet:
    if rules_file is None:
        return get_default_ruleset()
    return load_ruleset(rules_file)


def _make_progress_callback(console: Console):
    """Create a Rich-based progress callback."""
    severity_styles = {
        Severity.INFO: ("blue", ""),
        Severity.SUCCESS: ("green", "✓"),
        Severity.WARNING: ("yellow", "!"),
        Severity.ERROR: ("red", "✗"),
    }

    def callback(severity: Severity, message: str) -> None:
        color, icon = severity_styles[severity]
        if icon:
            console.print(f"  [{color}]{icon}[/{color}] {message}")
        else:
            console.print(f"  [{color}]•[/{color}] {message}")

    return callback


def _fail(console: Console, error: StackshiftError) -> None:
    console.print(f"\n[red]Error:[/red] {error}")
    raise typer.Exit(1)


def _print_summary(console: Console, analysis: MigrationAnalysis) -> None:
    complexity = analysis.complexity
    level_colors = {"low": "green", "medium": "yellow", "high": "red", "critical": "bold red"}
    color = level_colors[complexity.level]

    console.print()
    console.print(
        f"[bold]{analysis.source_stack.name}[/bold] → [bold]{analysis.target_stack.name}[/bold]"
    )
    console.print(
        f"  Complexity: [{color}]{complexity.score}/100 ({complexity.level})[/{color}]"
    )
    console.print(f"  Strategy: {analysis.recommended_strategy}")
    console.print(f"  Estimated duration: {analysis.estimated_duration}")
    if analysis.breaking_changes_summary:
        summary = analysis.breaking_changes_summary
        console.print(
            f"  Breaking changes: {summary.total} "
            f"({summary.critical} critical, {summary.automatable} automatable)"
        )
    if analysis.dependency_analysis:
        deps = analysis.dependency_analysis
        console.print(
            f"  Incompatible dependencies: {deps.incompatible_count}/{deps.total_dependencies}"
        )

    table = Table(title="Phases", show_lines=False)
    table.add_column("Phase")
    table.add_column("Duration")
    table.add_column("Rollback")
    table.add_column("Depends on")
    for phase in analysis.suggested_phases:
        table.add_row(
            phase.name,
            phase.estimated_duration,
            "✓" if phase.rollback_point else "",
            ", ".join(phase.dependencies),
        )
    console.print()
    console.print(table)


@app.command()
def detect(
    project_path: Annotated[
        Path,
        typer.Argument(help="Path to the project directory. Defaults to current directory."),
    ] = Path("."),
    rules_file: Annotated[
        Path | None,
        typer.Option("--rules", help="JSON rule set to use instead of the built-in rules."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging."),
    ] = False,
) -> None:
    """Detect the frameworks a project is built on."""
    _setup_logging(verbose)
    project_path = _validate_project_path(project_path)
    console = Console()

    try:
        ruleset = _load_rules(rules_file)
        result = asyncio.run(detect_frameworks(project_path, ruleset.frameworks))
    except StackshiftError as e:
        _fail(console, e)
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled[/yellow]")
        sys.exit(130)

    if not result.all_detected:
        console.print(f"[yellow]No frameworks detected in {project_path.name}[/yellow]")
        return

    table = Table(title=f"Frameworks in {project_path.name}")
    table.add_column("Framework")
    table.add_column("Variant")
    table.add_column("Version")
    table.add_column("Confidence", justify="right")
    table.add_column("Role")
    for framework in result.all_detected:
        if result.primary and framework.framework == result.primary.framework:
            role = "[green]primary[/green]"
        elif framework in result.secondary:
            role = "secondary"
        else:
            role = "[dim]candidate[/dim]"
        table.add_row(
            framework.framework,
            framework.variant or "-",
            framework.version or "-",
            f"{framework.confidence}%",
            role,
        )
    console.print(table)


@app.command()
def analyze(
    target: Annotated[
        str,
        typer.Option("--target", "-t", help="Target framework, e.g. 'Next.js' or 'FastAPI'."),
    ],
    project_path: Annotated[
        Path,
        typer.Argument(help="Path to the project directory. Defaults to current directory."),
    ] = Path("."),
    target_version: Annotated[
        str | None,
        typer.Option("--target-version", help="Target framework version."),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Artifact directory. Defaults to <PATH>/.stackshift."),
    ] = None,
    analyze_only: Annotated[
        bool,
        typer.Option("--analyze-only", help="Print the analysis without writing artifacts."),
    ] = False,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the analysis as JSON."),
    ] = False,
    rules_file: Annotated[
        Path | None,
        typer.Option("--rules", help="JSON rule set to use instead of the built-in rules."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging."),
    ] = False,
) -> None:
    """Analyze migrating a project to a target stack and write a migration plan."""
    _setup_logging(verbose)
    project_path = _validate_project_path(project_path)
    console = Console()
    target_stack = complete_target_stack(target.strip() or None, target_version)

    async def run() -> MigrationAnalysis:
        basic = await analyze_basic(project_path)
        return await analyze_migration(
            project_path,
            target_stack,
            basic,
            ruleset,
            on_progress=on_progress,
        )

    if as_json:
        on_progress = _make_progress_callback(Console(stderr=True, quiet=True))
    else:
        console.print(
            f"\n[bold]stackshift[/bold] - analyzing {project_path.name} → {target_stack.name}\n"
        )
        on_progress = _make_progress_callback(console)

    try:
        ruleset = _load_rules(rules_file)
        analysis = asyncio.run(run())
        written = []
        if not analyze_only:
            output_dir = output or get_output_dir(project_path)
            written = asyncio.run(write_artifacts(output_dir, analysis, project_path.name))
    except StackshiftError as e:
        _fail(console, e)
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled[/yellow]")
        sys.exit(130)

    if as_json:
        typer.echo(analysis.model_dump_json(indent=2))
        return

    _print_summary(console, analysis)
    if written:
        console.print(f"\n[green bold]✓ Wrote {len(written)} artifacts[/green bold]")
        for path in written:
            console.print(f"  [dim]{path}[/dim]")
    console.print()


@app.command()
def rules(
    framework: Annotated[str, typer.Argument(help="Framework name, e.g. 'react' or 'vue'.")],
    rules_file: Annotated[
        Path | None,
        typer.Option("--rules", help="JSON rule set to use instead of the built-in rules."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging."),
    ] = False,
) -> None:
    """List breaking change rules involving a framework."""
    _setup_logging(verbose)
    console = Console()
    try:
        ruleset = _load_rules(rules_file)
    except StackshiftError as e:
        _fail(console, e)

    matching = rules_for_framework(framework, ruleset)
    if not matching:
        console.print(f"[yellow]No breaking change rules for {framework}[/yellow]")
        return

    for rule in matching:
        source, target = rule.source, rule.target
        source_range = _version_range(source.min_version, source.max_version)
        target_range = _version_range(target.min_version, target.max_version)
        console.print(
            f"\n[bold]{source.framework}{source_range} → {target.framework}{target_range}[/bold]"
        )
        for change in rule.changes:
            marker = "[green]auto[/green]" if change.automatable else "[dim]manual[/dim]"
            console.print(f"  {change.id} ({change.severity}, {change.effort}) {marker}")
            console.print(f"    {change.description}")


def _version_range(min_version: str | None, max_version: str | None) -> str:
    if min_version and max_version:
        return f" {min_version}-{max_version}"
    if min_version:
        return f" >={min_version}"
    if max_version:
        return f" <={max_version}"
    return ""


if __name__ == "__main__":
    app()
