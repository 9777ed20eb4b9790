"""Basic project scan activity."""

import logging
import re
from pathlib import Path, PurePosixPath

from stackshift.exceptions import AnalyzeError
from stackshift.filesystem import (
    file_exists,
    list_files,
    package_dependencies,
    read_package_json,
    read_requirements,
)
from stackshift.models.stack import BasicAnalysis, FileStats
from stackshift.settings import get_settings

logger = logging.getLogger(__name__)

LOCK_FILE_MANAGERS = {
    "package-lock.json": "npm",
    "yarn.lock": "yarn",
    "pnpm-lock.yaml": "pnpm",
    "bun.lockb": "bun",
}

# Checked in order, first hit names the project type.
PROJECT_TYPES = [
    (("next", "@next/core-web-vitals"), "Next.js"),
    (("react",), "React"),
    (("vue",), "Vue.js"),
    (("angular", "@angular/core"), "Angular"),
    (("express",), "Express.js"),
    (("fastapi",), "FastAPI"),
    (("django",), "Django"),
    (("flask",), "Flask"),
]

EXTENSION_TYPES = [
    ((".tsx", ".jsx"), "React/JSX"),
    ((".vue",), "Vue.js"),
    ((".py",), "Python"),
    ((".rs",), "Rust"),
    ((".go",), "Go"),
    ((".java",), "Java"),
    ((".ts", ".js"), "JavaScript/TypeScript"),
]

DEPENDENCY_STACK = [
    (("mongoose", "mongodb"), "MongoDB"),
    (("pg", "postgres"), "PostgreSQL"),
    (("mysql2", "mysql"), "MySQL"),
    (("sqlite3",), "SQLite"),
    (("typescript",), "TypeScript"),
    (("tailwindcss",), "Tailwind CSS"),
    (("prisma",), "Prisma"),
    (("fastapi",), "FastAPI"),
    (("django",), "Django"),
    (("flask",), "Flask"),
]

_REQUIREMENT_NAME = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*")


def requirement_names(lines: list[str]) -> list[str]:
    """Lower-cased distribution names from requirements.txt lines."""
    names = []
    for line in lines:
        match = _REQUIREMENT_NAME.match(line)
        if match:
            names.append(match.group().lower())
    return names


def detect_project_type(files: list[str], deps: set[str]) -> str:
    for names, project_type in PROJECT_TYPES:
        if any(name in deps for name in names):
            return project_type

    extensions = {PurePosixPath(f).suffix for f in files}
    for suffixes, project_type in EXTENSION_TYPES:
        if any(suffix in extensions for suffix in suffixes):
            return project_type
    return "Mixed/Unknown"


def detect_tech_stack(files: list[str], deps: set[str]) -> list[str]:
    stack: list[str] = []

    if "next" in deps:
        stack.append("Next.js")
    elif "react" in deps:
        stack.append("React")
    if "vue" in deps:
        stack.append("Vue.js")
    if "@angular/core" in deps:
        stack.append("Angular")
    if "express" in deps:
        stack.append("Express.js")
    if "fastify" in deps:
        stack.append("Fastify")
    for names, label in DEPENDENCY_STACK:
        if any(name in deps for name in names):
            stack.append(label)

    extensions = {PurePosixPath(f).suffix for f in files}
    filenames = {PurePosixPath(f).name for f in files}
    if ".py" in extensions:
        stack.append("Python")
    if ".rs" in extensions:
        stack.append("Rust")
    if ".go" in extensions:
        stack.append("Go")
    if "Dockerfile" in filenames:
        stack.append("Docker")
    if "docker-compose.yml" in filenames:
        stack.append("Docker Compose")

    return list(dict.fromkeys(stack))


def calculate_file_stats(files: list[str]) -> FileStats:
    # Leading slash so directory checks also match at the project root.
    paths = ["/" + f for f in files]
    return FileStats(
        total=len(paths),
        components=sum(
            1
            for p in paths
            if "component" in p
            or p.endswith((".jsx", ".tsx"))
            or ("/src/" in p and p.endswith((".js", ".ts")))
        ),
        routes=sum(
            1
            for p in paths
            if "route" in p or "api/" in p or "pages/" in p
        ),
        tests=sum(1 for p in paths if ".test." in p or ".spec." in p or "__tests__" in p),
        config=sum(
            1
            for p in paths
            if "config" in p or p.endswith((".json", ".yaml", ".yml", ".toml", ".ini"))
        ),
    )


def find_existing_docs(files: list[str]) -> list[str]:
    names = [PurePosixPath(f).name for f in files]
    return [
        n for n in names if n.lower().endswith((".md", ".txt", ".rst")) and not n.startswith(".")
    ]


def detect_frameworks(deps: set[str]) -> list[str]:
    frameworks = []
    for dep in sorted(deps):
        if dep.startswith("@angular/"):
            frameworks.append("Angular")
        if dep == "vue":
            frameworks.append("Vue.js")
        if dep == "react":
            frameworks.append("React")
        if dep == "next":
            frameworks.append("Next.js")
    return list(dict.fromkeys(frameworks))


async def detect_package_managers(project_dir: Path) -> list[str]:
    managers = [
        manager
        for lock_file, manager in LOCK_FILE_MANAGERS.items()
        if await file_exists(project_dir / lock_file)
    ]
    return managers or ["npm"]


async def analyze_basic(path: Path) -> BasicAnalysis:
    """Scan a project directory for file statistics and technology markers.

    Args:
        path: Project root.

    Returns:
        BasicAnalysis used as input to migration analysis.

    Raises:
        AnalyzeError: If path is not a directory.
    """
    if not path.is_dir():
        raise AnalyzeError(f"Project directory not found: {path}")

    settings = get_settings()
    files = await list_files(path, max_files=settings.max_files, include_hidden=False)

    package_json = await read_package_json(path)
    dependencies, dev_dependencies = package_dependencies(package_json)
    deps = set(dependencies) | set(dev_dependencies)
    requirements = await read_requirements(path)
    if requirements:
        deps.update(requirement_names(requirements))

    project_type = detect_project_type(files, deps)
    tech_stack = detect_tech_stack(files, deps)
    file_stats = calculate_file_stats(files)

    analysis = BasicAnalysis(
        project_type=project_type,
        tech_stack=tech_stack,
        file_stats=file_stats,
        summary=f"{project_type} project with {', '.join(tech_stack)} ({file_stats.total} files)",
        existing_docs=find_existing_docs(files),
        package_managers=await detect_package_managers(path),
        frameworks=detect_frameworks(deps),
    )
    logger.debug("Basic analysis: %s", analysis.summary)
    return analysis
