"""Read-only filesystem helpers shared by the analyzers.

Every helper treats a missing or unreadable file as absent. Only malformed
JSON manifests are reported, through ManifestError.
"""

import asyncio
import fnmatch
import json
import logging
import re
from pathlib import Path
from typing import Any

import aiofiles
import aiofiles.os

from stackshift.exceptions import ManifestError

logger = logging.getLogger(__name__)

# Directories to skip during recursive file operations
SKIP_DIRS = frozenset({
    ".git",
    ".svn",
    ".hg",
    "node_modules",
    ".venv",
    "venv",
    "__pycache__",
    ".pytest_cache",
    ".mypy_cache",
    ".ruff_cache",
    ".tox",
    "dist",
    "build",
    ".next",
    ".nuxt",
    ".output",
    "coverage",
    ".turbo",
    ".cache",
})

LOCK_FILES = ("package-lock.json", "yarn.lock", "pnpm-lock.yaml")

_BRACE = re.compile(r"\{([^{}]*)\}")


def iter_files(
    root: Path,
    max_files: int = 5000,
    skip_dirs: frozenset[str] = SKIP_DIRS,
    include_hidden: bool = True,
) -> list[str]:
    """List files under root as sorted POSIX paths relative to root.

    Directory entries are visited in name order so the result does not depend
    on the platform's directory ordering.
    """
    files: list[str] = []

    def walk(directory: Path) -> None:
        if len(files) >= max_files:
            return

        try:
            entries = sorted(directory.iterdir(), key=lambda e: e.name)
        except OSError:
            return

        for entry in entries:
            if len(files) >= max_files:
                return
            if not include_hidden and entry.name.startswith(".") and entry.name != ".env.example":
                continue

            if entry.is_dir():
                if entry.name not in skip_dirs and not entry.is_symlink():
                    walk(entry)
            elif entry.is_file():
                files.append(entry.relative_to(root).as_posix())

    walk(root)
    return sorted(files)


def expand_braces(pattern: str) -> list[str]:
    """Expand {a,b} alternation: '**/*.{js,ts}' -> ['**/*.js', '**/*.ts']."""
    match = _BRACE.search(pattern)
    if not match:
        return [pattern]

    expanded = []
    head, tail = pattern[: match.start()], pattern[match.end() :]
    for option in match.group(1).split(","):
        expanded.extend(expand_braces(head + option + tail))
    return expanded


def match_glob(relative_path: str, pattern: str) -> bool:
    """Check a relative POSIX path against a glob with ** and {a,b} support."""
    for candidate in expand_braces(pattern):
        if fnmatch.fnmatchcase(relative_path, candidate):
            return True
        # '**/' also matches zero directories
        if candidate.startswith("**/") and fnmatch.fnmatchcase(relative_path, candidate[3:]):
            return True
    return False


def filter_glob(files: list[str], pattern: str, limit: int | None = None) -> list[str]:
    """Return files matching pattern, keeping at most limit entries."""
    matches = []
    for path in files:
        if match_glob(path, pattern):
            matches.append(path)
            if limit is not None and len(matches) >= limit:
                break
    return matches


async def list_files(root: Path, max_files: int = 5000, include_hidden: bool = True) -> list[str]:
    """Walk root in a worker thread."""
    return await asyncio.to_thread(
        iter_files, root, max_files, SKIP_DIRS, include_hidden
    )


async def file_exists(path: Path) -> bool:
    """Check whether a file or directory exists."""
    return await aiofiles.os.path.exists(path)


async def dir_exists(path: Path) -> bool:
    """Check whether a directory exists."""
    return await aiofiles.os.path.isdir(path)


async def read_text(path: Path) -> str | None:
    """Read a text file. Returns None if missing or unreadable."""
    try:
        async with aiofiles.open(path, encoding="utf-8", errors="replace") as f:
            return await f.read()
    except OSError:
        return None


async def read_json(path: Path) -> Any | None:
    """Read a JSON file.

    Returns:
        Parsed JSON, or None if the file is missing or unreadable.

    Raises:
        ManifestError: If the file exists but is not valid JSON.
    """
    content = await read_text(path)
    if content is None:
        return None
    try:
        return json.loads(content)
    except ValueError as e:
        raise ManifestError(path, str(e)) from e


async def read_package_json(project_dir: Path) -> dict[str, Any] | None:
    """Read package.json, treating a malformed manifest as absent."""
    path = project_dir / "package.json"
    try:
        data = await read_json(path)
    except ManifestError as e:
        logger.warning("Ignoring %s", e)
        return None

    if data is None:
        return None
    if not isinstance(data, dict):
        logger.warning("Ignoring %s: top-level value is not an object", path)
        return None
    return data


def package_dependencies(
    package_json: dict[str, Any] | None,
) -> tuple[dict[str, str], dict[str, str]]:
    """Split a package.json into (dependencies, devDependencies) name -> version maps."""
    if not package_json:
        return {}, {}

    def section(key: str) -> dict[str, str]:
        value = package_json.get(key) or {}
        if not isinstance(value, dict):
            return {}
        return {str(name): str(version) for name, version in value.items()}

    return section("dependencies"), section("devDependencies")


async def read_lock_file(project_dir: Path) -> str | None:
    """Return the content of the first readable lock file."""
    for name in LOCK_FILES:
        content = await read_text(project_dir / name)
        if content is not None:
            return content
    return None


async def read_requirements(project_dir: Path) -> list[str] | None:
    """Read requirements.txt entries, skipping blanks and comments."""
    content = await read_text(project_dir / "requirements.txt")
    if content is None:
        return None
    return [
        line.strip()
        for line in content.splitlines()
        if line.strip() and not line.strip().startswith("#")
    ]
