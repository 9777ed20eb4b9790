"""Framework detection from marker files, manifests, source content and layout.

Each framework pattern is scored from four independent signals. The signals
are pure functions of evidence gathered up front, so a pattern's confidence
only depends on what exists in the project and never on scan order.
"""

import asyncio
import logging
import math
import re
from dataclasses import dataclass, field
from pathlib import Path

from stackshift.filesystem import (
    dir_exists,
    file_exists,
    filter_glob,
    list_files,
    package_dependencies,
    read_lock_file,
    read_package_json,
    read_text,
)
from stackshift.models.rules import FrameworkPattern
from stackshift.models.stack import DetectedFramework, FrameworkDetectionResult
from stackshift.rules import get_default_ruleset
from stackshift.settings import get_settings

logger = logging.getLogger(__name__)

DETECTION_THRESHOLD = 30
PRIMARY_THRESHOLD = 70
SECONDARY_THRESHOLD = 50

FILES_BUDGET = 30
STRUCTURE_BUDGET = 10

_VERSION_PREFIX = re.compile(r"^[\^~>=<\s]+")


@dataclass(slots=True)
class ProjectEvidence:
    """Everything the detector reads once per run."""

    project_dir: Path
    files: list[str] = field(default_factory=list)
    dependencies: dict[str, str] = field(default_factory=dict)
    dev_dependencies: dict[str, str] = field(default_factory=dict)

    @property
    def all_dependencies(self) -> dict[str, str]:
        """Runtime and dev dependencies merged, dev entries winning."""
        return {**self.dependencies, **self.dev_dependencies}


# Signals


def score_files(expected: list[str], present: set[str]) -> float:
    """Each present marker file earns an equal share of 30 points."""
    if not expected:
        return 0.0
    share = FILES_BUDGET / len(expected)
    return sum(share for name in expected if name in present)


def score_dependencies(
    pattern: FrameworkPattern,
    dependencies: dict[str, str],
    dev_dependencies: dict[str, str],
) -> float:
    """Declared dependencies: up to 20 points each, dev dependencies up to 10."""
    score = 0.0
    if pattern.dependencies:
        share = min(20, 40 / len(pattern.dependencies))
        score += sum(share for dep in pattern.dependencies if dep in dependencies)
    if pattern.dev_dependencies:
        share = min(10, 20 / len(pattern.dev_dependencies))
        score += sum(share for dep in pattern.dev_dependencies if dep in dev_dependencies)
    return score


def score_content(weights: list[int], matched: list[bool]) -> float:
    """Sum the weights of content patterns that matched."""
    return float(sum(weight for weight, hit in zip(weights, matched, strict=True) if hit))


def score_structure(expected: list[str], present: set[str]) -> float:
    """Each present directory earns an equal share of 10 points."""
    if not expected:
        return 0.0
    share = STRUCTURE_BUDGET / len(expected)
    return sum(share for name in expected if name in present)


def combine(*signals: float) -> int:
    """Round half up and clamp the summed signals to 0-100."""
    total = math.floor(sum(signals) + 0.5)
    return max(0, min(100, total))


# Version and variant


def clean_version(version: str) -> str:
    """Strip range operators from a declared version: '^18.2.0' -> '18.2.0'."""
    return _VERSION_PREFIX.sub("", version)


def extract_version_from_lock(lock_content: str, package: str) -> str | None:
    """Find a package version in lock file text.

    Tries, in order, the package-lock.json layout, the yarn.lock
    ``name@version`` form and the pnpm ``name: version`` form.
    """
    name = re.escape(package)
    strategies = [
        rf'"{name}"[^"]*"version"[^"]*"([^"]+)"',
        rf"{name}@([^\s]+)",
        rf"{name}:\s*version[^\d]*(\d+\.\d+\.\d+)",
    ]
    for strategy in strategies:
        match = re.search(strategy, lock_content)
        if match:
            return match.group(1)
    return None


def detect_version(
    pattern: FrameworkPattern,
    all_dependencies: dict[str, str],
    lock_content: str | None,
) -> str | None:
    """Resolve the installed version of a framework."""
    for dep in pattern.dependencies:
        if all_dependencies.get(dep):
            return clean_version(all_dependencies[dep])

    if lock_content:
        for dep in pattern.dependencies:
            version = extract_version_from_lock(lock_content, dep)
            if version:
                return version
    return None


async def detect_variant(pattern: FrameworkPattern, evidence: ProjectEvidence) -> str | None:
    """Return the first declared variant whose files or dependencies are present."""
    all_deps = evidence.all_dependencies
    for variant in pattern.variants:
        for name in variant.files:
            if await file_exists(evidence.project_dir / name):
                return variant.name
        wanted = [*variant.dependencies, *variant.dev_dependencies]
        if any(all_deps.get(dep) for dep in wanted):
            return variant.name
    return None


# Evidence gathering


async def _present(project_dir: Path, names: list[str], check) -> set[str]:
    results = await asyncio.gather(*(check(project_dir / name) for name in names))
    return {name for name, exists in zip(names, results, strict=True) if exists}


async def _content_matches(
    pattern: FrameworkPattern,
    evidence: ProjectEvidence,
    sample_limit: int,
) -> list[bool]:
    """For each content pattern, whether any sampled file contains its regex."""
    matched = []
    for content in pattern.content:
        regex = re.compile(content.pattern)
        hit = False
        for relative in filter_glob(evidence.files, content.file, limit=sample_limit):
            text = await read_text(evidence.project_dir / relative)
            if text is not None and regex.search(text):
                hit = True
                break
        matched.append(hit)
    return matched


async def calculate_confidence(
    pattern: FrameworkPattern,
    evidence: ProjectEvidence,
    sample_limit: int,
) -> int:
    """Score one framework pattern against the gathered evidence."""
    files_present = await _present(evidence.project_dir, pattern.files, file_exists)
    dirs_present = await _present(evidence.project_dir, pattern.structure, dir_exists)
    matched = await _content_matches(pattern, evidence, sample_limit)

    signals = (
        score_files(pattern.files, files_present),
        score_dependencies(pattern, evidence.dependencies, evidence.dev_dependencies),
        score_content([c.weight for c in pattern.content], matched),
        score_structure(pattern.structure, dirs_present),
    )
    confidence = combine(*signals)
    logger.debug(
        "%s: files=%.1f deps=%.1f content=%.1f structure=%.1f -> %d",
        pattern.framework,
        *signals,
        confidence,
    )
    return confidence


async def gather_evidence(project_dir: Path, max_files: int) -> ProjectEvidence:
    """Walk the project once and read its package manifest."""
    files, package_json = await asyncio.gather(
        list_files(project_dir, max_files=max_files),
        read_package_json(project_dir),
    )
    dependencies, dev_dependencies = package_dependencies(package_json)
    return ProjectEvidence(
        project_dir=project_dir,
        files=files,
        dependencies=dependencies,
        dev_dependencies=dev_dependencies,
    )


# Entry point


def rank(candidates: list[DetectedFramework]) -> FrameworkDetectionResult:
    """Pick primary and secondary frameworks from scored candidates.

    Candidates must already be in pattern priority order; the sort is stable
    so ties keep that order.
    """
    detected = [c for c in candidates if c.confidence > DETECTION_THRESHOLD]
    detected.sort(key=lambda f: f.confidence, reverse=True)

    primary = next((f for f in detected if f.confidence >= PRIMARY_THRESHOLD), None)
    secondary = [
        f
        for f in detected
        if f.confidence >= SECONDARY_THRESHOLD
        and (primary is None or f.framework != primary.framework)
    ]
    return FrameworkDetectionResult(primary=primary, secondary=secondary, all_detected=detected)


async def detect_frameworks(
    project_dir: Path,
    patterns: list[FrameworkPattern] | None = None,
    *,
    sample_limit: int | None = None,
    max_concurrency: int | None = None,
) -> FrameworkDetectionResult:
    """Detect which frameworks a project uses.

    Args:
        project_dir: Project root.
        patterns: Detection patterns. Defaults to the built-in rule set.
        sample_limit: Files sampled per content pattern. Defaults to settings.
        max_concurrency: Patterns evaluated at once. Defaults to settings.

    Returns:
        Primary, secondary and all detected frameworks.
    """
    settings = get_settings()
    if patterns is None:
        patterns = get_default_ruleset().frameworks
    if sample_limit is None:
        sample_limit = settings.content_sample_limit
    if max_concurrency is None:
        max_concurrency = settings.max_concurrency

    ordered = sorted(patterns, key=lambda p: p.priority, reverse=True)
    evidence = await gather_evidence(project_dir, settings.max_files)
    semaphore = asyncio.Semaphore(max(1, max_concurrency))

    async def evaluate(pattern: FrameworkPattern) -> int:
        async with semaphore:
            try:
                return await calculate_confidence(pattern, evidence, sample_limit)
            except Exception as e:
                logger.warning("Skipping %s detection: %s", pattern.framework, e)
                return 0

    scores = await asyncio.gather(*(evaluate(p) for p in ordered))

    lock_content: str | None = None
    lock_read = False
    candidates = []
    for pattern, confidence in zip(ordered, scores, strict=True):
        if confidence <= DETECTION_THRESHOLD:
            continue
        version = detect_version(pattern, evidence.all_dependencies, None)
        if version is None and pattern.dependencies:
            if not lock_read:
                lock_content = await read_lock_file(project_dir)
                lock_read = True
            version = detect_version(pattern, evidence.all_dependencies, lock_content)
        candidates.append(
            DetectedFramework(
                framework=pattern.framework,
                version=version,
                variant=await detect_variant(pattern, evidence),
                confidence=confidence,
            )
        )

    result = rank(candidates)
    if result.primary:
        logger.info(
            "Detected %s (%d%% confidence)", result.primary.display_name, result.primary.confidence
        )
    else:
        logger.info("No primary framework detected in %s", project_dir)
    return result
