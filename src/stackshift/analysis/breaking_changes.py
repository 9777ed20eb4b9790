"""Known breaking changes between a source and a target framework."""

import logging
import re

from stackshift.models.migration import (
    BreakingChange,
    BreakingChangeAnalysis,
    Effort,
    EffortBreakdown,
    Severity,
)
from stackshift.models.rules import BreakingChangeRule, FrameworkVersion, RuleSet
from stackshift.models.stack import DetectedFramework, normalize_framework
from stackshift.rules import get_default_ruleset

logger = logging.getLogger(__name__)

# Hours of work per effort tier.
EFFORT_HOURS: dict[Effort, float] = {
    Effort.TRIVIAL: 0.5,
    Effort.SMALL: 2,
    Effort.MEDIUM: 8,
    Effort.LARGE: 24,
}

_LEADING_DIGITS = re.compile(r"^\d+")


def _version_parts(version: str) -> list[int]:
    parts = []
    for part in version.split("."):
        match = _LEADING_DIGITS.match(part)
        parts.append(int(match.group()) if match else 0)
    return parts


def compare_versions(left: str, right: str) -> int:
    """Compare dotted versions numerically. Missing parts count as 0.

    Returns:
        -1, 0 or 1.
    """
    a, b = _version_parts(left), _version_parts(right)
    for i in range(max(len(a), len(b))):
        x = a[i] if i < len(a) else 0
        y = b[i] if i < len(b) else 0
        if x != y:
            return 1 if x > y else -1
    return 0


def matches_framework(detected: DetectedFramework, expected: FrameworkVersion) -> bool:
    """Whether a detected framework satisfies one side of a rule."""
    if normalize_framework(detected.display_name) != normalize_framework(expected.framework):
        return False
    if not expected.min_version and not expected.max_version:
        return True

    if not detected.version:
        return False
    if expected.min_version and compare_versions(detected.version, expected.min_version) < 0:
        return False
    if expected.max_version and compare_versions(detected.version, expected.max_version) > 0:
        return False
    return True


def summarize(
    source: DetectedFramework,
    target: DetectedFramework,
    changes: list[BreakingChange],
) -> BreakingChangeAnalysis:
    """Aggregate effort, critical and automatable counts for a list of changes."""
    effort = EffortBreakdown()
    for change in changes:
        setattr(effort, change.effort.value, getattr(effort, change.effort.value) + 1)

    return BreakingChangeAnalysis(
        source=source,
        target=target,
        breaking_changes=changes,
        total_effort=effort,
        critical_count=sum(1 for c in changes if c.severity == Severity.CRITICAL),
        automatable_count=sum(1 for c in changes if c.automatable),
        estimated_hours=sum(EFFORT_HOURS[c.effort] for c in changes),
    )


def analyze_breaking_changes(
    source: DetectedFramework,
    target: DetectedFramework,
    ruleset: RuleSet | None = None,
) -> BreakingChangeAnalysis:
    """Collect the breaking changes of every rule matching source and target.

    An unknown framework pair yields an empty analysis.
    """
    ruleset = ruleset or get_default_ruleset()

    changes: list[BreakingChange] = []
    for rule in ruleset.breaking_changes:
        if matches_framework(source, rule.source) and matches_framework(target, rule.target):
            changes.extend(rule.changes)

    if not changes:
        logger.debug(
            "No breaking change rules for %s -> %s", source.display_name, target.display_name
        )
    return summarize(source, target, changes)


def rules_for_framework(framework: str, ruleset: RuleSet | None = None) -> list[BreakingChangeRule]:
    """Rules where the framework is either the source or the target."""
    ruleset = ruleset or get_default_ruleset()
    name = normalize_framework(framework)
    return [
        rule
        for rule in ruleset.breaking_changes
        if normalize_framework(rule.source.framework) == name
        or normalize_framework(rule.target.framework) == name
    ]
