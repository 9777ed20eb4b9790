"""Declarative rule tables consulted by the analysis engine."""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import ValidationError

from stackshift.exceptions import RuleError
from stackshift.models.rules import RuleSet
from stackshift.rules.breaking_changes import BREAKING_CHANGE_RULES
from stackshift.rules.complexity import FRAMEWORK_COMPLEXITY
from stackshift.rules.dependencies import (
    DEPENDENCY_MAPPINGS,
    FRAMEWORK_PREFIXES,
    REPLACEMENT_NOTES,
)
from stackshift.rules.frameworks import FRAMEWORK_PATTERNS

logger = logging.getLogger(__name__)


@lru_cache
def get_default_ruleset() -> RuleSet:
    """Get the built-in rule tables."""
    return RuleSet(
        frameworks=FRAMEWORK_PATTERNS,
        breaking_changes=BREAKING_CHANGE_RULES,
        dependency_mappings=DEPENDENCY_MAPPINGS,
        framework_prefixes=FRAMEWORK_PREFIXES,
        replacement_notes=REPLACEMENT_NOTES,
        framework_complexity=FRAMEWORK_COMPLEXITY,
    )


def load_ruleset(path: Path) -> RuleSet:
    """Load a rule set from a JSON file.

    Args:
        path: Path to a JSON document matching the RuleSet schema.

    Returns:
        The parsed RuleSet.

    Raises:
        RuleError: If the file cannot be read or fails validation.
    """
    try:
        ruleset = RuleSet.model_validate_json(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise RuleError(f"Cannot read rule file {path}: {e}") from e
    except ValidationError as e:
        raise RuleError(f"Invalid rule file {path}: {e}") from e

    logger.debug("Loaded rule set version %s from %s", ruleset.version, path)
    return ruleset


__all__ = ["RuleSet", "get_default_ruleset", "load_ruleset"]
