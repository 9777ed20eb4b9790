"""Exception hierarchy for stackshift."""

from pathlib import Path


class StackshiftError(Exception):
    """Base exception for all stackshift errors."""


class AnalyzeError(StackshiftError):
    """Failed to analyze project."""


class ManifestError(StackshiftError):
    """A dependency manifest exists but could not be parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Malformed manifest {path}: {reason}")


class RuleError(StackshiftError):
    """A rule table could not be loaded or contains an invalid entry."""


class ArtifactError(StackshiftError):
    """Failed to write a migration artifact."""
