"""Pydantic models describing technology stacks and project scans."""

from pydantic import BaseModel, ConfigDict, Field


def normalize_framework(name: str) -> str:
    """Normalize a framework name for comparisons and table lookups."""
    return name.strip().lower()


class DetectedFramework(BaseModel):
    """A framework whose detection confidence crossed the threshold."""

    framework: str
    version: str | None = None
    variant: str | None = None
    confidence: int = Field(ge=0, le=100)

    @property
    def display_name(self) -> str:
        """Variant name when one was detected, otherwise the framework."""
        return self.variant or self.framework


class FrameworkDetectionResult(BaseModel):
    """Result of scanning a project against all framework patterns."""

    primary: DetectedFramework | None = None
    secondary: list[DetectedFramework] = []
    all_detected: list[DetectedFramework] = []


class StackMetadata(BaseModel):
    """Detection evidence attached to a detected source stack."""

    confidence: int = Field(ge=0, le=100)
    detected_frameworks: list[DetectedFramework] = []


class TechStackInfo(BaseModel):
    """A source (detected) or target (declared) technology stack."""

    model_config = ConfigDict(frozen=True)

    name: str
    version: str | None = None
    type: str = "fullstack"
    docs: str = ""
    dependencies: list[str] = []
    dev_dependencies: list[str] = []
    metadata: StackMetadata | None = None


class FileStats(BaseModel):
    """File counts by rough category."""

    total: int = 0
    components: int = 0
    routes: int = 0
    tests: int = 0
    config: int = 0


class BasicAnalysis(BaseModel):
    """Lightweight project scan used as input to migration analysis."""

    project_type: str = "Mixed/Unknown"
    tech_stack: list[str] = []
    file_stats: FileStats = Field(default_factory=FileStats)
    summary: str = ""
    existing_docs: list[str] = []
    package_managers: list[str] = []
    frameworks: list[str] = []
