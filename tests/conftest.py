"""Shared test fixtures for project analysis tests."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from stackshift.models.migration import (
    BreakingChange,
    ChangeCategory,
    ComplexityFactor,
    DependencyAnalysis,
    Effort,
    MigrationComplexity,
    Rating,
    ResourceType,
    Severity,
    SharedResource,
)
from stackshift.settings import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so environment patches take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[[dict], Path]:
    """Factory writing a project tree from {relative path: content}.

    dict and list contents are written as JSON, None creates a directory.
    """

    def _make(files: dict) -> Path:
        root = tmp_path / "project"
        root.mkdir(exist_ok=True)
        for relative, content in files.items():
            path = root / relative
            if content is None:
                path.mkdir(parents=True, exist_ok=True)
                continue
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, (dict, list)):
                content = json.dumps(content, indent=2)
            path.write_text(content)
        return root

    return _make


@pytest.fixture
def empty_project(make_project) -> Path:
    """Project directory with nothing in it."""
    return make_project({})


@pytest.fixture
def react_project(make_project) -> Path:
    """React 17 app with JSX sources under src/."""
    return make_project(
        {
            "package.json": {
                "name": "shop",
                "dependencies": {"react": "^17.0.2", "react-dom": "^17.0.2"},
                "devDependencies": {"typescript": "^5.0.0"},
            },
            "package-lock.json": {"lockfileVersion": 1},
            "src/App.jsx": (
                "import React from 'react';\n"
                "export default class App extends React.Component {}\n"
            ),
            "src/index.jsx": "ReactDOM.render(<App />, document.getElementById('root'));\n",
            "README.md": "# Shop\n",
        }
    )


@pytest.fixture
def express_project(make_project) -> Path:
    """Express API declaring only the express package."""
    return make_project(
        {
            "package.json": {"name": "api", "dependencies": {"express": "^4.18.2"}},
        }
    )


@pytest.fixture
def react_18_root_change() -> BreakingChange:
    return BreakingChange(
        id="react-18-root-api",
        description="ReactDOM.render is deprecated. Use createRoot instead.",
        category=ChangeCategory.API,
        severity=Severity.HIGH,
        effort=Effort.SMALL,
        automatable=True,
        search_pattern=r"ReactDOM\.render\(",
        replacement='ReactDOM.createRoot(document.getElementById("root")).render(',
    )


@pytest.fixture
def manual_change() -> BreakingChange:
    return BreakingChange(
        id="vue-3-filters",
        description="Filters have been removed in Vue 3",
        category=ChangeCategory.SYNTAX,
        severity=Severity.CRITICAL,
        effort=Effort.MEDIUM,
        search_pattern=r"\|\s*\w+",
    )


@pytest.fixture
def database_resource() -> SharedResource:
    return SharedResource(
        type=ResourceType.DATABASE,
        name="Production Database",
        description="Shared database connection detected in environment",
        criticality_level=Severity.CRITICAL,
        migration_strategy="Maintain compatibility during migration",
    )


@pytest.fixture
def api_resource() -> SharedResource:
    return SharedResource(
        type=ResourceType.API,
        name="API Endpoints",
        description="Existing API contracts that may have consumers",
        criticality_level=Severity.HIGH,
        migration_strategy="Version APIs or maintain backward compatibility",
    )


@pytest.fixture
def low_complexity() -> MigrationComplexity:
    return MigrationComplexity(
        score=12,
        factors=[ComplexityFactor(name="Critical Risks", impact=0, description="0 critical")],
        level=Severity.LOW,
    )


@pytest.fixture
def incompatible_dependencies() -> DependencyAnalysis:
    return DependencyAnalysis(
        total_dependencies=20,
        incompatible_count=12,
        migration_complexity=Rating.HIGH,
    )
