"""Tests for dependency compatibility analysis."""

import pytest

from stackshift.analysis.dependencies import (
    AGNOSTIC,
    analyze_dependencies,
    classify_dependencies,
    incompatibility_for,
    migration_complexity_for,
    package_framework,
    replacement_effort,
)
from stackshift.models.migration import Effort, Rating, Severity
from stackshift.models.rules import RuleSet
from stackshift.rules import get_default_ruleset

REACT_PREFIXES = RuleSet(framework_prefixes={"react": ["react"]})


def _declared(specific: int, total: int = 10) -> dict[str, str]:
    """Build total dependencies of which specific are react packages."""
    deps = {f"react-lib-{i}": "1.0.0" for i in range(specific)}
    deps.update({f"util-{i}": "1.0.0" for i in range(total - specific)})
    return deps


class TestPackageFramework:
    """Test package ownership guessing."""

    @pytest.mark.parametrize(
        ("name", "framework"),
        [
            ("react-redux", "react"),
            ("@testing-library/react", "react"),
            ("@vue/cli", "vue"),
            ("@angular/core", "angular"),
            ("@sveltejs/kit", "svelte"),
            ("@nestjs/common", "nestjs"),
            ("next", "nextjs"),
            ("express-session", "express"),
            ("lodash", AGNOSTIC),
        ],
    )
    def test_known_prefixes(self, name, framework):
        """Package names map to their framework."""
        assert package_framework(name) == framework


class TestMigrationComplexity:
    """Test incompatible ratio bucketing."""

    def test_over_half_is_high(self):
        """6/10 incompatible is high."""
        analysis = classify_dependencies(_declared(6), "react", "vue", REACT_PREFIXES)
        assert analysis.incompatible_count == 6
        assert analysis.migration_complexity == Rating.HIGH

    def test_over_fifth_is_medium(self):
        """3/10 incompatible is medium."""
        analysis = classify_dependencies(_declared(3), "react", "vue", REACT_PREFIXES)
        assert analysis.migration_complexity == Rating.MEDIUM

    def test_boundaries_are_exclusive(self):
        """Exactly a fifth stays low and exactly half stays medium."""
        assert migration_complexity_for(10, 2) == Rating.LOW
        assert migration_complexity_for(10, 5) == Rating.MEDIUM

    def test_no_dependencies_is_low(self):
        """Empty manifests are low complexity."""
        assert migration_complexity_for(0, 0) == Rating.LOW

    def test_same_framework_is_compatible(self):
        """Framework packages survive when source equals target."""
        analysis = classify_dependencies(_declared(6), "react", "react", REACT_PREFIXES)
        assert analysis.incompatible_count == 0
        assert all(d.is_compatible for d in analysis.dependencies)


class TestIncompatibility:
    """Test incompatibility explanations."""

    def test_incompatible_mapping_is_high(self):
        """A mapping marked incompatible suggests its replacements."""
        info = incompatibility_for("react-scripts", "react", "vue", get_default_ruleset())
        assert info.severity == Severity.HIGH
        assert info.resolution == "Replace with: @vitejs/plugin-react, vite"
        assert info.reason == "Migrate from Create React App to Vite for better performance"

    def test_framework_package_is_critical(self):
        """An unmapped package of another framework is critical."""
        info = incompatibility_for("react-helmet", "react", "vue", get_default_ruleset())
        assert info.severity == Severity.CRITICAL
        assert info.reason == "react package incompatible with vue"
        assert info.resolution == "Find vue equivalent or remove"

    def test_unknown_package_needs_review(self):
        """Anything else gets a low severity manual review."""
        info = incompatibility_for("body-parser", "express", "fastapi", get_default_ruleset())
        assert info.severity == Severity.LOW
        assert info.resolution == "Manual review required"


class TestReplacements:
    """Test replacement suggestions."""

    def test_enzyme_replacements(self):
        """Mapped packages list their replacements with notes."""
        analysis = classify_dependencies({"enzyme": "3.11.0"}, "react", "vue")
        suggestion = analysis.replacements[0]
        assert suggestion.from_package == "enzyme"
        assert suggestion.to_package == "@testing-library/react"
        assert suggestion.confidence == Rating.HIGH
        assert suggestion.notes == "Different testing philosophy - no shallow rendering"
        assert analysis.has_replacements == 1

    def test_effort_tiers(self):
        """Effort grows with the distance between package names."""
        assert replacement_effort("vue", "vue@3") == Effort.TRIVIAL
        assert replacement_effort("vuex", "vue") == Effort.SMALL
        assert replacement_effort("enzyme", "@testing-library/react") == Effort.LARGE
        assert replacement_effort("moment", "dayjs") == Effort.MEDIUM


class TestAnalyzeDependencies:
    """Test analyze_dependencies against project trees."""

    @pytest.mark.asyncio
    async def test_missing_manifest_is_empty(self, empty_project):
        """No package.json yields an empty low complexity analysis."""
        analysis = await analyze_dependencies(empty_project, "react", "vue")
        assert analysis.total_dependencies == 0
        assert analysis.migration_complexity == Rating.LOW

    @pytest.mark.asyncio
    async def test_malformed_manifest_is_empty(self, make_project):
        """A malformed package.json is treated as missing."""
        root = make_project({"package.json": "{"})
        analysis = await analyze_dependencies(root, "react", "vue")
        assert analysis.total_dependencies == 0

    @pytest.mark.asyncio
    async def test_dev_dependencies_included(self, react_project):
        """Runtime and dev dependencies are both classified."""
        analysis = await analyze_dependencies(react_project, "react", "vue")
        names = {d.name for d in analysis.dependencies}
        assert names == {"react", "react-dom", "typescript"}
        assert analysis.incompatible_count == 2
