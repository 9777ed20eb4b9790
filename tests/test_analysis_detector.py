"""Tests for framework detection."""

from unittest.mock import patch

import pytest

from stackshift.analysis.detector import (
    ProjectEvidence,
    clean_version,
    combine,
    detect_frameworks,
    detect_variant,
    detect_version,
    extract_version_from_lock,
    rank,
    score_content,
    score_dependencies,
    score_files,
    score_structure,
)
from stackshift.models.rules import ContentPattern, FrameworkPattern, VariantPattern
from stackshift.models.stack import DetectedFramework


class TestSignals:
    """Test the pure scoring signals."""

    def test_files_share_thirty_points(self):
        """Each present marker earns an equal share of 30."""
        assert score_files(["a", "b", "c"], {"a"}) == pytest.approx(10)
        assert score_files(["a", "b"], {"a", "b"}) == pytest.approx(30)
        assert score_files([], {"a"}) == 0

    def test_dependencies_capped_at_twenty_each(self):
        """A single dependency earns 20, not 40."""
        pattern = FrameworkPattern(framework="express", dependencies=["express"])
        assert score_dependencies(pattern, {"express": "4"}, {}) == pytest.approx(20)

    def test_dependencies_share_shrinks_with_count(self):
        """Three dependencies split 40 points."""
        pattern = FrameworkPattern(framework="x", dependencies=["a", "b", "c"])
        assert score_dependencies(pattern, {"a": "1", "b": "1"}, {}) == pytest.approx(80 / 3)

    def test_dev_dependencies_only_count_dev_section(self):
        """Dev markers are matched against devDependencies only."""
        pattern = FrameworkPattern(framework="x", dev_dependencies=["vite"])
        assert score_dependencies(pattern, {"vite": "5"}, {}) == 0
        assert score_dependencies(pattern, {}, {"vite": "5"}) == pytest.approx(10)

    def test_content_sums_matched_weights(self):
        """Only matched content patterns contribute."""
        assert score_content([10, 5, 20], [True, False, True]) == 30

    def test_structure_shares_ten_points(self):
        """Each present directory earns an equal share of 10."""
        assert score_structure(["src", "apps"], {"src"}) == pytest.approx(5)

    def test_combine_rounds_half_up(self):
        """Half values round up."""
        assert combine(10.5, 20) == 31
        assert combine(0.4) == 0

    def test_combine_clamps(self):
        """Totals are clamped to 0-100."""
        assert combine(90, 40) == 100
        assert combine(-5) == 0


class TestVersions:
    """Test version resolution."""

    def test_clean_version_strips_operators(self):
        """Range operators are removed."""
        assert clean_version("^18.2.0") == "18.2.0"
        assert clean_version(">= 4.0") == "4.0"

    def test_version_from_declared_dependency(self):
        """Declared dependency version wins."""
        pattern = FrameworkPattern(framework="react", dependencies=["react", "react-dom"])
        assert detect_version(pattern, {"react-dom": "~17.0.1"}, None) == "17.0.1"

    def test_version_from_npm_lock(self):
        """npm lock layout is parsed."""
        lock = '{"dependencies": {"react": {"version": "18.2.0"}}}'
        assert extract_version_from_lock(lock, "react") == "18.2.0"

    def test_version_from_pnpm_lock(self):
        """pnpm name: version layout is parsed."""
        lock = "packages:\n  vue:\n    version: 3.4.1\n"
        assert extract_version_from_lock(lock, "vue") == "3.4.1"

    def test_lock_without_package(self):
        """Unknown package yields None."""
        assert extract_version_from_lock('{"name": "app"}', "react") is None

    def test_no_version_anywhere(self):
        """No declared version and no lock file yields None."""
        pattern = FrameworkPattern(framework="react", dependencies=["react"])
        assert detect_version(pattern, {}, None) is None


class TestVariants:
    """Test variant detection."""

    @pytest.mark.asyncio
    async def test_variant_from_dependency(self, tmp_path):
        """A variant dependency names the variant."""
        pattern = FrameworkPattern(
            framework="react",
            variants=[VariantPattern(name="next.js", dependencies=["next"])],
        )
        evidence = ProjectEvidence(project_dir=tmp_path, dependencies={"next": "14.0.0"})
        assert await detect_variant(pattern, evidence) == "next.js"

    @pytest.mark.asyncio
    async def test_variant_from_dev_dependency(self, tmp_path):
        """Dev dependencies are checked too."""
        pattern = FrameworkPattern(
            framework="react",
            variants=[VariantPattern(name="create-react-app", dev_dependencies=["react-scripts"])],
        )
        evidence = ProjectEvidence(project_dir=tmp_path, dev_dependencies={"react-scripts": "5"})
        assert await detect_variant(pattern, evidence) == "create-react-app"

    @pytest.mark.asyncio
    async def test_variant_from_file(self, make_project):
        """A variant marker file names the variant."""
        root = make_project({"nuxt.config.ts": "export default {}"})
        pattern = FrameworkPattern(
            framework="vue",
            variants=[VariantPattern(name="nuxt", files=["nuxt.config.js", "nuxt.config.ts"])],
        )
        assert await detect_variant(pattern, ProjectEvidence(project_dir=root)) == "nuxt"

    @pytest.mark.asyncio
    async def test_first_variant_wins(self, tmp_path):
        """Variants are checked in declaration order."""
        pattern = FrameworkPattern(
            framework="react",
            variants=[
                VariantPattern(name="first", dependencies=["a"]),
                VariantPattern(name="second", dependencies=["b"]),
            ],
        )
        evidence = ProjectEvidence(project_dir=tmp_path, dependencies={"a": "1", "b": "1"})
        assert await detect_variant(pattern, evidence) == "first"


class TestRank:
    """Test primary and secondary selection."""

    def test_threshold_is_exclusive(self):
        """A confidence of exactly 30 is not detected."""
        result = rank([DetectedFramework(framework="x", confidence=30)])
        assert result.all_detected == []

    def test_primary_and_secondary(self):
        """Highest confidence over 70 is primary; others over 50 are secondary."""
        result = rank(
            [
                DetectedFramework(framework="a", confidence=55),
                DetectedFramework(framework="b", confidence=90),
                DetectedFramework(framework="c", confidence=40),
            ]
        )
        assert result.primary.framework == "b"
        assert [f.framework for f in result.secondary] == ["a"]
        assert [f.framework for f in result.all_detected] == ["b", "a", "c"]

    def test_ties_keep_input_order(self):
        """Equal confidences keep priority order."""
        result = rank(
            [
                DetectedFramework(framework="high-priority", confidence=80),
                DetectedFramework(framework="low-priority", confidence=80),
            ]
        )
        assert result.primary.framework == "high-priority"

    def test_no_primary_below_seventy(self):
        """Nothing reaching 70 leaves primary unset."""
        result = rank([DetectedFramework(framework="x", confidence=69)])
        assert result.primary is None
        assert [f.framework for f in result.secondary] == ["x"]


class TestDetectFrameworks:
    """Test detect_frameworks against project trees."""

    @pytest.mark.asyncio
    async def test_react_project_primary(self, react_project):
        """React app is detected as primary with its declared version."""
        result = await detect_frameworks(react_project)
        assert result.primary is not None
        assert result.primary.framework == "react"
        assert result.primary.version == "17.0.2"
        assert result.primary.variant is None
        assert result.primary.confidence == 95

    @pytest.mark.asyncio
    async def test_express_only_is_secondary(self, express_project):
        """package.json plus one dependency scores 50, below primary."""
        result = await detect_frameworks(express_project)
        assert result.primary is None
        assert [(f.framework, f.confidence) for f in result.all_detected] == [("express", 50)]
        assert [f.framework for f in result.secondary] == ["express"]

    @pytest.mark.asyncio
    async def test_next_variant(self, make_project):
        """Next.js shows up as the react variant."""
        root = make_project(
            {
                "package.json": {
                    "dependencies": {"next": "14.1.0", "react": "18.2.0", "react-dom": "18.2.0"}
                },
                "next.config.js": "module.exports = {}",
            }
        )
        result = await detect_frameworks(root)
        assert result.primary.variant == "next.js"
        assert result.primary.display_name == "next.js"

    @pytest.mark.asyncio
    async def test_version_falls_back_to_lock_file(self, make_project):
        """An empty declared version is resolved from the lock file."""
        root = make_project(
            {
                "package.json": {"dependencies": {"react": "", "react-dom": ""}},
                "package-lock.json": '{"dependencies": {"react": {"version": "18.2.0"}}}',
            }
        )
        result = await detect_frameworks(root)
        assert result.all_detected[0].version == "18.2.0"

    @pytest.mark.asyncio
    async def test_empty_project(self, empty_project):
        """Nothing is detected in an empty directory."""
        result = await detect_frameworks(empty_project)
        assert result.primary is None
        assert result.all_detected == []

    @pytest.mark.asyncio
    async def test_adding_evidence_never_lowers_confidence(self, make_project):
        """Confidence is monotonic in evidence."""
        pattern = FrameworkPattern(
            framework="flask",
            files=["requirements.txt"],
            content=[ContentPattern(file="**/*.py", pattern="from flask import", weight=20)],
            structure=["templates"],
        )
        root = make_project({"requirements.txt": "flask\n", "app.py": "from flask import Flask"})
        before = await detect_frameworks(root, [pattern])

        (root / "templates").mkdir()
        after = await detect_frameworks(root, [pattern])

        assert after.all_detected[0].confidence > before.all_detected[0].confidence

    @pytest.mark.asyncio
    async def test_sample_limit_bounds_content_scan(self, make_project):
        """Only the first sample_limit files per glob are read."""
        root = make_project({"a.js": "", "b.js": "", "c.js": "MAGIC"})
        pattern = FrameworkPattern(
            framework="magic",
            content=[ContentPattern(file="**/*.js", pattern="MAGIC", weight=40)],
        )

        limited = await detect_frameworks(root, [pattern], sample_limit=1)
        full = await detect_frameworks(root, [pattern], sample_limit=10)

        assert limited.all_detected == []
        assert full.all_detected[0].confidence == 40

    @pytest.mark.asyncio
    async def test_failing_pattern_scores_zero(self, empty_project):
        """An error scoring one pattern does not abort the others."""

        async def flaky(pattern, evidence, sample_limit):
            if pattern.framework == "broken":
                raise RuntimeError("boom")
            return 80

        patterns = [
            FrameworkPattern(framework="broken", priority=10),
            FrameworkPattern(framework="good", priority=5),
        ]
        with patch("stackshift.analysis.detector.calculate_confidence", new=flaky):
            result = await detect_frameworks(empty_project, patterns)

        assert [f.framework for f in result.all_detected] == ["good"]
        assert result.primary.framework == "good"

    @pytest.mark.asyncio
    async def test_deterministic(self, react_project):
        """Repeated runs give identical results."""
        first = await detect_frameworks(react_project, max_concurrency=1)
        second = await detect_frameworks(react_project, max_concurrency=8)
        assert first == second
