"""Tests for the migration shell script renderer."""

from stackshift.models.migration import BreakingChange, ChangeCategory, Effort, Severity
from stackshift.reports.script import (
    NO_CHANGES,
    render_migration_script,
    sed_pattern,
    sed_replacement,
)


class TestEscaping:
    """Test sed and shell escaping."""

    def test_pattern_escapes_delimiter(self):
        """Slashes in the regex are escaped for s///."""
        assert sed_pattern("a/b") == "a\\/b"

    def test_replacement_escapes_ampersand(self):
        """& and / are escaped, backreferences are kept."""
        assert sed_replacement(r"app.\1(&/") == "app.\\1(\\&\\/"

    def test_single_quotes(self):
        """Single quotes survive inside single-quoted shell words."""
        assert sed_pattern("it's") == "it'\\''s"


class TestRenderMigrationScript:
    """Test render_migration_script."""

    def test_no_automatable_changes(self, manual_change):
        """Only manual changes yield the placeholder comment."""
        assert render_migration_script([manual_change]) == NO_CHANGES
        assert render_migration_script([]) == NO_CHANGES

    def test_script_applies_change(self, react_18_root_change, manual_change):
        """Automatable changes become grep and sed steps."""
        script = render_migration_script([react_18_root_change, manual_change])

        assert script.startswith("#!/bin/bash\n")
        assert "set -e" in script
        assert "This script will apply 1 automated changes" in script
        assert "echo 'Applying: react-18-root-api'" in script
        assert "grep -qE 'ReactDOM\\.render\\(' \"$file\"" in script
        assert (
            "sed -E -i.bak 's/ReactDOM\\.render\\(/"
            'ReactDOM.createRoot(document.getElementById("root")).render(/g\' "$file"'
        ) in script
        assert "vue-3-filters" not in script
        assert script.endswith("\n")

    def test_automatable_without_replacement(self):
        """Changes missing a replacement are announced but not scripted."""
        change = BreakingChange(
            id="vue-3-lifecycle",
            description="Lifecycle hooks renamed",
            category=ChangeCategory.API,
            severity=Severity.MEDIUM,
            effort=Effort.TRIVIAL,
            automatable=True,
            search_pattern="(beforeDestroy|destroyed)",
        )
        script = render_migration_script([change])
        assert "No automated script available for this change" in script
        assert "sed -E" not in script

    def test_stable_output(self, react_18_root_change):
        """Rendering is deterministic."""
        assert render_migration_script([react_18_root_change]) == render_migration_script(
            [react_18_root_change]
        )

    def test_untrusted_text_stays_inert(self):
        """Ids are single-quoted and descriptions stay on one comment line."""
        change = BreakingChange(
            id="custom'$(touch owned)",
            description="Rename hook\ntouch owned",
            category=ChangeCategory.API,
            severity=Severity.LOW,
            effort=Effort.TRIVIAL,
            automatable=True,
        )
        script = render_migration_script([change])
        assert "echo 'Applying: custom'\\''$(touch owned)'" in script
        assert "# Rename hook touch owned\n" in script
        assert "\ntouch owned" not in script
