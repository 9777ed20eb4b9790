"""Tests for strategy recommendation and rollback planning."""

import pytest

from stackshift.models.migration import MigrationComplexity, Severity, Strategy
from stackshift.planning.phases import synthesize_phases
from stackshift.planning.strategy import plan_rollback, recommend_strategy


def _complexity(level: Severity) -> MigrationComplexity:
    return MigrationComplexity(score=50, factors=[], level=level)


class TestRecommendStrategy:
    """Test recommend_strategy."""

    @pytest.mark.parametrize(
        ("level", "strategy"),
        [
            (Severity.LOW, Strategy.BIG_BANG),
            (Severity.MEDIUM, Strategy.INCREMENTAL),
            (Severity.HIGH, Strategy.INCREMENTAL),
            (Severity.CRITICAL, Strategy.PARALLEL_RUN),
        ],
    )
    def test_by_level(self, level, strategy):
        """Without critical resources the level decides."""
        assert recommend_strategy(_complexity(level), []) == strategy

    def test_critical_resource_forces_parallel_run(self, database_resource):
        """A critical shared resource rules out big-bang."""
        assert recommend_strategy(_complexity(Severity.LOW), [database_resource]) == (
            Strategy.PARALLEL_RUN
        )

    def test_non_critical_resource(self, api_resource):
        """A high criticality resource keeps the level based choice."""
        assert recommend_strategy(_complexity(Severity.LOW), [api_resource]) == Strategy.BIG_BANG


class TestPlanRollback:
    """Test plan_rollback."""

    def test_one_procedure_per_rollback_point(self, low_complexity, manual_change):
        """Procedures cover exactly the rollback-point phases."""
        phases = synthesize_phases(low_complexity, [manual_change])
        rollback = plan_rollback(phases, [])
        assert {p.phase for p in rollback.procedures} == {
            p.id for p in phases if p.rollback_point
        }
        assert rollback.automatic is False
        assert rollback.estimated_time == "1-2 hours"

    def test_database_requires_backup(self, low_complexity, database_resource):
        """A shared database turns on backups and database rollback steps."""
        phases = synthesize_phases(low_complexity)
        rollback = plan_rollback(phases, [database_resource])
        assert rollback.data_backup_required is True
        assert "Execute database rollback script" in rollback.procedures[0].steps

    def test_no_database(self, low_complexity, api_resource):
        """Without a database the rollback step is skipped."""
        rollback = plan_rollback(synthesize_phases(low_complexity), [api_resource])
        assert rollback.data_backup_required is False
        assert "Skip database rollback" in rollback.procedures[0].steps

    def test_triggers(self, low_complexity):
        """Three fixed triggers are always present."""
        rollback = plan_rollback(synthesize_phases(low_complexity), [])
        assert [t.action for t in rollback.triggers] == ["rollback", "rollback", "pause"]
