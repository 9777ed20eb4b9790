"""Tests for shared resource detection."""

import pytest

from stackshift.analysis.resources import detect_shared_resources, resources_from_env
from stackshift.models.migration import ResourceType, Severity


class TestResourcesFromEnv:
    """Test environment variable markers."""

    def test_database_and_auth(self):
        """DATABASE_URL and JWT_ markers yield database and auth resources."""
        resources = resources_from_env("DATABASE_URL=postgres://db\nJWT_SECRET=x\n")
        assert [r.type for r in resources] == [ResourceType.DATABASE, ResourceType.AUTH]
        assert all(r.criticality_level == Severity.CRITICAL for r in resources)

    def test_cache_prefix(self):
        """CACHE_ prefix yields a medium criticality cache."""
        resources = resources_from_env("CACHE_TTL=60")
        assert [(r.type, r.criticality_level) for r in resources] == [
            (ResourceType.CACHE, Severity.MEDIUM)
        ]

    def test_unrelated_variables(self):
        """Unrelated variables yield nothing."""
        assert resources_from_env("PORT=3000\nNODE_ENV=production") == []


class TestDetectSharedResources:
    """Test detection against project trees."""

    @pytest.mark.asyncio
    async def test_env_and_routes(self, make_project):
        """.env markers and a routes directory are both reported."""
        root = make_project({".env": "REDIS_URL=redis://cache", "routes": None})
        resources = await detect_shared_resources(root)
        assert [r.type for r in resources] == [ResourceType.CACHE, ResourceType.API]

    @pytest.mark.asyncio
    async def test_env_example_fallback(self, make_project):
        """.env.example is read when .env is missing."""
        root = make_project({".env.example": "DB_HOST=\nDB_PASSWORD="})
        resources = await detect_shared_resources(root)
        assert [r.name for r in resources] == ["Production Database"]

    @pytest.mark.asyncio
    async def test_env_wins_over_example(self, make_project):
        """.env.example is ignored when .env exists."""
        root = make_project({".env": "PORT=3000", ".env.example": "DATABASE_URL="})
        assert await detect_shared_resources(root) == []

    @pytest.mark.asyncio
    async def test_route_file_is_not_a_directory(self, make_project):
        """Only directories count as route folders."""
        root = make_project({"api": "not a dir"})
        assert await detect_shared_resources(root) == []

    @pytest.mark.asyncio
    async def test_empty_project(self, empty_project):
        """An empty project shares nothing."""
        assert await detect_shared_resources(empty_project) == []
