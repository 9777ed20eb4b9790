"""Detection of infrastructure shared between the old and new systems."""

import logging
from pathlib import Path

from stackshift.filesystem import dir_exists, read_text
from stackshift.models.migration import ResourceType, SharedResource, Severity

logger = logging.getLogger(__name__)

ENV_FILES = (".env", ".env.example")
ROUTE_DIRS = ("routes", "api", "views", "controllers")

# (markers, resource) pairs checked against the environment file text
ENV_RESOURCES: list[tuple[tuple[str, ...], SharedResource]] = [
    (
        ("DATABASE_URL", "DB_"),
        SharedResource(
            type=ResourceType.DATABASE,
            name="Production Database",
            description="Shared database connection detected in environment",
            criticality_level=Severity.CRITICAL,
            migration_strategy="Maintain compatibility during migration",
        ),
    ),
    (
        ("REDIS_URL", "CACHE_"),
        SharedResource(
            type=ResourceType.CACHE,
            name="Redis Cache",
            description="Shared cache instance detected",
            criticality_level=Severity.MEDIUM,
            migration_strategy="Gradual cache key migration",
        ),
    ),
    (
        ("AUTH_", "JWT_"),
        SharedResource(
            type=ResourceType.AUTH,
            name="Authentication System",
            description="Shared authentication configuration",
            criticality_level=Severity.CRITICAL,
            migration_strategy="Maintain session compatibility",
        ),
    ),
]

API_RESOURCE = SharedResource(
    type=ResourceType.API,
    name="API Endpoints",
    description="Existing API contracts that may have consumers",
    criticality_level=Severity.HIGH,
    migration_strategy="Version APIs or maintain backward compatibility",
)


async def _read_env(project_dir: Path) -> str | None:
    for name in ENV_FILES:
        content = await read_text(project_dir / name)
        if content is not None:
            return content
    return None


def resources_from_env(env_content: str) -> list[SharedResource]:
    """Shared resources implied by environment variable names."""
    return [
        resource.model_copy()
        for markers, resource in ENV_RESOURCES
        if any(marker in env_content for marker in markers)
    ]


async def has_route_directory(project_dir: Path) -> bool:
    """Whether the project root holds a conventional routes directory."""
    for name in ROUTE_DIRS:
        if await dir_exists(project_dir / name):
            return True
    return False


async def detect_shared_resources(project_dir: Path) -> list[SharedResource]:
    """Detect shared database, cache, auth and API resources.

    Reads .env, falling back to .env.example, then probes for route
    directories at the project root.
    """
    resources: list[SharedResource] = []

    env_content = await _read_env(project_dir)
    if env_content is not None:
        resources.extend(resources_from_env(env_content))

    if await has_route_directory(project_dir):
        resources.append(API_RESOURCE.model_copy())

    if resources:
        logger.info("Shared resources: %s", ", ".join(r.name for r in resources))
    return resources
