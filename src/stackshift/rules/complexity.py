"""Source to target framework distance matrix (0-10)."""

FRAMEWORK_COMPLEXITY: dict[str, dict[str, int]] = {
    "Flask": {
        "FastAPI": 4,
        "Django": 6,
        "Express": 8,
        "Next.js": 9,
    },
    "Django": {
        "FastAPI": 5,
        "Flask": 4,
        "Express": 8,
        "Next.js": 9,
    },
    "Express": {
        "Fastify": 3,
        "Next.js": 5,
        "Flask": 8,
        "Django": 9,
    },
    "React": {
        "Next.js": 3,
        "Vue": 7,
        "Angular": 8,
    },
}

# Unmapped pairs are treated as moderately hard rather than trivial.
DEFAULT_FRAMEWORK_COMPLEXITY = 7
