"""Pure planning stages: risks, complexity, phases, strategy and rollback."""
