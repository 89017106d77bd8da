"""Domain modules: fixtures, content generation and the agent proxy."""
