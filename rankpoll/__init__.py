"""Ranked-choice poll scoring and seeded randomization."""
