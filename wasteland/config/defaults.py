"""Anchor configuration: single source of truth for default puzzle parameters."""

from wasteland.config.experiment import PuzzleConfig

# All-default values: part 2, suffixes A/Z, AAA -> ZZZ for part 1,
# bound_factor=10, seed=42.
ANCHOR_CONFIG = PuzzleConfig()
