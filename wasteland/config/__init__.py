"""Puzzle configuration system with frozen, hashable, serializable dataclasses."""

from wasteland.config.defaults import ANCHOR_CONFIG
from wasteland.config.experiment import GraphConfig, PuzzleConfig, TraversalConfig
from wasteland.config.hashing import answer_config_hash, config_hash, full_config_hash
from wasteland.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_json,
)

__all__ = [
    "ANCHOR_CONFIG",
    "GraphConfig",
    "PuzzleConfig",
    "TraversalConfig",
    "answer_config_hash",
    "config_from_dict",
    "config_from_json",
    "config_hash",
    "config_to_json",
    "full_config_hash",
]
