"""Deterministic config hashing using SHA-256 over sorted JSON."""

import hashlib
import json
from dataclasses import asdict
from typing import Any

from wasteland.config.experiment import PuzzleConfig

# Fields that do not change the computed answer
_COSMETIC_FIELDS = ("description", "tags")


def config_hash(config: Any, exclude_fields: tuple[str, ...] = ()) -> str:
    """Deterministic SHA-256 hash of a config object.

    Args:
        config: Any dataclass instance (or sub-config).
        exclude_fields: Top-level field names to leave out of the hash.

    Returns:
        First 16 hex characters of the SHA-256 hash.
    """
    d = asdict(config)
    for name in exclude_fields:
        d.pop(name, None)
    serialized = json.dumps(
        d,
        sort_keys=True,
        ensure_ascii=True,
        separators=(",", ":"),
    )
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()[:16]


def answer_config_hash(config: PuzzleConfig) -> str:
    """Hash of everything that can change the answer (ignores description/tags)."""
    return config_hash(config, exclude_fields=_COSMETIC_FIELDS)


def full_config_hash(config: PuzzleConfig) -> str:
    """Hash for full run identity, including description and tags."""
    return config_hash(config)
