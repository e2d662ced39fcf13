"""JSON serialization and deserialization for puzzle configs."""

import json
from dataclasses import asdict
from typing import Any

from dacite import Config as DaciteConfig
from dacite import from_dict

from wasteland.config.experiment import PuzzleConfig

_DACITE_CONFIG = DaciteConfig(cast=[tuple], check_types=True, strict=True)


def config_to_json(config: PuzzleConfig) -> str:
    """Serialize a PuzzleConfig to a JSON string (sorted keys, 2-space indent)."""
    return json.dumps(asdict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> PuzzleConfig:
    """Deserialize a JSON string to a PuzzleConfig.

    Uses dacite with strict=True to reject unknown keys and cast=[tuple] to
    convert JSON arrays back to tuples. Missing keys take their defaults.
    """
    return config_from_dict(json.loads(json_str))


def config_from_dict(d: dict[str, Any]) -> PuzzleConfig:
    """Reconstruct a PuzzleConfig from a plain dictionary."""
    return from_dict(data_class=PuzzleConfig, data=d, config=_DACITE_CONFIG)
