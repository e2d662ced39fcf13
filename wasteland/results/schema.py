"""Result record building, validation, and writing.

Uses a Python validation function (not jsonschema) to check required fields
and types before writing result.json files.
"""

import json
import logging
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from wasteland.config.experiment import PuzzleConfig
from wasteland.config.hashing import answer_config_hash, full_config_hash
from wasteland.puzzle.solve import PuzzleResult
from wasteland.results.run_id import generate_run_id

log = logging.getLogger(__name__)

SCHEMA_VERSION = "1.0"

REQUIRED_TOP_FIELDS = {
    "schema_version",
    "run_id",
    "timestamp",
    "description",
    "tags",
    "config",
    "config_hash",
    "result",
}

REQUIRED_RESULT_FIELDS = {"part", "answer", "arrivals"}


def build_result(
    puzzle_result: PuzzleResult,
    config: PuzzleConfig,
    input_path: str | None = None,
    run_id: str | None = None,
) -> dict[str, Any]:
    """Assemble the result.json payload for one solved puzzle."""
    return {
        "schema_version": SCHEMA_VERSION,
        "run_id": run_id or generate_run_id(config),
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "description": config.description,
        "tags": list(config.tags),
        "config": asdict(config),
        "config_hash": full_config_hash(config),
        "answer_hash": answer_config_hash(config),
        "input_path": input_path,
        "result": {
            "part": puzzle_result.part,
            "answer": puzzle_result.answer,
            "arrivals": dict(sorted(puzzle_result.arrivals.items())),
            "final_positions": dict(sorted(puzzle_result.final_positions.items())),
            "warnings": list(puzzle_result.warnings),
        },
    }


def validate_result(result: dict[str, Any]) -> list[str]:
    """Validate a result dict against the project schema.

    Returns a list of error strings. An empty list means the result is valid.
    """
    errors: list[str] = []

    missing = REQUIRED_TOP_FIELDS - set(result.keys())
    if missing:
        errors.append(f"Missing required top-level fields: {sorted(missing)}")

    if "schema_version" in result and not isinstance(result["schema_version"], str):
        errors.append("schema_version must be a string")

    if "tags" in result and not isinstance(result["tags"], list):
        errors.append("tags must be a list")

    if "config" in result and not isinstance(result["config"], dict):
        errors.append("config must be a dict")

    if "timestamp" in result and "T" not in str(result["timestamp"]):
        errors.append("timestamp must be ISO 8601")

    body = result.get("result")
    if body is not None:
        if not isinstance(body, dict):
            errors.append("result must be a dict")
        else:
            missing_body = REQUIRED_RESULT_FIELDS - set(body.keys())
            if missing_body:
                errors.append(
                    f"Missing required result fields: {sorted(missing_body)}"
                )
            answer = body.get("answer")
            if answer is not None and (not isinstance(answer, int) or answer < 1):
                errors.append(f"answer must be a positive integer, got {answer!r}")
            arrivals = body.get("arrivals", {})
            if not isinstance(arrivals, dict) or not all(
                isinstance(v, int) and v > 0 for v in arrivals.values()
            ):
                errors.append("arrivals must map labels to positive integers")

    return errors


def write_result(result: dict[str, Any], results_dir: str | Path = "results") -> Path:
    """Validate and write ``result`` to ``<results_dir>/<run_id>/result.json``.

    Raises:
        ValueError: If the result fails schema validation.
    """
    errors = validate_result(result)
    if errors:
        raise ValueError(f"Invalid result: {'; '.join(errors)}")

    out_dir = Path(results_dir) / result["run_id"]
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / "result.json"
    with open(path, "w") as f:
        json.dump(result, f, indent=2)

    log.info("Result written to %s", path)
    return path
