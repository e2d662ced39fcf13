"""Result records: run IDs, schema validation, and result.json output."""

from wasteland.results.run_id import generate_run_id
from wasteland.results.schema import build_result, validate_result, write_result

__all__ = ["build_result", "generate_run_id", "validate_result", "write_result"]
