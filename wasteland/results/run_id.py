"""Run ID generation with scannable parameter slug format."""

from datetime import datetime, timezone

from wasteland.config.experiment import PuzzleConfig


def generate_run_id(config: PuzzleConfig, now: datetime | None = None) -> str:
    """Generate a scannable run ID from config parameters.

    Format: p{part}_{start_suffix}{terminal_suffix}_s{seed}_{YYYYMMDD}_{HHMMSS}
    Example: p2_AZ_s42_20261019_143012
    """
    ts = now or datetime.now(timezone.utc)
    return (
        f"p{config.part}"
        f"_{config.graph.start_suffix}{config.graph.terminal_suffix}"
        f"_s{config.seed}"
        f"_{ts.strftime('%Y%m%d_%H%M%S')}"
    )
