"""Pipeline configuration — per-run knobs."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PipelineConfig:
    """Controls target sizing and output formatting for one run."""

    # Target frame; None = use the source extent's own length
    target_width: int | None = None
    target_height: int | None = None

    # Decimal places for emitted coordinates; None = full float precision
    precision: int | None = None

    # Slack allowed when verifying emitted coordinates against the frame
    bounds_tolerance: float = 1e-9
