"""Calibration constants and per-analysis settings."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

EARTH_RADIUS_M = 6_371_000.0

# Share of beach waste that is visible at the surface; the rest is buried.
VISIBLE_FRACTION = 0.4

# Inverse-distance decay scale for heatmap influence, and the per-segment floor.
DECAY_DISTANCE_M = 500.0
MIN_INFLUENCE_SCORE = 0.01

SHORE_DEPTH_METERS = 30.0
EXTRACTION_RATE_TONS_PER_PERSON_PER_DAY = 0.05
HOURS_PER_DAY = 8.0
KG_PER_TON = 1000.0

LOW_PERCENTILE = 0.33
HIGH_PERCENTILE = 0.66

DEFAULT_SEGMENT_COUNT = 10
DEFAULT_BAND_WIDTH_METERS = 60.0

ENV_PREFIX = "SHORELINE_"


class AnalysisSettings(BaseModel):
    """Calibration values an analysis can override."""

    visible_fraction: float = Field(default=VISIBLE_FRACTION, gt=0.0, le=1.0)
    decay_distance_m: float = Field(default=DECAY_DISTANCE_M, gt=0.0)
    shore_depth_m: float = Field(default=SHORE_DEPTH_METERS, ge=0.0)
    extraction_rate_tons_per_person_per_day: float = Field(
        default=EXTRACTION_RATE_TONS_PER_PERSON_PER_DAY, gt=0.0
    )
    hours_per_day: float = Field(default=HOURS_PER_DAY, gt=0.0)

    @classmethod
    def from_env(cls) -> AnalysisSettings:
        """Build settings from ``SHORELINE_*`` variables, e.g. ``SHORELINE_SHORE_DEPTH_M=25``."""
        values = {}
        for name in cls.model_fields:
            raw = os.getenv(ENV_PREFIX + name.upper())
            if raw is not None and raw.strip():
                values[name] = float(raw)
        return cls(**values)
