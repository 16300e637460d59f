"""Per-segment cleanup metrics and percentile-based density classification."""

import math

from .config import (
    EXTRACTION_RATE_TONS_PER_PERSON_PER_DAY,
    HIGH_PERCENTILE,
    HOURS_PER_DAY,
    KG_PER_TON,
    LOW_PERCENTILE,
    SHORE_DEPTH_METERS,
)
from .models import DensityCategory, SegmentMetrics, ShorelineSegment
from .rounding import round_half_up


def compute_metrics(
    segments: list[ShorelineSegment],
    tons_per_segment: list[float],
    shore_depth_m: float = SHORE_DEPTH_METERS,
    extraction_rate_tons_per_person_per_day: float = EXTRACTION_RATE_TONS_PER_PERSON_PER_DAY,
    hours_per_day: float = HOURS_PER_DAY,
) -> list[SegmentMetrics]:
    """Derive area, density and labour for each segment.

    Segments without a matching tonnage entry get 0 tons. Person-hours are
    rounded up so labour is never under-provisioned.
    """
    rate_per_hour = extraction_rate_tons_per_person_per_day / hours_per_day
    metrics: list[SegmentMetrics] = []

    for i, seg in enumerate(segments):
        tons = tons_per_segment[i] if i < len(tons_per_segment) else 0.0
        area_m2 = seg.length_m * shore_depth_m
        weight = round_half_up(tons * KG_PER_TON / area_m2, 2) if area_m2 > 0 else 0.0
        person_hours = math.ceil(tons / rate_per_hour) if rate_per_hour > 0 and tons > 0 else 0

        metrics.append(
            SegmentMetrics(
                **seg.model_dump(),
                area_m2=round_half_up(area_m2, 1),
                plastic_tons=round_half_up(tons, 2),
                weight_kg_per_m2=weight,
                person_hours=person_hours,
            )
        )
    return metrics


def density_thresholds(metrics: list[SegmentMetrics]) -> tuple[float, float]:
    """33rd and 66th percentile of ``weight_kg_per_m2`` (nearest-rank on a full sort)."""
    values = sorted(m.weight_kg_per_m2 for m in metrics)
    return (
        values[math.floor(len(values) * LOW_PERCENTILE)],
        values[math.floor(len(values) * HIGH_PERCENTILE)],
    )


def categorize(metrics: list[SegmentMetrics]) -> list[SegmentMetrics]:
    """Label each segment green, yellow or red relative to the others in ``metrics``."""
    if not metrics:
        return []

    p33, p66 = density_thresholds(metrics)
    categorized: list[SegmentMetrics] = []
    for m in metrics:
        if m.weight_kg_per_m2 <= p33:
            category = DensityCategory.GREEN
        elif m.weight_kg_per_m2 <= p66:
            category = DensityCategory.YELLOW
        else:
            category = DensityCategory.RED
        categorized.append(m.model_copy(update={"category": category}))
    return categorized


def top_segments(metrics: list[SegmentMetrics], n: int = 3) -> list[SegmentMetrics]:
    """The ``n`` densest segments, densest first; ties keep index order."""
    return sorted(metrics, key=lambda m: m.weight_kg_per_m2, reverse=True)[: max(0, n)]
