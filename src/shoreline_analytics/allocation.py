"""Heatmap-weighted allocation of a tonnage total across segments."""

from .config import DECAY_DISTANCE_M, MIN_INFLUENCE_SCORE
from .geodesy import haversine_m
from .models import HeatmapPoint, ShorelineSegment
from .rounding import round_half_up


def influence_score(
    segment: ShorelineSegment,
    heatmap_points: list[HeatmapPoint],
    decay_distance_m: float = DECAY_DISTANCE_M,
) -> float:
    """Inverse-distance weighted heatmap intensity at a segment midpoint, floored."""
    score = 0.0
    for pt in heatmap_points:
        dist = haversine_m(segment.midpoint, pt)
        score += pt.intensity / (1 + dist / decay_distance_m)
    return max(score, MIN_INFLUENCE_SCORE)


def distribute_tons(
    segments: list[ShorelineSegment],
    heatmap_points: list[HeatmapPoint],
    total_tons: float,
    decay_distance_m: float = DECAY_DISTANCE_M,
) -> list[float]:
    """Split ``total_tons`` across segments in proportion to heatmap influence.

    Each share is rounded to 3 decimals. With no heatmap points every segment
    scores the floor value, so the total is split evenly.
    """
    if not segments:
        return []

    scores = [influence_score(seg, heatmap_points, decay_distance_m) for seg in segments]
    total_score = sum(scores)
    return [round_half_up(s / total_score * total_tons, 3) for s in scores]
