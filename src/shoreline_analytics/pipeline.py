"""End-to-end shoreline analysis and cleanup planning."""

from __future__ import annotations

import logging

from .allocation import distribute_tons
from .bands import buffer_to_polygon, select_best_access_point
from .config import DEFAULT_BAND_WIDTH_METERS, DEFAULT_SEGMENT_COUNT, AnalysisSettings
from .metrics import categorize, compute_metrics
from .models import AccessPoint, AnalysisResult, CleanupPlan, HeatmapPoint, LatLng
from .segments import extract_segment_paths, segment_shoreline
from .tonnage import correct_tons

logger = logging.getLogger(__name__)


def analyze_shoreline(
    polyline: list[LatLng],
    heatmap_points: list[HeatmapPoint],
    visible_tons: float,
    segment_count: float = DEFAULT_SEGMENT_COUNT,
    settings: AnalysisSettings | None = None,
) -> AnalysisResult:
    """Correct the tonnage, segment the shoreline and classify every segment.

    Never fails: sparse or degenerate input degrades to a single zero-length
    segment, zero tons, or an even split as appropriate.
    """
    settings = settings or AnalysisSettings()

    corrected = correct_tons(visible_tons, settings.visible_fraction)
    raw_segments = segment_shoreline(polyline, segment_count)
    logger.debug(
        "Segmented %d-point shoreline into %d segments (%.1f t corrected)",
        len(polyline), len(raw_segments), corrected.corrected_total_tons,
    )

    tons = distribute_tons(raw_segments, heatmap_points, corrected.corrected_total_tons, settings.decay_distance_m)
    metrics = compute_metrics(
        raw_segments,
        tons,
        shore_depth_m=settings.shore_depth_m,
        extraction_rate_tons_per_person_per_day=settings.extraction_rate_tons_per_person_per_day,
        hours_per_day=settings.hours_per_day,
    )
    return AnalysisResult(corrected=corrected, segments=categorize(metrics))


def plan_cleanup(
    polyline: list[LatLng],
    heatmap_points: list[HeatmapPoint],
    visible_tons: float,
    access_points: list[AccessPoint] | None = None,
    segment_count: float = DEFAULT_SEGMENT_COUNT,
    band_width_m: float = DEFAULT_BAND_WIDTH_METERS,
    settings: AnalysisSettings | None = None,
) -> CleanupPlan:
    """Analyse a shoreline and add band polygons, segment paths and the best access point."""
    result = analyze_shoreline(polyline, heatmap_points, visible_tons, segment_count, settings)
    segments = result.segments

    bands = [buffer_to_polygon(seg, band_width_m) for seg in segments]
    paths = extract_segment_paths(polyline, segment_count)
    best = select_best_access_point(access_points or [], segments)
    if best is not None:
        logger.debug("Selected access point %s (%s)", best.id, best.name)

    return CleanupPlan(
        corrected=result.corrected,
        segments=segments,
        bands=bands,
        paths=paths,
        best_access_point=best,
        total_length_m=sum(seg.length_m for seg in segments),
        total_person_hours=sum(seg.person_hours for seg in segments),
    )
