"""Shoreline cleanup analytics: segmentation, tonnage allocation and density bands."""

from .allocation import distribute_tons
from .bands import buffer_to_polygon, select_best_access_point
from .config import AnalysisSettings
from .geodesy import bearing, haversine_m, offset_point
from .geojson_reader import read_heatmap_geojson
from .kml_reader import read_shoreline_kml
from .metrics import categorize, compute_metrics, top_segments
from .models import (
    AccessPoint,
    AccessPointType,
    AnalysisResult,
    BandPolygon,
    CleanupPlan,
    CorrectedTons,
    DensityCategory,
    HeatmapPoint,
    LatLng,
    SegmentMetrics,
    ShorelineMetadata,
    ShorelineSegment,
)
from .pipeline import analyze_shoreline, plan_cleanup
from .reader import detect_crs, read_shoreline_shapefile
from .segments import cumulative_distances, extract_segment_paths, interpolate_at, segment_shoreline
from .tonnage import correct_tons

__all__ = [
    "AccessPoint",
    "AccessPointType",
    "AnalysisResult",
    "AnalysisSettings",
    "BandPolygon",
    "CleanupPlan",
    "CorrectedTons",
    "DensityCategory",
    "HeatmapPoint",
    "LatLng",
    "SegmentMetrics",
    "ShorelineMetadata",
    "ShorelineSegment",
    "analyze_shoreline",
    "bearing",
    "buffer_to_polygon",
    "categorize",
    "compute_metrics",
    "correct_tons",
    "cumulative_distances",
    "detect_crs",
    "distribute_tons",
    "extract_segment_paths",
    "haversine_m",
    "interpolate_at",
    "offset_point",
    "plan_cleanup",
    "read_heatmap_geojson",
    "read_shoreline_kml",
    "read_shoreline_shapefile",
    "segment_shoreline",
    "select_best_access_point",
    "top_segments",
]
