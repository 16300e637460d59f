"""CSV export of segment metrics."""

from __future__ import annotations

import csv
from pathlib import Path

from .models import SegmentMetrics

CSV_FIELDS = [
    "index",
    "start_lat", "start_lng", "end_lat", "end_lng", "mid_lat", "mid_lng",
    "length_m", "area_m2",
    "plastic_tons", "weight_kg_per_m2", "person_hours", "category",
]


def segment_row(seg: SegmentMetrics) -> dict:
    """Flatten a segment into one CSV row."""
    return {
        "index": seg.index,
        "start_lat": seg.start.lat,
        "start_lng": seg.start.lng,
        "end_lat": seg.end.lat,
        "end_lng": seg.end.lng,
        "mid_lat": seg.midpoint.lat,
        "mid_lng": seg.midpoint.lng,
        "length_m": seg.length_m,
        "area_m2": seg.area_m2,
        "plastic_tons": seg.plastic_tons,
        "weight_kg_per_m2": seg.weight_kg_per_m2,
        "person_hours": seg.person_hours,
        "category": seg.category.value if seg.category else "",
    }


def write_segments_csv(segments: list[SegmentMetrics], path: Path) -> None:
    with open(path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        writer.writeheader()
        writer.writerows(segment_row(seg) for seg in segments)
