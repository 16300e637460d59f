"""GeoJSON reader for pollution heatmap samples."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .models import HeatmapPoint

logger = logging.getLogger(__name__)

INTENSITY_PROPERTY = "intensity"


def read_heatmap_geojson(source: str | bytes | Path | dict) -> list[HeatmapPoint]:
    """Read Point features from a GeoJSON FeatureCollection as heatmap samples.

    ``source`` may be a path (``str`` or ``Path``), raw JSON bytes, or an
    already parsed dict. Features without Point geometry are skipped; a
    missing ``intensity`` property counts as 1.0.
    """
    if isinstance(source, (str, Path)):
        data = json.loads(Path(source).read_text(encoding="utf-8"))
    elif isinstance(source, bytes):
        data = json.loads(source)
    else:
        data = source

    points: list[HeatmapPoint] = []
    for feature in data.get("features", []):
        geometry = feature.get("geometry") or {}
        if geometry.get("type") != "Point":
            continue
        coords = geometry.get("coordinates") or []
        if len(coords) < 2:
            continue
        lon, lat = coords[:2]
        intensity = (feature.get("properties") or {}).get(INTENSITY_PROPERTY, 1.0)
        points.append(HeatmapPoint(lat=lat, lng=lon, intensity=float(intensity)))

    logger.info("Read %d heatmap points", len(points))
    return points
