"""Shoreline shapefile reader with CRS detection."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO

import shapefile
from pyproj import CRS

from .models import LatLng, ShorelineMetadata

logger = logging.getLogger(__name__)


def detect_crs(prj_source: str | Path | None) -> tuple[int | None, str | None, bool | None]:
    """Parse CRS from a .prj WKT string or file path.

    Returns (epsg_code, crs_name, is_projected) or (None, None, None) on failure.
    """
    if prj_source is None:
        return None, None, None

    wkt = prj_source if isinstance(prj_source, str) else ""
    if isinstance(prj_source, Path):
        if not prj_source.exists():
            return None, None, None
        wkt = prj_source.read_text()

    if not wkt.strip():
        return None, None, None

    try:
        crs = CRS.from_wkt(wkt)
    except Exception:
        logger.warning("Could not parse .prj WKT; assuming geographic coordinates")
        return None, None, None

    return crs.to_epsg(), crs.name, crs.is_projected


def read_shoreline_shapefile(
    shp_path: str | Path | None = None,
    *,
    shp_file: BinaryIO | None = None,
    shx_file: BinaryIO | None = None,
    dbf_file: BinaryIO | None = None,
    prj_wkt: str | None = None,
) -> tuple[list[LatLng], ShorelineMetadata]:
    """Read a polyline or point shapefile as an ordered shoreline.

    Supports two modes:
    - File path: pass ``shp_path`` (the .prj is auto-discovered)
    - File objects: pass ``shp_file``, ``shx_file``, ``dbf_file``, and optionally ``prj_wkt``

    Coordinates must be geographic (lon/lat). A projected CRS raises
    ``ValueError``; a missing or unreadable .prj is assumed to be WGS84.
    """
    if shp_path is not None:
        shp_path = Path(shp_path)
        sf = shapefile.Reader(str(shp_path))
        prj_path = shp_path.with_suffix(".prj")
        if not prj_path.exists():
            # shp_path might already lack an extension (pyshp convention)
            prj_path = Path(str(shp_path) + ".prj")
        epsg, crs_name, is_projected = detect_crs(prj_path if prj_path.exists() else None)
    elif shp_file is not None:
        sf = shapefile.Reader(shp=shp_file, shx=shx_file, dbf=dbf_file)
        epsg, crs_name, is_projected = detect_crs(prj_wkt)
    else:
        raise ValueError("Provide either shp_path or shp_file")

    if is_projected:
        raise ValueError(
            f"Projected CRS {crs_name or epsg} is not supported; reproject the shoreline to EPSG:4326"
        )

    shape_type_name = sf.shapeTypeName
    points = _extract_points(sf, shape_type_name.upper())
    logger.info("Read %d shoreline vertices from %s shapefile", len(points), shape_type_name)

    metadata = ShorelineMetadata(
        source_type=shape_type_name,
        crs_epsg=epsg,
        crs_name=crs_name,
        num_points=len(points),
        fields=[f[0] for f in sf.fields[1:]],  # skip DeletionFlag
    )
    return points, metadata


def _extract_points(sf: shapefile.Reader, upper_type: str) -> list[LatLng]:
    """Collect vertices in record and part order; x is longitude, y latitude."""
    if "POLYGON" in upper_type:
        raise ValueError(f"Unsupported shape type: {upper_type}. POLYGON shapes are not supported.")

    points: list[LatLng] = []
    if "POINT" in upper_type:
        for shape in sf.shapes():
            x, y = shape.points[0][:2]
            points.append(LatLng(lat=y, lng=x))
    elif "POLYLINE" in upper_type or upper_type in ("ARC", "ARCZ", "ARCM"):
        for shape in sf.shapes():
            points.extend(LatLng(lat=v[1], lng=v[0]) for v in shape.points)
    else:
        raise ValueError(f"Unsupported shape type: {upper_type}")
    return points
