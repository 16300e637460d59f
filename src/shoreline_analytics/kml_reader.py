"""KMZ/KML reader for shoreline polylines.

KMZ is a ZIP archive containing KML. KML coordinates are always WGS84 (EPSG:4326)
in ``longitude,latitude,altitude`` format.
"""

from __future__ import annotations

import io
import logging
import xml.etree.ElementTree as ET
import zipfile
from typing import BinaryIO

from .models import LatLng, ShorelineMetadata

logger = logging.getLogger(__name__)

KML_NS = "{http://www.opengis.net/kml/2.2}"
LINE_TAGS = ("LineString", "LinearRing")


def read_shoreline_kml(file: str | bytes | BinaryIO) -> tuple[list[LatLng], ShorelineMetadata]:
    """Read a KMZ (or plain KML) file and return its shoreline vertices in document order.

    Line geometry takes precedence: when a document has any ``LineString`` or
    ``LinearRing``, standalone ``Point`` placemarks (labels, markers) are
    ignored. A document with only points yields those points in order.

    Args:
        file: Path to a .kmz/.kml file, raw bytes, or a file-like object.
    """
    data = _read_bytes(file)

    if _is_zip(data):
        kml_text = _extract_kml_from_kmz(data)
    else:
        kml_text = data.decode("utf-8", errors="replace")

    root = ET.fromstring(kml_text)
    line_points = _collect(root, LINE_TAGS)
    if line_points:
        points, geometry_type = line_points, "LINESTRING"
    else:
        points, geometry_type = _collect(root, ("Point",)), "POINT"
    logger.info("Read %d shoreline vertices from KML %s geometry", len(points), geometry_type)

    metadata = ShorelineMetadata(
        source_type=f"KML_{geometry_type}",
        crs_epsg=4326,
        crs_name="WGS 84",
        num_points=len(points),
    )
    return points, metadata


def _read_bytes(file: str | bytes | BinaryIO) -> bytes:
    if isinstance(file, bytes):
        return file
    if isinstance(file, str):
        with open(file, "rb") as f:
            return f.read()
    return file.read()


def _is_zip(data: bytes) -> bool:
    return data[:4] == b"PK\x03\x04"


def _extract_kml_from_kmz(data: bytes) -> str:
    """Extract doc.kml, or failing that the first .kml, from a KMZ archive."""
    with zipfile.ZipFile(io.BytesIO(data)) as zf:
        names = zf.namelist()
        kml_name = next((n for n in names if n.lower() == "doc.kml"), None)
        if kml_name is None:
            kml_name = next((n for n in names if n.lower().endswith(".kml")), None)
        if kml_name is None:
            raise ValueError("No .kml file found in KMZ archive")
        return zf.read(kml_name).decode("utf-8", errors="replace")


def _collect(root: ET.Element, tags: tuple[str, ...]) -> list[LatLng]:
    points: list[LatLng] = []
    for elem in root.iter():
        if elem.tag.replace(KML_NS, "") not in tags:
            continue
        coords_elem = elem.find(f"{KML_NS}coordinates")
        if coords_elem is not None and coords_elem.text:
            points.extend(_parse_coordinates_text(coords_elem.text))
    return points


def _parse_coordinates_text(text: str) -> list[LatLng]:
    """Parse a KML ``<coordinates>`` block: ``lon,lat[,alt] lon,lat[,alt] ...``."""
    points: list[LatLng] = []
    for token in text.strip().split():
        parts = token.split(",")
        if len(parts) < 2:
            continue
        points.append(LatLng(lat=float(parts[1]), lng=float(parts[0])))
    return points
