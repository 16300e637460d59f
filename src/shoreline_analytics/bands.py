"""Band polygons around segments and access-point selection."""

import math

from .geodesy import bearing, haversine_m, offset_point
from .models import AccessPoint, BandPolygon, SegmentMetrics


def buffer_to_polygon(segment: SegmentMetrics, band_width_m: float) -> BandPolygon:
    """Build a quad of width ``band_width_m`` centred on the segment line.

    Corners are ordered start-left, end-left, end-right, start-right, with
    left and right taken perpendicular to the start-to-end bearing.
    """
    half_width = band_width_m / 2
    seg_bearing = bearing(segment.start, segment.end)
    left = seg_bearing - math.pi / 2
    right = seg_bearing + math.pi / 2

    coords = (
        offset_point(segment.start, left, half_width),
        offset_point(segment.end, left, half_width),
        offset_point(segment.end, right, half_width),
        offset_point(segment.start, right, half_width),
    )
    return BandPolygon(
        index=segment.index,
        category=segment.category,
        coords=coords,
        plastic_tons=segment.plastic_tons,
        weight_kg_per_m2=segment.weight_kg_per_m2,
        person_hours=segment.person_hours,
    )


def select_best_access_point(
    access_points: list[AccessPoint],
    segments: list[SegmentMetrics],
) -> AccessPoint | None:
    """Access point closest to the midpoint of the densest segment.

    Returns None without access points and the first access point without
    segments. Ties go to the earlier segment and the earlier access point.
    """
    if not access_points:
        return None
    if not segments:
        return access_points[0]

    densest = segments[0]
    for seg in segments[1:]:
        if seg.weight_kg_per_m2 > densest.weight_kg_per_m2:
            densest = seg

    best = access_points[0]
    best_dist = haversine_m(best.location, densest.midpoint)
    for ap in access_points[1:]:
        d = haversine_m(ap.location, densest.midpoint)
        if d < best_dist:
            best, best_dist = ap, d
    return best
