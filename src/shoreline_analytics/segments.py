"""Arc-length resampling of a shoreline polyline into equal segments."""

import bisect
import math

from .geodesy import haversine_m
from .models import LatLng, ShorelineSegment

ORIGIN = LatLng(lat=0.0, lng=0.0)


def normalize_count(count: float) -> int:
    """Requested segment count as a positive integer, halves rounding up.

    Non-finite counts (inf, nan) give 1.
    """
    if not math.isfinite(count):
        return 1
    return max(1, math.floor(count + 0.5))


def cumulative_distances(polyline: list[LatLng]) -> list[float]:
    """Distance travelled along the polyline at each vertex, starting at 0."""
    cum_dist = [0.0] if polyline else []
    for i in range(1, len(polyline)):
        cum_dist.append(cum_dist[-1] + haversine_m(polyline[i - 1], polyline[i]))
    return cum_dist


def interpolate_at(polyline: list[LatLng], target_m: float, cum_dist: list[float] | None = None) -> LatLng:
    """Point at ``target_m`` metres along the polyline.

    The target is clamped to the polyline's length. Latitude and longitude are
    interpolated linearly between the two bracketing vertices.
    """
    if not polyline:
        return ORIGIN
    if cum_dist is None:
        cum_dist = cumulative_distances(polyline)
    total = cum_dist[-1]
    d = max(0.0, min(total, target_m))

    i = bisect.bisect_left(cum_dist, d, lo=1)
    if i >= len(cum_dist):
        return polyline[-1]

    p1, p2 = polyline[i - 1], polyline[i]
    sub_len = cum_dist[i] - cum_dist[i - 1]
    t = (d - cum_dist[i - 1]) / sub_len if sub_len > 0 else 0.0
    return LatLng(lat=p1.lat + t * (p2.lat - p1.lat), lng=p1.lng + t * (p2.lng - p1.lng))


def _degenerate_segment(polyline: list[LatLng]) -> ShorelineSegment:
    pt = polyline[0] if polyline else ORIGIN
    return ShorelineSegment(index=0, start=pt, end=pt, midpoint=pt, length_m=0.0)


def segment_shoreline(polyline: list[LatLng], count: float) -> list[ShorelineSegment]:
    """Divide a polyline into ``count`` segments of equal arc length.

    Polylines with fewer than two points, or with zero length, collapse to a
    single zero-length segment at the first point (or at 0,0 when empty).
    Midpoints are the plain average of start and end coordinates.
    """
    if len(polyline) < 2:
        return [_degenerate_segment(polyline)]

    n = normalize_count(count)
    cum_dist = cumulative_distances(polyline)
    total = cum_dist[-1]
    if total == 0:
        return [_degenerate_segment(polyline)]

    seg_len = total / n
    segments: list[ShorelineSegment] = []
    for i in range(n):
        start = interpolate_at(polyline, i * seg_len, cum_dist)
        end = interpolate_at(polyline, (i + 1) * seg_len, cum_dist)
        segments.append(
            ShorelineSegment(
                index=i,
                start=start,
                end=end,
                midpoint=LatLng(lat=(start.lat + end.lat) / 2, lng=(start.lng + end.lng) / 2),
                length_m=seg_len,
            )
        )
    return segments


def extract_segment_paths(polyline: list[LatLng], count: float) -> list[list[LatLng]]:
    """Split a polyline at the same boundaries as :func:`segment_shoreline`.

    Each path runs from its interpolated start boundary through every original
    vertex strictly inside the segment to its interpolated end boundary, so a
    rendered path follows the actual coastline curve.
    """
    if len(polyline) < 2:
        return [[polyline[0] if polyline else ORIGIN]]

    n = normalize_count(count)
    cum_dist = cumulative_distances(polyline)
    total = cum_dist[-1]
    if total == 0:
        return [[polyline[0]]]

    seg_len = total / n
    paths: list[list[LatLng]] = []
    for s in range(n):
        start_m = s * seg_len
        end_m = (s + 1) * seg_len
        path = [interpolate_at(polyline, start_m, cum_dist)]
        path.extend(polyline[i] for i in range(1, len(polyline)) if start_m < cum_dist[i] < end_m)
        path.append(interpolate_at(polyline, end_m, cum_dist))
        paths.append(path)
    return paths
