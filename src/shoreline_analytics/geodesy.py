"""Spherical-earth distance, bearing and short-range offsets."""

import math

from .config import EARTH_RADIUS_M
from .models import LatLng


def haversine_m(a: LatLng, b: LatLng) -> float:
    """Great-circle distance between two coordinates in metres."""
    d_lat = math.radians(b.lat - a.lat)
    d_lng = math.radians(b.lng - a.lng)
    sin_lat = math.sin(d_lat / 2)
    sin_lng = math.sin(d_lng / 2)
    h = sin_lat * sin_lat + math.cos(math.radians(a.lat)) * math.cos(math.radians(b.lat)) * sin_lng * sin_lng
    return 2 * EARTH_RADIUS_M * math.asin(math.sqrt(min(1.0, h)))


def bearing(a: LatLng, b: LatLng) -> float:
    """Initial bearing from ``a`` to ``b`` in radians, clockwise from north.

    Coincident points give 0.0.
    """
    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)
    d_lng = math.radians(b.lng - a.lng)
    y = math.sin(d_lng) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(d_lng)
    return math.atan2(y, x)


def offset_point(point: LatLng, bearing_rad: float, distance_m: float) -> LatLng:
    """Move ``point`` by ``distance_m`` along ``bearing_rad``.

    Flat-earth approximation, good to about a kilometre. A negative distance
    moves backwards along the bearing.
    """
    d_lat = distance_m * math.cos(bearing_rad) / EARTH_RADIUS_M
    d_lng = distance_m * math.sin(bearing_rad) / (EARTH_RADIUS_M * math.cos(math.radians(point.lat)))
    return LatLng(lat=point.lat + math.degrees(d_lat), lng=point.lng + math.degrees(d_lng))
