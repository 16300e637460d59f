"""Tests for band polygons and access-point selection."""

import pytest

from shoreline_analytics import (
    AccessPoint,
    DensityCategory,
    LatLng,
    SegmentMetrics,
    buffer_to_polygon,
    haversine_m,
    select_best_access_point,
)


def _east_west_segment(category=DensityCategory.RED):
    return SegmentMetrics(
        index=0,
        start=LatLng(lat=0, lng=0),
        end=LatLng(lat=0, lng=0.001),
        midpoint=LatLng(lat=0, lng=0.0005),
        length_m=111,
        area_m2=3330,
        plastic_tons=5,
        weight_kg_per_m2=1.5,
        person_hours=100,
        category=category,
    )


class TestBufferToPolygon:
    def test_straddles_east_west_segment(self):
        band = buffer_to_polygon(_east_west_segment(), 60)
        assert len(band.coords) == 4
        assert band.category == DensityCategory.RED
        lats = [c.lat for c in band.coords]
        assert max(lats) > 0
        assert min(lats) < 0

    def test_corner_order(self):
        start_left, end_left, end_right, start_right = buffer_to_polygon(_east_west_segment(), 60).coords
        # heading east, left is north
        assert start_left.lat > 0 and end_left.lat > 0
        assert start_right.lat < 0 and end_right.lat < 0
        assert start_left.lng == pytest.approx(0, abs=1e-9)
        assert end_left.lng == pytest.approx(0.001, abs=1e-9)

    def test_half_width_offsets(self):
        seg = _east_west_segment()
        band = buffer_to_polygon(seg, 60)
        assert haversine_m(seg.start, band.coords[0]) == pytest.approx(30, rel=1e-3)
        assert haversine_m(band.coords[0], band.coords[3]) == pytest.approx(60, rel=1e-3)

    def test_copies_metrics(self):
        seg = SegmentMetrics(
            index=3,
            start=LatLng(lat=14.71, lng=-17.43),
            end=LatLng(lat=14.715, lng=-17.425),
            midpoint=LatLng(lat=14.7125, lng=-17.4275),
            length_m=700,
            area_m2=21000,
            plastic_tons=12.5,
            weight_kg_per_m2=0.6,
            person_hours=50,
            category=DensityCategory.GREEN,
        )
        band = buffer_to_polygon(seg, 60)
        assert band.index == 3
        assert band.plastic_tons == 12.5
        assert band.weight_kg_per_m2 == 0.6
        assert band.person_hours == 50
        assert band.category == DensityCategory.GREEN

    def test_zero_length_segment(self):
        seg = _east_west_segment().model_copy(
            update={"end": LatLng(lat=0, lng=0), "midpoint": LatLng(lat=0, lng=0), "length_m": 0}
        )
        assert len(buffer_to_polygon(seg, 60).coords) == 4


class TestSelectBestAccessPoint:
    access_points = [
        AccessPoint(id="a", name="Far Dock", lat=0, lng=0, type="DOCK"),
        AccessPoint(id="b", name="Near Dock", lat=1.001, lng=1.001, type="DOCK"),
    ]

    def test_closest_to_densest_segment(self, make_metrics):
        segments = [
            make_metrics(0, 0, 0, 1.0),
            make_metrics(1, 1, 1, 5.0),
            make_metrics(2, 2, 2, 2.0),
        ]
        assert select_best_access_point(self.access_points, segments).id == "b"

    def test_no_segments_returns_first(self):
        assert select_best_access_point(self.access_points, []).id == "a"

    def test_no_access_points(self, make_metrics):
        assert select_best_access_point([], [make_metrics(0, 0, 0, 5.0)]) is None

    def test_single_access_point(self, make_metrics):
        only = AccessPoint(id="only", name="Only Dock", lat=50, lng=50, type="DOCK")
        assert select_best_access_point([only], [make_metrics(0, 10, 20, 8.0)]) is only

    def test_density_tie_uses_first_segment(self, make_metrics):
        segments = [make_metrics(0, 0, 0, 5.0), make_metrics(1, 1, 1, 5.0)]
        assert select_best_access_point(self.access_points, segments).id == "a"

    def test_distance_tie_uses_first_access_point(self, make_metrics):
        twins = [
            AccessPoint(id="x", name="X", lat=0.0005, lng=0.0015, type="BEACH_ACCESS"),
            AccessPoint(id="y", name="Y", lat=0.0005, lng=0.0015, type="DOCK"),
        ]
        assert select_best_access_point(twins, [make_metrics(0, 0, 0, 1.0)]).id == "x"
