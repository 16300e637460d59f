"""Tests for arc-length interpolation, shoreline segmentation and segment paths."""

import pytest

from shoreline_analytics import (
    LatLng,
    cumulative_distances,
    extract_segment_paths,
    interpolate_at,
    segment_shoreline,
)
from shoreline_analytics.segments import normalize_count


class TestNormalizeCount:
    @pytest.mark.parametrize(
        "requested, expected",
        [(0, 1), (-3, 1), (1, 1), (4, 4), (2.4, 2), (2.5, 3), (0.4, 1)],
    )
    def test_rounds_and_floors_at_one(self, requested, expected):
        assert normalize_count(requested) == expected

    @pytest.mark.parametrize("requested", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_is_one(self, requested):
        assert normalize_count(requested) == 1

    def test_non_finite_count_gives_one_segment(self, equator_line):
        assert len(segment_shoreline(equator_line, float("inf"))) == 1
        assert len(extract_segment_paths(equator_line, float("nan"))) == 1


class TestInterpolateAt:
    line = [LatLng(lat=0, lng=0), LatLng(lat=0, lng=2)]

    def test_halfway(self):
        total = cumulative_distances(self.line)[-1]
        p = interpolate_at(self.line, total / 2)
        assert p.lat == pytest.approx(0)
        assert p.lng == pytest.approx(1)

    def test_clamps_below_zero(self):
        assert interpolate_at(self.line, -100) == self.line[0]

    def test_clamps_past_end(self):
        assert interpolate_at(self.line, 1e12) == self.line[-1]

    def test_empty_polyline_is_origin(self):
        assert interpolate_at([], 10) == LatLng(lat=0, lng=0)

    def test_skips_duplicate_vertices(self):
        line = [LatLng(lat=0, lng=0), LatLng(lat=0, lng=0), LatLng(lat=0, lng=1)]
        assert interpolate_at(line, 0) == line[0]


class TestSegmentShoreline:
    def test_divides_into_requested_segments(self, equator_line):
        segs = segment_shoreline(equator_line, 4)
        assert len(segs) == 4
        assert [s.index for s in segs] == [0, 1, 2, 3]
        for seg in segs:
            assert seg.length_m == pytest.approx(segs[0].length_m)

    def test_lengths_sum_to_total(self, dakar_shoreline):
        segs = segment_shoreline(dakar_shoreline, 7)
        total = cumulative_distances(dakar_shoreline)[-1]
        assert sum(s.length_m for s in segs) == pytest.approx(total)

    def test_single_point(self):
        segs = segment_shoreline([LatLng(lat=5, lng=10)], 5)
        assert len(segs) == 1
        assert segs[0].length_m == 0
        assert segs[0].start == segs[0].end == segs[0].midpoint == LatLng(lat=5, lng=10)

    def test_empty_polyline(self):
        segs = segment_shoreline([], 3)
        assert len(segs) == 1
        assert segs[0].midpoint == LatLng(lat=0, lng=0)

    def test_zero_length_polyline(self):
        p = LatLng(lat=1, lng=1)
        segs = segment_shoreline([p, p, p], 4)
        assert len(segs) == 1
        assert segs[0].length_m == 0

    def test_zero_requested_gives_one(self, equator_line):
        assert len(segment_shoreline(equator_line, 0)) == 1

    def test_endpoints_follow_polyline(self, dakar_shoreline):
        segs = segment_shoreline(dakar_shoreline, 3)
        assert segs[0].start == dakar_shoreline[0]
        assert segs[-1].end.lat == pytest.approx(dakar_shoreline[-1].lat)
        assert segs[-1].end.lng == pytest.approx(dakar_shoreline[-1].lng)

    def test_segments_are_contiguous(self, dakar_shoreline):
        segs = segment_shoreline(dakar_shoreline, 6)
        for prev, nxt in zip(segs, segs[1:]):
            assert prev.end == nxt.start

    def test_midpoint_is_plain_average(self, dakar_shoreline):
        for seg in segment_shoreline(dakar_shoreline, 4):
            assert seg.midpoint.lat == pytest.approx((seg.start.lat + seg.end.lat) / 2)
            assert seg.midpoint.lng == pytest.approx((seg.start.lng + seg.end.lng) / 2)


class TestExtractSegmentPaths:
    curved = [
        LatLng(lat=0, lng=0),
        LatLng(lat=0.001, lng=0.002),
        LatLng(lat=0.003, lng=0.003),
        LatLng(lat=0.004, lng=0.001),
        LatLng(lat=0.005, lng=0),
    ]

    def test_preserves_intermediate_vertices(self):
        paths = extract_segment_paths(self.curved, 2)
        assert len(paths) == 2
        assert sum(len(p) for p in paths) > 2 * 2

    def test_every_original_vertex_appears_once(self):
        paths = extract_segment_paths(self.curved, 2)
        interior = [pt for path in paths for pt in path[1:-1]]
        assert interior == self.curved[1:-1]

    def test_first_and_last_points(self):
        line = [LatLng(lat=10, lng=20), LatLng(lat=10.01, lng=20.01), LatLng(lat=10.02, lng=20.02)]
        paths = extract_segment_paths(line, 2)
        assert paths[0][0].lat == pytest.approx(10)
        assert paths[0][0].lng == pytest.approx(20)
        assert paths[-1][-1].lat == pytest.approx(10.02)
        assert paths[-1][-1].lng == pytest.approx(20.02)

    def test_single_point_polyline(self):
        paths = extract_segment_paths([LatLng(lat=5, lng=10)], 3)
        assert paths == [[LatLng(lat=5, lng=10)]]

    def test_path_count_matches_request(self):
        line = [LatLng(lat=0, lng=i) for i in range(4)]
        paths = extract_segment_paths(line, 6)
        assert len(paths) == 6
        assert all(len(p) >= 2 for p in paths)

    def test_boundaries_match_segments(self, dakar_shoreline):
        segs = segment_shoreline(dakar_shoreline, 5)
        paths = extract_segment_paths(dakar_shoreline, 5)
        for seg, path in zip(segs, paths):
            assert path[0] == seg.start
            assert path[-1] == seg.end
