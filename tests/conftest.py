import pytest
import shapefile

from shoreline_analytics import AccessPoint, HeatmapPoint, LatLng, SegmentMetrics


@pytest.fixture
def dakar_shoreline():
    return [
        LatLng(lat=14.700, lng=-17.435),
        LatLng(lat=14.710, lng=-17.422),
        LatLng(lat=14.725, lng=-17.425),
        LatLng(lat=14.738, lng=-17.440),
        LatLng(lat=14.765, lng=-17.468),
    ]


@pytest.fixture
def dakar_heatmap():
    return [
        HeatmapPoint(lat=14.710, lng=-17.425, intensity=0.95),
        HeatmapPoint(lat=14.735, lng=-17.450, intensity=0.35),
    ]


@pytest.fixture
def dakar_access_points():
    return [
        AccessPoint(id="sap-001a", name="Hann Bay Jetty", lat=14.708, lng=-17.427, type="DOCK"),
        AccessPoint(id="sap-001b", name="Yoff Beach Landing", lat=14.757, lng=-17.464, type="BEACH_ACCESS"),
    ]


@pytest.fixture
def equator_line():
    return [LatLng(lat=0, lng=0), LatLng(lat=0, lng=1), LatLng(lat=0, lng=2)]


@pytest.fixture
def make_metrics():
    def _make(index, lat, lng, density, category=None, length_m=150.0):
        return SegmentMetrics(
            index=index,
            start=LatLng(lat=lat, lng=lng),
            end=LatLng(lat=lat + 0.001, lng=lng + 0.001),
            midpoint=LatLng(lat=lat + 0.0005, lng=lng + 0.0005),
            length_m=length_m,
            area_m2=length_m * 30,
            plastic_tons=10,
            weight_kg_per_m2=density,
            person_hours=100,
            category=category,
        )

    return _make


@pytest.fixture
def coast_shapefile(tmp_path):
    """A two-part POLYLINE shapefile without a .prj."""
    base = tmp_path / "coast"
    w = shapefile.Writer(str(base), shapeType=shapefile.POLYLINE)
    w.field("name", "C")
    w.line([
        [[-17.435, 14.700], [-17.422, 14.710], [-17.425, 14.725]],
        [[-17.440, 14.738], [-17.468, 14.765]],
    ])
    w.record("dakar")
    w.close()
    return base.with_suffix(".shp")
