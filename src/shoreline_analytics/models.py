"""Pydantic data models for shoreline analytics."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class DensityCategory(str, Enum):
    """Relative pollution density of a segment within one analysis."""

    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


class AccessPointType(str, Enum):
    DOCK = "DOCK"
    BEACH_ACCESS = "BEACH_ACCESS"


class LatLng(BaseModel):
    """A geographic coordinate in degrees."""

    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float


class HeatmapPoint(BaseModel):
    """A pollution sample: a coordinate weighted by a 0-1 intensity."""

    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float
    intensity: float = Field(ge=0.0, le=1.0)


class AccessPoint(BaseModel):
    """A place where a cleanup crew or ship can reach the shore."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    lat: float
    lng: float
    type: AccessPointType

    @property
    def location(self) -> LatLng:
        return LatLng(lat=self.lat, lng=self.lng)


class CorrectedTons(BaseModel):
    """Visible estimate scaled up to include the buried share."""

    visible_tons: float
    buried_tons: float
    corrected_total_tons: float


class ShorelineSegment(BaseModel):
    """One of N equal arc-length pieces of a shoreline polyline."""

    index: int
    start: LatLng
    end: LatLng
    midpoint: LatLng
    length_m: float


class SegmentMetrics(ShorelineSegment):
    """A segment with its allocated tonnage and derived cleanup metrics."""

    area_m2: float
    plastic_tons: float
    weight_kg_per_m2: float
    person_hours: int
    category: DensityCategory | None = None


class BandPolygon(BaseModel):
    """A quad straddling a segment: start-left, end-left, end-right, start-right."""

    index: int
    category: DensityCategory | None
    coords: tuple[LatLng, LatLng, LatLng, LatLng]
    plastic_tons: float
    weight_kg_per_m2: float
    person_hours: int


class AnalysisResult(BaseModel):
    corrected: CorrectedTons
    segments: list[SegmentMetrics]


class CleanupPlan(BaseModel):
    """Complete result of planning a shoreline cleanup."""

    corrected: CorrectedTons
    segments: list[SegmentMetrics]
    bands: list[BandPolygon]
    paths: list[list[LatLng]]
    best_access_point: AccessPoint | None = None
    total_length_m: float
    total_person_hours: int


class ShorelineMetadata(BaseModel):
    """Metadata about a parsed shoreline source file."""

    source_type: str
    crs_epsg: int | None = None
    crs_name: str | None = None
    num_points: int
    fields: list[str] = Field(default_factory=list)


class AnalysisRequest(BaseModel):
    """Request body for the ``/analyze`` endpoint."""

    shoreline: list[LatLng]
    heatmap_points: list[HeatmapPoint] = Field(default_factory=list)
    visible_tons: float
    segment_count: int = 10
    band_width_m: float = Field(default=60.0, ge=0.0)
    access_points: list[AccessPoint] = Field(default_factory=list)
