"""FastAPI server for shoreline cleanup analysis."""

from __future__ import annotations

import csv
import io
import logging
import tempfile
import zipfile
from pathlib import Path

import shapefile
from fastapi import FastAPI, File, Form, HTTPException, Query, UploadFile
from fastapi.responses import StreamingResponse

from .config import DEFAULT_BAND_WIDTH_METERS, DEFAULT_SEGMENT_COUNT, AnalysisSettings
from .export import CSV_FIELDS, segment_row
from .geojson_reader import read_heatmap_geojson
from .kml_reader import read_shoreline_kml
from .models import AnalysisRequest, CleanupPlan, LatLng, SegmentMetrics
from .pipeline import plan_cleanup
from .reader import read_shoreline_shapefile

logger = logging.getLogger(__name__)

app = FastAPI(title="Shoreline Analytics", version="0.1.0")

settings = AnalysisSettings.from_env()

COMPANION_EXTS = {".shp", ".shx", ".dbf", ".prj"}


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/analyze", response_model=CleanupPlan)
async def analyze(
    request: AnalysisRequest,
    format: str = Query("json", pattern="^(csv|json)$"),
):
    """Plan a cleanup for a shoreline given as JSON coordinates."""
    plan = plan_cleanup(
        request.shoreline,
        request.heatmap_points,
        request.visible_tons,
        access_points=request.access_points,
        segment_count=request.segment_count,
        band_width_m=request.band_width_m,
        settings=settings,
    )
    if format == "csv":
        return _segments_to_csv_response(plan.segments)
    return plan


@app.post("/analyze/upload")
async def analyze_upload(
    files: list[UploadFile],
    visible_tons: float = Form(...),
    segment_count: int = Form(DEFAULT_SEGMENT_COUNT),
    band_width_m: float = Form(DEFAULT_BAND_WIDTH_METERS),
    heatmap: UploadFile | None = File(None),
    format: str = Query("csv", pattern="^(csv|json)$"),
):
    """Plan a cleanup for an uploaded shoreline file.

    Accepts:
    - A single .kmz or .kml file
    - A single .zip containing shapefile components
    - Multiple files (.shp, .shx, .dbf, and optionally .prj)

    An optional ``heatmap`` GeoJSON file supplies pollution samples.
    """
    filename = (files[0].filename or "").lower() if len(files) == 1 else ""

    try:
        if filename.endswith((".kmz", ".kml")):
            shoreline = await _handle_kmz(files[0])
        elif filename.endswith(".zip"):
            shoreline = await _handle_zip(files[0])
        else:
            shoreline = await _handle_multi_file(files)
        heatmap_points = read_heatmap_geojson(await heatmap.read()) if heatmap is not None else []
    except (ValueError, zipfile.BadZipFile, shapefile.ShapefileException) as exc:
        logger.warning("Rejected shoreline upload %r: %s", filename or "<multi-file>", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    plan = plan_cleanup(
        shoreline,
        heatmap_points,
        visible_tons,
        segment_count=segment_count,
        band_width_m=band_width_m,
        settings=settings,
    )
    if format == "json":
        return plan

    return _segments_to_csv_response(plan.segments)


async def _handle_zip(upload: UploadFile) -> list[LatLng]:
    """Extract a shapefile from a zip archive and read its shoreline."""
    content = await upload.read()
    with tempfile.TemporaryDirectory() as extract_dir:
        with zipfile.ZipFile(io.BytesIO(content)) as zf:
            zf.extractall(extract_dir)

        shp_files = list(Path(extract_dir).rglob("*.shp"))
        if not shp_files:
            raise HTTPException(status_code=400, detail="No .shp file found in zip archive")

        points, _ = read_shoreline_shapefile(shp_files[0])
        return points


async def _handle_kmz(upload: UploadFile) -> list[LatLng]:
    content = await upload.read()
    points, _ = read_shoreline_kml(content)
    return points


async def _handle_multi_file(files: list[UploadFile]) -> list[LatLng]:
    """Read a shoreline from separately uploaded shapefile components."""
    file_map: dict[str, bytes] = {}
    for f in files:
        ext = Path(f.filename or "").suffix.lower()
        if ext in COMPANION_EXTS:
            file_map[ext] = await f.read()

    if ".shp" not in file_map:
        raise HTTPException(status_code=400, detail="Missing required .shp file")

    prj_wkt = None
    if ".prj" in file_map:
        prj_wkt = file_map[".prj"].decode("utf-8", errors="replace")

    points, _ = read_shoreline_shapefile(
        shp_file=io.BytesIO(file_map[".shp"]),
        shx_file=io.BytesIO(file_map[".shx"]) if ".shx" in file_map else None,
        dbf_file=io.BytesIO(file_map[".dbf"]) if ".dbf" in file_map else None,
        prj_wkt=prj_wkt,
    )
    return points


def _segments_to_csv_response(segments: list[SegmentMetrics]) -> StreamingResponse:
    """Convert segment metrics to a streaming CSV response."""

    def generate():
        buf = io.StringIO()
        writer = csv.DictWriter(buf, fieldnames=CSV_FIELDS)
        writer.writeheader()
        yield buf.getvalue()
        buf.seek(0)
        buf.truncate(0)

        for seg in segments:
            writer.writerow(segment_row(seg))
            yield buf.getvalue()
            buf.seek(0)
            buf.truncate(0)

    return StreamingResponse(
        generate(),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=shoreline_segments.csv"},
    )
