"""Plan a shoreline cleanup from a KML/KMZ or shapefile: segment CSV and density profile plot.

Usage:
    python analyze_shoreline.py coast.kml --visible-tons 320 --heatmap samples.geojson
"""

import argparse
import logging
import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from shoreline_analytics import (  # noqa: E402
    AnalysisSettings,
    CleanupPlan,
    plan_cleanup,
    read_heatmap_geojson,
    read_shoreline_kml,
    read_shoreline_shapefile,
)
from shoreline_analytics.config import DEFAULT_BAND_WIDTH_METERS, DEFAULT_SEGMENT_COUNT  # noqa: E402
from shoreline_analytics.export import write_segments_csv  # noqa: E402

logger = logging.getLogger("analyze_shoreline")

CATEGORY_COLORS = {"green": "#10b981", "yellow": "#f97316", "red": "#ef4444"}


def load_shoreline(path: Path):
    if path.suffix.lower() in (".kml", ".kmz"):
        return read_shoreline_kml(str(path))
    return read_shoreline_shapefile(path)


def plot_profile(plan: CleanupPlan, path: Path, title: str = "Shoreline Density Profile") -> None:
    """Bar chart of kg/m² per segment along the shoreline, coloured by category."""
    seg_len_km = [s.length_m / 1000 for s in plan.segments]
    starts_km = [sum(seg_len_km[:i]) for i in range(len(seg_len_km))]
    densities = [s.weight_kg_per_m2 for s in plan.segments]
    colors = [CATEGORY_COLORS.get(s.category.value if s.category else "", "grey") for s in plan.segments]

    fig, ax = plt.subplots(figsize=(14, 5))
    ax.bar(starts_km, densities, width=seg_len_km, align="edge", color=colors, edgecolor="black", linewidth=0.3)
    ax.set_xlabel("Distance along shoreline (km)")
    ax.set_ylabel("Density (kg/m²)")
    ax.set_title(title)
    ax.grid(True, axis="y", alpha=0.3)
    fig.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)
    logger.info("Plot saved: %s", path)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("shoreline", type=Path, help="Shoreline .kml/.kmz or .shp file")
    parser.add_argument("--visible-tons", type=float, required=True, help="Visible waste estimate in tons")
    parser.add_argument("--heatmap", type=Path, help="GeoJSON Point features with an 'intensity' property")
    parser.add_argument("--segments", type=int, default=DEFAULT_SEGMENT_COUNT)
    parser.add_argument("--band-width", type=float, default=DEFAULT_BAND_WIDTH_METERS)
    parser.add_argument("--output-csv", type=Path, default=Path("shoreline_segments.csv"))
    parser.add_argument("--output-plot", type=Path, default=Path("shoreline_profile.png"))
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        shoreline, metadata = load_shoreline(args.shoreline)
        heatmap = read_heatmap_geojson(args.heatmap) if args.heatmap else []
    except (OSError, ValueError) as exc:
        logger.error("Could not read input: %s", exc)
        return 1

    logger.info("Shoreline source: %s, %d vertices", metadata.source_type, metadata.num_points)
    plan = plan_cleanup(
        shoreline,
        heatmap,
        args.visible_tons,
        segment_count=args.segments,
        band_width_m=args.band_width,
        settings=AnalysisSettings.from_env(),
    )

    c = plan.corrected
    print(f"Visible:         {c.visible_tons:,.1f} t")
    print(f"Buried:          {c.buried_tons:,.1f} t")
    print(f"Corrected total: {c.corrected_total_tons:,.1f} t")
    print(f"Shoreline:       {plan.total_length_m / 1000:.2f} km in {len(plan.segments)} segments")
    print(f"Person-hours:    {plan.total_person_hours:,}")
    print()

    write_segments_csv(plan.segments, args.output_csv)
    logger.info("CSV exported: %s", args.output_csv)
    plot_profile(plan, args.output_plot, title=f"Shoreline Density Profile: {args.shoreline.name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
