"""Visible-to-total tonnage correction."""

from .config import VISIBLE_FRACTION
from .models import CorrectedTons
from .rounding import round_half_up


def correct_tons(visible_tons: float, visible_fraction: float = VISIBLE_FRACTION) -> CorrectedTons:
    """Scale a visible waste estimate up to the corrected total including buried waste.

    All three figures are rounded to one decimal. The visible share is
    recomputed from the rounded total so the breakdown stays consistent.
    """
    if visible_tons <= 0:
        return CorrectedTons(visible_tons=0.0, buried_tons=0.0, corrected_total_tons=0.0)

    total = round_half_up(visible_tons / visible_fraction, 1)
    return CorrectedTons(
        visible_tons=round_half_up(total * visible_fraction, 1),
        buried_tons=round_half_up(total * (1 - visible_fraction), 1),
        corrected_total_tons=total,
    )
