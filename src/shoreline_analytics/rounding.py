"""Fixed-decimal rounding shared by the display-facing metrics."""

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, places: int) -> float:
    """Round to ``places`` decimals, ties away from zero.

    Works on the exact binary value of ``value``, so ``round_half_up(2.675, 2)``
    gives 2.67 (2.675 is stored as 2.67499999...) while ``round_half_up(0.125, 2)``
    gives 0.13.
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
