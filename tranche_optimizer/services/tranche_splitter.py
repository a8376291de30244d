"""Share of the total principal to place on the short tranche."""

from __future__ import annotations

import math

from tranche_optimizer.services.annuity import monthly_payment

_NORMALIZED_PRINCIPAL = 1.0


def split_ratio(
    short_rate: float,
    short_duration: float,
    long_rate: float,
    long_duration: float,
) -> float:
    """Return the fraction of principal allocated to the short tranche.

    The total principal is normalized to 1. The long tranche's standalone
    payment minus one period of interest on the whole principal gives the
    payment the short tranche should carry; discounting that payment at the
    short tranche's terms yields its principal, which is the ratio itself.

    Interest is charged on the full normalized principal rather than on the
    long tranche's share. The result is not clamped; see
    :func:`is_degenerate_ratio`.
    """

    if short_rate <= 0:
        raise ValueError(f"short_rate must be > 0, got {short_rate}")

    m2 = monthly_payment(_NORMALIZED_PRINCIPAL, long_duration, long_rate)
    interest2 = _NORMALIZED_PRINCIPAL * long_rate
    m1 = m2 - interest2

    amount1 = m1 * (1 - (1 + short_rate) ** -short_duration) / short_rate

    return amount1 / _NORMALIZED_PRINCIPAL


def is_degenerate_ratio(ratio: float) -> bool:
    """True when the ratio is not a finite value strictly between 0 and 1."""
    return not math.isfinite(ratio) or not 0.0 < ratio < 1.0


__all__ = ["split_ratio", "is_degenerate_ratio"]
