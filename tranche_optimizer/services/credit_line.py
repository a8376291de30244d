"""Blended payment while both tranches are active."""

from __future__ import annotations

from tranche_optimizer.services.annuity import annuity_factor


def blended_monthly_payment(
    short_monthly_payment: float,
    short_duration: float,
    long_principal: float,
    long_rate: float,
    long_duration: float,
) -> float:
    """Fold the short tranche's payment into the long tranche's annuity.

    The short payment is turned back into a balance by discounting it at the
    long tranche's rate over the short duration, then re-amortized together
    with the long principal at the long tranche's rate and duration.
    """

    short_balance = short_monthly_payment / annuity_factor(short_duration, long_rate)
    return (long_principal + short_balance) * annuity_factor(long_duration, long_rate)


__all__ = ["blended_monthly_payment"]
