"""Closed-form annuity formulas for a single amortizing loan.

Rates are periodic (monthly) decimals, e.g. ``0.0025`` for 3% a year, and
durations are counted in months.
"""

from __future__ import annotations


def _check_terms(duration_months: float, monthly_rate: float) -> None:
    if monthly_rate <= 0:
        raise ValueError(f"monthly_rate must be > 0, got {monthly_rate}")
    if duration_months <= 0:
        raise ValueError(f"duration_months must be > 0, got {duration_months}")


def annuity_factor(duration_months: float, monthly_rate: float) -> float:
    """Payment per unit of principal that fully amortizes the loan."""
    _check_terms(duration_months, monthly_rate)
    return monthly_rate / (1 - (1 + monthly_rate) ** -duration_months)


def monthly_payment(
    principal: float, duration_months: float, monthly_rate: float
) -> float:
    return principal * annuity_factor(duration_months, monthly_rate)


def total_interest(
    principal: float, duration_months: float, monthly_rate: float
) -> float:
    """Interest paid over the life of the loan on top of the principal."""
    payment = monthly_payment(principal, duration_months, monthly_rate)
    return payment * duration_months - principal


__all__ = ["annuity_factor", "monthly_payment", "total_interest"]
