"""Reference rate grid used when no other table is configured."""

from __future__ import annotations

from typing import Mapping

# Annual nominal rates (percent) keyed by loan duration in years.
DEFAULT_RATE_GRID: Mapping[int, float] = {
    10: 2.9,
    12: 3.2,
    15: 3.5,
    20: 3.8,
    22: 3.8,
    25: 4.4,
}

# Illustrative total loan amount the pairs are evaluated against.
DEFAULT_EVALUATION_PRINCIPAL: float = 300_000.0

MONTHS_PER_YEAR: int = 12
