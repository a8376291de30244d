import math

import pytest

from tranche_optimizer.services.annuity import annuity_factor, monthly_payment
from tranche_optimizer.services.tranche_splitter import is_degenerate_ratio, split_ratio

SHORT_RATE, SHORT_MONTHS = 2.9 / 100 / 12, 120
LONG_RATE, LONG_MONTHS = 3.2 / 100 / 12, 144


def test_split_ratio_follows_normalized_derivation():
    ratio = split_ratio(SHORT_RATE, SHORT_MONTHS, LONG_RATE, LONG_MONTHS)

    expected = (annuity_factor(LONG_MONTHS, LONG_RATE) - LONG_RATE) / annuity_factor(
        SHORT_MONTHS, SHORT_RATE
    )
    assert ratio == pytest.approx(expected, rel=1e-12)
    assert ratio == pytest.approx(0.5937, abs=1e-3)


def test_short_share_carries_long_payment_net_of_interest():
    ratio = split_ratio(SHORT_RATE, SHORT_MONTHS, LONG_RATE, LONG_MONTHS)

    short_payment = monthly_payment(ratio, SHORT_MONTHS, SHORT_RATE)

    assert short_payment == pytest.approx(
        monthly_payment(1, LONG_MONTHS, LONG_RATE) - LONG_RATE, rel=1e-12
    )


def test_split_ratio_is_deterministic():
    first = split_ratio(SHORT_RATE, SHORT_MONTHS, LONG_RATE, LONG_MONTHS)
    second = split_ratio(SHORT_RATE, SHORT_MONTHS, LONG_RATE, LONG_MONTHS)

    assert first == second


def test_split_ratio_stays_below_duration_ratio():
    ratio = split_ratio(0.0025, 180, 0.0035, 300)

    assert 0 < ratio < 180 / 300


def test_split_ratio_rejects_zero_short_rate():
    with pytest.raises(ValueError):
        split_ratio(0.0, SHORT_MONTHS, LONG_RATE, LONG_MONTHS)


@pytest.mark.parametrize(
    "ratio, expected",
    [
        (0.5, False),
        (0.0001, False),
        (0.0, True),
        (1.0, True),
        (1.2, True),
        (-0.3, True),
        (math.nan, True),
        (math.inf, True),
    ],
)
def test_is_degenerate_ratio(ratio, expected):
    assert is_degenerate_ratio(ratio) is expected
