"""Validation of raw rate tables into ordered :class:`RateTable` values."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Iterable, List, Mapping, Tuple, Union

from pydantic import ValidationError

from tranche_optimizer.domain.schemas import RateOffer, RateTable
from tranche_optimizer.exceptions import InsufficientOffersError, InvalidOfferError

logger = logging.getLogger(__name__)

RateTableSource = Union[
    RateTable,
    Mapping[Any, Any],
    Iterable[Union[RateOffer, Tuple[Any, Any]]],
]


def _coerce_offer(duration: Any, rate: Any) -> RateOffer:
    try:
        offer = RateOffer(duration_years=duration, annual_rate_pct=rate)
        # Monthly rate must stay positive once divided down to a period.
        offer.to_loan_terms()
    except ValidationError as exc:
        raise InvalidOfferError(
            f"Invalid rate offer: duration={duration!r}, rate={rate!r}",
            details={
                "duration_years": duration,
                "annual_rate_pct": rate,
                "errors": exc.errors(include_url=False),
            },
        ) from exc
    return offer


def _collect_offers(source: RateTableSource) -> List[RateOffer]:
    if isinstance(source, Mapping):
        return [_coerce_offer(duration, rate) for duration, rate in source.items()]

    offers: List[RateOffer] = []
    for item in source:
        if isinstance(item, RateOffer):
            offers.append(_coerce_offer(item.duration_years, item.annual_rate_pct))
        else:
            duration, rate = item
            offers.append(_coerce_offer(duration, rate))
    return offers


def build_rate_table(source: RateTableSource) -> RateTable:
    """Validate offers and return them ordered by ascending duration.

    Offers are checked one by one before the table size, so a table such as
    ``{5: 0}`` is reported as an invalid offer.
    """

    if isinstance(source, RateTable):
        return source

    offers = _collect_offers(source)

    duplicates = sorted(
        duration
        for duration, count in Counter(o.duration_years for o in offers).items()
        if count > 1
    )
    if duplicates:
        raise InvalidOfferError(
            "Rate table contains duplicate durations",
            details={"duplicate_durations": duplicates},
        )

    if len(offers) < 2:
        raise InsufficientOffersError(
            "Rate table needs at least two offers to form a tranche pair",
            details={"offer_count": len(offers)},
        )

    table = RateTable(offers=tuple(offers))
    logger.debug(
        "built rate table",
        extra={"offers": table.to_mapping()},
    )
    return table


__all__ = ["RateTableSource", "build_rate_table"]
