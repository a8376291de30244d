"""Brute-force search for the cheapest two-tranche split."""

from __future__ import annotations

import logging
import math
from itertools import combinations
from typing import Iterator, List, Optional

from tranche_optimizer.config import settings
from tranche_optimizer.domain.schemas import (
    PairEvaluation,
    PairIssue,
    PairStatus,
    RateTable,
    SearchOutcome,
    TranchePair,
)
from tranche_optimizer.exceptions import ConfigurationError, DegenerateRatioError
from tranche_optimizer.services.annuity import monthly_payment, total_interest
from tranche_optimizer.services.credit_line import blended_monthly_payment
from tranche_optimizer.services.rate_table import RateTableSource, build_rate_table
from tranche_optimizer.services.tranche_splitter import is_degenerate_ratio, split_ratio

logger = logging.getLogger(__name__)


def _resolve_principal(principal: Optional[float]) -> float:
    value = settings.evaluation_principal if principal is None else principal
    if not math.isfinite(value) or value <= 0:
        raise ConfigurationError(
            "Evaluation principal must be a positive amount",
            details={"evaluation_principal": value},
        )
    return float(value)


def iter_tranche_pairs(table: RateTable) -> Iterator[TranchePair]:
    """Yield every unordered pair of offers, shortest durations first."""
    for first, second in combinations(table.offers, 2):
        yield TranchePair.from_offers(first, second)


def _detect_issue(ratio: float, blended: float) -> Optional[PairIssue]:
    if is_degenerate_ratio(ratio):
        return PairIssue(
            code="degenerate_ratio",
            message="Split ratio falls outside (0, 1); the pairing is not coherent.",
            details={"split_ratio": ratio},
        )
    if not math.isfinite(blended):
        return PairIssue(
            code="non_finite_payment",
            message="Blended monthly payment is not a finite amount.",
            details={"blended_monthly_payment": blended},
        )
    return None


def evaluate_pair(
    pair: TranchePair, principal: float, *, strict: bool = False
) -> PairEvaluation:
    """Split ``principal`` across the pair and compute the blended payment.

    With ``strict`` a degenerate pairing raises :class:`DegenerateRatioError`
    instead of being returned with a ``degenerate`` status.
    """

    short_terms = pair.short.to_loan_terms()
    long_terms = pair.long.to_loan_terms()
    r1, d1 = short_terms.monthly_rate, short_terms.duration_months
    r2, d2 = long_terms.monthly_rate, long_terms.duration_months

    ratio = short_principal = long_principal = math.nan
    m1 = blended = short_interest = long_interest = math.nan
    issue: Optional[PairIssue] = None

    try:
        ratio = split_ratio(r1, d1, r2, d2)

        short_principal = principal * ratio
        long_principal = principal - short_principal

        m1 = monthly_payment(short_principal, d1, r1)
        blended = blended_monthly_payment(m1, d1, long_principal, r2, d2)

        short_interest = total_interest(short_principal, d1, r1)
        long_interest = total_interest(long_principal, d2, r2)
    except (ZeroDivisionError, OverflowError) as exc:
        # Rates too small to move 1 + r, or too large to compound, in float.
        issue = PairIssue(
            code="non_finite_payment",
            message="Annuity figures cannot be computed in floating point.",
            details={"error": str(exc), "split_ratio": ratio},
        )
    else:
        issue = _detect_issue(ratio, blended)

    if issue is not None and strict:
        raise DegenerateRatioError(
            f"Pair {pair.short.label()} / {pair.long.label()}: {issue.message}",
            details=issue.details,
        )

    return PairEvaluation(
        pair=pair,
        split_ratio=ratio,
        short_principal=short_principal,
        long_principal=long_principal,
        short_monthly_payment=m1,
        blended_monthly_payment=blended,
        short_total_interest=short_interest,
        long_total_interest=long_interest,
        status=PairStatus.DEGENERATE if issue else PairStatus.VALID,
        issue=issue,
    )


def search_best_option(
    source: RateTableSource,
    principal: Optional[float] = None,
) -> SearchOutcome:
    """Evaluate every pair of offers and pick the lowest blended payment.

    The table is validated up front. Degenerate pairs are kept in the result
    but never selected. On equal payments the first pair scanned wins.
    """

    table = build_rate_table(source)
    amount = _resolve_principal(principal)

    evaluations: List[PairEvaluation] = []
    best_index: Optional[int] = None
    best_payment = math.inf

    for index, pair in enumerate(iter_tranche_pairs(table)):
        evaluation = evaluate_pair(pair, amount)
        evaluations.append(evaluation)

        if not evaluation.is_valid:
            logger.warning(
                "skipping degenerate tranche pair",
                extra={
                    "short_years": pair.short.duration_years,
                    "long_years": pair.long.duration_years,
                    "issue_code": evaluation.issue.code if evaluation.issue else None,
                },
            )
            continue

        logger.debug(
            "%s | %s | ratio=%.6f -> %.2f",
            pair.short.label(),
            pair.long.label(),
            evaluation.split_ratio,
            evaluation.blended_monthly_payment,
        )

        if evaluation.blended_monthly_payment < best_payment:
            best_payment = evaluation.blended_monthly_payment
            best_index = index

    if best_index is None:
        logger.warning(
            "No valid tranche pairing among %d evaluated pairs", len(evaluations)
        )
    else:
        logger.info(
            "Evaluated %d tranche pairs, minimal blended payment %.2f",
            len(evaluations),
            best_payment,
        )

    return SearchOutcome(
        evaluation_principal=amount,
        evaluations=tuple(evaluations),
        best_index=best_index,
    )


__all__ = ["evaluate_pair", "iter_tranche_pairs", "search_best_option"]
