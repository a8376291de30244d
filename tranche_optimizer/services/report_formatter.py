"""Helpers for presenting search outcomes."""

from __future__ import annotations

from typing import Any, Dict, List

from tranche_optimizer.domain.schemas import PairEvaluation, SearchOutcome


def _format_currency(value: float) -> str:
    return f"{value:,.2f}"


def _format_pct(value: float) -> str:
    return f"{value:.1f}%"


def _offer_snapshot(evaluation: PairEvaluation) -> Dict[str, Any]:
    pair = evaluation.pair
    return {
        "short_duration_years": pair.short.duration_years,
        "short_rate_pct": pair.short.annual_rate_pct,
        "long_duration_years": pair.long.duration_years,
        "long_rate_pct": pair.long.annual_rate_pct,
    }


def format_evaluations(outcome: SearchOutcome) -> List[Dict[str, Any]]:
    """Return a presentation-friendly summary for each evaluated pair."""

    formatted: List[Dict[str, Any]] = []
    for index, evaluation in enumerate(outcome.evaluations):
        formatted.append(
            {
                "index": index,
                "is_best": index == outcome.best_index,
                "status": evaluation.status.value,
                **_offer_snapshot(evaluation),
                "split_ratio": evaluation.split_ratio,
                "short_share_display": _format_pct(evaluation.split_ratio * 100),
                "short_principal": evaluation.short_principal,
                "long_principal": evaluation.long_principal,
                "short_monthly_payment": evaluation.short_monthly_payment,
                "blended_monthly_payment": evaluation.blended_monthly_payment,
                "blended_monthly_payment_display": _format_currency(
                    evaluation.blended_monthly_payment
                ),
                "short_total_interest": evaluation.short_total_interest,
                "long_total_interest": evaluation.long_total_interest,
                "issue": evaluation.issue.code if evaluation.issue else None,
            }
        )
    return formatted


def _render_line(evaluation: PairEvaluation) -> str:
    pair = evaluation.pair
    line = (
        f"{pair.short.duration_years}: {pair.short.annual_rate_pct:g} | "
        f"{pair.long.duration_years}: {pair.long.annual_rate_pct:g} | "
        f"[ratio - {evaluation.split_ratio:.6f}] = "
        f"{_format_currency(evaluation.blended_monthly_payment)}"
    )
    if evaluation.issue is not None:
        line += f" (skipped: {evaluation.issue.code})"
    return line


def render_report(outcome: SearchOutcome) -> str:
    """Render the per-pair results followed by the minimum, as plain text."""

    lines = [
        f"Blended payment for each pair group "
        f"(principal {_format_currency(outcome.evaluation_principal)}):"
    ]
    lines.extend(f"  {_render_line(evaluation)}" for evaluation in outcome.evaluations)

    best = outcome.best
    if best is None:
        lines.append("No valid pairing found.")
    else:
        lines.append(
            f"Minimal blended payment: {_format_currency(best.blended_monthly_payment)} "
            f"({best.pair.short.label()} + {best.pair.long.label()}, "
            f"short share {_format_pct(best.split_ratio * 100)})"
        )
    return "\n".join(lines)


__all__ = ["format_evaluations", "render_report"]
