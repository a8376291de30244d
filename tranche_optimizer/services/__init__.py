from .annuity import annuity_factor, monthly_payment, total_interest
from .credit_line import blended_monthly_payment
from .option_search import evaluate_pair, iter_tranche_pairs, search_best_option
from .rate_table import build_rate_table
from .report_formatter import format_evaluations, render_report
from .tranche_splitter import is_degenerate_ratio, split_ratio

__all__ = [
    "annuity_factor",
    "monthly_payment",
    "total_interest",
    "blended_monthly_payment",
    "evaluate_pair",
    "iter_tranche_pairs",
    "search_best_option",
    "build_rate_table",
    "format_evaluations",
    "render_report",
    "is_degenerate_ratio",
    "split_ratio",
]
