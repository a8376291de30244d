from .schemas import (
    LoanTerms,
    PairEvaluation,
    PairIssue,
    PairStatus,
    RateOffer,
    RateTable,
    SearchOutcome,
    TranchePair,
)

__all__ = [
    "LoanTerms",
    "PairEvaluation",
    "PairIssue",
    "PairStatus",
    "RateOffer",
    "RateTable",
    "SearchOutcome",
    "TranchePair",
]
