"""Domain schemas for rate offers and tranche split evaluations."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from tranche_optimizer.configuration.rate_grid import MONTHS_PER_YEAR


DurationYears = Annotated[int, Field(gt=0)]
RatePct = Annotated[float, Field(gt=0.0, allow_inf_nan=False)]


class PairStatus(str, Enum):
    """Outcome of evaluating a single tranche pair."""

    VALID = "valid"
    DEGENERATE = "degenerate"


class LoanTerms(BaseModel):
    """Monthly terms of a single amortizing tranche."""

    model_config = ConfigDict(frozen=True)

    monthly_rate: float = Field(..., gt=0.0)
    duration_months: int = Field(..., gt=0)


class RateOffer(BaseModel):
    """A (duration, annual rate) offer from the rate table."""

    model_config = ConfigDict(frozen=True)

    duration_years: DurationYears
    annual_rate_pct: RatePct = Field(
        ..., description="Annual nominal rate in percent, e.g. 3.5 for 3.5%."
    )

    def to_loan_terms(self) -> LoanTerms:
        return LoanTerms(
            monthly_rate=self.annual_rate_pct / 100 / MONTHS_PER_YEAR,
            duration_months=self.duration_years * MONTHS_PER_YEAR,
        )

    def label(self) -> str:
        return f"{self.duration_years}y @ {self.annual_rate_pct:g}%"


class RateTable(BaseModel):
    """Ordered, immutable set of offers with unique durations."""

    model_config = ConfigDict(frozen=True)

    offers: Tuple[RateOffer, ...]

    @field_validator("offers")
    @classmethod
    def _sort_by_duration(cls, offers: Tuple[RateOffer, ...]) -> Tuple[RateOffer, ...]:
        ordered = tuple(sorted(offers, key=lambda offer: offer.duration_years))
        durations = [offer.duration_years for offer in ordered]
        if len(set(durations)) != len(durations):
            raise ValueError("rate table durations must be unique")
        if len(ordered) < 2:
            raise ValueError("rate table needs at least two offers")
        return ordered

    def __len__(self) -> int:
        return len(self.offers)

    def to_mapping(self) -> Dict[int, float]:
        return {offer.duration_years: offer.annual_rate_pct for offer in self.offers}


class TranchePair(BaseModel):
    """Two offers split into a short-maturity and a long-maturity tranche."""

    model_config = ConfigDict(frozen=True)

    short: RateOffer
    long: RateOffer

    @model_validator(mode="after")
    def _validate_ordering(self) -> "TranchePair":
        if self.short.duration_years >= self.long.duration_years:
            raise ValueError(
                "short tranche duration must be strictly below the long tranche duration"
            )
        return self

    @classmethod
    def from_offers(cls, first: RateOffer, second: RateOffer) -> "TranchePair":
        if first.duration_years <= second.duration_years:
            return cls(short=first, long=second)
        return cls(short=second, long=first)


class PairIssue(BaseModel):
    """Explains why a pair was left out of the minimum comparison."""

    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)


class PairEvaluation(BaseModel):
    """Blended payment figures for one tranche pair."""

    model_config = ConfigDict(frozen=True)

    pair: TranchePair
    split_ratio: float
    short_principal: float
    long_principal: float
    short_monthly_payment: float
    blended_monthly_payment: float
    short_total_interest: float
    long_total_interest: float
    status: PairStatus = PairStatus.VALID
    issue: Optional[PairIssue] = None

    @property
    def is_valid(self) -> bool:
        return self.status == PairStatus.VALID

    @property
    def long_ratio(self) -> float:
        return 1 - self.split_ratio


class SearchOutcome(BaseModel):
    """All pair evaluations of a search and the index of the cheapest valid one."""

    model_config = ConfigDict(frozen=True)

    evaluation_principal: float
    evaluations: Tuple[PairEvaluation, ...] = ()
    best_index: Optional[int] = None

    @model_validator(mode="after")
    def _validate_best_index(self) -> "SearchOutcome":
        if self.best_index is None:
            return self
        if not 0 <= self.best_index < len(self.evaluations):
            raise ValueError("best_index is out of range")
        if not self.evaluations[self.best_index].is_valid:
            raise ValueError("best_index must point at a valid evaluation")
        return self

    @property
    def has_valid_pairing(self) -> bool:
        return self.best_index is not None

    @property
    def best(self) -> Optional[PairEvaluation]:
        if self.best_index is None:
            return None
        return self.evaluations[self.best_index]

    @property
    def minimum_payment(self) -> Optional[float]:
        best = self.best
        return best.blended_monthly_payment if best is not None else None

    def valid_evaluations(self) -> List[PairEvaluation]:
        return [evaluation for evaluation in self.evaluations if evaluation.is_valid]
