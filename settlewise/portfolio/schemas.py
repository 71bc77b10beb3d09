"""Claim and cost records supplied by the caller.

These are frozen value objects: the engines borrow them for a single call
and never mutate them. Editing a portfolio or ledger produces a new one.
"""

from decimal import Decimal
from enum import Enum
from typing import Iterable, Iterator, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from settlewise.shared.types import HUNDRED, ZERO, Money, Percentage, clamp_percentage


class CostCategory(str, Enum):
    LEGAL_FEES = "legal_fees"
    COURT_FEES = "court_fees"
    EXPERT = "expert"
    TRAVEL = "travel"
    OTHER = "other"


class ClaimComponent(BaseModel):
    id: str = Field(..., min_length=1, description="Unique within a portfolio")
    name: str = Field(..., description="Head of claim, e.g. 'Principal Amount'")
    amount: Money = Field(..., ge=0, description="Value of the head of claim")
    probability: Percentage = Field(Decimal("50"), description="Likelihood of success, 0-100")
    notes: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("probability")
    @classmethod
    def _clamp_probability(cls, value: Decimal) -> Decimal:
        return clamp_percentage(value, "claim probability")


class CostItem(BaseModel):
    id: str = Field(..., min_length=1, description="Unique within a ledger")
    category: CostCategory = CostCategory.LEGAL_FEES
    description: str
    amount: Money = Field(..., ge=0)
    incurred: bool = Field(False, description="Already spent, as opposed to projected")
    recoverable: bool = Field(True, description="Claimable from the losing side on success")

    model_config = ConfigDict(frozen=True)


class CostBreakdown(BaseModel):
    total: Money
    incurred: Money
    future: Money
    recoverable: Money
    non_recoverable: Money

    model_config = ConfigDict(frozen=True)


def total_claim(claims: Iterable[ClaimComponent]) -> Decimal:
    return sum((c.amount for c in claims), ZERO)


def expected_value(claims: Iterable[ClaimComponent]) -> Decimal:
    """Probability-weighted sum of the claim amounts, before any overall win probability."""
    return sum((c.amount * c.probability / HUNDRED for c in claims), ZERO)


def cost_breakdown(costs: Iterable[CostItem]) -> CostBreakdown:
    costs = list(costs)
    total = sum((c.amount for c in costs), ZERO)
    incurred = sum((c.amount for c in costs if c.incurred), ZERO)
    recoverable = sum((c.amount for c in costs if c.recoverable), ZERO)
    return CostBreakdown(
        total=total,
        incurred=incurred,
        future=total - incurred,
        recoverable=recoverable,
        non_recoverable=total - recoverable,
    )


def _ensure_unique(ids, kind: str) -> None:
    seen = set()
    for item_id in ids:
        if item_id in seen:
            raise ValueError(f"Duplicate {kind} id '{item_id}'")
        seen.add(item_id)


class ClaimPortfolio(BaseModel):
    claims: Tuple[ClaimComponent, ...] = ()

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_unique_ids(self) -> "ClaimPortfolio":
        _ensure_unique((c.id for c in self.claims), "claim")
        return self

    def __len__(self) -> int:
        return len(self.claims)

    def __iter__(self) -> Iterator[ClaimComponent]:
        return iter(self.claims)

    def get(self, claim_id: str) -> Optional[ClaimComponent]:
        return next((c for c in self.claims if c.id == claim_id), None)

    def add(self, claim: ClaimComponent) -> "ClaimPortfolio":
        return ClaimPortfolio(claims=self.claims + (claim,))

    def remove(self, claim_id: str) -> "ClaimPortfolio":
        if self.get(claim_id) is None:
            raise ValueError(f"Claim '{claim_id}' not found in portfolio")
        return ClaimPortfolio(claims=tuple(c for c in self.claims if c.id != claim_id))

    @property
    def total_claim(self) -> Decimal:
        return total_claim(self.claims)

    @property
    def expected_value(self) -> Decimal:
        return expected_value(self.claims)


class CostLedger(BaseModel):
    costs: Tuple[CostItem, ...] = ()

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_unique_ids(self) -> "CostLedger":
        _ensure_unique((c.id for c in self.costs), "cost")
        return self

    def __len__(self) -> int:
        return len(self.costs)

    def __iter__(self) -> Iterator[CostItem]:
        return iter(self.costs)

    def get(self, cost_id: str) -> Optional[CostItem]:
        return next((c for c in self.costs if c.id == cost_id), None)

    def add(self, cost: CostItem) -> "CostLedger":
        return CostLedger(costs=self.costs + (cost,))

    def remove(self, cost_id: str) -> "CostLedger":
        if self.get(cost_id) is None:
            raise ValueError(f"Cost '{cost_id}' not found in ledger")
        return CostLedger(costs=tuple(c for c in self.costs if c.id != cost_id))

    def breakdown(self) -> CostBreakdown:
        return cost_breakdown(self.costs)
