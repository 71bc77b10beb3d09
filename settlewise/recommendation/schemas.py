from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from settlewise.shared.types import Money, Percentage


class Recommendation(str, Enum):
    ACCEPT = "accept"
    COUNTER = "counter"
    REJECT = "reject"
    # Kept for compatibility with stored results; no rule produces it.
    LITIGATE = "litigate"


class RecommendedRange(BaseModel):
    min: Money
    max: Money

    model_config = ConfigDict(frozen=True)


class RecommendationResult(BaseModel):
    recommendation: Recommendation
    reasoning: List[str] = Field(..., min_length=1, description="Justification lines in evaluation order")
    recommended_range: RecommendedRange
    suggested_counter: Optional[Money] = Field(None, description="Counter-offer figure when countering")
    risk_adjusted_value: Money
    break_even_point: Money
    time_value_adjustment: Money

    model_config = ConfigDict(frozen=True)


class ScenarioComparison(BaseModel):
    """Settling now versus running the case to trial, for display next to a recommendation."""

    settle_now_net: Money
    future_costs_avoided: Money
    trial_net: Money
    settlement_advantage: Money
    loss_risk_percent: Percentage
    favours_settlement: bool

    model_config = ConfigDict(frozen=True)
