from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from settlewise.shared.types import Money, Percentage, Ratio, clamp_percentage


class ValuationScenario(BaseModel):
    """Risk and timing parameters for one valuation run."""

    win_probability: Percentage = Field(Decimal("50"), description="Overall chance of winning, 0-100")
    months_to_trial: Decimal = Field(Decimal("12"), ge=0)
    annual_discount_rate_percent: Decimal = Field(Decimal("5"), ge=0)

    model_config = ConfigDict(frozen=True)

    @field_validator("win_probability")
    @classmethod
    def _clamp_win_probability(cls, value: Decimal) -> Decimal:
        return clamp_percentage(value, "win_probability")


class ValuationSnapshot(BaseModel):
    """Derived figures for one set of inputs. Recomputed on every call, never stored as state."""

    total_claim: Money
    expected_value: Money
    total_costs: Money
    incurred_costs: Money
    future_costs: Money
    recoverable_costs: Money
    non_recoverable_costs: Money
    risk_adjusted_value: Money
    time_value_factor: Ratio
    present_value: Money
    break_even: Money
    net_expected_value: Money
    worst_case: Money
    best_case: Money

    model_config = ConfigDict(frozen=True)
