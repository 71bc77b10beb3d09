import logging
from decimal import Decimal
from typing import Iterable, Optional, Union

from settlewise.config import Settings, settings
from settlewise.portfolio.schemas import (
    ClaimComponent,
    CostItem,
    cost_breakdown,
    expected_value,
    total_claim,
)
from settlewise.shared.types import (
    HUNDRED,
    ONE,
    ZERO,
    clamp_percentage,
    require_non_negative,
    to_cents,
    to_decimal,
)
from settlewise.valuation.schemas import ValuationScenario, ValuationSnapshot

logger = logging.getLogger(__name__)

Number = Union[Decimal, int, float, str]


class ValuationEngine:
    """Turns claims, costs and scenario parameters into a ValuationSnapshot.

    The engine holds nothing but its policy; every call is independent and
    returns a fresh snapshot for the inputs it was given.
    """

    def __init__(self, policy: Optional[Settings] = None):
        self.policy = policy or settings

    def time_value_factor(self, months_to_trial: Decimal, annual_discount_rate_percent: Decimal) -> Decimal:
        """Compound annual discount over the months until trial."""
        if months_to_trial == 0 or annual_discount_rate_percent == 0:
            return ONE
        growth = (ONE + annual_discount_rate_percent / HUNDRED) ** (months_to_trial / 12)
        return ONE / growth

    def compute(
        self,
        claims: Iterable[ClaimComponent],
        costs: Iterable[CostItem],
        win_probability: Number,
        months_to_trial: Number,
        annual_discount_rate_percent: Number,
    ) -> ValuationSnapshot:
        win_probability = clamp_percentage(to_decimal(win_probability, "win_probability"), "win_probability")
        months_to_trial = require_non_negative(months_to_trial, "months_to_trial")
        rate = require_non_negative(annual_discount_rate_percent, "annual_discount_rate_percent")

        # Accepts a ClaimPortfolio / CostLedger or any iterable of records
        claims = list(claims)
        costs = list(costs)

        claim_total = total_claim(claims)
        weighted = expected_value(claims)
        breakdown = cost_breakdown(costs)

        risk_adjusted = weighted * win_probability / HUNDRED
        factor = self.time_value_factor(months_to_trial, rate)
        present_value = risk_adjusted * factor

        break_even = breakdown.incurred + breakdown.future * self.policy.FUTURE_COST_RETAINED_FRACTION
        net_expected = risk_adjusted - breakdown.total
        worst_case = ZERO - (
            breakdown.total + breakdown.recoverable * self.policy.ADVERSE_COSTS_AWARD_FRACTION
        )
        best_case = claim_total + breakdown.recoverable - breakdown.non_recoverable

        snapshot = ValuationSnapshot(
            total_claim=to_cents(claim_total),
            expected_value=to_cents(weighted),
            total_costs=to_cents(breakdown.total),
            incurred_costs=to_cents(breakdown.incurred),
            future_costs=to_cents(breakdown.future),
            recoverable_costs=to_cents(breakdown.recoverable),
            non_recoverable_costs=to_cents(breakdown.non_recoverable),
            risk_adjusted_value=to_cents(risk_adjusted),
            time_value_factor=factor,
            present_value=to_cents(present_value),
            break_even=to_cents(break_even),
            net_expected_value=to_cents(net_expected),
            worst_case=to_cents(worst_case),
            best_case=to_cents(best_case),
        )
        logger.debug(
            f"Valued {len(claims)} claims / {len(costs)} costs: "
            f"expected={snapshot.expected_value} risk_adjusted={snapshot.risk_adjusted_value} "
            f"present={snapshot.present_value} break_even={snapshot.break_even}"
        )
        return snapshot

    def compute_scenario(
        self,
        claims: Iterable[ClaimComponent],
        costs: Iterable[CostItem],
        scenario: ValuationScenario,
    ) -> ValuationSnapshot:
        return self.compute(
            claims,
            costs,
            scenario.win_probability,
            scenario.months_to_trial,
            scenario.annual_discount_rate_percent,
        )


def compute(
    claims: Iterable[ClaimComponent],
    costs: Iterable[CostItem],
    win_probability: Number,
    months_to_trial: Number,
    annual_discount_rate_percent: Number,
) -> ValuationSnapshot:
    """Value a case with the process-wide policy."""
    return ValuationEngine().compute(
        claims, costs, win_probability, months_to_trial, annual_discount_rate_percent
    )
