import logging
from decimal import Decimal
from typing import List, Optional, Tuple

from settlewise.config import Settings, settings
from settlewise.recommendation.schemas import (
    Recommendation,
    RecommendationResult,
    RecommendedRange,
    ScenarioComparison,
)
from settlewise.shared.formatting import format_currency, format_percent
from settlewise.shared.types import (
    HUNDRED,
    clamp_percentage,
    require_non_negative,
    round_whole,
    to_cents,
    to_decimal,
)
from settlewise.valuation.schemas import ValuationSnapshot

logger = logging.getLogger(__name__)


class RecommendationEngine:
    """Maps an offer and a valuation snapshot to accept / counter / reject.

    Rules are evaluated top-down and the first threshold the offer clears
    decides the base recommendation:

    1. offer >= risk-adjusted value x ACCEPT_RISK_ADJUSTED_RATIO  -> accept
    2. offer >= present value x ACCEPT_PRESENT_VALUE_RATIO        -> accept
    3. offer >= break-even x COUNTER_BREAK_EVEN_MULTIPLE          -> counter at the midpoint
    4. offer >= break-even                                        -> counter at a share of risk-adjusted value
    5. otherwise                                                  -> reject

    A zero offer clears no threshold, so it is always rejected at step 5 even
    when the snapshot is all zeros.

    Win probability then adjusts the outcome: a low one turns a reject into a
    counter, a strong one adds a note without changing the category.
    """

    def __init__(self, policy: Optional[Settings] = None):
        self.policy = policy or settings

    def _money(self, amount: Decimal) -> str:
        return format_currency(amount, self.policy.CURRENCY_SYMBOL)

    def _base_recommendation(
        self, snapshot: ValuationSnapshot, offer: Decimal, months_to_trial: Optional[Decimal]
    ) -> Tuple[Recommendation, List[str], Optional[Decimal]]:
        policy = self.policy
        risk_adjusted = snapshot.risk_adjusted_value
        break_even = snapshot.break_even

        def clears(threshold: Decimal) -> bool:
            return offer > 0 and offer >= threshold

        if clears(risk_adjusted * policy.ACCEPT_RISK_ADJUSTED_RATIO):
            if risk_adjusted > 0:
                ratio = round_whole(offer / risk_adjusted * HUNDRED)
                first = (
                    f"Offer of {self._money(offer)} is {ratio}% of risk-adjusted expected value"
                )
            else:
                first = (
                    f"Offer of {self._money(offer)} exceeds a risk-adjusted expected value "
                    f"of {self._money(risk_adjusted)}"
                )
            return Recommendation.ACCEPT, [
                first,
                "Settlement provides certainty vs. litigation risk",
                "Saves future legal costs and time",
            ], None

        if clears(snapshot.present_value * policy.ACCEPT_PRESENT_VALUE_RATIO):
            reasoning = [
                f"Offer exceeds {format_percent(policy.ACCEPT_PRESENT_VALUE_RATIO * HUNDRED)} "
                f"of present value ({self._money(snapshot.present_value)})",
                "Time value of money favors early settlement",
            ]
            if months_to_trial is not None:
                reasoning.append(f"Avoids {months_to_trial.normalize():f} months of litigation")
            else:
                reasoning.append("Avoids the remaining months of litigation")
            return Recommendation.ACCEPT, reasoning, None

        if clears(break_even * policy.COUNTER_BREAK_EVEN_MULTIPLE):
            counter = round_whole((risk_adjusted + offer) / 2)
            return Recommendation.COUNTER, [
                f"Offer of {self._money(offer)} is above break-even but below expected value",
                f"Recommended counter: {self._money(counter)}",
                "Room for negotiation exists",
            ], counter

        if clears(break_even):
            counter = round_whole(risk_adjusted * policy.COUNTER_RISK_ADJUSTED_RATIO)
            return Recommendation.COUNTER, [
                "Offer only slightly above break-even point",
                "Significant upside potential justifies continued negotiation",
                f"Counter with {self._money(counter)}",
            ], counter

        if offer < break_even:
            first = f"Offer of {self._money(offer)} is below break-even ({self._money(break_even)})"
        else:
            first = f"Offer of {self._money(offer)} does not clear break-even ({self._money(break_even)})"
        return Recommendation.REJECT, [
            first,
            "Would not recover costs already incurred",
            "Better to proceed to trial unless offer improves significantly",
        ], None

    def recommended_range(self, snapshot: ValuationSnapshot) -> RecommendedRange:
        policy = self.policy
        floor = max(
            snapshot.break_even * policy.RANGE_BREAK_EVEN_MULTIPLE,
            snapshot.risk_adjusted_value * policy.RANGE_FLOOR_RATIO,
        )
        return RecommendedRange(
            min=to_cents(floor),
            max=to_cents(snapshot.risk_adjusted_value * policy.RANGE_CEILING_RATIO),
        )

    def recommend(
        self,
        snapshot: ValuationSnapshot,
        current_offer,
        win_probability,
        months_to_trial=None,
    ) -> RecommendationResult:
        """Recommend a response to `current_offer`.

        `months_to_trial` only feeds the wording of the present-value rule;
        the figures themselves come from the snapshot.
        """
        offer = require_non_negative(current_offer, "current_offer")
        win_probability = clamp_percentage(to_decimal(win_probability, "win_probability"), "win_probability")
        if months_to_trial is not None:
            months_to_trial = require_non_negative(months_to_trial, "months_to_trial")

        recommendation, reasoning, counter = self._base_recommendation(snapshot, offer, months_to_trial)

        if win_probability < self.policy.LOW_WIN_PROBABILITY and recommendation == Recommendation.REJECT:
            recommendation = Recommendation.COUNTER
            reasoning.append(
                f"Note: Low win probability ({format_percent(win_probability)}) "
                "suggests settlement may be prudent"
            )
        if win_probability > self.policy.STRONG_WIN_PROBABILITY:
            reasoning.append(
                f"Strong case ({format_percent(win_probability)} win probability) "
                "supports harder negotiation"
            )

        result = RecommendationResult(
            recommendation=recommendation,
            reasoning=reasoning,
            recommended_range=self.recommended_range(snapshot),
            suggested_counter=counter,
            risk_adjusted_value=snapshot.risk_adjusted_value,
            break_even_point=snapshot.break_even,
            time_value_adjustment=to_cents(snapshot.risk_adjusted_value - snapshot.present_value),
        )
        logger.info(
            f"Offer {offer} against risk-adjusted {snapshot.risk_adjusted_value}: "
            f"{result.recommendation.value}"
        )
        return result

    def compare_scenarios(
        self, snapshot: ValuationSnapshot, current_offer, win_probability
    ) -> ScenarioComparison:
        """Net position from settling at `current_offer` against the expected net from trial."""
        offer = require_non_negative(current_offer, "current_offer")
        win_probability = clamp_percentage(to_decimal(win_probability, "win_probability"), "win_probability")

        settle_net = offer - snapshot.incurred_costs
        trial_net = snapshot.net_expected_value
        return ScenarioComparison(
            settle_now_net=to_cents(settle_net),
            future_costs_avoided=snapshot.future_costs,
            trial_net=trial_net,
            settlement_advantage=to_cents(settle_net - trial_net),
            loss_risk_percent=HUNDRED - win_probability,
            favours_settlement=settle_net > trial_net,
        )


def recommend(snapshot: ValuationSnapshot, current_offer, win_probability) -> RecommendationResult:
    """Recommend with the process-wide policy."""
    return RecommendationEngine().recommend(snapshot, current_offer, win_probability)
