"""Sample contract claim used for demos and as a fixture in tests.

Run with:
    python -m settlewise.scripts.sample_case
"""

import datetime
from decimal import Decimal

from settlewise.offers.schemas import OfferParty
from settlewise.offers.service import OfferLedger
from settlewise.portfolio.schemas import (
    ClaimComponent,
    ClaimPortfolio,
    CostCategory,
    CostItem,
    CostLedger,
)
from settlewise.recommendation.service import RecommendationEngine
from settlewise.shared.formatting import format_currency
from settlewise.valuation.schemas import ValuationScenario
from settlewise.valuation.service import ValuationEngine

SAMPLE_CURRENT_OFFER = Decimal("3000000")
SAMPLE_SCENARIO = ValuationScenario(
    win_probability=Decimal("50"),
    months_to_trial=Decimal("12"),
    annual_discount_rate_percent=Decimal("5"),
)


def sample_portfolio() -> ClaimPortfolio:
    return ClaimPortfolio(claims=[
        ClaimComponent(
            id="1",
            name="Principal Amount",
            amount=Decimal("5000000"),
            probability=Decimal("85"),
            notes="Original investment amount with clear documentation",
        ),
        ClaimComponent(
            id="2",
            name="Interest (Contractual)",
            amount=Decimal("750000"),
            probability=Decimal("70"),
            notes="Interest at 5% from breach date",
        ),
        ClaimComponent(
            id="3",
            name="Consequential Damages",
            amount=Decimal("1500000"),
            probability=Decimal("40"),
            notes="Lost business opportunities - harder to prove",
        ),
        ClaimComponent(
            id="4",
            name="Costs Recovery",
            amount=Decimal("800000"),
            probability=Decimal("60"),
            notes="Estimated recoverable costs if successful",
        ),
    ])


def sample_ledger() -> CostLedger:
    return CostLedger(costs=[
        CostItem(id="1", category=CostCategory.LEGAL_FEES, description="Solicitor fees to date",
                 amount=Decimal("250000"), incurred=True, recoverable=True),
        CostItem(id="2", category=CostCategory.LEGAL_FEES, description="Estimated fees to trial",
                 amount=Decimal("500000"), incurred=False, recoverable=True),
        CostItem(id="3", category=CostCategory.COURT_FEES, description="Filing fees and hearing fees",
                 amount=Decimal("50000"), incurred=True, recoverable=True),
        CostItem(id="4", category=CostCategory.EXPERT, description="Expert witness (forensic accountant)",
                 amount=Decimal("150000"), incurred=False, recoverable=True),
        CostItem(id="5", category=CostCategory.TRAVEL, description="Travel to Hong Kong for hearings",
                 amount=Decimal("30000"), incurred=True, recoverable=False),
    ])


def sample_offers() -> OfferLedger:
    ledger = OfferLedger()
    ledger.record(
        Decimal("2000000"),
        OfferParty.OPPONENT,
        datetime.date(2024, 6, 15),
        conditions="Full and final settlement, no admission of liability",
        notes="Initial lowball offer",
    )
    ledger.record(
        Decimal("4500000"),
        OfferParty.YOU,
        datetime.date(2024, 8, 20),
        conditions="Payment within 28 days, costs to be agreed",
        expiry=datetime.date(2024, 9, 20),
    )
    return ledger


def main():
    portfolio = sample_portfolio()
    ledger = sample_ledger()
    snapshot = ValuationEngine().compute_scenario(portfolio.claims, ledger.costs, SAMPLE_SCENARIO)
    engine = RecommendationEngine()
    result = engine.recommend(
        snapshot,
        SAMPLE_CURRENT_OFFER,
        SAMPLE_SCENARIO.win_probability,
        months_to_trial=SAMPLE_SCENARIO.months_to_trial,
    )

    print(f"Total claim:          {format_currency(snapshot.total_claim)}")
    print(f"Expected value:       {format_currency(snapshot.expected_value)}")
    print(f"Risk-adjusted value:  {format_currency(snapshot.risk_adjusted_value)}")
    print(f"Present value:        {format_currency(snapshot.present_value)}")
    print(f"Break-even:           {format_currency(snapshot.break_even)}")
    print(f"Best / worst case:    {format_currency(snapshot.best_case)} / {format_currency(snapshot.worst_case)}")
    print()
    print(f"Offer {format_currency(SAMPLE_CURRENT_OFFER)}: {result.recommendation.value.upper()}")
    for line in result.reasoning:
        print(f"  - {line}")
    print(
        f"Recommended range: {format_currency(result.recommended_range.min)}"
        f" - {format_currency(result.recommended_range.max)}"
    )

    offers = sample_offers()
    print()
    for offer in offers:
        print(f"{offer.date} {offer.party.value:<8} {format_currency(offer.amount)}")
    gap = offers.negotiation_gap()
    if gap is not None:
        print(f"Gap between positions: {format_currency(gap)}")


if __name__ == "__main__":
    main()
