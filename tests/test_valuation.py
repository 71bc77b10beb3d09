import logging
from decimal import Decimal

import pytest

from settlewise.config import Settings
from settlewise.portfolio.schemas import ClaimComponent, CostItem
from settlewise.shared.exceptions import ValidationError
from settlewise.valuation.schemas import ValuationScenario
from settlewise.valuation.service import ValuationEngine, compute


def test_sample_case_snapshot(snapshot):
    assert snapshot.total_claim == Decimal("8050000")
    assert snapshot.expected_value == Decimal("5855000")
    assert snapshot.total_costs == Decimal("980000")
    assert snapshot.incurred_costs == Decimal("330000")
    assert snapshot.future_costs == Decimal("650000")
    assert snapshot.recoverable_costs == Decimal("950000")
    assert snapshot.non_recoverable_costs == Decimal("30000")
    assert snapshot.risk_adjusted_value == Decimal("2927500")
    assert round(float(snapshot.time_value_factor), 5) == 0.95238
    assert snapshot.present_value == Decimal("2788095.24")
    assert snapshot.break_even == Decimal("525000")
    assert snapshot.net_expected_value == Decimal("1947500")
    assert snapshot.worst_case == Decimal("-1645000")
    assert snapshot.best_case == Decimal("8970000")


def test_empty_portfolio_is_all_zero():
    snapshot = compute([], [], 50, 12, 5)
    for field, value in snapshot.model_dump().items():
        if field == "time_value_factor":
            continue
        assert value == 0, field
    assert snapshot.present_value == 0


def test_expected_value_ignores_win_probability(portfolio, ledger):
    engine = ValuationEngine()
    low = engine.compute(portfolio.claims, ledger.costs, 10, 12, 5)
    high = engine.compute(portfolio.claims, ledger.costs, 90, 12, 5)
    assert low.expected_value == high.expected_value
    assert low.risk_adjusted_value == Decimal("585500")
    assert high.risk_adjusted_value == Decimal("5269500")


@pytest.mark.parametrize("months, rate", [(0, 5), (12, 0), (0, 0)])
def test_no_discounting_when_months_or_rate_is_zero(portfolio, ledger, months, rate):
    snapshot = compute(portfolio.claims, ledger.costs, 50, months, rate)
    assert snapshot.time_value_factor == 1
    assert snapshot.present_value == snapshot.risk_adjusted_value


def test_fractional_year_discounting(portfolio, ledger):
    snapshot = compute(portfolio.claims, ledger.costs, 50, 6, 5)
    # 1 / sqrt(1.05)
    assert round(float(snapshot.time_value_factor), 4) == 0.9759
    assert snapshot.present_value < snapshot.risk_adjusted_value


def test_win_probability_is_clamped(portfolio, ledger):
    assert compute(portfolio.claims, ledger.costs, 140, 12, 5) == compute(portfolio.claims, ledger.costs, 100, 12, 5)
    clamped_low = compute(portfolio.claims, ledger.costs, -20, 12, 5)
    assert clamped_low.risk_adjusted_value == 0


@pytest.mark.parametrize(
    "months, rate, field",
    [(-1, 5, "months_to_trial"), (12, -0.5, "annual_discount_rate_percent")],
)
def test_negative_time_parameters_are_rejected(portfolio, ledger, months, rate, field):
    with pytest.raises(ValidationError) as exc_info:
        compute(portfolio.claims, ledger.costs, 50, months, rate)
    assert exc_info.value.field == field


def test_non_numeric_parameter_is_rejected(portfolio, ledger):
    with pytest.raises(ValidationError) as exc_info:
        compute(portfolio.claims, ledger.costs, "likely", 12, 5)
    assert exc_info.value.field == "win_probability"


def test_compute_is_idempotent(portfolio, ledger):
    first = compute(portfolio.claims, ledger.costs, 65, 18, 4.5)
    second = compute(portfolio.claims, ledger.costs, 65, 18, 4.5)
    assert first == second


def test_compute_does_not_mutate_inputs(portfolio, ledger):
    claims_before = portfolio.model_dump()
    costs_before = ledger.model_dump()
    compute(portfolio.claims, ledger.costs, 50, 12, 5)
    assert portfolio.model_dump() == claims_before
    assert ledger.model_dump() == costs_before


def test_policy_constants_are_configurable(portfolio, ledger):
    policy = Settings(
        FUTURE_COST_RETAINED_FRACTION=Decimal("0.5"),
        ADVERSE_COSTS_AWARD_FRACTION=Decimal("0"),
    )
    snapshot = ValuationEngine(policy).compute(portfolio.claims, ledger.costs, 50, 12, 5)
    assert snapshot.break_even == Decimal("655000")
    assert snapshot.worst_case == Decimal("-980000")


def test_compute_scenario_matches_positional_call(portfolio, ledger):
    scenario = ValuationScenario(win_probability=70, months_to_trial=24, annual_discount_rate_percent=3)
    engine = ValuationEngine()
    assert engine.compute_scenario(portfolio.claims, ledger.costs, scenario) == engine.compute(
        portfolio.claims, ledger.costs, 70, 24, 3
    )


def test_sub_cent_amounts_are_rounded_half_up():
    claims = [ClaimComponent(id="a", name="Interest", amount=Decimal("0.05"), probability=50)]
    costs = [CostItem(id="c", description="Courier", amount=Decimal("0.015"), incurred=True)]
    snapshot = compute(claims, costs, 100, 0, 0)
    assert snapshot.expected_value == Decimal("0.03")
    assert snapshot.total_costs == Decimal("0.02")


def test_compute_accepts_portfolio_and_ledger(portfolio, ledger, snapshot):
    assert compute(portfolio, ledger, 50, 12, 5) == snapshot


def test_compute_accepts_one_shot_iterators(portfolio, ledger, snapshot):
    result = compute(iter(portfolio.claims), (c for c in ledger.costs), 50, 12, 5)
    assert result == snapshot
    assert result.expected_value == Decimal("5855000")


def test_win_probability_clamping_is_logged(portfolio, ledger, caplog):
    with caplog.at_level(logging.DEBUG, logger="settlewise.shared.types"):
        compute(portfolio, ledger, 130, 12, 5)
    assert "Clamped win_probability 130 to 100" in caplog.text


def test_in_range_win_probability_is_not_logged(portfolio, ledger, caplog):
    with caplog.at_level(logging.DEBUG, logger="settlewise.shared.types"):
        compute(portfolio, ledger, 50, 12, 5)
    assert "Clamped" not in caplog.text


def test_scenario_win_probability_clamping_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="settlewise.shared.types"):
        scenario = ValuationScenario(win_probability=-10)
    assert scenario.win_probability == 0
    assert "Clamped win_probability -10 to 0" in caplog.text
