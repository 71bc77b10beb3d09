from typing import Optional

from settlewise.config import Settings, settings
from settlewise.portfolio.schemas import ClaimPortfolio, CostLedger
from settlewise.recommendation.service import RecommendationEngine
from settlewise.settlement.schemas import AnalysisRequest, AnalysisResponse, ValuationRequest
from settlewise.valuation.schemas import ValuationSnapshot
from settlewise.valuation.service import ValuationEngine


class SettlementAnalysisService:
    def __init__(self, policy: Optional[Settings] = None):
        policy = policy or settings
        self.valuation = ValuationEngine(policy)
        self.recommendation = RecommendationEngine(policy)

    def valuate(self, request: ValuationRequest) -> ValuationSnapshot:
        # Building the collections enforces unique ids within each
        portfolio = ClaimPortfolio(claims=request.claims)
        ledger = CostLedger(costs=request.costs)
        return self.valuation.compute_scenario(portfolio.claims, ledger.costs, request.scenario)

    def analyze(self, request: AnalysisRequest) -> AnalysisResponse:
        snapshot = self.valuate(request)
        scenario = request.scenario
        recommendation = self.recommendation.recommend(
            snapshot,
            request.current_offer,
            scenario.win_probability,
            months_to_trial=scenario.months_to_trial,
        )
        scenarios = self.recommendation.compare_scenarios(
            snapshot, request.current_offer, scenario.win_probability
        )
        return AnalysisResponse(snapshot=snapshot, recommendation=recommendation, scenarios=scenarios)
