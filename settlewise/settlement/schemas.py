from typing import List

from pydantic import BaseModel, Field

from settlewise.portfolio.schemas import ClaimComponent, CostItem
from settlewise.recommendation.schemas import RecommendationResult, ScenarioComparison
from settlewise.shared.types import Money
from settlewise.valuation.schemas import ValuationScenario, ValuationSnapshot


class ValuationRequest(BaseModel):
    claims: List[ClaimComponent] = []
    costs: List[CostItem] = []
    scenario: ValuationScenario = ValuationScenario()


class AnalysisRequest(ValuationRequest):
    current_offer: Money = Field(..., ge=0, description="Offer currently on the table")


class AnalysisResponse(BaseModel):
    snapshot: ValuationSnapshot
    recommendation: RecommendationResult
    scenarios: ScenarioComparison
