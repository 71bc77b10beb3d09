import logging

from fastapi import APIRouter, HTTPException

from settlewise.settlement.schemas import AnalysisRequest, AnalysisResponse, ValuationRequest
from settlewise.settlement.service import SettlementAnalysisService
from settlewise.valuation.schemas import ValuationSnapshot

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/settlement", tags=["settlement"])


@router.post("/valuation", response_model=ValuationSnapshot)
async def valuation_endpoint(request: ValuationRequest):
    service = SettlementAnalysisService()
    try:
        return service.valuate(request)
    except ValueError as e:
        logger.warning(f"Rejected valuation request: {e}")
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/analysis", response_model=AnalysisResponse)
async def analysis_endpoint(request: AnalysisRequest):
    service = SettlementAnalysisService()
    try:
        return service.analyze(request)
    except ValueError as e:
        logger.warning(f"Rejected analysis request: {e}")
        raise HTTPException(status_code=400, detail=str(e))
