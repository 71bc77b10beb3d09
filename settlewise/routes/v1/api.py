from fastapi import APIRouter

from settlewise.settlement.router import router as settlement_router

api_router = APIRouter()

api_router.include_router(settlement_router)
