import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from typing import AsyncGenerator

from settlewise.main import create_app
from settlewise.portfolio.schemas import ClaimPortfolio, CostLedger
from settlewise.scripts.sample_case import sample_ledger, sample_portfolio
from settlewise.valuation.schemas import ValuationSnapshot
from settlewise.valuation.service import ValuationEngine


@pytest_asyncio.fixture(scope="function")
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Client for testing API endpoints."""
    app = create_app()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def portfolio() -> ClaimPortfolio:
    return sample_portfolio()


@pytest.fixture
def ledger() -> CostLedger:
    return sample_ledger()


@pytest.fixture
def snapshot(portfolio: ClaimPortfolio, ledger: CostLedger) -> ValuationSnapshot:
    """The sample case at 50% win probability, 12 months to trial, 5% discount rate."""
    return ValuationEngine().compute(portfolio.claims, ledger.costs, 50, 12, 5)
