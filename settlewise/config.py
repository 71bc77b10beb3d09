from decimal import Decimal
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "Settlewise"
    VERSION: str = "0.1.0"
    API_V1_STR: str = "/v1"

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    LOG_LEVEL: str = "INFO"

    # Display
    CURRENCY_SYMBOL: str = "HK$"

    # Valuation policy
    # Share of projected future costs still spent when settling now (70% salvaged)
    FUTURE_COST_RETAINED_FRACTION: Decimal = Field(Decimal("0.3"), ge=0, le=1)
    # Share of recoverable costs assumed awarded against us on a loss
    ADVERSE_COSTS_AWARD_FRACTION: Decimal = Field(Decimal("0.7"), ge=0, le=1)

    # Recommendation cascade
    ACCEPT_RISK_ADJUSTED_RATIO: Decimal = Field(Decimal("0.9"), ge=0)
    ACCEPT_PRESENT_VALUE_RATIO: Decimal = Field(Decimal("0.85"), ge=0)
    COUNTER_BREAK_EVEN_MULTIPLE: Decimal = Field(Decimal("1.5"), ge=0)
    COUNTER_RISK_ADJUSTED_RATIO: Decimal = Field(Decimal("0.85"), ge=0)
    LOW_WIN_PROBABILITY: Decimal = Field(Decimal("40"), ge=0, le=100)
    STRONG_WIN_PROBABILITY: Decimal = Field(Decimal("75"), ge=0, le=100)

    # Recommended counter-offer range
    RANGE_BREAK_EVEN_MULTIPLE: Decimal = Field(Decimal("1.2"), ge=0)
    RANGE_FLOOR_RATIO: Decimal = Field(Decimal("0.7"), ge=0)
    RANGE_CEILING_RATIO: Decimal = Field(Decimal("0.95"), ge=0)

    model_config = SettingsConfigDict(case_sensitive=True, env_file=".env")

settings = Settings()
