import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from settlewise.shared.types import Money


class OfferParty(str, Enum):
    YOU = "you"
    OPPONENT = "opponent"


class SettlementOffer(BaseModel):
    """One offer made in negotiations. Never edited; a revised offer is a new record."""

    id: str = Field(..., min_length=1)
    amount: Money = Field(..., ge=0)
    date: datetime.date
    party: OfferParty = Field(..., alias="from", description="Who made the offer")
    conditions: Optional[str] = None
    expiry: Optional[datetime.date] = None
    notes: Optional[str] = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)
