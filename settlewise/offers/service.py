import datetime
import logging
import uuid
from decimal import Decimal
from typing import Iterable, Iterator, List, Optional, Tuple

from settlewise.offers.schemas import OfferParty, SettlementOffer

logger = logging.getLogger(__name__)


class OfferLedger:
    """Append-only history of offers exchanged in a negotiation.

    Offers are kept in the order they were recorded. Nothing here feeds the
    valuation; the ledger exists so callers can display and compare offers.
    """

    def __init__(self, offers: Iterable[SettlementOffer] = ()):
        self._offers: List[SettlementOffer] = []
        for offer in offers:
            self.append(offer)

    def __iter__(self) -> Iterator[SettlementOffer]:
        return iter(self._offers)

    def __len__(self) -> int:
        return len(self._offers)

    @property
    def offers(self) -> Tuple[SettlementOffer, ...]:
        return tuple(self._offers)

    def append(self, offer: SettlementOffer) -> SettlementOffer:
        if any(existing.id == offer.id for existing in self._offers):
            raise ValueError(f"Offer '{offer.id}' already recorded; record a new offer instead")
        self._offers.append(offer)
        logger.info(f"Recorded {offer.party.value} offer {offer.id} of {offer.amount} on {offer.date}")
        return offer

    def record(
        self,
        amount,
        party: OfferParty,
        date: datetime.date,
        conditions: Optional[str] = None,
        expiry: Optional[datetime.date] = None,
        notes: Optional[str] = None,
    ) -> SettlementOffer:
        offer = SettlementOffer(
            id=str(uuid.uuid4()),
            amount=amount,
            date=date,
            party=party,
            conditions=conditions,
            expiry=expiry,
            notes=notes,
        )
        return self.append(offer)

    def by_party(self, party: OfferParty) -> List[SettlementOffer]:
        return [o for o in self._offers if o.party == party]

    def latest(self, party: Optional[OfferParty] = None) -> Optional[SettlementOffer]:
        """Most recent offer by date; ties go to the one recorded last."""
        candidates = self._offers if party is None else self.by_party(party)
        if not candidates:
            return None
        # enumerate keeps recording order as the tie-breaker
        return max(enumerate(candidates), key=lambda pair: (pair[1].date, pair[0]))[1]

    def negotiation_gap(self) -> Optional[Decimal]:
        """Latest own offer minus latest opponent offer, or None until both sides have offered."""
        ours = self.latest(OfferParty.YOU)
        theirs = self.latest(OfferParty.OPPONENT)
        if ours is None or theirs is None:
            return None
        return ours.amount - theirs.amount

    @staticmethod
    def is_expired(offer: SettlementOffer, on: datetime.date) -> bool:
        return offer.expiry is not None and on > offer.expiry
