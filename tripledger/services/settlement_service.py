from typing import Iterable, List, Optional
from datetime import datetime, timezone

from tripledger.models.ledger import Category, CostEvent, EventKind, Transfer

class SettlementService:
    @staticmethod
    def from_transfer(
        transfer: Transfer,
        creator: Optional[str] = None,
        timestamp: Optional[datetime] = None,
    ) -> CostEvent:
        """
        Build the settlement event for a suggested transfer.

        The engine never stores it; the caller hands it to the storage layer,
        after which recomputing balances reflects the payment.
        """
        return CostEvent(
            payer=transfer.from_id,
            participants=[transfer.to_id],
            amount=transfer.amount,
            kind=EventKind.SETTLEMENT,
            creator=creator or transfer.from_id,
            category=Category.ESSENTIALS,
            title=f"Settlement {transfer.from_id} -> {transfer.to_id}",
            timestamp=timestamp or datetime.now(timezone.utc),
        )

    @staticmethod
    def record_plan(
        transfers: Iterable[Transfer],
        creator: Optional[str] = None,
        timestamp: Optional[datetime] = None,
    ) -> List[CostEvent]:
        return [
            SettlementService.from_transfer(transfer, creator=creator, timestamp=timestamp)
            for transfer in transfers
        ]
