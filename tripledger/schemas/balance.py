from typing import Dict, List, Optional
from datetime import datetime
from pydantic import BaseModel

from tripledger.core.money import Money
from tripledger.models.ledger import Category, CostEvent, Participant

class BalanceRequest(BaseModel):
    """Roster + events as supplied by the sync layer, seen by one viewer."""
    roster: List[Participant]
    events: List[CostEvent] = []
    viewer_id: str

class TransfersRequest(BaseModel):
    net_balances: Dict[str, Money]

class SummaryRequest(BalanceRequest):
    trip_end: Optional[datetime] = None

class BudgetSummaryResponse(BaseModel):
    viewer_id: str

    # Personal
    my_total_spend: Money
    budget: Money
    remaining_budget: Money
    burn_rate: float  # percent of budget spent, capped at 100

    # Group
    group_total_spend: Money
    group_budget: Money
    group_burn_rate: float
    over_group_budget: bool

    category_spend: Dict[Category, Money]
    recent_transactions: List[CostEvent]
    days_until_end: Optional[int] = None
