from typing import List, Optional
from pydantic import BaseModel
from datetime import datetime

from tripledger.models.ledger import Transfer

class SettlementPlanCreate(BaseModel):
    transfers: List[Transfer]
    creator: Optional[str] = None
    timestamp: Optional[datetime] = None
