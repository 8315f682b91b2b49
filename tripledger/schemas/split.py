from typing import Dict, List, Optional
from pydantic import BaseModel

from tripledger.core.money import Money

class EqualSplitRequest(BaseModel):
    amount: Money
    participants: List[str]

class CustomSplitRequest(BaseModel):
    amount: Money
    shares: Dict[str, Money]
    tolerance: Optional[Money] = None

class SplitResponse(BaseModel):
    amount: Money
    shares: Dict[str, Money]

class ConversionRequest(BaseModel):
    amount: Money
    rate: Money  # multiplier from the exchange-rate service
    currency_code: Optional[str] = None

class ConversionResponse(BaseModel):
    amount: Money
    display: str
