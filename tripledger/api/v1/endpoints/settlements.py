from typing import List
from fastapi import APIRouter
from tripledger.models.ledger import CostEvent
from tripledger.schemas.settlement import SettlementPlanCreate
from tripledger.services.settlement_service import SettlementService

router = APIRouter()

@router.post("/", response_model=List[CostEvent])
async def create_settlements(plan_in: SettlementPlanCreate):
    """Settlement events to record for the accepted transfers"""
    return SettlementService.record_plan(
        plan_in.transfers,
        creator=plan_in.creator,
        timestamp=plan_in.timestamp,
    )
