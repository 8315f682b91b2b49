from typing import List
from fastapi import APIRouter
from tripledger.models.ledger import BalanceResult, Transfer
from tripledger.schemas.balance import BalanceRequest, TransfersRequest, SummaryRequest, BudgetSummaryResponse
from tripledger.services.balance_calculator import calculate_balances, calculate_smart_transfers
from tripledger.services.budget_service import BudgetService

router = APIRouter()

@router.post("/", response_model=BalanceResult)
async def compute_balances(request: BalanceRequest):
    """Net balances, the viewer's pairwise debts and the settlement plan"""
    return calculate_balances(request.events, request.roster, request.viewer_id)

@router.post("/transfers", response_model=List[Transfer])
async def compute_transfers(request: TransfersRequest):
    """Minimal set of transfers that settles the given net balances"""
    return calculate_smart_transfers(request.net_balances)

@router.post("/summary", response_model=BudgetSummaryResponse)
async def compute_summary(request: SummaryRequest):
    """Budget burn, category spend and recent transactions for the viewer"""
    return BudgetService.summarize(
        request.events,
        request.roster,
        request.viewer_id,
        trip_end=request.trip_end,
    )
