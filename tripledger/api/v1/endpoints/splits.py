from fastapi import APIRouter, HTTPException
from tripledger.schemas.split import EqualSplitRequest, CustomSplitRequest, SplitResponse
from tripledger.services.split_service import SplitService
from tripledger.utils.split_validation import SplitValidationError

router = APIRouter()

@router.post("/equal", response_model=SplitResponse)
async def equal_split(request: EqualSplitRequest):
    """Explicit equal shares, remainder cents to the first participants"""
    try:
        shares = SplitService.equal_split(request.amount, request.participants)
    except SplitValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return SplitResponse(amount=request.amount, shares=shares)

@router.post("/custom", response_model=SplitResponse)
async def custom_split(request: CustomSplitRequest):
    """Validate custom shares against the amount"""
    try:
        shares = SplitService.custom_split(request.amount, request.shares, request.tolerance)
    except SplitValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return SplitResponse(amount=request.amount, shares=shares)
