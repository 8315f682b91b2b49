from fastapi import APIRouter
from tripledger.core.config import settings
from tripledger.schemas.split import ConversionRequest, ConversionResponse
from tripledger.utils.currency import convert_to_base, format_currency

router = APIRouter()

@router.post("/convert", response_model=ConversionResponse)
async def convert(request: ConversionRequest):
    """Apply an exchange rate and return the base-currency amount"""
    amount = convert_to_base(request.amount, request.rate)
    return ConversionResponse(
        amount=amount,
        display=format_currency(amount, request.currency_code or settings.BASE_CURRENCY),
    )
