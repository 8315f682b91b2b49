from fastapi import APIRouter
from tripledger.api.v1.endpoints import balances, splits, settlements, currency

api_router = APIRouter()

api_router.include_router(balances.router, prefix="/balances", tags=["balances"])
api_router.include_router(splits.router, prefix="/splits", tags=["splits"])
api_router.include_router(settlements.router, prefix="/settlements", tags=["settlements"])
api_router.include_router(currency.router, prefix="/currency", tags=["currency"])
