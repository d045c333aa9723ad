from fastapi import APIRouter

from .health import router as health_router
from .accounts import router as accounts_router
from .transactions import router as transactions_router
from .categories import router as categories_router
from .budgets import router as budgets_router
from .money import router as money_router

api_router = APIRouter()

api_router.include_router(health_router, tags=["health"])
api_router.include_router(accounts_router, prefix="/accounts", tags=["accounts"])
api_router.include_router(transactions_router, prefix="/transactions", tags=["transactions"])
api_router.include_router(categories_router, prefix="/categories", tags=["categories"])
api_router.include_router(budgets_router, prefix="/budget", tags=["budget"])
api_router.include_router(money_router, prefix="/money", tags=["money"])
