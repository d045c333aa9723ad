from fastapi import APIRouter, Depends, Query

from ..dependencies import get_budget_metadata, get_ledger
from ..models import BudgetMetadata, MonthlySummary
from ..schemas import AvailableToBudgetResponse
from ..services.budget_service import format_month, parse_month
from ..services.ledger_service import LedgerService

router = APIRouter()


@router.get("/metadata", response_model=BudgetMetadata)
def get_metadata(metadata: BudgetMetadata = Depends(get_budget_metadata)):
    """Budget name and currency."""
    return metadata


@router.get("/summary", response_model=MonthlySummary)
def monthly_summary(
    month: str = Query(..., description="YYYY-MM"),
    ledger: LedgerService = Depends(get_ledger),
):
    """Assigned, spent and available per category and group for one month."""
    return ledger.monthly_summary(month)


@router.get("/available", response_model=AvailableToBudgetResponse)
def available_to_budget(
    month: str = Query(..., description="YYYY-MM"),
    ledger: LedgerService = Depends(get_ledger),
):
    return AvailableToBudgetResponse(
        month=format_month(*parse_month(month)),
        available_to_budget=ledger.available_to_budget(month),
    )
