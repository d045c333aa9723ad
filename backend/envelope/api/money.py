from fastapi import APIRouter, Depends, Query

from ..dependencies import get_budget_metadata
from ..models import BudgetMetadata
from ..schemas import FormattedMoney
from ..services.money import format_money, parse_money

router = APIRouter()


@router.get("/format", response_model=FormattedMoney)
def format_amount(
    amount: int = Query(..., description="Amount in minor units"),
    metadata: BudgetMetadata = Depends(get_budget_metadata),
):
    """Render an amount in the budget's currency."""
    return FormattedMoney(
        amount=amount,
        formatted=format_money(amount, metadata.currency),
        currency_code=metadata.currency.code,
    )


@router.get("/parse", response_model=FormattedMoney)
def parse_amount(
    text: str = Query(..., description="User-entered amount, e.g. $1,234.56"),
    metadata: BudgetMetadata = Depends(get_budget_metadata),
):
    """Parse user-entered text into minor units of the budget's currency."""
    amount = parse_money(text, metadata.currency)
    return FormattedMoney(
        amount=amount,
        formatted=format_money(amount, metadata.currency),
        currency_code=metadata.currency.code,
    )
