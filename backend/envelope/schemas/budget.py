from pydantic import BaseModel


class AvailableToBudgetResponse(BaseModel):
    month: str
    available_to_budget: int


class FormattedMoney(BaseModel):
    amount: int
    formatted: str
    currency_code: str
