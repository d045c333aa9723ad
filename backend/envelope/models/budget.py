from pydantic import Field

from .account import Account
from .base import LedgerModel
from .category import Category
from .transaction import Transaction


class Currency(LedgerModel):
    """A currency and the number of minor-unit digits it uses."""
    code: str = Field(min_length=1, pattern=r"^[A-Za-z]+$")
    precision: int = Field(ge=0)


class BudgetMetadata(LedgerModel):
    name: str = Field(min_length=1)
    currency: Currency
    version: int = Field(default=1, ge=1)


class DataStore(LedgerModel):
    """A consistent snapshot of the whole ledger."""
    accounts: list[Account] = []
    transactions: list[Transaction] = []
    categories: list[Category] = []


# --- Derived (never stored) ---

class CategorySummary(LedgerModel):
    id: str
    name: str
    assigned: int
    spent: int
    available: int


class GroupSummary(LedgerModel):
    name: str
    categories: list[CategorySummary]
    total_assigned: int
    total_spent: int
    total_available: int


class UncategorizedSummary(LedgerModel):
    spent: int = 0


class MonthlySummary(LedgerModel):
    month: str
    available_to_budget: int
    total_income: int
    total_assigned: int
    groups: list[GroupSummary]
    uncategorized: UncategorizedSummary
