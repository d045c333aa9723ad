from .config import load_budget_metadata
from .models import BudgetMetadata
from .services.ledger_service import LedgerService
from .storage import get_storage


def get_ledger() -> LedgerService:
    """FastAPI dependency for the ledger service over the current storage."""
    return LedgerService(get_storage())


def get_budget_metadata() -> BudgetMetadata:
    """FastAPI dependency for the budget name and currency."""
    return load_budget_metadata()
