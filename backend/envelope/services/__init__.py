from .money import format_money, parse_money, CURRENCY_SYMBOLS
from .balance import compute_balance, compute_balances
from .integrity import can_delete_account, can_archive_account, on_delete_category
from .transfers import (
    create_transfer_pair,
    propagate_transfer_update,
    cascade_transfer_delete,
    find_transfer_sibling,
    find_unpaired_transfers,
    new_id,
)
from .budget_service import (
    compute_available_to_budget,
    compute_monthly_summary,
    parse_month,
    format_month,
)
from .default_categories import get_default_categories, DEFAULT_CATEGORIES
from .validation import transaction_issues, validate_transaction, validate_category
from .ledger_service import LedgerService

__all__ = [
    "format_money",
    "parse_money",
    "CURRENCY_SYMBOLS",
    "compute_balance",
    "compute_balances",
    "can_delete_account",
    "can_archive_account",
    "on_delete_category",
    "create_transfer_pair",
    "propagate_transfer_update",
    "cascade_transfer_delete",
    "find_transfer_sibling",
    "find_unpaired_transfers",
    "new_id",
    "compute_available_to_budget",
    "compute_monthly_summary",
    "parse_month",
    "format_month",
    "get_default_categories",
    "DEFAULT_CATEGORIES",
    "transaction_issues",
    "validate_transaction",
    "validate_category",
    "LedgerService",
]
