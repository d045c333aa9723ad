from .base import LedgerModel
from .account import Account, AccountType, SPENDABLE_ACCOUNT_TYPES
from .transaction import Transaction, TransactionType, TransactionSource, MAX_SAFE_AMOUNT
from .category import Category, INCOME_GROUP
from .budget import (
    Currency,
    BudgetMetadata,
    DataStore,
    CategorySummary,
    GroupSummary,
    UncategorizedSummary,
    MonthlySummary,
)

__all__ = [
    "LedgerModel",
    "Account",
    "AccountType",
    "SPENDABLE_ACCOUNT_TYPES",
    "Transaction",
    "TransactionType",
    "TransactionSource",
    "MAX_SAFE_AMOUNT",
    "Category",
    "INCOME_GROUP",
    "Currency",
    "BudgetMetadata",
    "DataStore",
    "CategorySummary",
    "GroupSummary",
    "UncategorizedSummary",
    "MonthlySummary",
]
