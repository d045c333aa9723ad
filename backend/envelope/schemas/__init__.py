from .account import AccountCreate, AccountUpdate, AccountResponse
from .transaction import (
    TransactionCreate,
    TransactionUpdate,
    TransactionResponse,
    TransferCreate,
    TransferResponse,
)
from .category import CategoryCreate, CategoryUpdate, CategoryResponse
from .budget import AvailableToBudgetResponse, FormattedMoney

__all__ = [
    "AccountCreate",
    "AccountUpdate",
    "AccountResponse",
    "TransactionCreate",
    "TransactionUpdate",
    "TransactionResponse",
    "TransferCreate",
    "TransferResponse",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
    "AvailableToBudgetResponse",
    "FormattedMoney",
]
