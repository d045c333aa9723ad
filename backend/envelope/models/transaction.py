import enum
import datetime as dt

from .base import LedgerModel


class TransactionType(str, enum.Enum):
    """Type of transaction."""
    INCOME = "income"
    EXPENSE = "expense"
    TRANSFER = "transfer"


class TransactionSource(str, enum.Enum):
    """How the transaction was created."""
    MANUAL = "manual"
    AI_AGENT = "ai_agent"
    IMPORT = "import"


# Largest magnitude a JavaScript client can represent exactly
MAX_SAFE_AMOUNT = 2**53 - 1


class Transaction(LedgerModel):
    """
    A transaction in an account's ledger.

    Amounts are integer minor units (cents for USD).
    Negative amounts = outflow (expense), positive amounts = inflow (income/refund).

    Transfers are stored as two legs, one per account, each pointing at the
    other through transfer_pair_id. Transfers never carry a category.
    """

    id: str
    type: TransactionType
    account_id: str
    date: dt.date
    category_id: str = ""
    description: str = ""
    payee: str = ""
    transfer_pair_id: str = ""
    amount: int
    notes: str = ""
    source: TransactionSource = TransactionSource.MANUAL
    created_at: dt.datetime

    @property
    def is_transfer(self) -> bool:
        return self.type == TransactionType.TRANSFER

    def __repr__(self) -> str:
        return (
            f"<Transaction(id={self.id}, date={self.date}, "
            f"amount={self.amount}, payee='{self.payee}')>"
        )
