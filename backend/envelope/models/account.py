import enum
from datetime import datetime

from .base import LedgerModel


class AccountType(str, enum.Enum):
    """Kind of account."""
    CASH = "cash"
    CHECKING = "checking"
    SAVINGS = "savings"
    CREDIT_CARD = "credit_card"
    LOAN = "loan"
    ASSET = "asset"
    CRYPTO = "crypto"


# Account types whose balances count toward money available to budget
SPENDABLE_ACCOUNT_TYPES = frozenset({
    AccountType.CASH,
    AccountType.CHECKING,
    AccountType.SAVINGS,
    AccountType.CREDIT_CARD,
})


class Account(LedgerModel):
    """
    A financial account (checking, savings, credit card, etc.).

    The balance is never stored; it is derived from the account's transactions.
    reported_balance is the institution's figure, kept for reconciliation.
    """

    id: str
    name: str
    type: AccountType
    institution: str = ""
    reported_balance: int | None = None
    reconciled_at: str = ""
    archived: bool = False
    created_at: datetime

    @property
    def is_spendable(self) -> bool:
        return self.type in SPENDABLE_ACCOUNT_TYPES

    def __repr__(self) -> str:
        return f"<Account(id={self.id}, name='{self.name}', type='{self.type.value}')>"
