"""
Guards for structural changes to the ledger.

Accounts may only be deleted while nothing references them, and only archived
once they are empty. Deleting a category leaves its transactions uncategorized.
"""

from collections.abc import Sequence

from ..models import Transaction
from .balance import compute_balance


def can_delete_account(transactions: Sequence[Transaction], account_id: str) -> bool:
    """True only if no transaction references the account, whatever its balance."""
    return not any(tx.account_id == account_id for tx in transactions)


def can_archive_account(transactions: Sequence[Transaction], account_id: str) -> bool:
    """True iff the account's derived balance is exactly zero."""
    return compute_balance(transactions, account_id) == 0


def on_delete_category(transactions: Sequence[Transaction], category_id: str) -> list[Transaction]:
    """Return a new ledger with the deleted category cleared from its transactions."""
    return [
        tx.model_copy(update={"category_id": ""}) if tx.category_id == category_id else tx
        for tx in transactions
    ]
