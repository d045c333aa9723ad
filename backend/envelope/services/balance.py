from collections import defaultdict
from collections.abc import Iterable

from ..models import Transaction


def compute_balance(transactions: Iterable[Transaction], account_id: str) -> int:
    """
    Derive an account's balance from the ledger.

    Sum of every transaction amount booked to the account. Unknown accounts
    and empty ledgers have a balance of 0. Python integers do not overflow, so
    the sum is exact; amounts beyond MAX_SAFE_AMOUNT are rejected on entry.
    """
    return sum(tx.amount for tx in transactions if tx.account_id == account_id)


def compute_balances(transactions: Iterable[Transaction]) -> dict[str, int]:
    """Balances for every account that has at least one transaction, in one pass."""
    balances: dict[str, int] = defaultdict(int)
    for tx in transactions:
        balances[tx.account_id] += tx.amount
    return dict(balances)
