"""
Invariant checks for records entering the ledger.

The budget math assumes valid input; these checks run at the data-entry
boundary (request schemas and the ledger service) before a record is stored.
"""

from ..exceptions import ValidationFailure
from ..models import Category, MAX_SAFE_AMOUNT, Transaction, TransactionType


def transaction_issues(
    tx_type: TransactionType,
    category_id: str,
    amount: int,
    transfer_pair_id: str = "",
) -> list[tuple[str, str]]:
    """Return (field, message) for every rule the transaction breaks."""
    issues = []
    if abs(amount) > MAX_SAFE_AMOUNT:
        issues.append(("amount", f"Amount magnitude must not exceed {MAX_SAFE_AMOUNT}"))
    if tx_type == TransactionType.TRANSFER and category_id != "":
        issues.append(("category_id", 'Transfer transactions must have category_id = ""'))
    if tx_type == TransactionType.INCOME and amount < 0:
        issues.append(("amount", "Income transactions must have a non-negative amount"))
    if tx_type == TransactionType.EXPENSE and amount > 0:
        issues.append(("amount", "Expense transactions must have a non-positive amount"))
    if tx_type != TransactionType.TRANSFER and transfer_pair_id != "":
        issues.append(("transfer_pair_id", "Only transfer transactions can be paired"))
    return issues


def validate_transaction(tx: Transaction) -> Transaction:
    """Raise ValidationFailure for the first broken rule, else return tx."""
    issues = transaction_issues(tx.type, tx.category_id, tx.amount, tx.transfer_pair_id)
    if issues:
        field, message = issues[0]
        raise ValidationFailure(message, field=field)
    return tx


def validate_category(category: Category) -> Category:
    if category.assigned < 0:
        raise ValidationFailure("Assigned amount must be non-negative", field="assigned")
    if abs(category.assigned) > MAX_SAFE_AMOUNT:
        raise ValidationFailure(f"Assigned amount must not exceed {MAX_SAFE_AMOUNT}", field="assigned")
    return category
