"""
Write operations on the ledger.

Every mutation reads a snapshot, decides with the pure engine functions
(integrity guard, transfer manager, validation) and commits the resulting
records to storage as one unit.
"""

import logging
from datetime import datetime, timezone

from ..exceptions import NotFound, ValidationFailure
from ..models import (
    Account,
    Category,
    DataStore,
    INCOME_GROUP,
    MonthlySummary,
    Transaction,
    TransactionType,
)
from ..storage import MemoryStorage, merge_record
from .balance import compute_balance, compute_balances
from .budget_service import compute_available_to_budget, compute_monthly_summary
from .default_categories import get_default_categories
from .integrity import can_archive_account, can_delete_account, on_delete_category
from .transfers import (
    IdFactory,
    cascade_transfer_delete,
    create_transfer_pair,
    find_unpaired_transfers,
    new_id,
    propagate_transfer_update,
)
from .validation import validate_category, validate_transaction

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class LedgerService:
    def __init__(self, storage: MemoryStorage, id_factory: IdFactory = new_id):
        self.storage = storage
        self.id_factory = id_factory

    # --- Reads ---

    def snapshot(self) -> DataStore:
        return self.storage.snapshot()

    def account_balances(self) -> dict[str, int]:
        return compute_balances(self.storage.get_transactions())

    def monthly_summary(self, month: str) -> MonthlySummary:
        return compute_monthly_summary(self.snapshot(), month)

    def available_to_budget(self, month: str) -> int:
        return compute_available_to_budget(self.snapshot(), month)

    def get_account(self, account_id: str) -> Account:
        account = self.storage.get_account(account_id)
        if account is None:
            raise NotFound("Account not found")
        return account

    def get_transaction(self, transaction_id: str) -> Transaction:
        tx = self.storage.get_transaction(transaction_id)
        if tx is None:
            raise NotFound("Transaction not found")
        return tx

    def get_category(self, category_id: str) -> Category:
        category = self.storage.get_category(category_id)
        if category is None:
            raise NotFound("Category not found")
        return category

    # --- Accounts ---

    def create_account(
        self,
        name: str,
        account_type: str,
        institution: str = "",
        starting_balance: int = 0,
    ) -> Account:
        """
        Create an account and its opening-balance transaction.

        A non-zero opening balance is booked under the first Income category
        (uncategorized if the budget has none): as income when positive, as an
        expense when negative (credit cards, loans). A zero opening balance books
        nothing, so a fresh account can still be deleted.
        """
        now = _utcnow()
        account = Account(
            id=self.id_factory(),
            name=name,
            type=account_type,
            institution=institution,
            reported_balance=None,
            reconciled_at="",
            archived=False,
            created_at=now,
        )
        income_category = next(
            (c for c in self.storage.get_categories() if c.group == INCOME_GROUP),
            None,
        )
        opening = None
        if starting_balance:
            opening = Transaction(
                id=self.id_factory(),
                type=TransactionType.INCOME if starting_balance > 0 else TransactionType.EXPENSE,
                account_id=account.id,
                date=now.date(),
                category_id=income_category.id if income_category else "",
                description="Opening Balance",
                amount=starting_balance,
                created_at=now,
            )
            validate_transaction(opening)

        with self.storage.transaction():
            self.storage.create_account(account)
            if opening is not None:
                self.storage.create_transaction(opening)
        logger.debug("Created account %s with opening balance %d", account.id, starting_balance)
        return account

    def update_account(self, account_id: str, changes: dict) -> Account:
        if not changes:
            return self.get_account(account_id)

        with self.storage.transaction():
            self.get_account(account_id)
            if changes.get("archived"):
                self._check_archivable(account_id)
            return self.storage.update_account(account_id, changes)

    def archive_account(self, account_id: str, archived: bool = True) -> Account:
        return self.update_account(account_id, {"archived": archived})

    def _check_archivable(self, account_id: str) -> None:
        transactions = self.storage.get_transactions()
        if not can_archive_account(transactions, account_id):
            balance = compute_balance(transactions, account_id)
            logger.info("Refused to archive account %s with balance %d", account_id, balance)
            raise ValidationFailure("Cannot archive account with non-zero balance", field="archived")

    def delete_account(self, account_id: str) -> None:
        with self.storage.transaction():
            self.get_account(account_id)
            if not can_delete_account(self.storage.get_transactions(), account_id):
                raise ValidationFailure("Cannot delete account that has transactions")
            self.storage.delete_account(account_id)

    # --- Transactions ---

    def create_transaction(self, data: dict) -> Transaction:
        """Create an income or expense transaction."""
        tx = Transaction(
            id=self.id_factory(),
            type=data["type"],
            account_id=data["account_id"],
            date=data["date"],
            category_id=data.get("category_id", ""),
            description=data.get("description", ""),
            payee=data.get("payee", ""),
            transfer_pair_id="",
            amount=data["amount"],
            notes=data.get("notes", ""),
            source=data.get("source", "manual"),
            created_at=_utcnow(),
        )
        if tx.type == TransactionType.TRANSFER:
            raise ValidationFailure("Use create_transfer to create transfers", field="type")
        validate_transaction(tx)

        with self.storage.transaction():
            self.get_account(tx.account_id)
            self.storage.create_transaction(tx)
        return tx

    def create_transfer(
        self,
        from_account_id: str,
        to_account_id: str,
        amount: int,
        on_date,
        description: str = "",
        payee: str = "",
        notes: str = "",
    ) -> tuple[Transaction, Transaction]:
        """Create both legs of a transfer. Returns (outflow, inflow)."""
        outflow, inflow = create_transfer_pair(
            from_account_id,
            to_account_id,
            amount,
            on_date,
            description=description,
            payee=payee,
            notes=notes,
            id_factory=self.id_factory,
        )
        validate_transaction(outflow)

        with self.storage.transaction():
            self.get_account(from_account_id)
            self.get_account(to_account_id)
            self.storage.create_transaction(outflow)
            self.storage.create_transaction(inflow)
        return outflow, inflow

    def update_transaction(self, transaction_id: str, changes: dict) -> Transaction:
        """
        Apply changes to a transaction.

        Editing one leg of a transfer rewrites the other leg's amount and date.
        A transfer cannot be turned into another type, and vice versa.
        """
        with self.storage.transaction():
            existing = self.get_transaction(transaction_id)
            if not changes:
                return existing

            changes = {k: v for k, v in changes.items() if k not in ("transfer_pair_id", "created_at")}
            updated = merge_record(existing, changes)

            if (updated.type == TransactionType.TRANSFER) != (existing.type == TransactionType.TRANSFER):
                raise ValidationFailure("Cannot change a transaction to or from a transfer", field="type")
            validate_transaction(updated)
            if "account_id" in changes:
                self.get_account(updated.account_id)

            if not existing.transfer_pair_id:
                self.storage.create_transaction(updated)
                return updated

            before = self.storage.get_transactions()
            after = propagate_transfer_update(before, updated)
            for tx in after:
                if tx.id in (updated.id, updated.transfer_pair_id):
                    self.storage.create_transaction(tx)

            broken = find_unpaired_transfers(
                [tx for tx in after if tx.id in (updated.id, updated.transfer_pair_id)]
            )
            if broken:
                logger.warning("Transfer %s has no matching sibling", updated.id)
        return updated

    def delete_transaction(self, transaction_id: str) -> list[str]:
        """Delete a transaction and, for transfers, its sibling. Returns the removed ids."""
        with self.storage.transaction():
            self.get_transaction(transaction_id)
            before = self.storage.get_transactions()
            remaining = {tx.id for tx in cascade_transfer_delete(before, transaction_id)}
            removed = [tx.id for tx in before if tx.id not in remaining]
            for tx_id in removed:
                self.storage.delete_transaction(tx_id)
        return removed

    # --- Categories ---

    def create_category(self, data: dict) -> Category:
        category = Category(
            id=self.id_factory(),
            name=data["name"],
            group=data["group"],
            assigned=data.get("assigned", 0),
            sort_order=data.get("sort_order", 0),
            archived=False,
        )
        validate_category(category)
        return self.storage.create_category(category)

    def update_category(self, category_id: str, changes: dict) -> Category:
        with self.storage.transaction():
            existing = self.get_category(category_id)
            if not changes:
                return existing
            validate_category(merge_record(existing, changes))
            return self.storage.update_category(category_id, changes)

    def delete_category(self, category_id: str) -> int:
        """Delete a category, leaving its transactions uncategorized. Returns how many were cleared."""
        with self.storage.transaction():
            self.get_category(category_id)
            before = self.storage.get_transactions()
            cleared = [
                tx for old, tx in zip(before, on_delete_category(before, category_id))
                if tx.category_id != old.category_id
            ]
            for tx in cleared:
                self.storage.create_transaction(tx)
            self.storage.delete_category(category_id)
        return len(cleared)

    def initialize_budget(self) -> list[Category]:
        """Seed the default categories into an empty budget. Existing categories are left alone."""
        with self.storage.transaction():
            existing = self.storage.get_categories()
            if existing:
                return existing
            seeded = [self.storage.create_category(c) for c in get_default_categories()]
        logger.info("Seeded %d default categories", len(seeded))
        return seeded
