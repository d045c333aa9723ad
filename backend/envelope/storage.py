import copy
import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from pydantic import BaseModel, ValidationError

from .exceptions import NotFound, ValidationFailure
from .models import Account, Category, DataStore, Transaction

logger = logging.getLogger(__name__)


def merge_record(existing, changes: dict):
    """
    Apply changes to a record and re-validate the result.

    The id never changes. Raises ValidationFailure if the merged record is invalid
    (a required field set to None, a value of the wrong type).
    """
    changes = {k: v for k, v in changes.items() if k != "id"}
    try:
        return type(existing).model_validate({**existing.model_dump(), **changes})
    except ValidationError as exc:
        error = exc.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or None
        raise ValidationFailure(f"Invalid {field}: {error['msg']}", field=field) from exc


class BackupResult(BaseModel):
    """Files written by a backup."""
    paths: list[str] = []


class MemoryStorage:
    """
    In-memory ledger storage.

    Records are kept by id. Creating a record with an existing id replaces it,
    updating a missing id raises NotFound, deleting a missing id does nothing.

    Writes that must land together (both legs of a transfer, a category and the
    transactions it leaves uncategorized) go through transaction(): readers
    cannot observe the block half-applied, and the prior state is restored if
    the block raises.
    """

    kind = "memory"

    def __init__(self):
        self._accounts: dict[str, Account] = {}
        self._transactions: dict[str, Transaction] = {}
        self._categories: dict[str, Category] = {}
        self._lock = threading.RLock()
        self._connected = False

    def connect(self) -> None:
        self._connected = True

    def disconnect(self) -> None:
        self._connected = False

    def is_connected(self) -> bool:
        return self._connected

    @contextmanager
    def transaction(self) -> Iterator["MemoryStorage"]:
        """Atomic unit of work."""
        with self._lock:
            saved = (
                copy.copy(self._accounts),
                copy.copy(self._transactions),
                copy.copy(self._categories),
            )
            try:
                yield self
            except Exception:
                self._accounts, self._transactions, self._categories = saved
                raise

    def snapshot(self) -> DataStore:
        """A consistent copy of the whole ledger."""
        with self._lock:
            return DataStore(
                accounts=list(self._accounts.values()),
                transactions=list(self._transactions.values()),
                categories=list(self._categories.values()),
            )

    # Shared record helpers

    def _create(self, table: dict, record):
        with self._lock:
            table[record.id] = record
        return record

    def _update(self, table: dict, record_id: str, changes: dict, label: str):
        with self._lock:
            existing = table.get(record_id)
            if existing is None:
                raise NotFound(f"{label} not found")
            updated = merge_record(existing, changes)
            table[record_id] = updated
        return updated

    def _delete(self, table: dict, record_id: str) -> None:
        with self._lock:
            table.pop(record_id, None)

    # Accounts

    def get_accounts(self) -> list[Account]:
        with self._lock:
            return list(self._accounts.values())

    def get_account(self, account_id: str) -> Account | None:
        with self._lock:
            return self._accounts.get(account_id)

    def create_account(self, account: Account) -> Account:
        return self._create(self._accounts, account)

    def update_account(self, account_id: str, changes: dict) -> Account:
        return self._update(self._accounts, account_id, changes, "Account")

    def delete_account(self, account_id: str) -> None:
        self._delete(self._accounts, account_id)

    # Transactions

    def get_transactions(self) -> list[Transaction]:
        with self._lock:
            return list(self._transactions.values())

    def get_transaction(self, transaction_id: str) -> Transaction | None:
        with self._lock:
            return self._transactions.get(transaction_id)

    def create_transaction(self, transaction: Transaction) -> Transaction:
        return self._create(self._transactions, transaction)

    def update_transaction(self, transaction_id: str, changes: dict) -> Transaction:
        return self._update(self._transactions, transaction_id, changes, "Transaction")

    def delete_transaction(self, transaction_id: str) -> None:
        self._delete(self._transactions, transaction_id)

    # Categories

    def get_categories(self) -> list[Category]:
        with self._lock:
            return list(self._categories.values())

    def get_category(self, category_id: str) -> Category | None:
        with self._lock:
            return self._categories.get(category_id)

    def create_category(self, category: Category) -> Category:
        return self._create(self._categories, category)

    def update_category(self, category_id: str, changes: dict) -> Category:
        return self._update(self._categories, category_id, changes, "Category")

    def delete_category(self, category_id: str) -> None:
        self._delete(self._categories, category_id)

    def backup(self) -> BackupResult:
        """Nothing to back up for in-memory storage."""
        return BackupResult(paths=[])


def create_storage(storage_type: str) -> MemoryStorage:
    """Build a storage backend by name."""
    if storage_type == "memory":
        return MemoryStorage()
    raise ValueError(f"Unsupported storage type: {storage_type}")


# Global state for the current storage
_current_storage: MemoryStorage | None = None


def open_storage(storage_type: str = "memory") -> MemoryStorage:
    """Create and connect the storage used by the API, replacing any open one."""
    global _current_storage

    if _current_storage is not None:
        close_storage()

    storage = create_storage(storage_type)
    storage.connect()
    _current_storage = storage
    logger.info("Opened %s storage", storage_type)
    return storage


def close_storage() -> None:
    """Disconnect the current storage."""
    global _current_storage

    if _current_storage is not None:
        _current_storage.disconnect()
        logger.info("Closed %s storage", _current_storage.kind)
        _current_storage = None


def get_storage() -> MemoryStorage:
    """Get the current storage."""
    if _current_storage is None:
        raise RuntimeError("No storage is currently open")
    return _current_storage


def is_storage_open() -> bool:
    return _current_storage is not None
