import threading

import pytest

from envelope.exceptions import NotFound, ValidationFailure
from envelope.storage import (
    MemoryStorage,
    close_storage,
    create_storage,
    get_storage,
    is_storage_open,
    open_storage,
)

from factories import make_account, make_category, make_transaction


@pytest.fixture
def storage():
    storage = MemoryStorage()
    storage.connect()
    return storage


def test_connect_and_disconnect(storage):
    assert storage.is_connected()
    storage.disconnect()
    assert not storage.is_connected()


def test_create_and_get_accounts(storage):
    account = make_account()
    storage.create_account(account)
    assert storage.get_accounts() == [account]


def test_update_account_merges_changes(storage):
    storage.create_account(make_account())
    updated = storage.update_account("acc-1", {"name": "Main Checking"})
    assert updated.name == "Main Checking"
    assert updated.type.value == "checking"


def test_update_preserves_id(storage):
    storage.create_account(make_account(id="acc-1"))
    updated = storage.update_account("acc-1", {"id": "acc-hijack", "name": "Renamed"})
    assert updated.id == "acc-1"
    assert [a.id for a in storage.get_accounts()] == ["acc-1"]


@pytest.mark.parametrize("method, label", [
    ("update_account", "Account"),
    ("update_transaction", "Transaction"),
    ("update_category", "Category"),
])
def test_update_missing_raises_not_found(storage, method, label):
    with pytest.raises(NotFound, match=f"{label} not found"):
        getattr(storage, method)("nope", {"name": "X"})


def test_create_overwrites_same_id(storage):
    storage.create_account(make_account(name="Old"))
    storage.create_account(make_account(name="New"))
    assert [a.name for a in storage.get_accounts()] == ["New"]


def test_transactions_crud(storage):
    storage.create_transaction(make_transaction(id="tx-1"))
    storage.create_transaction(make_transaction(id="tx-2", amount=-3000))
    assert len(storage.get_transactions()) == 2

    updated = storage.update_transaction("tx-1", {"amount": -6000})
    assert updated.amount == -6000
    assert updated.description == "Groceries"

    storage.delete_transaction("tx-1")
    assert [tx.id for tx in storage.get_transactions()] == ["tx-2"]


def test_categories_crud(storage):
    storage.create_category(make_category())
    assert storage.update_category("5", {"assigned": 60000}).assigned == 60000
    storage.delete_category("5")
    assert storage.get_categories() == []


def test_delete_missing_is_noop(storage):
    storage.delete_account("nope")
    storage.delete_transaction("nope")
    storage.delete_category("nope")


def test_backup_is_empty(storage):
    assert storage.backup().paths == []


def test_snapshot(storage):
    storage.create_account(make_account())
    storage.create_transaction(make_transaction())
    storage.create_category(make_category())

    snapshot = storage.snapshot()
    assert len(snapshot.accounts) == 1
    assert len(snapshot.transactions) == 1
    assert len(snapshot.categories) == 1


def test_transaction_rolls_back_on_error(storage):
    storage.create_transaction(make_transaction(id="keep"))

    with pytest.raises(RuntimeError):
        with storage.transaction():
            storage.create_transaction(make_transaction(id="leg-1"))
            storage.delete_transaction("keep")
            raise RuntimeError("crash between legs")

    assert [tx.id for tx in storage.get_transactions()] == ["keep"]


def test_transaction_commits(storage):
    with storage.transaction():
        storage.create_transaction(make_transaction(id="leg-1"))
        storage.create_transaction(make_transaction(id="leg-2"))
    assert {tx.id for tx in storage.get_transactions()} == {"leg-1", "leg-2"}


def test_create_storage_rejects_unknown_type():
    assert isinstance(create_storage("memory"), MemoryStorage)
    with pytest.raises(ValueError, match="Unsupported storage type"):
        create_storage("mongodb")


def test_open_and_close_storage():
    storage = open_storage("memory")
    try:
        assert is_storage_open()
        assert get_storage() is storage
        assert storage.is_connected()
    finally:
        close_storage()
    assert not is_storage_open()
    assert not storage.is_connected()
    with pytest.raises(RuntimeError):
        get_storage()


@pytest.mark.parametrize("changes, field", [
    ({"name": None}, "name"),
    ({"type": "mortgage"}, "type"),
    ({"archived": None}, "archived"),
])
def test_update_rejects_invalid_record(storage, changes, field):
    storage.create_account(make_account())

    with pytest.raises(ValidationFailure) as exc_info:
        storage.update_account("acc-1", changes)

    assert exc_info.value.field == field
    assert storage.get_account("acc-1") == make_account()


def test_update_transaction_rejects_null_amount(storage):
    storage.create_transaction(make_transaction())
    with pytest.raises(ValidationFailure):
        storage.update_transaction("tx-1", {"amount": None})
    assert storage.get_transaction("tx-1").amount == -5000


def test_single_record_read_waits_for_commit(storage):
    seen = {}

    def read_legs():
        leg = storage.get_transaction("out")
        seen["leg"] = leg
        seen["sibling"] = storage.get_transaction(leg.transfer_pair_id)

    with storage.transaction():
        storage.create_transaction(make_transaction(id="out", type="transfer", category_id="", transfer_pair_id="in"))
        reader = threading.Thread(target=read_legs)
        reader.start()
        reader.join(timeout=0.2)
        assert reader.is_alive()
        storage.create_transaction(make_transaction(id="in", type="transfer", category_id="", transfer_pair_id="out", amount=5000))

    reader.join(timeout=5)
    assert not reader.is_alive()
    assert seen["sibling"].id == "in"


def test_single_record_read_never_sees_rolled_back_write(storage):
    seen = {}

    def read_leg():
        seen["leg"] = storage.get_transaction("out")

    with pytest.raises(RuntimeError):
        with storage.transaction():
            storage.create_transaction(make_transaction(id="out"))
            reader = threading.Thread(target=read_leg)
            reader.start()
            reader.join(timeout=0.2)
            assert reader.is_alive()
            raise RuntimeError("crash between legs")

    reader.join(timeout=5)
    assert seen["leg"] is None
