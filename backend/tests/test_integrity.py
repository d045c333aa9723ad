from envelope.services.integrity import can_archive_account, can_delete_account, on_delete_category

from factories import make_transaction


def test_can_delete_account_without_transactions():
    assert can_delete_account([], "a") is True


def test_cannot_delete_account_with_transactions():
    assert can_delete_account([make_transaction(account_id="a")], "a") is False


def test_zero_balance_does_not_allow_delete():
    txs = [
        make_transaction(id="t1", account_id="a", type="income", category_id="1", amount=500),
        make_transaction(id="t2", account_id="a", amount=-500),
    ]
    assert can_delete_account(txs, "a") is False


def test_other_accounts_do_not_block_delete():
    assert can_delete_account([make_transaction(account_id="b")], "a") is True


def test_can_archive_empty_account():
    assert can_archive_account([], "a") is True


def test_can_archive_when_transactions_offset():
    txs = [
        make_transaction(id="t1", account_id="a", type="income", category_id="1", amount=500),
        make_transaction(id="t2", account_id="a", amount=-500),
    ]
    assert can_archive_account(txs, "a") is True


def test_cannot_archive_with_balance():
    assert can_archive_account([make_transaction(account_id="a", amount=-1)], "a") is False


def test_delete_category_clears_matching_transactions():
    txs = [
        make_transaction(id="t1", category_id="5"),
        make_transaction(id="t2", category_id="6"),
        make_transaction(id="t3", category_id="5"),
    ]
    result = on_delete_category(txs, "5")

    assert [tx.category_id for tx in result] == ["", "6", ""]
    assert result[1] == txs[1]
    # Input untouched
    assert [tx.category_id for tx in txs] == ["5", "6", "5"]


def test_delete_unknown_category_leaves_ledger_equal():
    txs = [make_transaction(id="t1", category_id="5"), make_transaction(id="t2", category_id="")]
    result = on_delete_category(txs, "99")
    assert result == txs
    assert result is not txs
