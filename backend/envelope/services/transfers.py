"""
Transfer legs.

A transfer between two accounts is stored as two transactions: an outflow on the
source account and an inflow on the destination account. Each leg's
transfer_pair_id is the other leg's id, their amounts are additive inverses and
they share a date. The functions here keep that true across create, update and
delete; none of them mutate the ledger they are given.
"""

import uuid
from collections.abc import Callable, Sequence
from datetime import date, datetime, timezone

from ..models import Transaction, TransactionSource, TransactionType

IdFactory = Callable[[], str]


def new_id() -> str:
    """Default id factory."""
    return str(uuid.uuid4())


def _build_leg(
    *,
    leg_id: str,
    pair_id: str,
    account_id: str,
    amount: int,
    on_date: date,
    description: str,
    payee: str,
    notes: str,
    created_at: datetime,
) -> Transaction:
    """Build one transfer leg. Every transaction field is set here."""
    return Transaction(
        id=leg_id,
        type=TransactionType.TRANSFER,
        account_id=account_id,
        date=on_date,
        category_id="",
        description=description,
        payee=payee,
        transfer_pair_id=pair_id,
        amount=amount,
        notes=notes,
        source=TransactionSource.MANUAL,
        created_at=created_at,
    )


def create_transfer_pair(
    from_account_id: str,
    to_account_id: str,
    amount: int,
    on_date: date,
    *,
    description: str = "",
    payee: str = "",
    notes: str = "",
    id_factory: IdFactory = new_id,
    now: datetime | None = None,
) -> tuple[Transaction, Transaction]:
    """
    Create the two linked legs of a transfer.

    The sign of amount is ignored: the outflow always gets -|amount| and the
    inflow +|amount|. Returns (outflow, inflow).
    """
    magnitude = abs(amount)
    outflow_id = id_factory()
    inflow_id = id_factory()
    if outflow_id == inflow_id:
        raise ValueError(f"id factory returned the same id twice: {outflow_id}")

    created_at = now or datetime.now(timezone.utc)
    shared = {
        "on_date": on_date,
        "description": description,
        "payee": payee,
        "notes": notes,
        "created_at": created_at,
    }

    outflow = _build_leg(
        leg_id=outflow_id,
        pair_id=inflow_id,
        account_id=from_account_id,
        amount=-magnitude,
        **shared,
    )
    inflow = _build_leg(
        leg_id=inflow_id,
        pair_id=outflow_id,
        account_id=to_account_id,
        amount=magnitude,
        **shared,
    )
    return outflow, inflow


def find_transfer_sibling(transactions: Sequence[Transaction], tx: Transaction) -> Transaction | None:
    """Return the other leg of a transfer, or None."""
    if not tx.transfer_pair_id:
        return None
    for other in transactions:
        if other.id == tx.transfer_pair_id:
            return other
    return None


def propagate_transfer_update(
    transactions: Sequence[Transaction],
    updated: Transaction,
) -> list[Transaction]:
    """
    Mirror an edited transfer leg onto its sibling.

    The edited leg replaces its stored version; the sibling gets the negated
    amount and the same date. Non-transfers are returned unchanged.
    """
    if not updated.transfer_pair_id:
        return list(transactions)

    result = []
    for tx in transactions:
        if tx.id == updated.id:
            result.append(updated)
        elif tx.id == updated.transfer_pair_id:
            result.append(tx.model_copy(update={"amount": -updated.amount, "date": updated.date}))
        else:
            result.append(tx)
    return result


def cascade_transfer_delete(transactions: Sequence[Transaction], deleted_id: str) -> list[Transaction]:
    """
    Remove a transaction, and its sibling if it is a transfer leg.

    Deleting an id that is not in the ledger changes nothing.
    """
    target = next((tx for tx in transactions if tx.id == deleted_id), None)
    if target is None:
        return list(transactions)

    removed = {deleted_id}
    if target.transfer_pair_id:
        removed.add(target.transfer_pair_id)
    return [tx for tx in transactions if tx.id not in removed]


def find_unpaired_transfers(transactions: Sequence[Transaction]) -> list[Transaction]:
    """
    Transfer legs that break the pairing rule.

    A leg is broken when its sibling is missing, does not point back, is not
    the additive inverse, or is dated differently.
    """
    by_id = {tx.id: tx for tx in transactions}
    broken = []
    for tx in transactions:
        if tx.type != TransactionType.TRANSFER:
            continue
        sibling = by_id.get(tx.transfer_pair_id) if tx.transfer_pair_id else None
        if (
            sibling is None
            or sibling.id == tx.id
            or sibling.transfer_pair_id != tx.id
            or sibling.amount != -tx.amount
            or sibling.date != tx.date
        ):
            broken.append(tx)
    return broken
