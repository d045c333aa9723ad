from fastapi import APIRouter, Depends, Query

from ..dependencies import get_ledger
from ..schemas import (
    TransactionCreate,
    TransactionUpdate,
    TransactionResponse,
    TransferCreate,
    TransferResponse,
)
from ..services.budget_service import parse_month
from ..services.ledger_service import LedgerService

router = APIRouter()


@router.get("/", response_model=list[TransactionResponse])
def list_transactions(
    account_id: str | None = None,
    month: str | None = Query(None, description="YYYY-MM"),
    ledger: LedgerService = Depends(get_ledger)
):
    """
    Get transactions with optional filters.

    If month is provided, returns transactions dated within that calendar month.
    """
    transactions = ledger.snapshot().transactions

    if account_id:
        transactions = [tx for tx in transactions if tx.account_id == account_id]

    if month:
        year, month_num = parse_month(month)
        transactions = [
            tx for tx in transactions
            if tx.date.year == year and tx.date.month == month_num
        ]

    return sorted(transactions, key=lambda tx: (tx.date, tx.created_at))


@router.get("/{transaction_id}", response_model=TransactionResponse)
def get_transaction(transaction_id: str, ledger: LedgerService = Depends(get_ledger)):
    """Get a single transaction by ID."""
    return ledger.get_transaction(transaction_id)


@router.post("/", response_model=TransactionResponse, status_code=201)
def create_transaction(transaction: TransactionCreate, ledger: LedgerService = Depends(get_ledger)):
    """Create a new income or expense transaction."""
    return ledger.create_transaction(transaction.model_dump())


@router.post("/transfer", response_model=TransferResponse, status_code=201)
def create_transfer(transfer: TransferCreate, ledger: LedgerService = Depends(get_ledger)):
    """Create a transfer (two linked transactions)."""
    outflow, inflow = ledger.create_transfer(
        from_account_id=transfer.from_account_id,
        to_account_id=transfer.to_account_id,
        amount=transfer.amount,
        on_date=transfer.date,
        description=transfer.description,
        payee=transfer.payee,
        notes=transfer.notes,
    )
    return TransferResponse(
        outflow=TransactionResponse.model_validate(outflow),
        inflow=TransactionResponse.model_validate(inflow),
    )


@router.patch("/{transaction_id}", response_model=TransactionResponse)
def update_transaction(
    transaction_id: str,
    transaction: TransactionUpdate,
    ledger: LedgerService = Depends(get_ledger)
):
    """Update a transaction. Transfer edits are mirrored onto the other leg."""
    return ledger.update_transaction(transaction_id, transaction.model_dump(exclude_unset=True))


@router.delete("/{transaction_id}", status_code=204)
def delete_transaction(transaction_id: str, ledger: LedgerService = Depends(get_ledger)):
    """Delete a transaction; deleting a transfer leg deletes both legs."""
    ledger.delete_transaction(transaction_id)
    return None
