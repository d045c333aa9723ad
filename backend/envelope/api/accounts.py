from fastapi import APIRouter, Depends

from ..dependencies import get_ledger
from ..models import Account
from ..schemas import AccountCreate, AccountUpdate, AccountResponse
from ..services.ledger_service import LedgerService

router = APIRouter()


def _build_response(account: Account, balance: int) -> AccountResponse:
    return AccountResponse(**account.model_dump(), balance=balance)


@router.get("/", response_model=list[AccountResponse])
def list_accounts(include_archived: bool = True, ledger: LedgerService = Depends(get_ledger)):
    """Get all accounts with their derived balances."""
    balances = ledger.account_balances()
    accounts = sorted(ledger.snapshot().accounts, key=lambda a: (a.archived, a.name.lower()))
    return [
        _build_response(a, balances.get(a.id, 0))
        for a in accounts
        if include_archived or not a.archived
    ]


@router.get("/{account_id}", response_model=AccountResponse)
def get_account(account_id: str, ledger: LedgerService = Depends(get_ledger)):
    """Get a single account by ID."""
    account = ledger.get_account(account_id)
    return _build_response(account, ledger.account_balances().get(account_id, 0))


@router.post("/", response_model=AccountResponse, status_code=201)
def create_account(account: AccountCreate, ledger: LedgerService = Depends(get_ledger)):
    """Create a new account, booking its starting balance."""
    created = ledger.create_account(
        name=account.name,
        account_type=account.type,
        institution=account.institution,
        starting_balance=account.starting_balance,
    )
    return _build_response(created, account.starting_balance)


@router.patch("/{account_id}", response_model=AccountResponse)
def update_account(
    account_id: str,
    account: AccountUpdate,
    ledger: LedgerService = Depends(get_ledger)
):
    """Update an account. Archiving requires a zero balance."""
    updated = ledger.update_account(account_id, account.model_dump(exclude_unset=True))
    return _build_response(updated, ledger.account_balances().get(account_id, 0))


@router.post("/{account_id}/archive", response_model=AccountResponse)
def archive_account(account_id: str, ledger: LedgerService = Depends(get_ledger)):
    updated = ledger.archive_account(account_id, True)
    return _build_response(updated, ledger.account_balances().get(account_id, 0))


@router.post("/{account_id}/unarchive", response_model=AccountResponse)
def unarchive_account(account_id: str, ledger: LedgerService = Depends(get_ledger)):
    updated = ledger.archive_account(account_id, False)
    return _build_response(updated, ledger.account_balances().get(account_id, 0))


@router.delete("/{account_id}", status_code=204)
def delete_account(account_id: str, ledger: LedgerService = Depends(get_ledger)):
    """Delete an account. Only accounts without transactions can be deleted."""
    ledger.delete_account(account_id)
    return None
