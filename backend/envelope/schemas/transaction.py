import datetime as dt
from pydantic import BaseModel, Field, field_validator, model_validator

from ..models import MAX_SAFE_AMOUNT, TransactionType, TransactionSource
from ..services.validation import transaction_issues


class TransactionBase(BaseModel):
    """Base transaction fields."""
    type: TransactionType
    account_id: str = Field(min_length=1)
    date: dt.date
    category_id: str = ""
    description: str = ""
    payee: str = ""
    amount: int
    notes: str = ""
    source: TransactionSource = TransactionSource.MANUAL


class TransactionCreate(TransactionBase):
    """Fields for creating an income or expense transaction."""

    @model_validator(mode="after")
    def check_invariants(self):
        if self.type == TransactionType.TRANSFER:
            raise ValueError("Use the transfer endpoint to create transfers")
        issues = transaction_issues(self.type, self.category_id, self.amount)
        if issues:
            raise ValueError("; ".join(message for _, message in issues))
        return self


class TransactionUpdate(BaseModel):
    """Fields for updating a transaction (all optional)."""
    type: TransactionType | None = None
    account_id: str | None = Field(default=None, min_length=1)
    date: dt.date | None = None
    category_id: str | None = None
    description: str | None = None
    payee: str | None = None
    amount: int | None = None
    notes: str | None = None
    source: TransactionSource | None = None

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value, info):
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value


class TransferCreate(BaseModel):
    """Fields for creating a transfer between two accounts."""
    from_account_id: str = Field(min_length=1)
    to_account_id: str = Field(min_length=1)
    amount: int = Field(ge=-MAX_SAFE_AMOUNT, le=MAX_SAFE_AMOUNT)
    date: dt.date
    description: str = ""
    payee: str = ""
    notes: str = ""

    @model_validator(mode="after")
    def check_accounts(self):
        if self.from_account_id == self.to_account_id:
            raise ValueError("Cannot transfer to the same account")
        return self


class TransactionResponse(TransactionBase):
    """Transaction response with all fields."""
    id: str
    transfer_pair_id: str = ""
    created_at: dt.datetime

    class Config:
        from_attributes = True


class TransferResponse(BaseModel):
    """Both legs of a transfer."""
    outflow: TransactionResponse
    inflow: TransactionResponse
