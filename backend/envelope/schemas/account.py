from datetime import datetime
from pydantic import BaseModel, Field, field_validator

from ..models import AccountType, MAX_SAFE_AMOUNT


class AccountBase(BaseModel):
    """Base account fields."""
    name: str = Field(min_length=1)
    type: AccountType
    institution: str = ""


class AccountCreate(AccountBase):
    """Fields for creating an account."""
    starting_balance: int = Field(default=0, ge=-MAX_SAFE_AMOUNT, le=MAX_SAFE_AMOUNT)


class AccountUpdate(BaseModel):
    """Fields for updating an account (all optional)."""
    name: str | None = Field(default=None, min_length=1)
    type: AccountType | None = None
    institution: str | None = None
    reported_balance: int | None = None
    reconciled_at: str | None = None
    archived: bool | None = None

    @field_validator("name", "type", "institution", "reconciled_at", "archived", mode="before")
    @classmethod
    def reject_null(cls, value, info):
        # reported_balance may be cleared; everything else can only be omitted
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value


class AccountResponse(AccountBase):
    """Account response with its derived balance."""
    id: str
    reported_balance: int | None = None
    reconciled_at: str = ""
    archived: bool
    created_at: datetime
    balance: int

    class Config:
        from_attributes = True
