from pydantic import BaseModel, ConfigDict


class LedgerModel(BaseModel):
    """Base for ledger records. Records are immutable; use model_copy(update=...)."""

    model_config = ConfigDict(frozen=True, from_attributes=True)
