import json
import os
from pathlib import Path
from pydantic import BaseModel, ValidationError

from .models import BudgetMetadata, Currency

# Config directory: ENVELOPE_DATA_DIR if set (e.g. /data in Docker),
# otherwise fall back to ~/.config/envelope for local dev
_data_dir = os.environ.get("ENVELOPE_DATA_DIR")
CONFIG_DIR = Path(_data_dir) / "config" if _data_dir else Path.home() / ".config" / "envelope"
BUDGET_FILE = CONFIG_DIR / "budget.json"

DEFAULT_BUDGET = BudgetMetadata(
    name="My Budget",
    currency=Currency(code="USD", precision=2),
    version=1,
)


class Settings(BaseModel):
    """Server settings."""
    host: str = "127.0.0.1"
    port: int = 8000
    storage_type: str = "memory"


def load_settings() -> Settings:
    """Read server settings from the environment."""
    return Settings(
        host=os.environ.get("ENVELOPE_HOST", "127.0.0.1"),
        port=int(os.environ.get("ENVELOPE_PORT", "8000")),
        storage_type=os.environ.get("ENVELOPE_STORAGE", "memory"),
    )


def load_budget_metadata(path: Path | None = None) -> BudgetMetadata:
    """Load the budget name and currency, or the defaults if there is no usable file."""
    path = path or BUDGET_FILE
    if not path.exists():
        return DEFAULT_BUDGET

    try:
        with open(path, "r") as f:
            return BudgetMetadata(**json.load(f))
    except (json.JSONDecodeError, TypeError, ValidationError):
        return DEFAULT_BUDGET
