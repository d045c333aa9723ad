from fastapi import APIRouter, Depends

from ..dependencies import get_ledger
from ..schemas import CategoryCreate, CategoryUpdate, CategoryResponse
from ..services.ledger_service import LedgerService

router = APIRouter()


@router.get("/", response_model=list[CategoryResponse])
def list_categories(ledger: LedgerService = Depends(get_ledger)):
    """Get all categories."""
    return sorted(ledger.snapshot().categories, key=lambda c: (c.sort_order, c.name))


@router.post("/defaults", response_model=list[CategoryResponse])
def seed_default_categories(ledger: LedgerService = Depends(get_ledger)):
    """Seed the default category set if the budget has no categories yet."""
    return sorted(ledger.initialize_budget(), key=lambda c: (c.sort_order, c.name))


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(category_id: str, ledger: LedgerService = Depends(get_ledger)):
    """Get a single category by ID."""
    return ledger.get_category(category_id)


@router.post("/", response_model=CategoryResponse, status_code=201)
def create_category(category: CategoryCreate, ledger: LedgerService = Depends(get_ledger)):
    """Create a new category."""
    return ledger.create_category(category.model_dump())


@router.patch("/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: str,
    category: CategoryUpdate,
    ledger: LedgerService = Depends(get_ledger)
):
    """Update a category."""
    return ledger.update_category(category_id, category.model_dump(exclude_unset=True))


@router.delete("/{category_id}", status_code=204)
def delete_category(category_id: str, ledger: LedgerService = Depends(get_ledger)):
    """Delete a category. Its transactions become uncategorized."""
    ledger.delete_category(category_id)
    return None
