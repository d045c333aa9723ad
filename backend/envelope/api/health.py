from fastapi import APIRouter

from ..storage import get_storage

router = APIRouter()


@router.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "ok", "storage": get_storage().kind}
