"""GET /api/health — liveness check."""
from fastapi import APIRouter

from mssql_dbml import __version__

router = APIRouter()


@router.get("/health")
def health_check():
    return {"status": "ok", "version": __version__}
