from __future__ import annotations

from fastapi import APIRouter, Depends

from ..db import Database
from ..deps import get_database

router = APIRouter(tags=["meta"])

SERVICE_NAME = "hello_fastapi"


def _health(db: Database) -> dict:
    db_ok = db.ping()
    return {"ok": db_ok, "service": SERVICE_NAME, "database": db_ok}


@router.get("/health")
def health_root(db: Database = Depends(get_database)):
    return _health(db)


@router.get("/api/health")
def health_api(db: Database = Depends(get_database)):
    return _health(db)


# Legacy endpoint for backward compatibility
@router.get("/api/")
def legacy_root():
    return {"name": "Cloudflare"}
