"""
Operational endpoints.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from app.api.schemas import HealthResponse
from app.infra.config.database import Database, get_database

router = APIRouter(tags=["system"])


@router.get("/health", response_model=HealthResponse)
async def health_check(database: Database = Depends(get_database)) -> HealthResponse:
    """Status token and server timestamp."""
    database_ok = await database.health_check()
    return HealthResponse(
        status="ok" if database_ok else "degraded",
        timestamp=datetime.now(timezone.utc),
        database="ok" if database_ok else "unavailable",
    )
