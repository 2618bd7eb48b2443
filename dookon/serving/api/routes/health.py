"""
Health Check Endpoints
"""

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Request, Response
from pydantic import BaseModel

from dookon.database.connection import Database

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response"""
    status: str
    version: str
    timestamp: datetime
    checks: Dict[str, Any]


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request, response: Response) -> HealthResponse:
    """
    Database connectivity check.

    Answers 503 when the database cannot be reached.
    """
    database: Database = request.app.state.database
    db_health = await database.check_health()

    status = "healthy"
    if db_health.get("status") != "healthy":
        status = "unhealthy"
        response.status_code = 503

    return HealthResponse(
        status=status,
        version=request.app.version,
        timestamp=datetime.now(timezone.utc),
        checks={"database": db_health},
    )
