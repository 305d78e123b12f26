from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter(tags=["internal"])


class HealthResponse(BaseModel):
    status: str
    timestamp: str


@router.get("/health", response_model=HealthResponse)
async def health() -> dict[str, str]:
    return {
        "status": "Server is running!",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
