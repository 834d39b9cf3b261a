# app/routers/health.py

from fastapi import APIRouter

from app.models.greeting import PingResponse

router = APIRouter(tags=["health"])

@router.get("/ping", response_model=PingResponse)
async def ping():
    """Liveness probe."""
    return PingResponse()
