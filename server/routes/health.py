"""Health check endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from orchestrator.action_router import ActionRouter
from server.dependencies import get_router
from server.schemas.responses import HealthResponseDTO

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponseDTO)
async def health_check(action_router: ActionRouter = Depends(get_router)):
    """Health check endpoint."""
    return HealthResponseDTO(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        version="1.0.0",
        functions=action_router.functions,
    )
