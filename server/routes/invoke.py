"""Invoke endpoint: runs one agent invocation exactly as the Lambda handler would."""

from typing import Any

from fastapi import APIRouter, Depends

from models.invocation import Invocation
from orchestrator.action_router import ActionRouter
from server.dependencies import get_router
from server.schemas.requests import InvocationRequest
from utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Invoke"])


@router.post("/invoke")
async def invoke(
    request: InvocationRequest, action_router: ActionRouter = Depends(get_router)
) -> dict[str, Any]:
    invocation = Invocation.from_event(request.to_event())
    response = await action_router.handle(invocation)
    return response.to_dict()
