"""AWS Lambda entry point for the Bedrock agent action group."""

import asyncio
from typing import Any

from models.invocation import Invocation
from orchestrator.factory import create_router_from_env
from utils.logger import get_logger

logger = get_logger(__name__)

# Built once per cold start; configuration is never re-read afterwards
ROUTER = create_router_from_env()


def handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    request_id = getattr(context, "aws_request_id", None)
    invocation = Invocation.from_event(event)

    logger.info(
        "Invocation received",
        extra={
            "extra_fields": {
                "request_id": request_id,
                "function": invocation.function,
                "action_group": invocation.action_group,
                "parameter_names": [param.name for param in invocation.parameters],
            }
        },
    )

    try:
        response = asyncio.run(ROUTER.handle(invocation))
    except Exception:
        logger.error(
            "Invocation failed with an unhandled error",
            extra={"extra_fields": {"request_id": request_id}},
        )
        raise

    return response.to_dict()
