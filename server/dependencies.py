"""FastAPI dependencies."""

from orchestrator.action_router import ActionRouter
from orchestrator.factory import create_router_from_env


def get_router() -> ActionRouter:
    """Dependency to get the router instance (singleton pattern)."""
    if not hasattr(get_router, "_instance"):
        get_router._instance = create_router_from_env()
    return get_router._instance
