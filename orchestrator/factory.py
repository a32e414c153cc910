"""Build the process-wide ActionRouter from environment configuration."""

from config.config import Config
from orchestrator.action_router import ActionRouter
from tools.web import create_page_extractor, create_search_client


def create_router_from_env(config: Config | None = None) -> ActionRouter:
    """
    Create an ActionRouter.

    Environment variables (read once, through Config):
        GOOGLE_SEARCH_KEY / GOOGLE_SEARCH_CX: search credentials
        GOOGLE_SEARCH_ENDPOINT: override of the Custom Search endpoint
        HTTP_TIMEOUT_SECONDS: outbound request timeout
        HTTP_USER_AGENT: User-Agent for page fetches
    """
    config = config or Config()
    return ActionRouter(
        extractor=create_page_extractor(config),
        search_client=create_search_client(config),
    )
