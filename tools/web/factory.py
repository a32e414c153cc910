"""Factories that build the web tools from a Config."""

from config.config import Config
from utils.logger import get_logger

from .google_search_client import GoogleSearchClient
from .page_extractor import PageExtractor

logger = get_logger(__name__)


def create_page_extractor(config: Config) -> PageExtractor:
    return PageExtractor(user_agent=config.user_agent, timeout_s=config.http_timeout_s)


def create_search_client(config: Config) -> GoogleSearchClient:
    """
    Build the search client.

    Missing credentials are only warned about: scraping must keep working, and
    the search API answers unauthenticated calls with an error document that
    ends up as a "No results found" failure.
    """
    missing = config.validate()
    if missing:
        logger.warning(
            "Search credentials missing; google_search will not return results",
            extra={"extra_fields": {"missing": missing}},
        )

    return GoogleSearchClient(config=config.search, timeout_s=config.http_timeout_s)
