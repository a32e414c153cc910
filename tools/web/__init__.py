"""Web tools: page scraping and Google search."""

from .contracts import SearchResult
from .factory import create_page_extractor, create_search_client
from .google_search_client import GoogleSearchClient
from .page_extractor import PageExtractor, extract_text, truncate_utf8

__all__ = [
    "GoogleSearchClient",
    "PageExtractor",
    "SearchResult",
    "create_page_extractor",
    "create_search_client",
    "extract_text",
    "truncate_utf8",
]
