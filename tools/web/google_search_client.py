"""Google Custom Search JSON API client."""

from contextlib import asynccontextmanager
from typing import Any

import httpx

from config.config import SearchConfig
from utils.logger import get_logger

from .contracts import SearchResult

logger = get_logger(__name__)

MAX_RESULTS = 10


def parse_results(payload: Any, max_results: int = MAX_RESULTS) -> list[SearchResult]:
    """
    Map a Custom Search response to SearchResult entries, upstream order kept.

    Anything without a non-empty `items` list (including Google's error
    documents) yields an empty list.
    """
    if not isinstance(payload, dict):
        return []

    items = payload.get("items")
    if not items or not isinstance(items, list):
        return []

    results = []
    for item in items[:max_results]:
        item = item if isinstance(item, dict) else {}
        results.append(SearchResult(title=item.get("title"), link=item.get("link")))
    return results


class GoogleSearchClient:
    """
    Thin async wrapper around the Custom Search `v1` endpoint.

    Credentials come from the injected SearchConfig, never from the environment.
    """

    def __init__(
        self,
        config: SearchConfig,
        timeout_s: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.config = config
        self.timeout_s = timeout_s
        self._http_client = http_client

    @asynccontextmanager
    async def _client(self):
        if self._http_client is not None:
            yield self._http_client
            return

        kwargs = {}
        if self.timeout_s is not None:
            kwargs["timeout"] = self.timeout_s
        async with httpx.AsyncClient(**kwargs) as client:
            yield client

    async def search(self, query: str) -> list[SearchResult]:
        """
        Run one search and return at most MAX_RESULTS entries.

        Returns an empty list when the API reports no items. Transport errors and
        undecodable JSON propagate.
        """
        params = {
            "key": self.config.api_key,
            "cx": self.config.engine_id,
            "q": query,
        }

        async with self._client() as client:
            response = await client.get(self.config.endpoint, params=params)

        payload = response.json()
        results = parse_results(payload)

        if not results and isinstance(payload, dict) and "error" in payload:
            error = payload["error"] if isinstance(payload["error"], dict) else {}
            logger.warning(
                "Search API returned an error document",
                extra={
                    "extra_fields": {
                        "status_code": response.status_code,
                        "api_error": error.get("message", ""),
                    }
                },
            )

        logger.info(
            "Search finished",
            extra={
                "extra_fields": {
                    "query": query,
                    "status_code": response.status_code,
                    "result_count": len(results),
                }
            },
        )
        return results
