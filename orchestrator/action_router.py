"""
ActionRouter - dispatches one agent invocation to its web tool.

Key guarantees:
- Exactly one handler runs per invocation, with at most one outbound request
- Missing parameters and empty search results come back as FAILURE envelopes
- Upstream faults (network, malformed JSON) are not caught here; they reach the
  host as execution errors, distinct from a FAILURE envelope
"""

import time
from collections.abc import Awaitable, Callable

from models.action_response import ActionResponse
from models.invocation import Invocation
from tools.web.google_search_client import GoogleSearchClient
from tools.web.page_extractor import PageExtractor
from utils.logger import get_logger

logger = get_logger(__name__)

FUNCTION_SCRAPE = "scrape"
FUNCTION_GOOGLE_SEARCH = "google_search"

ERROR_FUNCTION_NOT_FOUND = "Function not found"
ERROR_URL_MISSING = "URL not found in parameters"
ERROR_QUERY_MISSING = "Query not found in parameters"
ERROR_NO_RESULTS = "No results found"

Handler = Callable[[Invocation], Awaitable[ActionResponse]]


class ActionRouter:
    def __init__(self, extractor: PageExtractor, search_client: GoogleSearchClient):
        self.extractor = extractor
        self.search_client = search_client
        self._handlers: dict[str, Handler] = {
            FUNCTION_SCRAPE: self._scrape,
            FUNCTION_GOOGLE_SEARCH: self._google_search,
        }

    @property
    def functions(self) -> list[str]:
        return list(self._handlers)

    async def handle(self, invocation: Invocation) -> ActionResponse:
        """Run the handler named by `invocation.function` and wrap its outcome."""
        start = time.perf_counter()
        handler = self._handlers.get(invocation.function)

        if handler is None:
            response = ActionResponse.failure(invocation, ERROR_FUNCTION_NOT_FOUND)
        else:
            try:
                response = await handler(invocation)
            except Exception as e:
                logger.error(
                    "Upstream call failed",
                    exc_info=True,
                    extra={
                        "extra_fields": {
                            "function": invocation.function,
                            "action_group": invocation.action_group,
                            "session_id": invocation.session_id,
                            "error_type": type(e).__name__,
                        }
                    },
                )
                raise

        logger.info(
            "Invocation handled",
            extra={
                "extra_fields": {
                    "function": invocation.function,
                    "action_group": invocation.action_group,
                    "session_id": invocation.session_id,
                    "success": response.is_success,
                    "error": response.payload.get("error"),
                    "latency_ms": int((time.perf_counter() - start) * 1000),
                }
            },
        )
        return response

    async def _scrape(self, invocation: Invocation) -> ActionResponse:
        url = invocation.get_parameter("url")
        if not url:
            return ActionResponse.failure(invocation, ERROR_URL_MISSING)

        text = await self.extractor.scrape(url)
        return ActionResponse.success(invocation, {"text": text})

    async def _google_search(self, invocation: Invocation) -> ActionResponse:
        query = invocation.get_parameter("query")
        if not query:
            return ActionResponse.failure(invocation, ERROR_QUERY_MISSING)

        results = await self.search_client.search(query)
        if not results:
            return ActionResponse.failure(invocation, ERROR_NO_RESULTS)

        return ActionResponse.success(
            invocation, {"results": [result.to_dict() for result in results]}
        )
