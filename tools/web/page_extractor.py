"""Fetch a single web page and reduce it to its readable text."""

from contextlib import asynccontextmanager

import httpx
from bs4 import BeautifulSoup, Comment

from utils.logger import get_logger

logger = get_logger(__name__)

# Lambda response payloads are capped at 25KB; leave room for the envelope
MAX_TEXT_BYTES = 20 * 1024
TRUNCATION_MARKER = "..."

STRIPPED_TAGS = ["script", "style", "iframe", "noscript", "link", "meta", "head"]


def extract_text(html: str) -> str:
    """
    Strip non-content markup and return the text of the document body.

    Text nodes are concatenated as the parser yields them. The only whitespace
    change is html.parser collapsing whitespace-only runs between elements.
    """
    soup = BeautifulSoup(html, "html.parser")

    for element in soup(STRIPPED_TAGS):
        element.decompose()
    for comment in soup.find_all(string=lambda node: isinstance(node, Comment)):
        comment.extract()

    # html.parser does not synthesize <body> for fragments
    root = soup.body if soup.body is not None else soup
    return root.get_text()


def truncate_utf8(text: str, max_bytes: int = MAX_TEXT_BYTES) -> str:
    """
    Cap `text` at `max_bytes` of UTF-8.

    Text over the limit is cut to the longest whole-character prefix that fits,
    trailing whitespace is stripped and TRUNCATION_MARKER appended.
    """
    encoded = text.encode("utf-8")
    if len(encoded) <= max_bytes:
        return text

    # A byte slice of valid UTF-8 can only be broken at its tail; "ignore"
    # drops that partial character and nothing else.
    prefix = encoded[:max_bytes].decode("utf-8", errors="ignore")
    return prefix.rstrip() + TRUNCATION_MARKER


class PageExtractor:
    """
    Single-page scraper.

    No caching and no retries: every call issues exactly one GET.
    """

    def __init__(
        self,
        user_agent: str,
        timeout_s: float | None = None,
        max_bytes: int = MAX_TEXT_BYTES,
        http_client: httpx.AsyncClient | None = None,
    ):
        """
        Args:
            user_agent: User-Agent header sent with every fetch
            timeout_s: Request timeout; None keeps the httpx default
            max_bytes: UTF-8 ceiling for the returned text
            http_client: Shared client (tests inject one backed by MockTransport)
        """
        self.user_agent = user_agent
        self.timeout_s = timeout_s
        self.max_bytes = max_bytes
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

    async def fetch_html(self, url: str) -> str:
        """
        GET `url` and return the decoded body.

        The body is returned whatever the HTTP status; transport errors propagate.
        """
        async with self._client() as client:
            response = await client.get(
                url, headers={"User-Agent": self.user_agent}, follow_redirects=True
            )

        logger.info(
            "Fetched page",
            extra={
                "extra_fields": {
                    "url": url,
                    "status_code": response.status_code,
                    "content_type": response.headers.get("content-type", ""),
                    "content_length": len(response.content),
                }
            },
        )
        return response.text

    async def scrape(self, url: str) -> str:
        """Fetch `url` and return its readable text, capped at max_bytes."""
        html = await self.fetch_html(url)
        text = extract_text(html)
        size = len(text.encode("utf-8"))

        truncated = truncate_utf8(text, self.max_bytes)
        logger.debug(
            "Extracted page text",
            extra={
                "extra_fields": {
                    "url": url,
                    "text_bytes": size,
                    "truncated": size > self.max_bytes,
                }
            },
        )
        return truncated
