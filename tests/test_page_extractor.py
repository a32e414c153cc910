import asyncio

import httpx
import pytest

from conftest import RecordingTransport, html_responder
from tools.web.page_extractor import (
    MAX_TEXT_BYTES,
    TRUNCATION_MARKER,
    PageExtractor,
    extract_text,
    truncate_utf8,
)

pytestmark = pytest.mark.unit


def _extractor(transport: httpx.MockTransport) -> PageExtractor:
    return PageExtractor(user_agent="test-agent", http_client=httpx.AsyncClient(transport=transport))


class TestExtractText:
    def test_returns_body_text(self):
        html = "<html><head><title>Title</title></head><body><p>Hello</p> <p>World</p></body></html>"
        assert extract_text(html) == "Hello World"

    def test_strips_script_style_and_comments(self):
        html = (
            "<html><body>"
            "<script>var secret = 1;</script>"
            "<style>.hidden { display: none }</style>"
            "<!-- internal note -->"
            "<p>Visible</p>"
            "</body></html>"
        )
        text = extract_text(html)
        assert text == "Visible"
        assert "secret" not in text
        assert "hidden" not in text
        assert "internal note" not in text

    def test_strips_iframe_noscript_link_meta(self):
        html = (
            "<html><body>"
            "<iframe>frame content</iframe>"
            "<noscript>enable javascript</noscript>"
            '<link rel="stylesheet" href="a.css">'
            '<meta name="x" content="y">'
            "<div>Kept</div>"
            "</body></html>"
        )
        assert extract_text(html) == "Kept"

    def test_head_contents_never_leak(self):
        html = "<html><head><title>Page title</title></head><body>Body</body></html>"
        assert "Page title" not in extract_text(html)

    def test_other_elements_are_kept(self):
        html = "<html><body><nav>Menu</nav><main>Article</main><footer>Foot</footer></body></html>"
        assert extract_text(html) == "MenuArticleFoot"

    def test_whitespace_between_elements_comes_from_parser(self):
        # html.parser collapses a whitespace-only run to one character
        html = "<html><body><p>a</p>\n\n<p>b</p></body></html>"
        assert extract_text(html) == "a\nb"

    def test_whitespace_inside_text_is_kept(self):
        html = "<html><body><pre>x  \n\n  y</pre></body></html>"
        assert extract_text(html) == "x  \n\n  y"

    def test_fragment_without_body(self):
        assert extract_text("<p>Just a fragment</p><script>x()</script>") == "Just a fragment"

    def test_empty_document(self):
        assert extract_text("") == ""


class TestTruncateUtf8:
    def test_short_text_unchanged(self):
        assert truncate_utf8("hello") == "hello"

    def test_text_exactly_at_limit_unchanged(self):
        text = "a" * MAX_TEXT_BYTES
        assert truncate_utf8(text) == text

    def test_ascii_over_limit(self):
        result = truncate_utf8("a" * (MAX_TEXT_BYTES + 100))
        assert result == "a" * MAX_TEXT_BYTES + TRUNCATION_MARKER

    def test_multibyte_characters_are_never_split(self):
        text = "€" * 10000  # 3 bytes each
        result = truncate_utf8(text)

        assert result.endswith(TRUNCATION_MARKER)
        kept = result[: -len(TRUNCATION_MARKER)]
        assert kept == "€" * (MAX_TEXT_BYTES // 3)
        assert text.startswith(kept)
        assert len(result.encode("utf-8")) <= MAX_TEXT_BYTES + len(TRUNCATION_MARKER)

    def test_four_byte_characters(self):
        text = "x" + "\U0001f600" * 6000
        result = truncate_utf8(text)
        kept = result[: -len(TRUNCATION_MARKER)]

        assert text.startswith(kept)
        assert len(kept.encode("utf-8")) <= MAX_TEXT_BYTES
        # one more emoji would not fit
        assert len(kept.encode("utf-8")) + 4 > MAX_TEXT_BYTES

    def test_trailing_whitespace_trimmed_before_marker(self):
        text = "a" * (MAX_TEXT_BYTES - 10) + " " * 100
        assert truncate_utf8(text) == "a" * (MAX_TEXT_BYTES - 10) + TRUNCATION_MARKER

    def test_leading_whitespace_preserved(self):
        text = "  " + "b" * MAX_TEXT_BYTES
        result = truncate_utf8(text)
        assert result.startswith("  b")
        assert text.startswith(result[: -len(TRUNCATION_MARKER)])

    def test_custom_limit(self):
        assert truncate_utf8("abcdef", max_bytes=3) == "abc..."


class TestPageExtractor:
    def test_scrape_fetches_once_and_extracts(self):
        transport = RecordingTransport(
            html_responder("<html><body><h1>News</h1><script>track()</script></body></html>")
        )
        text = asyncio.run(_extractor(transport).scrape("https://example.com/news"))

        assert text == "News"
        assert len(transport.requests) == 1
        assert transport.requests[0].method == "GET"
        assert str(transport.requests[0].url) == "https://example.com/news"

    def test_sends_user_agent(self):
        transport = RecordingTransport(html_responder("<body>ok</body>"))
        asyncio.run(_extractor(transport).scrape("https://example.com"))
        assert transport.requests[0].headers["user-agent"] == "test-agent"

    def test_error_status_body_is_still_extracted(self):
        transport = RecordingTransport(html_responder("<body>Not Found</body>", status_code=404))
        assert asyncio.run(_extractor(transport).scrape("https://example.com/missing")) == "Not Found"

    def test_follows_redirects(self):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/old":
                return httpx.Response(301, headers={"location": "https://example.com/new"})
            return httpx.Response(200, text="<body>Moved here</body>")

        transport = RecordingTransport(handler)
        assert asyncio.run(_extractor(transport).scrape("https://example.com/old")) == "Moved here"
        assert [r.url.path for r in transport.requests] == ["/old", "/new"]

    def test_large_page_is_truncated(self):
        html = "<html><body><p>" + "word " * 10000 + "</p></body></html>"
        transport = RecordingTransport(html_responder(html))
        text = asyncio.run(_extractor(transport).scrape("https://example.com/long"))

        assert text.endswith(TRUNCATION_MARKER)
        assert len(text.encode("utf-8")) <= MAX_TEXT_BYTES + len(TRUNCATION_MARKER)

    def test_network_error_propagates(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(httpx.ConnectError):
            asyncio.run(_extractor(RecordingTransport(handler)).scrape("https://down.example"))
