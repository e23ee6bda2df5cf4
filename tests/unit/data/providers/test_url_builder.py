"""Tests for UrlBuilder rendering."""

import pytest

from data.providers.finnhub import UrlBuilder


class TestUrlBuilder:
    """Test pure URL rendering"""

    def test_renders_root_endpoint_and_query(self):
        builder = UrlBuilder("https://api.example.com/v1")

        url = builder.url("quote", [("symbol", "AAPL"), ("token", "abc123")])

        assert url == "https://api.example.com/v1/quote?symbol=AAPL&token=abc123"

    def test_nested_endpoint_path(self):
        builder = UrlBuilder("https://finnhub.io/api/v1")

        assert (
            builder.url("stock/candle", [("symbol", "AAPL")])
            == "https://finnhub.io/api/v1/stock/candle?symbol=AAPL"
        )

    @pytest.mark.parametrize(
        "root, endpoint",
        [
            ("https://finnhub.io/api/v1/", "quote"),
            ("https://finnhub.io/api/v1", "/quote"),
            ("https://finnhub.io/api/v1/", "/quote"),
        ],
    )
    def test_single_separator_between_root_and_endpoint(self, root, endpoint):
        assert UrlBuilder(root).url(endpoint, [("a", "1")]) == "https://finnhub.io/api/v1/quote?a=1"

    def test_no_params_renders_no_question_mark(self):
        assert UrlBuilder("https://finnhub.io/api/v1").url("forex/exchange", []) == (
            "https://finnhub.io/api/v1/forex/exchange"
        )

    def test_preserves_order_and_duplicates(self):
        builder = UrlBuilder("https://h.example")

        url = builder.url("e", [("z", "1"), ("a", "2"), ("z", "3")])

        assert url == "https://h.example/e?z=1&a=2&z=3"

    def test_escapes_values(self):
        builder = UrlBuilder("https://h.example")

        url = builder.url("search", [("q", "AT&T corp"), ("x", "a=b/c?")])

        assert url == "https://h.example/search?q=AT%26T+corp&x=a%3Db%2Fc%3F"

    def test_deterministic(self):
        builder = UrlBuilder("https://finnhub.io/api/v1")
        params = [("symbol", "AAPL"), ("resolution", "D"), ("from", "1"), ("to", "2")]

        rendered = {builder.url("stock/candle", params) for _ in range(50)}

        assert len(rendered) == 1

    def test_endpoint_is_not_validated(self):
        """Rendering never fails; validation happens in the dispatcher"""
        assert UrlBuilder("https://h.example").url("bad\npath") == "https://h.example/bad\npath"
