"""Request URL rendering for the Finnhub REST API."""

from collections.abc import Sequence
from urllib.parse import urlencode


class UrlBuilder:
    """Renders ``{root}/{endpoint}?{query}`` from an ordered parameter list.

    Pure text rendering: the result is not validated as a URL here.
    """

    def __init__(self, root: str) -> None:
        self.root = root.rstrip("/")

    def url(self, endpoint: str, params: Sequence[tuple[str, str]] = ()) -> str:
        """Render the request URL.

        Parameter order is preserved and duplicate keys are passed through, so
        identical inputs always render the same string.
        """
        base = f"{self.root}/{endpoint.lstrip('/')}"
        if not params:
            return base
        return f"{base}?{urlencode(list(params))}"

    def __repr__(self) -> str:
        return f"UrlBuilder(root={self.root!r})"
