"""Record/replay transport for deterministic tests.

Fixtures are JSON files keyed by the request URL with the credential scrubbed,
so a fixture recorded with one API key replays under any other key.
"""

import hashlib
import json
import logging
import re
from pathlib import Path
from urllib.parse import parse_qsl, urlencode, urlparse, urlunparse

from data.base import TransportError
from utils.http import HttpResponse, Transport

logger = logging.getLogger(__name__)

REDACTED = "REDACTED"


def scrub_url(url: str, secret_param: str = "token") -> str:
    """Replace the value of ``secret_param`` in the query string, keeping order."""
    parsed = urlparse(url)
    pairs = [
        (key, REDACTED if key == secret_param else value)
        for key, value in parse_qsl(parsed.query, keep_blank_values=True)
    ]
    return urlunparse(parsed._replace(query=urlencode(pairs)))


def _secret_values(url: str, secret_param: str) -> list[str]:
    query = urlparse(url).query
    return [v for k, v in parse_qsl(query, keep_blank_values=True) if k == secret_param and v]


def _redact(text: str, secret: str) -> str:
    """Replace whole occurrences of ``secret``, leaving longer words and numbers intact."""
    pattern = rf"(?<![\w.-]){re.escape(secret)}(?![\w.-])"
    return re.sub(pattern, REDACTED, text)


def fixture_name(url: str, secret_param: str = "token") -> str:
    """Stable file name for the fixture of ``url``."""
    digest = hashlib.sha256(scrub_url(url, secret_param).encode("utf-8")).hexdigest()
    return f"{digest[:16]}.json"


class ReplayTransport:
    """Serve responses from recorded fixtures instead of the network.

    With ``record_with`` set, a missing fixture is fetched through that
    transport and persisted (scrubbed). Without it, a missing fixture is a
    ``TransportError``.
    """

    def __init__(
        self,
        fixture_dir: str | Path,
        *,
        record_with: Transport | None = None,
        secret_param: str = "token",
    ) -> None:
        self.fixture_dir = Path(fixture_dir)
        self.record_with = record_with
        self.secret_param = secret_param

    def fixture_path(self, url: str) -> Path:
        return self.fixture_dir / fixture_name(url, self.secret_param)

    async def get(self, url: str) -> HttpResponse:
        path = self.fixture_path(url)
        if path.exists():
            return self._load(path)

        if self.record_with is None:
            raise TransportError(
                f"No recorded fixture for {scrub_url(url, self.secret_param)} ({path.name})"
            )

        response = await self.record_with.get(url)
        self._save(path, url, response)
        return response

    def _load(self, path: Path) -> HttpResponse:
        try:
            with path.open(encoding="utf-8") as f:
                fixture = json.load(f)
            return HttpResponse(
                status_code=int(fixture["status_code"]),
                body=fixture["body"].encode("utf-8"),
            )
        except (OSError, ValueError, KeyError, TypeError) as exc:
            raise TransportError(f"Corrupt replay fixture {path}: {exc}") from exc

    def _save(self, path: Path, url: str, response: HttpResponse) -> None:
        body = response.body.decode("utf-8", errors="replace")
        for secret in _secret_values(url, self.secret_param):
            body = _redact(body, secret)

        fixture = {
            "url": scrub_url(url, self.secret_param),
            "status_code": response.status_code,
            "body": body,
        }
        self.fixture_dir.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            json.dump(fixture, f, indent=2, ensure_ascii=False)
        logger.debug("Recorded fixture %s for %s", path.name, fixture["url"])
