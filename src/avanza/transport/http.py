"""
REST HTTP transport for the Avanza API.

Stateless request/response primitives on top of one pooled httpx client.
Nothing is retried: a failed request surfaces immediately as TransportError
or ParseError.
"""

import json
import logging
from typing import Any, Optional

import httpx

from avanza.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from avanza.errors import MissingHeaderError, ParseError, TransportError

logger = logging.getLogger(__name__)


class RawResponse:
    """Status, headers and undecoded body of a response."""

    def __init__(self, status_code: int, headers: httpx.Headers, body: bytes):
        self.status_code = status_code
        self.headers = headers
        self.body = body

    @classmethod
    def from_httpx(cls, resp: httpx.Response) -> "RawResponse":
        return cls(resp.status_code, resp.headers, resp.content)

    def require_header(self, name: str) -> str:
        value = self.headers.get(name)
        if not value:
            raise MissingHeaderError(name)
        return value

    def json(self) -> Any:
        try:
            return json.loads(self.body)
        except ValueError as e:
            raise ParseError(f"Response body is not valid JSON: {e}") from e


class HttpClient:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._user_agent = user_agent
        self._timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def is_open(self) -> bool:
        return self._client is not None

    def _get_client(self) -> httpx.AsyncClient:
        # Opened on first request so unused clients hold no connections.
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={"User-Agent": self._user_agent, "Accept": "application/json"},
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    async def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            resp = await self._get_client().request(method, path, **kwargs)
        except httpx.TimeoutException as e:
            raise TransportError(f"{method} {path} timed out: {e}") from e
        except httpx.HTTPError as e:
            raise TransportError(f"{method} {path} failed: {e}") from e
        logger.debug("%s %s -> %s", method, resp.request.url, resp.status_code)
        if not resp.is_success:
            raise TransportError(f"HTTP {resp.status_code}: {resp.text[:200]}", status_code=resp.status_code)
        return resp

    @staticmethod
    def _decode(resp: httpx.Response) -> Any:
        try:
            return resp.json()
        except ValueError as e:
            raise ParseError(f"Response body is not valid JSON: {e}") from e

    async def post_json(self, path: str, fields: dict[str, str]) -> Any:
        resp = await self._send("POST", path, json=fields)
        return self._decode(resp)

    async def post_raw(self, path: str, fields: dict[str, str]) -> RawResponse:
        """POST and keep the headers, for callers that need a header value."""
        resp = await self._send("POST", path, json=fields)
        return RawResponse.from_httpx(resp)

    async def get_json(self, path: str, headers: Optional[dict[str, str]] = None) -> Any:
        resp = await self._send("GET", path, headers=headers)
        return self._decode(resp)

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
