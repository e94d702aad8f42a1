"""
AsyncAvanza / Avanza: main SDK clients.
"""

import asyncio
from typing import Any, Optional

import httpx

from avanza.auth import AuthenticationFlow, AuthState
from avanza.config import ClientConfig, Credentials
from avanza.errors import NotAuthenticated
from avanza.models.auth import AuthenticateResponse
from avanza.models.positions import PositionsResponse
from avanza.otp import OneTimeCodeProvider, TotpCodeProvider
from avanza.portfolio import PortfolioAPI
from avanza.session import Session
from avanza.transport.http import HttpClient

SECURITY_TOKEN_REQUEST_HEADER = "X-SecurityToken"
SESSION_REQUEST_HEADER = "X-AuthenticationSession"


class AsyncAvanza:
    """Async Avanza client (primary)."""

    def __init__(
        self,
        credentials: Credentials,
        config: Optional[ClientConfig] = None,
        code_provider: Optional[OneTimeCodeProvider] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._credentials = credentials
        self._config = config or ClientConfig()
        self._code_provider = code_provider or TotpCodeProvider()
        self._transport = transport

        self.session = Session()
        self.http = HttpClient(
            base_url=self._config.base_url,
            user_agent=self._config.user_agent,
            timeout=self._config.timeout,
            transport=transport,
        )
        self._flow = AuthenticationFlow(self.http, self.session, credentials, self._code_provider)
        self.portfolio = PortfolioAPI(self)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "AsyncAvanza":
        """Build a client from AVANZA_* environment variables."""
        kwargs.setdefault("config", ClientConfig.from_env())
        return cls(Credentials.from_env(), **kwargs)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def api_url(self) -> str:
        return self._config.base_url

    @property
    def user_agent(self) -> str:
        return self._config.user_agent

    @property
    def auth_state(self) -> AuthState:
        return self._flow.state

    @property
    def is_authenticated(self) -> bool:
        return self.session.is_authenticated

    @property
    def customer_id(self) -> Optional[str]:
        login = self._flow.login
        return login.customer_id if login else None

    @property
    def registration_complete(self) -> Optional[bool]:
        login = self._flow.login
        return login.registration_complete if login else None

    def with_config(self, config: ClientConfig) -> "AsyncAvanza":
        """Return a new, unauthenticated client using ``config``."""
        return AsyncAvanza(
            self._credentials,
            config=config,
            code_provider=self._code_provider,
            transport=self._transport,
        )

    def with_api_url(self, value: str) -> "AsyncAvanza":
        return self.with_config(self._config.with_base_url(value))

    def with_user_agent(self, value: str) -> "AsyncAvanza":
        return self.with_config(self._config.with_user_agent(value))

    async def authenticate(self) -> AuthenticateResponse:
        """Run the username/password + TOTP login and populate the session."""
        return await self._flow.authenticate()

    async def authenticated_request(self, path: str) -> Any:
        """GET ``path`` with the session credentials attached.

        Raises NotAuthenticated before any network call when there is no session.
        """
        creds = self.session.snapshot()
        if not creds.complete:
            raise NotAuthenticated()
        return await self.http.get_json(path, headers={
            SECURITY_TOKEN_REQUEST_HEADER: creds.security_token,
            SESSION_REQUEST_HEADER: creds.session_id,
        })

    async def positions(self) -> PositionsResponse:
        return await self.portfolio.positions()

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> "AsyncAvanza":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()


class Avanza:
    """Sync wrapper around AsyncAvanza. Runs the event loop internally."""

    def __init__(self, credentials: Credentials, **kwargs: Any):
        self._async = AsyncAvanza(credentials, **kwargs)
        self._loop = asyncio.new_event_loop()

    @classmethod
    def from_env(cls, **kwargs: Any) -> "Avanza":
        kwargs.setdefault("config", ClientConfig.from_env())
        return cls(Credentials.from_env(), **kwargs)

    def _run(self, coro: Any) -> Any:
        return self._loop.run_until_complete(coro)

    @property
    def is_authenticated(self) -> bool:
        return self._async.is_authenticated

    @property
    def session(self) -> Session:
        return self._async.session

    def authenticate(self) -> AuthenticateResponse:
        return self._run(self._async.authenticate())

    def authenticated_request(self, path: str) -> Any:
        return self._run(self._async.authenticated_request(path))

    def positions(self) -> PositionsResponse:
        return self._run(self._async.positions())

    def close(self) -> None:
        self._run(self._async.close())
        self._loop.close()
