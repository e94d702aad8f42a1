"""Shared fixtures: an in-process fake of the Avanza HTTP API."""

from typing import Any, Callable, Optional

import httpx
import pytest

from avanza import AsyncAvanza, ClientConfig, Credentials

SESSION_ID = "4530ff65-a4d3-4af0-9e9b-22729a6157c9"
TRANSACTION_ID = "4530ff65-a4d3-4af0-9e9b-22729a6157c9"
CREDENTIALS_PATH = "/_api/authentication/sessions/usercredentials"
TOTP_PATH = "/_api/authentication/sessions/totp"
POSITIONS_PATH = "/_mobile/account/positions"

Responder = Callable[[httpx.Request], httpx.Response]


class FakeAvanzaServer:
    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Responder] = {}
        self.calls: list[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        json: Any = None,
        status: int = 200,
        headers: Optional[dict[str, str]] = None,
        text: Optional[str] = None,
    ) -> None:
        if text is not None:
            self.routes[(method, path)] = lambda request: httpx.Response(status, text=text, headers=headers)
        else:
            self.routes[(method, path)] = lambda request: httpx.Response(status, json=json, headers=headers)

    def add_handler(self, method: str, path: str, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.routes[(method, path)] = handler

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"message": "not mocked"})
        return route(request)

    def calls_to(self, path: str) -> list[httpx.Request]:
        return [r for r in self.calls if r.url.path == path]

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def mock_auth(self, method: str = "TOTP", token: Optional[str] = "mysecrettoken") -> None:
        self.add("POST", CREDENTIALS_PATH, json={
            "twoFactorLogin": {"transactionId": TRANSACTION_ID, "method": method},
        })
        self.add("POST", TOTP_PATH, headers={"x-securitytoken": token} if token else None, json={
            "authenticationSession": SESSION_ID,
            "pushSubscriptionId": "54320ff65-a4d3-4af0-9e9b-22729a6157c9",
            "customerId": "123232",
            "registrationComplete": True,
        })


class StaticCodeProvider:
    def __init__(self, code: str = "123456") -> None:
        self.code = code
        self.secrets: list[str] = []

    def current_code(self, secret: str) -> str:
        self.secrets.append(secret)
        return self.code


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(username="user", password="pass", totp_secret="JBSWY3DPEHPK3PXP")


@pytest.fixture
def server() -> FakeAvanzaServer:
    return FakeAvanzaServer()


@pytest.fixture
def code_provider() -> StaticCodeProvider:
    return StaticCodeProvider()


@pytest.fixture
def client(credentials, server, code_provider) -> AsyncAvanza:
    return AsyncAvanza(
        credentials,
        config=ClientConfig(base_url="https://avanza.test"),
        code_provider=code_provider,
        transport=server.transport,
    )
