"""CLI tests with the fake Avanza API."""

import json
import logging

import pytest
from click.testing import CliRunner

from avanza import AsyncAvanza, Credentials
from avanza.cli import main as cli_main

from conftest import POSITIONS_PATH

POSITIONS_BODY = {
    "instrumentPositions": [{
        "instrumentType": "STOCK",
        "positions": [{"name": "Volvo B", "orderbookId": "5269", "accountName": "ISK", "volume": 10, "value": 2500}],
    }],
    "totalOwnCapital": 100000,
    "totalProfit": 40000,
    "totalBuyingPower": 4000,
    "totalBalance": 4000,
    "totalProfitPercent": 10,
}


@pytest.fixture
def env(monkeypatch):
    monkeypatch.setenv("AVANZA_USERNAME", "user")
    monkeypatch.setenv("AVANZA_PASSWORD", "pass")
    monkeypatch.setenv("AVANZA_TOTP_SECRET", "JBSWY3DPEHPK3PXP")


@pytest.fixture
def fake_client(monkeypatch, server, code_provider):
    class _Factory:
        @staticmethod
        def from_env(config):
            return AsyncAvanza(Credentials.from_env(), config=config, code_provider=code_provider,
                               transport=server.transport)

    monkeypatch.setattr(cli_main, "AsyncAvanza", _Factory)


def test_missing_configuration(monkeypatch):
    for name in ("AVANZA_USERNAME", "AVANZA_PASSWORD", "AVANZA_TOTP_SECRET"):
        monkeypatch.delenv(name, raising=False)
    result = CliRunner().invoke(cli_main.main, ["auth", "login"])
    assert result.exit_code == 1
    assert "AVANZA_USERNAME" in result.output


def test_login(env, fake_client, server):
    server.mock_auth()
    result = CliRunner().invoke(cli_main.main, ["auth", "login"])
    assert result.exit_code == 0, result.output
    assert "Logged in" in result.output
    assert "123232" in result.output


def test_login_unknown_method(env, fake_client, server):
    server.mock_auth(method="BANKID")
    result = CliRunner().invoke(cli_main.main, ["auth", "login"])
    assert result.exit_code == 1
    assert "UnknownAuthenticationMethod" in result.output


def test_positions_json(env, fake_client, server):
    server.mock_auth()
    server.add("GET", POSITIONS_PATH, json=POSITIONS_BODY)
    result = CliRunner().invoke(cli_main.main, ["positions", "--json"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["totalBalance"] == 4000
    assert data["instrumentPositions"][0]["positions"][0]["name"] == "Volvo B"


def test_positions_table(env, fake_client, server):
    server.mock_auth()
    server.add("GET", POSITIONS_PATH, json=POSITIONS_BODY)
    result = CliRunner().invoke(cli_main.main, ["positions"])
    assert result.exit_code == 0, result.output
    assert "Volvo B" in result.output


def test_base_url_option(env, fake_client, server):
    server.mock_auth()
    result = CliRunner().invoke(cli_main.main, ["--base-url", "https://avanza.test/", "auth", "login"])
    assert result.exit_code == 0, result.output
    assert "https://avanza.test " in result.output
    assert {r.url.host for r in server.calls} == {"avanza.test"}


def test_verbose_logs_flow(env, fake_client, server, caplog):
    server.mock_auth()
    try:
        result = CliRunner().invoke(cli_main.main, ["--verbose", "auth", "login"])
        assert result.exit_code == 0, result.output
        assert logging.getLogger("avanza").level == logging.DEBUG
        messages = [r.getMessage() for r in caplog.records if r.name.startswith("avanza")]
        assert "Credentials accepted, server requested TOTP" in messages
        assert "Authenticated as customer 123232" in messages
    finally:
        logging.getLogger("avanza").setLevel(logging.NOTSET)
