"""
avanza-client: async Python client for the Avanza brokerage API.

Username/password + TOTP login and authorized REST calls.
"""

from avanza.client import Avanza, AsyncAvanza
from avanza.auth import AuthenticationFlow, AuthState
from avanza.config import ClientConfig, Credentials
from avanza.session import Session
from avanza.errors import (
    AvanzaError,
    ConfigurationError,
    MissingHeaderError,
    MissingSecurityToken,
    NotAuthenticated,
    ParseError,
    TransportError,
    UnknownAuthenticationMethod,
)

__version__ = "0.1.0"
__all__ = [
    "Avanza",
    "AsyncAvanza",
    "AuthenticationFlow",
    "AuthState",
    "ClientConfig",
    "Credentials",
    "Session",
    "AvanzaError",
    "ConfigurationError",
    "MissingHeaderError",
    "MissingSecurityToken",
    "NotAuthenticated",
    "ParseError",
    "TransportError",
    "UnknownAuthenticationMethod",
]
