"""
Avanza client error types.
"""

from typing import Any, Optional


class AvanzaError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class TransportError(AvanzaError):
    """Network failure, timeout or an HTTP error status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__("transport_error", message, {"status_code": status_code} if status_code else None)
        self.status_code = status_code


class ParseError(AvanzaError):
    """Response body was not JSON or did not match the expected shape."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("parse_error", message, details)


class UnknownAuthenticationMethod(AvanzaError):
    def __init__(self, method: str):
        super().__init__(
            "unknown_authentication_method",
            f"Can not handle authentication method {method!r}",
            {"method": method},
        )
        self.method = method


class MissingHeaderError(AvanzaError):
    def __init__(self, header: str, code: str = "missing_header"):
        super().__init__(code, f"Response is missing required header {header!r}", {"header": header})
        self.header = header


class MissingSecurityToken(MissingHeaderError):
    def __init__(self, header: str = "x-securitytoken"):
        super().__init__(header, code="missing_security_token")


class NotAuthenticated(AvanzaError):
    def __init__(self, message: str = "Not authenticated. Call authenticate() first."):
        super().__init__("not_authenticated", message)


class ConfigurationError(AvanzaError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("configuration_error", message, details)
