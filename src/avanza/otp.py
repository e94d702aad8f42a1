"""
One-time code providers for the TOTP second factor.
"""

from typing import Protocol

import pyotp

from avanza.errors import ConfigurationError


class OneTimeCodeProvider(Protocol):
    def current_code(self, secret: str) -> str: ...


class TotpCodeProvider:
    """Generates the current RFC 6238 code for a base32 shared secret."""

    def current_code(self, secret: str) -> str:
        try:
            return pyotp.TOTP(secret).now()
        except ValueError as e:
            raise ConfigurationError(f"TOTP secret is not valid base32: {e}") from e
