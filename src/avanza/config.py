"""
Client configuration and login credentials.

Both are frozen values. ``ClientConfig`` is changed builder-style through the
``with_*`` methods, which return an updated copy.
"""

from __future__ import annotations

import os
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from avanza.errors import ConfigurationError

DEFAULT_BASE_URL = "https://www.avanza.se"
DEFAULT_USER_AGENT = "Avanza API client"
DEFAULT_TIMEOUT = 30.0

ENV_USERNAME = "AVANZA_USERNAME"
ENV_PASSWORD = "AVANZA_PASSWORD"
ENV_TOTP_SECRET = "AVANZA_TOTP_SECRET"
ENV_BASE_URL = "AVANZA_BASE_URL"


class Credentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str
    password: str = Field(repr=False)
    totp_secret: str = Field(repr=False)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Credentials:
        """Read AVANZA_USERNAME, AVANZA_PASSWORD and AVANZA_TOTP_SECRET."""
        env = os.environ if environ is None else environ
        names = (ENV_USERNAME, ENV_PASSWORD, ENV_TOTP_SECRET)
        missing = [name for name in names if not env.get(name)]
        if missing:
            raise ConfigurationError(
                f"Please provide {', '.join(missing)} env var(s)",
                {"missing": missing},
            )
        return cls(
            username=env[ENV_USERNAME],
            password=env[ENV_PASSWORD],
            totp_secret=env[ENV_TOTP_SECRET],
        )


class ClientConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = DEFAULT_TIMEOUT

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> ClientConfig:
        env = os.environ if environ is None else environ
        base_url = env.get(ENV_BASE_URL)
        return cls(base_url=base_url) if base_url else cls()

    def _replace(self, **changes: Any) -> ClientConfig:
        # model_copy skips validation
        return type(self).model_validate({**self.model_dump(), **changes})

    def with_base_url(self, value: str) -> ClientConfig:
        return self._replace(base_url=value)

    def with_user_agent(self, value: str) -> ClientConfig:
        return self._replace(user_agent=value)

    def with_timeout(self, value: float) -> ClientConfig:
        return self._replace(timeout=value)
