"""
Two-factor authentication flow.

Step 1 submits username and password and receives the second-factor
challenge. Step 2 checks that the challenge asks for TOTP. Step 3 submits a
freshly generated TOTP code and reads the security token from the
``x-securitytoken`` header and the session id from the body. The session is
only written once both values are in hand.
"""

import logging
from enum import Enum
from typing import Optional

from avanza.config import Credentials
from avanza.errors import AvanzaError, MissingHeaderError, MissingSecurityToken, UnknownAuthenticationMethod
from avanza.models import parse_model
from avanza.models.auth import AuthenticateResponse, TotpAuthenticationResponse, TwoFactorLogin
from avanza.otp import OneTimeCodeProvider
from avanza.session import Session
from avanza.transport.http import HttpClient

logger = logging.getLogger(__name__)

USER_CREDENTIALS_PATH = "/_api/authentication/sessions/usercredentials"
TOTP_PATH = "/_api/authentication/sessions/totp"
SECURITY_TOKEN_HEADER = "x-securitytoken"
TOTP_METHOD = "TOTP"
MAX_INACTIVE_MINUTES_AS_SECONDS = "3600"


class AuthState(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    CREDENTIALS_SUBMITTED = "credentials_submitted"
    CHALLENGE_ISSUED = "challenge_issued"
    AUTHENTICATED = "authenticated"
    FAILED = "failed"


class AuthenticationFlow:
    def __init__(
        self,
        http: HttpClient,
        session: Session,
        credentials: Credentials,
        code_provider: OneTimeCodeProvider,
    ):
        self._http = http
        self._session = session
        self._credentials = credentials
        self._code_provider = code_provider
        self._state = AuthState.UNAUTHENTICATED
        self._login: Optional[TotpAuthenticationResponse] = None

    @property
    def state(self) -> AuthState:
        return self._state

    @property
    def login(self) -> Optional[TotpAuthenticationResponse]:
        """Body of the last successful TOTP step (customer id, registration status)."""
        return self._login

    async def authenticate(self) -> AuthenticateResponse:
        """Run all three steps. Every call is a full round trip."""
        self._state = AuthState.UNAUTHENTICATED
        response = await self.submit_credentials()
        challenge = self.validate_challenge(response.two_factor_login)
        await self.submit_one_time_code(challenge)
        return response

    async def submit_credentials(self) -> AuthenticateResponse:
        body = {
            "username": self._credentials.username,
            "password": self._credentials.password,
            "maxInactiveMinutes": MAX_INACTIVE_MINUTES_AS_SECONDS,
        }
        try:
            data = await self._http.post_json(USER_CREDENTIALS_PATH, body)
            response = parse_model(AuthenticateResponse, data)
        except AvanzaError:
            self._state = AuthState.FAILED
            raise
        self._state = AuthState.CREDENTIALS_SUBMITTED
        logger.info("Credentials accepted, server requested %s", response.two_factor_login.method)
        return response

    def validate_challenge(self, challenge: TwoFactorLogin) -> TwoFactorLogin:
        if challenge.method != TOTP_METHOD:
            self._state = AuthState.FAILED
            logger.warning("Unsupported second factor %r offered, aborting", challenge.method)
            raise UnknownAuthenticationMethod(challenge.method)
        self._state = AuthState.CHALLENGE_ISSUED
        return challenge

    async def submit_one_time_code(self, challenge: TwoFactorLogin) -> TotpAuthenticationResponse:
        # The transaction id only correlates the challenge; the code is generated now.
        logger.debug("Answering TOTP challenge %s", challenge.transaction_id)
        try:
            code = self._code_provider.current_code(self._credentials.totp_secret)
            raw = await self._http.post_raw(TOTP_PATH, {"totpCode": code, "method": TOTP_METHOD})
            try:
                token = raw.require_header(SECURITY_TOKEN_HEADER)
            except MissingHeaderError:
                logger.warning("TOTP response carried no %s header", SECURITY_TOKEN_HEADER)
                raise MissingSecurityToken(SECURITY_TOKEN_HEADER) from None
            response = parse_model(TotpAuthenticationResponse, raw.json())
        except AvanzaError:
            self._state = AuthState.FAILED
            raise

        self._session.update(token, response.authentication_session)
        self._login = response
        self._state = AuthState.AUTHENTICATED
        logger.info("Authenticated as customer %s", response.customer_id or "<unknown>")
        return response
