"""
Authentication wire models for the usercredentials and totp endpoints.
"""

from pydantic import BaseModel, Field


class TwoFactorLogin(BaseModel):
    """Second-factor challenge declared by the credentials step."""
    method: str
    transaction_id: str = Field(alias="transactionId")

    model_config = {"populate_by_name": True}


class AuthenticateResponse(BaseModel):
    two_factor_login: TwoFactorLogin = Field(alias="twoFactorLogin")

    model_config = {"populate_by_name": True}


class TotpAuthenticationResponse(BaseModel):
    authentication_session: str = Field(alias="authenticationSession", min_length=1)
    push_subscription_id: str = Field(default="", alias="pushSubscriptionId")
    customer_id: str = Field(default="", alias="customerId")
    registration_complete: bool = Field(default=False, alias="registrationComplete")

    model_config = {"populate_by_name": True}
