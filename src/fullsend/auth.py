"""Authentication schemes accepted by the Twilio REST API."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field, SecretStr


class AccountToken(BaseModel):
    """Account auth token, paired with the account SID for HTTP Basic auth."""

    model_config = {"frozen": True}

    type: Literal["account_token"] = "account_token"
    token: SecretStr

    def basic_auth(self, account_sid: str) -> tuple[str, str]:
        return (account_sid, self.token.get_secret_value())


class ApiKey(BaseModel):
    """API key and secret.

    The key is used as the HTTP Basic username and the secret as the password.
    The account SID only appears in the request URL.
    """

    model_config = {"frozen": True}

    type: Literal["api_key"] = "api_key"
    key: str
    secret: SecretStr

    def basic_auth(self, account_sid: str) -> tuple[str, str]:
        return (self.key, self.secret.get_secret_value())


AuthMethod = Annotated[AccountToken | ApiKey, Field(discriminator="type")]
