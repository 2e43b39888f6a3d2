"""Authenticated client context for the Twilio REST API."""

from __future__ import annotations

from pydantic import BaseModel

from fullsend.auth import AccountToken, ApiKey, AuthMethod
from fullsend.errors import NoAccountSidSetError, NoAuthMethodSetError


class Client(BaseModel):
    """Account SID plus the credentials used to authenticate requests.

    Immutable once built, so a single instance can be shared by any number of
    concurrent sends. Create one with a :class:`ClientBuilder`::

        client = (
            Client.builder()
            .account_sid(os.environ["TWILIO_ACCOUNT_SID"])
            .auth_token(os.environ["TWILIO_ACCOUNT_TKN"])
            .build()
        )
    """

    model_config = {"frozen": True}

    account_sid: str
    auth: AuthMethod

    @staticmethod
    def builder() -> ClientBuilder:
        return ClientBuilder()

    def basic_auth(self) -> tuple[str, str]:
        """HTTP Basic credentials for the configured auth method."""
        return self.auth.basic_auth(self.account_sid)


class ClientBuilder:
    """Accumulates client settings; validation happens in :meth:`build`."""

    def __init__(self) -> None:
        self._account_sid: str | None = None
        self._auth: AccountToken | ApiKey | None = None

    def account_sid(self, account_sid: str) -> ClientBuilder:
        self._account_sid = account_sid
        return self

    def auth_token(self, token: str) -> ClientBuilder:
        """Authenticate with the account's auth token.

        Replaces any API key set earlier.
        """
        self._auth = AccountToken(token=token)
        return self

    def api_key(self, key: str, secret: str) -> ClientBuilder:
        """Authenticate with an API key and secret.

        Replaces any auth token set earlier.
        """
        self._auth = ApiKey(key=key, secret=secret)
        return self

    def build(self) -> Client:
        """Validate the accumulated settings and return a :class:`Client`.

        The builder is left untouched, so it can be corrected and built again.

        Raises:
            NoAccountSidSetError: If no account SID was set.
            NoAuthMethodSetError: If neither an auth token nor an API key was set.
        """
        if self._account_sid is None:
            raise NoAccountSidSetError()
        if self._auth is None:
            raise NoAuthMethodSetError()
        return Client(account_sid=self._account_sid, auth=self._auth)
