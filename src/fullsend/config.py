"""Sender configuration."""

from __future__ import annotations

from urllib.parse import quote

from pydantic import BaseModel


class SenderConfig(BaseModel):
    """Transport settings for :class:`~fullsend.sender.TwilioMessageSender`."""

    base_url: str = "https://api.twilio.com"
    api_version: str = "2010-04-01"
    timeout: float = 10.0

    def messages_url(self, account_sid: str) -> str:
        sid = quote(account_sid, safe="")
        return f"{self.base_url.rstrip('/')}/{self.api_version}/Accounts/{sid}/Messages.json"
