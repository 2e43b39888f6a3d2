"""Send messages through the Twilio Messages REST API."""

from __future__ import annotations

import json
import logging
from types import TracebackType
from typing import Any

import httpx
from pydantic import BaseModel, Field

from fullsend.client import Client
from fullsend.config import SenderConfig
from fullsend.errors import NetworkError, ProviderError
from fullsend.message import Message

logger = logging.getLogger("fullsend.sender")


class SendResult(BaseModel):
    """Outcome of a message accepted by Twilio."""

    status_code: int
    sid: str | None = None
    status: str | None = None
    raw: dict[str, Any] = Field(default_factory=dict)


def build_form_params(message: Message) -> list[tuple[str, str]]:
    """Form parameters for ``message``, in a fixed order.

    ``To``, ``From``, ``MessagingServiceSid``, ``Body``, ``ContentSid``,
    ``ContentVariables`` (JSON-encoded), then one ``MediaUrl`` per attachment.
    Unset fields are omitted.
    """
    params: list[tuple[str, str]] = [("To", message.to)]
    if message.from_ is not None:
        params.append(("From", message.from_))
    if message.messaging_service_sid is not None:
        params.append(("MessagingServiceSid", message.messaging_service_sid))
    if message.body is not None:
        params.append(("Body", message.body))
    if message.content_sid is not None:
        params.append(("ContentSid", message.content_sid))
    if message.content_variables is not None:
        params.append(("ContentVariables", json.dumps(dict(message.content_variables))))
    params.extend(("MediaUrl", url) for url in message.media_urls)
    return params


def basic_auth_for(client: Client) -> tuple[str, str]:
    """HTTP Basic credentials for ``client``'s auth method."""
    return client.basic_auth()


class TwilioMessageSender:
    """Posts messages to Twilio, one request per send.

    Args:
        config: Transport settings. Defaults to :class:`SenderConfig`.
        http_client: An existing ``httpx.AsyncClient`` to use. A borrowed
            client is not closed by :meth:`close`.
    """

    def __init__(
        self,
        config: SenderConfig | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or SenderConfig()
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=self._config.timeout)

    @property
    def config(self) -> SenderConfig:
        return self._config

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._client

    async def send(self, client: Client, message: Message) -> SendResult:
        """Send ``message`` using ``client``'s account and credentials.

        Returns:
            The accepted message's SID and status as reported by Twilio.

        Raises:
            NetworkError: If the HTTP exchange could not be completed.
            ProviderError: If Twilio answered with a non-2xx status.
        """
        url = self._config.messages_url(client.account_sid)
        data = _form_data(build_form_params(message))

        logger.debug("Sending message via %s", url)
        try:
            resp = await self._client.post(
                url,
                auth=basic_auth_for(client),
                data=data,
            )
        except httpx.HTTPError as exc:
            logger.debug("Request to %s failed: %s", url, exc)
            raise NetworkError(exc) from exc

        if not resp.is_success:
            error = _provider_error(resp)
            logger.debug("Twilio rejected message via %s: HTTP %s", url, resp.status_code)
            raise error

        body = _json_body(resp)
        return SendResult(
            status_code=resp.status_code,
            sid=body.get("sid"),
            status=body.get("status"),
            raw=body,
        )

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> TwilioMessageSender:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()


async def send_message(
    client: Client,
    message: Message,
    *,
    config: SenderConfig | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> SendResult:
    """Send a single message with a short-lived :class:`TwilioMessageSender`."""
    async with TwilioMessageSender(config, http_client=http_client) as sender:
        return await sender.send(client, message)


def _form_data(params: list[tuple[str, str]]) -> dict[str, str | list[str]]:
    # MediaUrl is the only repeated key and always comes last.
    data: dict[str, str | list[str]] = {}
    media_urls: list[str] = []
    for name, value in params:
        if name == "MediaUrl":
            media_urls.append(value)
        else:
            data[name] = value
    if media_urls:
        data["MediaUrl"] = media_urls
    return data


def _json_body(resp: httpx.Response) -> dict[str, Any]:
    try:
        data = resp.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


def _provider_error(resp: httpx.Response) -> ProviderError:
    data = _json_body(resp)
    code = data.get("code")
    detail = data.get("message")
    return ProviderError(
        resp.status_code,
        error_code=code if isinstance(code, int) else None,
        detail=detail if isinstance(detail, str) else None,
    )
