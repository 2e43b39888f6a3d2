"""Outbound SMS/MMS message payloads."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from pydantic import BaseModel

from fullsend.errors import NoMessageSetError, NoSenderSetError, NoToSetError


class Message(BaseModel):
    """A validated message, ready to be sent.

    Build one per send with a :class:`MessageBuilder`::

        message = Message.builder().to(phone_num).from_(sender_num).body("hi").build()
    """

    model_config = {"frozen": True}

    to: str
    from_: str | None = None
    messaging_service_sid: str | None = None
    body: str | None = None
    content_sid: str | None = None
    content_variables: tuple[tuple[str, str], ...] | None = None
    media_urls: tuple[str, ...] = ()

    @staticmethod
    def builder() -> MessageBuilder:
        return MessageBuilder()


class MessageBuilder:
    """Accumulates message fields; validation happens in :meth:`build`.

    Setters overwrite the previous value and perform no cross-field checks.
    """

    def __init__(self) -> None:
        self._to: str | None = None
        self._from: str | None = None
        self._messaging_service_sid: str | None = None
        self._body: str | None = None
        self._content_sid: str | None = None
        self._content_variables: dict[str, str] | None = None
        self._media_urls: list[str] = []

    def to(self, to: str) -> MessageBuilder:
        """Set the recipient's phone number."""
        self._to = to
        return self

    def from_(self, from_: str) -> MessageBuilder:
        """Set the Twilio phone number the message is sent from."""
        self._from = from_
        return self

    def messaging_service_sid(self, sid: str) -> MessageBuilder:
        """Send through a Messaging Service instead of (or as well as) a number."""
        self._messaging_service_sid = sid
        return self

    def body(self, body: str) -> MessageBuilder:
        self._body = body
        return self

    def content_sid(self, sid: str) -> MessageBuilder:
        """Send a pre-approved content template."""
        self._content_sid = sid
        return self

    def content_variables(self, variables: Mapping[str, str]) -> MessageBuilder:
        """Set the substitutions for the content template placeholders.

        A template such as ``Hello, {{name}}!`` takes ``{"name": "Ada"}``.
        The built message keeps them as ordered ``(name, value)`` pairs.
        """
        self._content_variables = dict(variables)
        return self

    def media_url(self, url: str) -> MessageBuilder:
        """Attach a single media URL, replacing any URLs set before."""
        self._media_urls = [url]
        return self

    def media_urls(self, urls: Iterable[str]) -> MessageBuilder:
        """Replace the media URLs, keeping order and duplicates."""
        self._media_urls = list(urls)
        return self

    def build(self) -> Message:
        """Validate the accumulated fields and return a :class:`Message`.

        Checks run in order: recipient, then sender, then content.

        Raises:
            NoToSetError: If no recipient was set.
            NoSenderSetError: If neither ``from_`` nor a messaging service SID was set.
            NoMessageSetError: If no body, content SID or media URL was set.
        """
        if self._to is None:
            raise NoToSetError()
        if self._from is None and self._messaging_service_sid is None:
            raise NoSenderSetError()
        if self._body is None and self._content_sid is None and not self._media_urls:
            raise NoMessageSetError()
        return Message(
            to=self._to,
            from_=self._from,
            messaging_service_sid=self._messaging_service_sid,
            body=self._body,
            content_sid=self._content_sid,
            content_variables=(
                tuple(self._content_variables.items())
                if self._content_variables is not None
                else None
            ),
            media_urls=tuple(self._media_urls),
        )
