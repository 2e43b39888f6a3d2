"""Exceptions raised by fullsend."""

from __future__ import annotations


class FullsendError(Exception):
    """Base exception for all fullsend errors."""


class ClientBuilderError(FullsendError):
    """A ``ClientBuilder`` could not produce a ``Client``."""


class NoAccountSidSetError(ClientBuilderError):
    """No account SID set in builder."""

    def __init__(self) -> None:
        super().__init__("no account SID set in builder")


class NoAuthMethodSetError(ClientBuilderError):
    """Neither an auth token nor an API key was set in builder."""

    def __init__(self) -> None:
        super().__init__("no auth method set in builder")


class MessageBuilderError(FullsendError):
    """A ``MessageBuilder`` could not produce a ``Message``."""


class NoToSetError(MessageBuilderError):
    """No destination set in builder."""

    def __init__(self) -> None:
        super().__init__("no `to` field set in builder")


class NoSenderSetError(MessageBuilderError):
    """Neither a ``from_`` number nor a messaging service SID was set."""

    def __init__(self) -> None:
        super().__init__("no sender set in builder")


class NoMessageSetError(MessageBuilderError):
    """No body, content SID or media URL was set."""

    def __init__(self) -> None:
        super().__init__("no message content set in builder")


class SendError(FullsendError):
    """Sending a message failed."""


class NetworkError(SendError):
    """The HTTP exchange with Twilio could not be completed.

    Attributes:
        cause: The underlying transport exception.
    """

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"network error: {cause}")
        self.cause = cause


class ProviderError(SendError):
    """Twilio answered with a non-2xx status.

    Attributes:
        status_code: HTTP status code returned by Twilio.
        error_code: Twilio error code from the response body, if any.
        detail: Human-readable error message from the response body, if any.
    """

    def __init__(
        self,
        status_code: int,
        *,
        error_code: int | None = None,
        detail: str | None = None,
    ) -> None:
        message = f"twilio returned HTTP {status_code}"
        if error_code is not None:
            message += f" (code {error_code})"
        if detail:
            message += f": {detail}"
        super().__init__(message)
        self.status_code = status_code
        self.error_code = error_code
        self.detail = detail
