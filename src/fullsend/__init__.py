"""fullsend - Async Python client for sending SMS/MMS messages with Twilio."""

from fullsend._version import __version__
from fullsend.auth import AccountToken, ApiKey, AuthMethod
from fullsend.client import Client, ClientBuilder
from fullsend.config import SenderConfig
from fullsend.errors import (
    ClientBuilderError,
    FullsendError,
    MessageBuilderError,
    NetworkError,
    NoAccountSidSetError,
    NoAuthMethodSetError,
    NoMessageSetError,
    NoSenderSetError,
    NoToSetError,
    ProviderError,
    SendError,
)
from fullsend.message import Message, MessageBuilder
from fullsend.mock import MockMessageSender
from fullsend.sender import (
    SendResult,
    TwilioMessageSender,
    basic_auth_for,
    build_form_params,
    send_message,
)

__all__ = [
    "AccountToken",
    "ApiKey",
    "AuthMethod",
    "Client",
    "ClientBuilder",
    "ClientBuilderError",
    "FullsendError",
    "Message",
    "MessageBuilder",
    "MessageBuilderError",
    "MockMessageSender",
    "NetworkError",
    "NoAccountSidSetError",
    "NoAuthMethodSetError",
    "NoMessageSetError",
    "NoSenderSetError",
    "NoToSetError",
    "ProviderError",
    "SendError",
    "SendResult",
    "SenderConfig",
    "TwilioMessageSender",
    "__version__",
    "basic_auth_for",
    "build_form_params",
    "send_message",
]
