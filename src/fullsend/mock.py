"""Mock sender for testing code that sends messages."""

from __future__ import annotations

from uuid import uuid4

from fullsend.client import Client
from fullsend.message import Message
from fullsend.sender import SendResult


class MockMessageSender:
    """Records sent messages for verification in tests."""

    def __init__(self) -> None:
        self.sent: list[tuple[Client, Message]] = []

    async def send(self, client: Client, message: Message) -> SendResult:
        self.sent.append((client, message))
        return SendResult(status_code=201, sid=f"SM{uuid4().hex}", status="queued")

    async def close(self) -> None:
        pass
