"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from fullsend import Client, Message


@pytest.fixture
def token_client() -> Client:
    return Client.builder().account_sid("AC1").auth_token("tok").build()


@pytest.fixture
def api_key_client() -> Client:
    return Client.builder().account_sid("AC1").api_key("KEY", "SECRET").build()


@pytest.fixture
def text_message() -> Message:
    return Message.builder().to("+15551234567").from_("+15559876543").body("hi").build()
