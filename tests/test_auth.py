"""Tests for authentication schemes."""

from __future__ import annotations

from pydantic import TypeAdapter

from fullsend.auth import AccountToken, ApiKey, AuthMethod


class TestAccountToken:
    def test_basic_auth_uses_account_sid(self) -> None:
        assert AccountToken(token="tok").basic_auth("AC1") == ("AC1", "tok")

    def test_empty_token_accepted(self) -> None:
        assert AccountToken(token="").basic_auth("AC1") == ("AC1", "")

    def test_token_hidden_in_repr(self) -> None:
        assert "tok-secret" not in repr(AccountToken(token="tok-secret"))

    def test_equality(self) -> None:
        assert AccountToken(token="a") == AccountToken(token="a")
        assert AccountToken(token="a") != AccountToken(token="b")


class TestApiKey:
    def test_basic_auth_ignores_account_sid(self) -> None:
        auth = ApiKey(key="KEY", secret="SECRET")
        assert auth.basic_auth("AC1") == ("KEY", "SECRET")
        assert auth.basic_auth("AC-other") == ("KEY", "SECRET")

    def test_secret_hidden_in_repr(self) -> None:
        assert "SECRET" not in repr(ApiKey(key="KEY", secret="SECRET"))

    def test_not_equal_to_account_token(self) -> None:
        assert ApiKey(key="x", secret="y") != AccountToken(token="y")


class TestAuthMethod:
    def test_discriminates_on_type(self) -> None:
        adapter = TypeAdapter(AuthMethod)
        token = adapter.validate_python({"type": "account_token", "token": "t"})
        assert isinstance(token, AccountToken)
        parsed = adapter.validate_python({"type": "api_key", "key": "k", "secret": "s"})
        assert isinstance(parsed, ApiKey)
        assert parsed.key == "k"
