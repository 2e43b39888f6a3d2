"""Tests for public API surface."""

from __future__ import annotations

import fullsend


class TestPublicAPI:
    def test_version_string(self) -> None:
        assert isinstance(fullsend.__version__, str)
        assert fullsend.__version__ == "0.2.0"

    def test_all_names_importable(self) -> None:
        for name in fullsend.__all__:
            obj = getattr(fullsend, name)
            assert obj is not None, f"{name} is None"

    def test_exception_classes(self) -> None:
        assert issubclass(fullsend.NoAccountSidSetError, fullsend.ClientBuilderError)
        assert issubclass(fullsend.NoAuthMethodSetError, fullsend.ClientBuilderError)
        assert issubclass(fullsend.NoToSetError, fullsend.MessageBuilderError)
        assert issubclass(fullsend.NoSenderSetError, fullsend.MessageBuilderError)
        assert issubclass(fullsend.NoMessageSetError, fullsend.MessageBuilderError)
        assert issubclass(fullsend.NetworkError, fullsend.SendError)
        assert issubclass(fullsend.ProviderError, fullsend.SendError)
        for exc in (fullsend.ClientBuilderError, fullsend.MessageBuilderError, fullsend.SendError):
            assert issubclass(exc, fullsend.FullsendError)
