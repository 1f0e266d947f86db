"""Smoke tests — verify scaffold wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

from devhub import __version__
from devhub.cli import exit_codes
from devhub.cli.app import main
from devhub.core.models import ErrorPayload
from devhub.exceptions import (
    AuthenticationError,
    ConfigurationError,
    DevhubError,
    EnvironmentError,
    RemoteError,
    UsageError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            UsageError,
            ConfigurationError,
            AuthenticationError,
            RemoteError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[DevhubError]
    ) -> None:
        assert issubclass(exc_class, DevhubError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(DevhubError, Exception)

    def test_hint_is_stored(self) -> None:
        err = DevhubError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = DevhubError("boom")
        assert err.hint is None

    def test_remote_error_carries_payload(self) -> None:
        payload = ErrorPayload(404, body={"errors": {"detail": "Not Found"}})
        err = RemoteError(payload)
        assert err.payload is payload
        assert "404" in str(err)

    def test_remote_error_transport_summary(self) -> None:
        err = RemoteError(ErrorPayload(None, reason="connection refused"))
        assert "connection refused" in str(err)


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# CLI routing (skeleton)
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_no_args_returns_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        """No arguments should print help and exit 0."""
        code = main([])
        assert code == exit_codes.SUCCESS
        assert "product" in capsys.readouterr().out

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_product_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["product", "--help"])
        assert exc_info.value.code == 0
        assert "update PRODUCT_NAME KEY VALUE" in capsys.readouterr().out
