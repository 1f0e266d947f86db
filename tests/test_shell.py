"""Tests for the terminal shell (cli/shell.py).

questionary is replaced with a ``MagicMock`` — no terminal interaction.
"""

from __future__ import annotations

import sys
from unittest.mock import MagicMock

import pytest

from devhub.cli.shell import Shell


@pytest.fixture
def questionary(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    fake = MagicMock()
    monkeypatch.setitem(sys.modules, "questionary", fake)
    return fake


class TestOutput:
    def test_info_goes_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        Shell().info("Products:")
        captured = capsys.readouterr()
        assert captured.out == "Products:\n"
        assert captured.err == ""

    def test_info_does_not_interpret_markup(self, capsys: pytest.CaptureFixture[str]) -> None:
        Shell().info("  name: [bold]widget[/bold]")
        assert "[bold]widget[/bold]" in capsys.readouterr().out

    def test_blank_info_line(self, capsys: pytest.CaptureFixture[str]) -> None:
        Shell().info("")
        assert capsys.readouterr().out == "\n"

    def test_info_keeps_emoji_codes(self, capsys: pytest.CaptureFixture[str]) -> None:
        Shell().info("  name: rocket:thumbs_up:")
        assert capsys.readouterr().out == "  name: rocket:thumbs_up:\n"

    def test_info_does_not_wrap_long_lines(self, capsys: pytest.CaptureFixture[str]) -> None:
        line = "  name: " + " ".join(["segment"] * 12)
        assert len(line) > 80
        Shell().info(line)
        assert capsys.readouterr().out == line + "\n"

    def test_error_is_verbatim(self, capsys: pytest.CaptureFixture[str]) -> None:
        line = "    name: " + " ".join(["taken:thumbs_up:"] * 6)
        assert len(line) > 80
        Shell().error(line)
        assert capsys.readouterr().err == line + "\n"

    def test_error_goes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        Shell().error("Server returned an error (HTTP 500):")
        captured = capsys.readouterr()
        assert "HTTP 500" in captured.err
        assert captured.out == ""


class TestPrompt:
    def test_returns_answer(self, questionary: MagicMock) -> None:
        questionary.text.return_value.ask.return_value = "widget"
        assert Shell().prompt("Product name:") == "widget"
        questionary.text.assert_called_once_with("Product name:")

    def test_cancel_raises_keyboard_interrupt(self, questionary: MagicMock) -> None:
        questionary.text.return_value.ask.return_value = None
        with pytest.raises(KeyboardInterrupt):
            Shell().prompt("Product name:")

    def test_password_hidden(self, questionary: MagicMock) -> None:
        questionary.password.return_value.ask.return_value = "hunter2"
        assert Shell().password("Password:") == "hunter2"
        questionary.password.assert_called_once_with("Password:")


class TestConfirm:
    @pytest.mark.parametrize(
        ("answer", "expected"),
        [(True, True), (False, False), (None, False)],
    )
    def test_only_explicit_yes_confirms(
        self, questionary: MagicMock, answer: bool | None, expected: bool,
    ) -> None:
        questionary.confirm.return_value.ask.return_value = answer
        assert Shell().confirm("Delete product 'widget'?") is expected

    def test_defaults_to_no(self, questionary: MagicMock) -> None:
        questionary.confirm.return_value.ask.return_value = False
        Shell().confirm("Delete product 'widget'?")
        questionary.confirm.assert_called_once_with("Delete product 'widget'?", default=False)
