"""Interactive terminal I/O for command handlers.

:class:`Shell` is the only object handlers use to talk to the user:

* :meth:`Shell.info` writes result lines to stdout.
* :meth:`Shell.error` writes diagnostics to stderr.
* :meth:`Shell.prompt`, :meth:`Shell.password` and :meth:`Shell.confirm`
  ask questions through questionary.

Handlers receive the shell as a parameter, so tests can swap in a fake
that records output and scripts answers.
"""

from __future__ import annotations

from typing import Any

from devhub.cli.console import console, out
from devhub.exceptions import EnvironmentError

_VERBATIM: dict[str, Any] = {
    "markup": False,
    "emoji": False,
    "highlight": False,
    "soft_wrap": True,
}


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


class Shell:
    """Terminal-backed shell."""

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def info(self, text: str = "") -> None:
        # Server-supplied text is printed verbatim: no markup, emoji codes or wrapping.
        out.print(text, **_VERBATIM)

    def error(self, text: str) -> None:
        console.print(text, style="red", **_VERBATIM)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def prompt(self, message: str) -> str:
        """Ask a free-text question.

        Raises
        ------
        KeyboardInterrupt
            If the user cancels the prompt.
        """
        questionary = _import_questionary()
        answer: str | None = questionary.text(message).ask()
        if answer is None:
            raise KeyboardInterrupt
        return answer

    def password(self, message: str) -> str:
        """Ask a question without echoing the answer."""
        questionary = _import_questionary()
        answer: str | None = questionary.password(message).ask()
        if answer is None:
            raise KeyboardInterrupt
        return answer

    def confirm(self, message: str) -> bool:
        """Ask a yes/no question; anything but an explicit yes is ``False``."""
        questionary = _import_questionary()
        answer: bool | None = questionary.confirm(message, default=False).ask()
        return answer is True
