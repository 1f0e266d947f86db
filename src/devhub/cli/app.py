"""CLI application entry point and command routing for devhub.

This module is the **sole error boundary** for the entire application.
It catches :class:`~devhub.exceptions.DevhubError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core
  parsers and the product handlers.
* Settings are read once per process and passed down explicitly.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from collections.abc import Sequence
from typing import TYPE_CHECKING, NoReturn

from devhub.cli import exit_codes
from devhub.cli.console import console, escape
from devhub.core.commands import USAGE, parse_command
from devhub.core.models import Invocation
from devhub.exceptions import DevhubError, UsageError
from devhub.version import __version__

if TYPE_CHECKING:
    from devhub.cli.product import ProductContext
    from devhub.infra.config import Settings

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _StrictParser(argparse.ArgumentParser):
    """Argument parser that raises :class:`UsageError` instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message, hint=USAGE)


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``devhub product <verb> [args] [--org ORG] [--name NAME]``
    * ``devhub --version``
    """
    parser = _StrictParser(
        prog="devhub",
        allow_abbrev=False,
        description="Manage products on a remote device-management service.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    product = subparsers.add_parser(
        "product",
        allow_abbrev=False,
        help="Manage your products.",
        description="Manage your products.",
        epilog=USAGE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    product.add_argument(
        "--org",
        default=None,
        help="Organization that owns the products (default: $DEVHUB_ORG).",
    )
    product.add_argument(
        "--name",
        default=None,
        help="Product name for 'create'.",
    )
    product.add_argument(
        "args",
        nargs="*",
        metavar="ARG",
        help="list | create | delete PRODUCT_NAME | update PRODUCT_NAME KEY VALUE",
    )
    return parser


_NEGATIVE_NUMBER = re.compile(r"^-\d+$|^-\d*\.\d+$")


def _is_flag(token: str) -> bool:
    """Mirror argparse: ``-`` and negative numbers are positionals."""
    return token.startswith("-") and token != "-" and not _NEGATIVE_NUMBER.match(token)


def _collect_positionals(parsed: Sequence[str], extras: Sequence[str]) -> list[str]:
    """Merge positionals argparse left over after an option.

    Any leftover token that looks like a flag is unknown and rejected.
    """
    unknown = [token for token in extras if _is_flag(token)]
    if unknown:
        raise UsageError(
            f"Unrecognized arguments: {' '.join(unknown)}",
            hint=USAGE,
        )
    return [*parsed, *extras]


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _build_context(settings: Settings) -> ProductContext:
    """Wire infra adapters and the terminal shell for the product handlers."""
    from devhub.cli.product import ProductContext
    from devhub.cli.shell import Shell
    from devhub.infra.api_client import DevhubAPI
    from devhub.infra.auth import TokenAuth
    from devhub.infra.config import ProjectConfig

    shell = Shell()
    api = DevhubAPI(settings.api_url, timeout=settings.timeout)
    return ProductContext(
        remote=api,
        auth=TokenAuth(api, shell, token=settings.token),
        shell=shell,
        project=ProjectConfig.load(),
        server=settings.api_url,
    )


def _handle_product(args: argparse.Namespace, extras: Sequence[str]) -> int:
    """Dispatch ``devhub product``.

    Flow:
    1. Validate the verb and its arity (no I/O yet).
    2. Load settings and resolve the organization.
    3. Hand over to the matching product handler.
    """
    from devhub.cli.product import run_product
    from devhub.infra.config import Settings
    from devhub.utils.logs import configure_logging

    positionals = _collect_positionals(args.args, extras)
    command = parse_command(positionals, name=args.name)

    settings = Settings.from_env()
    configure_logging(settings.log_level)
    org = settings.resolve_org(args.org)
    logger.info("API endpoint: %s", settings.api_url)

    return run_product(Invocation(command=command, org=org), _build_context(settings))


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the devhub CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    UsageError
        For malformed invocations.
    ConfigurationError
        When no organization can be resolved.
    """
    parser = _build_parser()
    args, extras = parser.parse_known_args(argv)

    if args.command is None:
        if extras:
            parser.error(f"unrecognized arguments: {' '.join(extras)}")
        parser.print_help()
        return exit_codes.SUCCESS

    return _handle_product(args, extras)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except DevhubError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}", emoji=False)
        if exc.hint:
            console.print("[yellow]Hint:[/yellow]")
            console.print(exc.hint, markup=False, emoji=False, highlight=False)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}",
            emoji=False,
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
