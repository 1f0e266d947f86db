"""``devhub product`` — list, create, delete, and update products.

Each handler acquires a credential, performs one remote call, and
prints either the result or a rendered error.  Remote failures are
reported, not raised: the handler returns
:data:`~devhub.cli.exit_codes.GENERAL_ERROR` and the process ends
normally.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from devhub.cli import exit_codes
from devhub.cli.shell import Shell
from devhub.core.models import (
    Command,
    CreateProduct,
    DeleteProduct,
    Invocation,
    ListProducts,
    UpdateProduct,
)
from devhub.core.name_resolution import constant, resolve_name
from devhub.core.protocols import CredentialProvider, ProductRemote
from devhub.core.render import render_error, render_product
from devhub.exceptions import RemoteError, UsageError
from devhub.infra.config import ProjectConfig

logger = logging.getLogger(__name__)

SEPARATOR: str = "------------"


@dataclass(slots=True)
class ProductContext:
    """Collaborators shared by every product handler."""

    remote: ProductRemote
    auth: CredentialProvider
    shell: Shell
    project: ProjectConfig
    server: str | None = None
    """Shown when the server cannot be reached."""


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def run_product(invocation: Invocation, ctx: ProductContext) -> int:
    """Route *invocation* to exactly one handler and return its exit code."""
    command: Command = invocation.command
    org = invocation.org

    if isinstance(command, ListProducts):
        return list_products(org, ctx)
    if isinstance(command, CreateProduct):
        return create_product(org, command.name, ctx)
    if isinstance(command, DeleteProduct):
        return delete_product(org, command.name, ctx)
    if isinstance(command, UpdateProduct):
        return update_product(org, command.product, command.key, command.value, ctx)
    raise TypeError(f"Unhandled product command: {command!r}")


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------

def list_products(org: str, ctx: ProductContext) -> int:
    shell = ctx.shell
    auth = ctx.auth.request_credential()

    try:
        products = ctx.remote.list_products(org, auth)
    except RemoteError as exc:
        return _report(exc, ctx)

    if not products:
        shell.info("No products have been created.")
        return exit_codes.SUCCESS

    shell.info("")
    shell.info("Products:")
    for product in products:
        shell.info(SEPARATOR)
        shell.info(render_product(product))
    shell.info("")
    return exit_codes.SUCCESS


def create_product(org: str, name: str | None, ctx: ProductContext) -> int:
    """Create a product, falling back through configured names to a prompt."""
    shell = ctx.shell
    resolved = resolve_name(
        [
            constant(name),
            constant(ctx.project.product_name),
            constant(ctx.project.app_name),
            lambda: shell.prompt("Product name:"),
        ]
    )
    if resolved is None:
        raise UsageError(
            "A product name is required.",
            hint="Pass --name NAME or answer the prompt.",
        )

    shell.info("")
    shell.info(f"Creating product '{resolved}'...")

    auth = ctx.auth.request_credential()
    try:
        ctx.remote.create_product(org, resolved, auth)
    except RemoteError as exc:
        return _report(exc, ctx)

    shell.info(f"Product '{resolved}' created.")
    return exit_codes.SUCCESS


def delete_product(org: str, name: str, ctx: ProductContext) -> int:
    """Delete a product after an explicit confirmation."""
    shell = ctx.shell
    if not shell.confirm(f"Delete product '{name}'?"):
        logger.debug("Deletion of %r declined", name)
        return exit_codes.SUCCESS

    auth = ctx.auth.request_credential()
    try:
        ctx.remote.delete_product(org, name, auth)
    except RemoteError as exc:
        return _report(exc, ctx)

    shell.info("Product deleted successfully.")
    return exit_codes.SUCCESS


def update_product(
    org: str,
    product: str,
    key: str,
    value: str,
    ctx: ProductContext,
) -> int:
    """Set one metadata key and show the product as the server now has it."""
    shell = ctx.shell
    auth = ctx.auth.request_credential()

    try:
        updated = ctx.remote.update_product(org, product, {key: value}, auth)
    except RemoteError as exc:
        return _report(exc, ctx)

    shell.info("")
    shell.info("Product updated:")
    shell.info(render_product(updated))
    shell.info("")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Error reporting
# ---------------------------------------------------------------------------

def _report(exc: RemoteError, ctx: ProductContext) -> int:
    ctx.shell.error(render_error(exc.payload, server=ctx.server))
    return exit_codes.GENERAL_ERROR
