"""Positional-argument parsing for ``devhub product``.

Turns the verb and its positional arguments into one of the tagged
:data:`~devhub.core.models.Command` variants.  Anything that does not
match the table below is rejected here, before any I/O happens.

=====================================  ==========================
positional args                        command
=====================================  ==========================
``list``                               :class:`ListProducts`
``create``                             :class:`CreateProduct`
``delete NAME``                        :class:`DeleteProduct`
``update NAME KEY VALUE``              :class:`UpdateProduct`
=====================================  ==========================
"""

from __future__ import annotations

from collections.abc import Sequence

from devhub.core.models import (
    Command,
    CreateProduct,
    DeleteProduct,
    ListProducts,
    UpdateProduct,
)
from devhub.exceptions import UsageError

USAGE: str = """\
Usage:
  devhub product list
  devhub product create [--name NAME]
  devhub product delete PRODUCT_NAME
  devhub product update PRODUCT_NAME KEY VALUE

Run `devhub product --help` for more information."""


def parse_command(args: Sequence[str], *, name: str | None = None) -> Command:
    """Map positional *args* to a command.

    Parameters
    ----------
    args:
        Positional tokens, verb first.
    name:
        Value of ``--name``; only meaningful for ``create``.

    Raises
    ------
    UsageError
        For an empty, unknown, or wrong-arity invocation.
    """
    verb = args[0] if args else None
    rest = list(args[1:])

    if verb == "list" and not rest:
        return ListProducts()
    if verb == "create" and not rest:
        return CreateProduct(name=name)
    if verb == "delete" and len(rest) == 1:
        return DeleteProduct(name=rest[0])
    if verb == "update" and len(rest) == 3:
        product, key, value = rest
        return UpdateProduct(product=product, key=key, value=value)

    raise UsageError("Invalid arguments to `devhub product`.", hint=USAGE)
