"""Core layer — pure parsing, resolution, and rendering logic.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from devhub.core.commands import USAGE, parse_command
from devhub.core.models import (
    AuthToken,
    Command,
    CreateProduct,
    DeleteProduct,
    ErrorPayload,
    Invocation,
    ListProducts,
    Product,
    UpdateProduct,
)
from devhub.core.protocols import CredentialProvider, ProductRemote, Prompter
from devhub.core.render import render_error, render_product

__all__: list[str] = [
    "USAGE",
    "AuthToken",
    "Command",
    "CreateProduct",
    "CredentialProvider",
    "DeleteProduct",
    "ErrorPayload",
    "Invocation",
    "ListProducts",
    "Product",
    "ProductRemote",
    "Prompter",
    "UpdateProduct",
    "parse_command",
    "render_error",
    "render_product",
]
