"""Protocols (interfaces) consumed by the core and CLI layers.

These define the contracts that infrastructure adapters must satisfy.
Handlers depend ONLY on these protocols — never on concrete
implementations — so tests can substitute in-memory fakes.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

from devhub.core.models import AuthToken, Product


class ProductRemote(Protocol):
    """Contract for the remote product API.

    Every method performs exactly one round trip.  Implementations must
    map all transport and HTTP failures to
    :class:`~devhub.exceptions.RemoteError`.
    """

    def list_products(self, org: str, auth: AuthToken) -> list[Product]:
        """Return the organization's products in server order."""
        ...  # pragma: no cover

    def create_product(self, org: str, name: str, auth: AuthToken) -> Product:
        """Create a product and return the server's representation."""
        ...  # pragma: no cover

    def delete_product(self, org: str, name: str, auth: AuthToken) -> None:
        """Delete a product.  Success carries no body."""
        ...  # pragma: no cover

    def update_product(
        self,
        org: str,
        name: str,
        fields: Mapping[str, str],
        auth: AuthToken,
    ) -> Product:
        """Apply *fields* to a product and return the updated product."""
        ...  # pragma: no cover


class Prompter(Protocol):
    """Contract for the interactive questions asked while logging in."""

    def prompt(self, message: str) -> str:
        ...  # pragma: no cover

    def password(self, message: str) -> str:
        ...  # pragma: no cover


class CredentialProvider(Protocol):
    """Contract for obtaining a user credential.

    May block on an interactive prompt.  Failure raises
    :class:`~devhub.exceptions.AuthenticationError`, which is fatal.
    """

    def request_credential(self) -> AuthToken:
        ...  # pragma: no cover
