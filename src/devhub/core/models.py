"""Domain models for devhub.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O, zero dependencies on
external packages, and must remain pure across the entire lifecycle.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union


# ---------------------------------------------------------------------------
# Product
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Product:
    """A product as returned by the remote service."""

    name: str
    """Product name, unique within an organization."""

    metadata: dict[str, str] = field(default_factory=dict)
    """Every other string-valued key the server returned."""

    @classmethod
    def from_json(cls, raw: Mapping[str, Any]) -> Product:
        """Build a :class:`Product` from a decoded JSON object."""
        metadata = {
            str(key): value
            for key, value in raw.items()
            if key != "name" and isinstance(value, str)
        }
        return cls(name=str(raw.get("name", "")), metadata=metadata)


# ---------------------------------------------------------------------------
# Remote failures
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ErrorPayload:
    """A non-success result from the remote service."""

    status_code: int | None
    """HTTP status, or ``None`` when the request never got a response."""

    body: Any = None
    """Decoded JSON body, raw text, or ``None``."""

    reason: str | None = None
    """Transport-level failure description, if any."""

    @property
    def is_transport_failure(self) -> bool:
        return self.status_code is None

    def summary(self) -> str:
        if self.is_transport_failure:
            return f"Request failed: {self.reason or 'unknown transport error'}"
        return f"Remote call failed with HTTP {self.status_code}"


# ---------------------------------------------------------------------------
# Credentials
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class AuthToken:
    """Opaque user token required by every product call."""

    value: str = field(repr=False)

    def header(self) -> str:
        """Return the ``Authorization`` header value."""
        return f"token {self.value}"


# ---------------------------------------------------------------------------
# Parsed commands
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ListProducts:
    """``product list``"""


@dataclass(frozen=True, slots=True)
class CreateProduct:
    """``product create [--name NAME]``"""

    name: str | None = None


@dataclass(frozen=True, slots=True)
class DeleteProduct:
    """``product delete PRODUCT_NAME``"""

    name: str


@dataclass(frozen=True, slots=True)
class UpdateProduct:
    """``product update PRODUCT_NAME KEY VALUE``"""

    product: str
    key: str
    value: str


Command = Union[ListProducts, CreateProduct, DeleteProduct, UpdateProduct]


@dataclass(frozen=True, slots=True)
class Invocation:
    """A fully resolved ``product`` invocation: what to do, and for whom."""

    command: Command
    org: str
