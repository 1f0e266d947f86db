"""Pure text rendering for products and remote errors.

Every function here returns a string; printing is the caller's job.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from devhub.core.models import ErrorPayload, Product


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------

def render_product(product: Product) -> str:
    """Render a product as an indented ``key: value`` block."""
    return f"  name: {product.name}\n".rstrip()


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

def render_error(payload: ErrorPayload, *, server: str | None = None) -> str:
    """Render a remote failure as a human-readable diagnostic.

    Never raises: shapes that are not recognised fall through to a
    generic message that still carries the HTTP status.
    """
    if payload.is_transport_failure:
        target = server or "the server"
        return f"Unable to reach {target}: {payload.reason or 'unknown error'}"

    header = f"Server returned an error (HTTP {payload.status_code}):"
    lines = _describe_body(payload.body)
    if not lines:
        return f"Unexpected response from server (HTTP {payload.status_code})."
    return "\n".join([header, *(f"  {line}" for line in lines)])


def _describe_body(body: Any) -> list[str]:
    if isinstance(body, str):
        text = body.strip()
        return [text] if text else []

    if not isinstance(body, Mapping):
        return []

    if "errors" in body:
        return _describe_errors(body["errors"])

    for key in ("error", "message", "detail"):
        value = body.get(key)
        if isinstance(value, str) and value.strip():
            return [value.strip()]
    return []


def _describe_errors(errors: Any) -> list[str]:
    if isinstance(errors, str):
        return [errors] if errors.strip() else []

    if isinstance(errors, list):
        return [_stringify(item) for item in errors if item not in (None, "")]

    if isinstance(errors, Mapping):
        detail = errors.get("detail")
        if isinstance(detail, str) and detail.strip():
            return [detail.strip()]
        return [
            f"{field}: {_stringify(messages)}"
            for field, messages in errors.items()
        ]

    return []


def _stringify(value: Any) -> str:
    if isinstance(value, list):
        return ", ".join(_stringify(item) for item in value)
    if isinstance(value, Mapping):
        return ", ".join(f"{k}: {_stringify(v)}" for k, v in value.items())
    return str(value)
