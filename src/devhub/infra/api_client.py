"""httpx-backed implementation of :class:`~devhub.core.protocols.ProductRemote`.

This module is the **only** place in the codebase that talks HTTP.
Every httpx exception and every non-2xx response is caught here and
re-raised as :class:`~devhub.exceptions.RemoteError` — nothing raw
escapes the infrastructure boundary.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import httpx

from devhub.core.models import AuthToken, ErrorPayload, Product
from devhub.exceptions import RemoteError
from devhub.version import __version__

logger = logging.getLogger(__name__)


class DevhubAPI:
    """Client for the product and login endpoints of the remote service.

    Usage::

        api = DevhubAPI("https://api.devhub.example")
        products = api.list_products("acme", token)

    A fresh :class:`httpx.Client` is opened and closed for every call;
    *transport* lets tests plug in :class:`httpx.MockTransport`.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url: str = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    def list_products(self, org: str, auth: AuthToken) -> list[Product]:
        response = self._request("GET", _products_path(org), auth=auth)
        data = self._data(response)
        if not isinstance(data, list) or not all(isinstance(entry, dict) for entry in data):
            raise RemoteError(ErrorPayload(response.status_code, body=data))
        return [Product.from_json(entry) for entry in data]

    def create_product(self, org: str, name: str, auth: AuthToken) -> Product:
        response = self._request(
            "POST",
            _products_path(org),
            auth=auth,
            json={"product": {"name": name}},
        )
        return self._product(response)

    def delete_product(self, org: str, name: str, auth: AuthToken) -> None:
        self._request("DELETE", _product_path(org, name), auth=auth)

    def update_product(
        self,
        org: str,
        name: str,
        fields: Mapping[str, str],
        auth: AuthToken,
    ) -> Product:
        response = self._request(
            "PUT",
            _product_path(org, name),
            auth=auth,
            json={"product": dict(fields)},
        )
        return self._product(response)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def login(self, email: str, password: str, *, note: str) -> AuthToken:
        """Exchange user credentials for a token."""
        response = self._request(
            "POST",
            "/users/login",
            json={"email": email, "password": password, "note": note},
        )
        data = self._data(response)
        token = data.get("token") if isinstance(data, dict) else None
        if not isinstance(token, str) or not token:
            raise RemoteError(ErrorPayload(response.status_code, body=data))
        return AuthToken(token)

    # ------------------------------------------------------------------
    # Transport (safe boundary)
    # ------------------------------------------------------------------

    def _request(
        self,
        method: str,
        path: str,
        *,
        auth: AuthToken | None = None,
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        headers = {
            "Accept": "application/json",
            "User-Agent": f"devhub/{__version__}",
        }
        if auth is not None:
            headers["Authorization"] = auth.header()

        logger.debug("%s %s%s", method, self.base_url, path)
        try:
            with httpx.Client(
                base_url=self.base_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = client.request(method, path, json=json, headers=headers)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise RemoteError(
                ErrorPayload(None, reason=str(exc) or type(exc).__name__),
                hint="Check your network connection and DEVHUB_API_URL.",
            ) from exc

        logger.debug("%s %s -> %s", method, path, response.status_code)
        if not response.is_success:
            logger.warning("%s %s returned HTTP %s", method, path, response.status_code)
            raise RemoteError(ErrorPayload(response.status_code, body=_decode(response)))
        return response

    @staticmethod
    def _data(response: httpx.Response) -> Any:
        """Pull ``data`` out of a success body, or fail as malformed."""
        body = _decode(response)
        if not isinstance(body, dict) or "data" not in body:
            raise RemoteError(ErrorPayload(response.status_code, body=body))
        return body["data"]

    @classmethod
    def _product(cls, response: httpx.Response) -> Product:
        data = cls._data(response)
        if not isinstance(data, dict):
            raise RemoteError(ErrorPayload(response.status_code, body=data))
        return Product.from_json(data)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _products_path(org: str) -> str:
    return f"/orgs/{quote(org, safe='')}/products"


def _product_path(org: str, name: str) -> str:
    return f"{_products_path(org)}/{quote(name, safe='')}"


def _decode(response: httpx.Response) -> Any:
    """Decode a JSON body, falling back to raw text."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text
