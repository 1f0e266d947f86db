"""Infrastructure: user credential acquisition.

A configured ``DEVHUB_TOKEN`` is used as-is.  Without one the user is
asked for e-mail and password, which are exchanged for a token through
the login endpoint.  The token is kept for the lifetime of this object
only; nothing is written to disk.
"""

from __future__ import annotations

import logging
import platform

from devhub.core.models import AuthToken
from devhub.core.protocols import Prompter
from devhub.exceptions import AuthenticationError, RemoteError
from devhub.infra.api_client import DevhubAPI

logger = logging.getLogger(__name__)


class TokenAuth:
    """Concrete :class:`~devhub.core.protocols.CredentialProvider`."""

    def __init__(
        self,
        api: DevhubAPI,
        prompter: Prompter,
        *,
        token: str | None = None,
    ) -> None:
        self._api = api
        self._prompter = prompter
        self._token: AuthToken | None = AuthToken(token) if token else None

    def request_credential(self) -> AuthToken:
        """Return a token, logging in interactively if none is configured.

        Raises
        ------
        AuthenticationError
            When the login is rejected or the prompts are left empty.
        """
        if self._token is not None:
            return self._token

        logger.info("No token configured; logging in to %s", self._api.base_url)
        email = self._prompter.prompt("Email address:").strip()
        password = self._prompter.password("Password:")
        if not email or not password:
            raise AuthenticationError(
                "E-mail and password are required to log in.",
                hint="Set DEVHUB_TOKEN to skip the login prompt.",
            )

        try:
            self._token = self._api.login(email, password, note=_token_note())
        except RemoteError as exc:
            raise AuthenticationError(
                "Login failed.",
                hint=(
                    "Check your e-mail address and password."
                    if not exc.payload.is_transport_failure
                    else str(exc)
                ),
            ) from exc
        return self._token


def _token_note() -> str:
    """Describe this machine so the token is recognisable server-side."""
    return f"devhub CLI on {platform.node() or 'unknown host'}"
