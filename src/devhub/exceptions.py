"""Custom exception hierarchy for devhub.

All exceptions that cross layer boundaries must inherit from
:class:`DevhubError`.  Raw third-party exceptions (e.g. from httpx)
must NEVER propagate beyond the infrastructure layer — they must be
caught and re-raised as a typed subclass defined here.

Hierarchy
---------
DevhubError
├── UsageError
├── ConfigurationError
├── AuthenticationError
├── RemoteError
└── EnvironmentError
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from devhub.core.models import ErrorPayload


class DevhubError(Exception):
    """Base exception for all devhub errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Invocation ------------------------------------------------------------

class UsageError(DevhubError):
    """Raised when the command line is malformed or names an unknown verb."""


class ConfigurationError(DevhubError):
    """Raised when a required setting (e.g. the organization) is missing."""


# --- Remote service --------------------------------------------------------

class AuthenticationError(DevhubError):
    """Raised when a user credential cannot be obtained."""


class RemoteError(DevhubError):
    """Raised for any non-success result of a remote API call.

    The structured :attr:`payload` is what the error renderer works
    from; the message is only a short summary for logs.
    """

    def __init__(self, payload: ErrorPayload, *, hint: str | None = None) -> None:
        super().__init__(payload.summary(), hint=hint)
        self.payload: ErrorPayload = payload


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(DevhubError):
    """Raised when a required runtime dependency is not available."""
