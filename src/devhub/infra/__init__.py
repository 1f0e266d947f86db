"""Infrastructure layer — external system integration.

This layer wraps all interaction with the remote HTTP API, the process
environment, and project files.  Every raw third-party exception must
be caught here and re-raised as a :class:`~devhub.exceptions.DevhubError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from devhub.infra.api_client import DevhubAPI
from devhub.infra.auth import TokenAuth
from devhub.infra.config import ProjectConfig, Settings

__all__: list[str] = [
    "DevhubAPI",
    "ProjectConfig",
    "Settings",
    "TokenAuth",
]
