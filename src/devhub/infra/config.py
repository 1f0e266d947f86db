"""Infrastructure: settings and project configuration.

Two sources of configuration are read here and nowhere else:

* :class:`Settings` — process settings from ``DEVHUB_*`` environment
  variables, with a ``.env`` file in the working directory loaded
  first via python-dotenv.
* :class:`ProjectConfig` — the current project's ``pyproject.toml``,
  used as a fallback source for the product name.

Both are plain frozen dataclasses passed explicitly to the handlers.
"""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from devhub.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_API_URL: str = "https://api.devhub.example"
DEFAULT_TIMEOUT: float = 30.0
_VALID_LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# ---------------------------------------------------------------------------
# Process settings
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Settings:
    """Process-wide settings resolved once at start-up."""

    api_url: str = DEFAULT_API_URL
    org: str | None = None
    token: str | None = field(default=None, repr=False)
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = "WARNING"

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        dotenv: bool = True,
    ) -> Settings:
        """Build settings from *environ* (default: ``os.environ``).

        Raises
        ------
        ConfigurationError
            When a variable is present but unusable.
        """
        if environ is None:
            if dotenv:
                load_dotenv(Path.cwd() / ".env")
            environ = os.environ

        api_url = environ.get("DEVHUB_API_URL", DEFAULT_API_URL).strip().rstrip("/")
        if not api_url.startswith(("http://", "https://")):
            raise ConfigurationError(
                f"Invalid API URL: {api_url}",
                hint="DEVHUB_API_URL must start with http:// or https://",
            )

        raw_timeout = environ.get("DEVHUB_TIMEOUT", str(DEFAULT_TIMEOUT))
        try:
            timeout = float(raw_timeout)
        except ValueError as exc:
            raise ConfigurationError(
                f"Invalid timeout: {raw_timeout}",
                hint="DEVHUB_TIMEOUT must be a number of seconds.",
            ) from exc
        if timeout <= 0:
            raise ConfigurationError(f"Invalid timeout: {raw_timeout}")

        log_level = environ.get("DEVHUB_LOG_LEVEL", "WARNING").strip().upper()
        if log_level not in _VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log level: {log_level}",
                hint=f"DEVHUB_LOG_LEVEL must be one of {', '.join(_VALID_LOG_LEVELS)}",
            )

        return cls(
            api_url=api_url,
            org=_non_blank(environ.get("DEVHUB_ORG")),
            token=_non_blank(environ.get("DEVHUB_TOKEN")),
            timeout=timeout,
            log_level=log_level,
        )

    def resolve_org(self, explicit: str | None) -> str:
        """Return *explicit* if given, else the configured default org.

        Raises
        ------
        ConfigurationError
            When neither is available.
        """
        org = _non_blank(explicit) or self.org
        if org is None:
            raise ConfigurationError(
                "No organization specified.",
                hint="Pass --org ORG or set DEVHUB_ORG.",
            )
        return org


# ---------------------------------------------------------------------------
# Project configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ProjectConfig:
    """Product-related values from the current project's ``pyproject.toml``."""

    product_name: str | None = None
    """``[tool.devhub] product``"""

    app_name: str | None = None
    """``[project] name``"""

    @classmethod
    def load(cls, path: Path | None = None) -> ProjectConfig:
        """Read *path* (default ``./pyproject.toml``).

        A missing or unreadable file yields an empty config.
        """
        path = path if path is not None else Path.cwd() / "pyproject.toml"
        try:
            with path.open("rb") as fh:
                data: dict[str, Any] = tomllib.load(fh)
        except FileNotFoundError:
            return cls()
        except (OSError, tomllib.TOMLDecodeError) as exc:
            logger.warning("Ignoring unreadable project config %s: %s", path, exc)
            return cls()

        project = data.get("project")
        tool = data.get("tool")
        devhub = tool.get("devhub") if isinstance(tool, dict) else None
        return cls(
            product_name=_str_or_none(devhub.get("product")) if isinstance(devhub, dict) else None,
            app_name=_str_or_none(project.get("name")) if isinstance(project, dict) else None,
        )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _non_blank(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def _str_or_none(value: object) -> str | None:
    return _non_blank(value) if isinstance(value, str) else None
