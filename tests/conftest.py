"""Shared pytest fixtures and configuration for the devhub test suite.

Guidelines
----------
* No internet access in any test.
* HTTP is mocked at the transport (``httpx.MockTransport``) or replaced
  wholesale by :class:`~fakes.FakeRemote`.
* Core tests must be pure — no side effects.
* Tests must not depend on the developer's environment variables.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from devhub.cli.product import ProductContext
from devhub.infra.config import ProjectConfig
from fakes import FakeAuth, FakeRemote, FakeShell

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def shell() -> FakeShell:
    return FakeShell()


@pytest.fixture
def remote() -> FakeRemote:
    return FakeRemote()


@pytest.fixture
def auth() -> FakeAuth:
    return FakeAuth()


@pytest.fixture
def make_ctx(remote: FakeRemote, auth: FakeAuth):
    """Build a :class:`ProductContext` around the fakes."""

    def _make(
        shell: FakeShell,
        project: ProjectConfig | None = None,
    ) -> ProductContext:
        return ProductContext(
            remote=remote,
            auth=auth,
            shell=shell,  # type: ignore[arg-type]
            project=project or ProjectConfig(),
            server="https://api.test",
        )

    return _make


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Isolate every test from DEVHUB_* variables and stray .env files."""
    for name in (
        "DEVHUB_API_URL",
        "DEVHUB_ORG",
        "DEVHUB_TOKEN",
        "DEVHUB_TIMEOUT",
        "DEVHUB_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
