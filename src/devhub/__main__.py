"""Allow ``python -m devhub`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m devhub`` behaves identically to the ``devhub``
console script.
"""

from __future__ import annotations

from devhub.cli.app import cli

if __name__ == "__main__":
    cli()
