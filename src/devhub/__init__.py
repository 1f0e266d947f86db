"""devhub — manage products on a remote device-management service.

Built as a thin CLI over the service's REST API with a strict layered
architecture.
"""

from devhub.version import __version__

__all__: list[str] = ["__version__"]
