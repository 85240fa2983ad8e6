"""Keep mc-router routes in sync with a server list API, with a health endpoint."""

__version__ = "0.1.0"
__all__ = ["__version__"]