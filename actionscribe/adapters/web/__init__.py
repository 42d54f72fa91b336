"""FastAPI web adapter."""

from actionscribe.adapters.web.server import create_app

__all__ = ["create_app"]
