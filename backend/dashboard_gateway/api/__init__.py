"""REST API routes."""

from .routes import RestProxy, router

__all__ = ["RestProxy", "router"]
