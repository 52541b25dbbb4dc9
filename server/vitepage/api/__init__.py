"""API module."""

from vitepage.api.routes import router

__all__ = ["router"]
