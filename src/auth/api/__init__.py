"""Auth domain API package."""

from auth.api.routes import router

__all__ = ["router"]
