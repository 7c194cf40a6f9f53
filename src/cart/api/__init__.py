"""Cart domain API package."""

from cart.api.routes import router

__all__ = ["router"]
