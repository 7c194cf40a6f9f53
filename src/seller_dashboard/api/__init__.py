"""Seller Dashboard API package."""

from seller_dashboard.api.routes import router

__all__ = ["router"]
