"""Nexora FastAPI application.

One web server for every bounded context. Each request is wrapped in the
domain context that owns its URL prefix.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# PROTEAN_ENV controls which config overlay is applied:
#   - "test"       → in-memory providers, sync processing
#   - "production" → PostgreSQL, Redis, Message DB, async processing via Engine
from auth.domain import auth
from cart.domain import cart
from catalogue.domain import catalogue
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from notifications.domain import notifications
from ordering.domain import ordering
from payments.domain import payments
from seller_dashboard.domain import seller_dashboard
from shared.api import register_error_handlers
from shared.logging import domain_log_context
from shared.relay import install_event_relay

DOMAINS = (auth, catalogue, cart, ordering, payments, notifications, seller_dashboard)

# Sync overlays have no Engine to carry events between contexts.
install_event_relay(DOMAINS)

for _domain in DOMAINS:
    _domain.init()

# ---------------------------------------------------------------------------
# Route-to-domain mapping
# ---------------------------------------------------------------------------
_ROUTE_DOMAIN_MAP = {
    "/api/auth": auth,
    "/api/products": catalogue,
    "/api/cart": cart,
    "/api/orders": ordering,
    "/api/payments": payments,
    "/api/notifications": notifications,
    "/api/seller": seller_dashboard,
}


def _resolve_domain(path: str):
    """Return the domain for the given request path, or None."""
    for prefix, domain in _ROUTE_DOMAIN_MAP.items():
        if path.startswith(prefix):
            return domain
    return None


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Nexora API",
    description="Marketplace backend: auth, catalogue, cart, orders, payments, notifications and seller dashboard",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the correct Protean domain context for each request."""
    domain = _resolve_domain(request.url.path)
    if domain is not None:
        with domain.domain_context(), domain_log_context(domain.name):
            response = await call_next(request)
        return response
    # No domain match: health check, docs
    return await call_next(request)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from auth.api import router as auth_router  # noqa: E402
from cart.api import router as cart_router  # noqa: E402
from catalogue.api import product_router  # noqa: E402
from notifications.api import router as notifications_router  # noqa: E402
from ordering.api import router as ordering_router  # noqa: E402
from payments.api import router as payments_router  # noqa: E402
from seller_dashboard.api import router as seller_dashboard_router  # noqa: E402

app.include_router(auth_router)
app.include_router(product_router)
app.include_router(cart_router)
app.include_router(ordering_router)
app.include_router(payments_router)
app.include_router(notifications_router)
app.include_router(seller_dashboard_router)


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {domain.name: {"name": domain.name} for domain in DOMAINS},
        }
    )
