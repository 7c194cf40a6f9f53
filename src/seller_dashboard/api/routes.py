"""FastAPI endpoints for the Seller Dashboard."""

from fastapi import APIRouter, Depends

from shared.auth import CurrentUser, authenticate

from seller_dashboard.metrics import seller_metrics, seller_orders, seller_products

router = APIRouter(prefix="/api/seller/dashboard", tags=["seller-dashboard"])

seller_only = authenticate(roles=("seller",))


def _product_view(product) -> dict:
    return {
        "_id": str(product.product_id),
        "title": product.title,
        "price": {"amount": product.price_amount, "currency": product.price_currency},
        "stock": product.stock,
    }


@router.get("/metrics")
async def metrics(current_user: CurrentUser = Depends(seller_only)) -> dict:
    return seller_metrics(current_user.id)


@router.get("/orders")
async def orders(current_user: CurrentUser = Depends(seller_only)) -> dict:
    return {"orders": seller_orders(current_user.id)}


@router.get("/products")
async def products(current_user: CurrentUser = Depends(seller_only)) -> dict:
    return {"products": [_product_view(p) for p in seller_products(current_user.id)]}
