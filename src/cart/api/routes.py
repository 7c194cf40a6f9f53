"""FastAPI endpoints for the Cart domain."""

from fastapi import APIRouter, Depends, HTTPException
from protean.utils.globals import current_domain

from shared.auth import CurrentUser, authenticate

from cart.api.schemas import AddItemRequest, UpdateItemRequest, check_product_id
from cart.api.views import cart_view, totals_view
from cart.cart.items import (
    AddToCart,
    ClearCart,
    OpenCart,
    RemoveFromCart,
    UpdateCartQuantity,
    find_cart,
)

router = APIRouter(prefix="/api/cart", tags=["cart"])

shopper = authenticate(roles=("user",))


def _valid_product_id(product_id: str) -> str:
    try:
        return check_product_id(product_id)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def _cart_with_item(user_id: str, product_id: str):
    shopping_cart = find_cart(user_id)
    if shopping_cart is None:
        raise HTTPException(status_code=404, detail="Cart not found")
    if shopping_cart.find_item(product_id) is None:
        raise HTTPException(status_code=404, detail="Product not found in cart")
    return shopping_cart


@router.get("")
async def get_cart(current_user: CurrentUser = Depends(shopper)) -> dict:
    current_domain.process(OpenCart(user_id=current_user.id), asynchronous=False)
    shopping_cart = find_cart(current_user.id)
    return {"cart": cart_view(shopping_cart), "totals": totals_view(shopping_cart)}


@router.post("/items")
async def add_item(body: AddItemRequest, current_user: CurrentUser = Depends(shopper)) -> dict:
    current_domain.process(
        AddToCart(user_id=current_user.id, product_id=body.product_id, quantity=body.qty),
        asynchronous=False,
    )
    return {"message": "Item added to cart", "cart": cart_view(find_cart(current_user.id))}


@router.patch("/items/{product_id}")
async def update_item(product_id: str, body: UpdateItemRequest, current_user: CurrentUser = Depends(shopper)) -> dict:
    product_id = _valid_product_id(product_id)
    _cart_with_item(current_user.id, product_id)

    current_domain.process(
        UpdateCartQuantity(user_id=current_user.id, product_id=product_id, quantity=body.qty),
        asynchronous=False,
    )
    return {"message": "Cart item updated", "cart": cart_view(find_cart(current_user.id))}


@router.delete("/items/{product_id}")
async def remove_item(product_id: str, current_user: CurrentUser = Depends(shopper)) -> dict:
    product_id = _valid_product_id(product_id)
    _cart_with_item(current_user.id, product_id)

    current_domain.process(RemoveFromCart(user_id=current_user.id, product_id=product_id), asynchronous=False)
    return {"message": "Item removed from cart", "cart": cart_view(find_cart(current_user.id))}


@router.delete("")
async def clear_cart(current_user: CurrentUser = Depends(shopper)) -> dict:
    current_domain.process(OpenCart(user_id=current_user.id), asynchronous=False)
    current_domain.process(ClearCart(user_id=current_user.id), asynchronous=False)
    return {"message": "Cart cleared", "cart": cart_view(find_cart(current_user.id))}
