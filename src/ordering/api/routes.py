"""FastAPI endpoints for the Ordering domain."""

import json

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse
from protean.utils.globals import current_domain

from shared.auth import CurrentUser, authenticate

from ordering.api.schemas import CancelOrderRequest, PlaceOrderRequest, UpdateAddressRequest, UpdateStatusRequest
from ordering.api.views import order_view
from ordering.order.fulfillment import DeliverOrder, ShipOrder
from ordering.order.management import CancelOrder, UpdateOrderAddress
from ordering.order.order import OrderStatus
from ordering.order.placement import OrderPlacementError, UpstreamServiceError, place_order
from ordering.order.queries import DEFAULT_PAGE_SIZE, get_order, orders_for_user

router = APIRouter(prefix="/api/orders", tags=["orders"])

buyer = authenticate(roles=("user",))
staff = authenticate(roles=("seller", "admin"))


def _order_for(order_id: str, current_user: CurrentUser):
    order = get_order(order_id)
    if order is None:
        raise HTTPException(status_code=404, detail="Order not found")
    if not order.is_owned_by(current_user.id):
        raise HTTPException(status_code=403, detail="Forbidden: You do not have access to this order")
    return order


@router.post("", status_code=201)
async def create_order(body: PlaceOrderRequest, current_user: CurrentUser = Depends(buyer)):
    try:
        order_id = await place_order(
            user_id=current_user.id,
            token=current_user.token,
            shipping_address=body.shipping_address.model_dump(),
        )
    except OrderPlacementError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except UpstreamServiceError as exc:
        return JSONResponse(status_code=500, content={"message": "Internal Server Error", "error": str(exc)})

    return {"message": "Order placed", "order": order_view(get_order(order_id))}


@router.get("/me")
async def my_orders(
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=100),
    current_user: CurrentUser = Depends(buyer),
) -> dict:
    orders, total = orders_for_user(current_user.id, page=page, limit=limit)
    return {"orders": [order_view(o) for o in orders], "page": page, "limit": limit, "total": total}


@router.get("/{order_id}")
async def get_order_by_id(order_id: str, current_user: CurrentUser = Depends(buyer)) -> dict:
    return {"order": order_view(_order_for(order_id, current_user))}


@router.post("/{order_id}/cancel")
async def cancel_order(
    order_id: str,
    body: CancelOrderRequest | None = None,
    current_user: CurrentUser = Depends(buyer),
) -> dict:
    order = _order_for(order_id, current_user)
    if not order.is_pending:
        raise HTTPException(status_code=409, detail="Your order cannot be cancelled at this stage")

    current_domain.process(
        CancelOrder(order_id=order_id, user_id=current_user.id, reason=body.reason if body else None),
        asynchronous=False,
    )
    return {"order": order_view(get_order(order_id))}


@router.patch("/{order_id}/address")
async def update_address(
    order_id: str, body: UpdateAddressRequest, current_user: CurrentUser = Depends(buyer)
) -> dict:
    order = _order_for(order_id, current_user)
    if not order.is_pending:
        raise HTTPException(status_code=409, detail="Order address cannot be updated at this stage")

    current_domain.process(
        UpdateOrderAddress(
            order_id=order_id,
            user_id=current_user.id,
            shipping_address=json.dumps(body.shipping_address.model_dump()),
        ),
        asynchronous=False,
    )
    return {"order": order_view(get_order(order_id))}


@router.patch("/{order_id}/status")
async def update_status(order_id: str, body: UpdateStatusRequest, current_user: CurrentUser = Depends(staff)) -> dict:
    order = get_order(order_id)
    if order is None:
        raise HTTPException(status_code=404, detail="Order not found")

    target = OrderStatus(body.status)
    if not order.can_transition_to(target):
        raise HTTPException(status_code=409, detail=f"Cannot transition from {order.status} to {target.value}")

    command = ShipOrder if target == OrderStatus.SHIPPED else DeliverOrder
    current_domain.process(command(order_id=order_id), asynchronous=False)
    return {"order": order_view(get_order(order_id))}
