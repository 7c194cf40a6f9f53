"""FastAPI endpoints for the Catalogue domain."""

import asyncio
import json

import pydantic
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from fastapi.responses import JSONResponse
from protean.utils.globals import current_domain

from shared.auth import CurrentUser, authenticate

from catalogue.api.schemas import ProductForm, UpdateProductRequest
from catalogue.api.views import product_view
from catalogue.domain import logger
from catalogue.product.creation import CreateProduct
from catalogue.product.details import DeleteProduct, UpdateProduct
from catalogue.product.product import MAX_IMAGES
from catalogue.product.queries import (
    DEFAULT_PAGE_SIZE,
    get_product,
    is_valid_product_id,
    products_for_seller,
    search_products,
)
from catalogue.storage import get_storage
from catalogue.storage.port import ImageStorageError

product_router = APIRouter(prefix="/api/products", tags=["products"])

seller_or_admin = authenticate(roles=("seller", "admin"))
seller_only = authenticate(roles=("seller",))


def _validation_errors(errors: list[dict]) -> JSONResponse:
    return JSONResponse(status_code=400, content={"message": "Validation errors", "errors": errors})


def _owned_product(product_id: str, seller_id: str, action: str):
    if not is_valid_product_id(product_id):
        raise HTTPException(status_code=400, detail="Invalid product id")
    product = get_product(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    if not product.is_owned_by(seller_id):
        raise HTTPException(status_code=403, detail=f"Forbidden: You can only {action} your own products")
    return product


@product_router.post("", status_code=201)
async def create_product(
    title: str | None = Form(None),
    description: str | None = Form(None),
    price_amount: str | None = Form(None, alias="priceAmount"),
    price_currency: str | None = Form(None, alias="priceCurrency"),
    stock: str | None = Form(None),
    images: list[UploadFile] | None = File(None),
    current_user: CurrentUser = Depends(seller_or_admin),
):
    raw = {"title": title, "description": description, "price_amount": price_amount, "stock": stock or 0}
    if price_currency:
        raw["price_currency"] = price_currency
    try:
        form = ProductForm.model_validate(raw)
    except pydantic.ValidationError as exc:
        return _validation_errors(
            [{"field": ".".join(str(p) for p in e["loc"]), "message": e["msg"]} for e in exc.errors()]
        )

    files = images or []
    if len(files) > MAX_IMAGES:
        return _validation_errors([{"field": "images", "message": f"At most {MAX_IMAGES} images are allowed"}])

    storage = get_storage()
    contents = [(await f.read(), f.filename) for f in files]
    try:
        stored = await asyncio.gather(*(storage.upload(content, filename) for content, filename in contents))
    except ImageStorageError as exc:
        logger.error("Product image upload failed", seller_id=current_user.id, error=str(exc))
        return JSONResponse(status_code=500, content={"message": "Internal Server Error", "error": str(exc)})

    product_id = current_domain.process(
        CreateProduct(
            seller_id=current_user.id,
            title=form.title,
            description=form.description,
            price_amount=form.price_amount,
            price_currency=form.price_currency,
            stock=form.stock,
            images=json.dumps([image.as_dict() for image in stored]),
        ),
        asynchronous=False,
    )
    return {"message": "Product Created", "data": product_view(get_product(product_id))}


@product_router.get("")
async def list_products(
    q: str | None = None,
    minprice: float | None = None,
    maxprice: float | None = None,
    skip: int = 0,
    limit: int = DEFAULT_PAGE_SIZE,
) -> dict:
    products = search_products(q=q, min_price=minprice, max_price=maxprice, skip=skip, limit=limit)
    return {"data": [product_view(p) for p in products]}


@product_router.get("/seller")
async def list_seller_products(
    skip: int = 0,
    limit: int = DEFAULT_PAGE_SIZE,
    current_user: CurrentUser = Depends(seller_only),
) -> dict:
    products = products_for_seller(current_user.id, skip=skip, limit=limit)
    return {"data": [product_view(p) for p in products]}


@product_router.get("/{product_id}")
async def get_product_by_id(product_id: str) -> dict:
    if not is_valid_product_id(product_id):
        raise HTTPException(status_code=400, detail="Invalid product id")
    product = get_product(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return {"product": product_view(product)}


@product_router.patch("/{product_id}")
async def update_product(
    product_id: str,
    body: UpdateProductRequest,
    current_user: CurrentUser = Depends(seller_only),
) -> dict:
    _owned_product(product_id, current_user.id, "update")

    current_domain.process(
        UpdateProduct(
            product_id=product_id,
            seller_id=current_user.id,
            title=body.title,
            description=body.description,
            price_amount=body.price.amount if body.price else None,
            price_currency=body.price.currency if body.price else None,
            stock=body.stock,
        ),
        asynchronous=False,
    )
    return {"message": "Product updated successfully", "product": product_view(get_product(product_id))}


@product_router.delete("/{product_id}")
async def delete_product(product_id: str, current_user: CurrentUser = Depends(seller_only)) -> dict:
    _owned_product(product_id, current_user.id, "delete")

    current_domain.process(DeleteProduct(product_id=product_id, seller_id=current_user.id), asynchronous=False)
    return {"message": "Product deleted successfully"}
