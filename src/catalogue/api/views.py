"""JSON views of Product aggregates."""


def product_view(product) -> dict:
    return {
        "_id": str(product.id),
        "title": product.title,
        "description": product.description,
        "price": {"amount": product.price.amount, "currency": product.price.currency},
        "stock": product.stock,
        "seller": str(product.seller_id),
        "images": [
            {"url": image.url, "thumbnail": image.thumbnail, "id": image.file_id} for image in product.images
        ],
        "createdAt": product.created_at.isoformat() if product.created_at else None,
        "updatedAt": product.updated_at.isoformat() if product.updated_at else None,
    }
