"""JSON views of User aggregates."""


def address_view(address) -> dict:
    return {
        "_id": str(address.id),
        "street": address.street,
        "city": address.city,
        "state": address.state,
        "country": address.country,
        "pincode": address.pincode,
        "phone": address.phone,
        "isDefault": bool(address.is_default),
    }


def user_view(user) -> dict:
    """Public representation of a user. The password hash never leaves the domain."""
    return {
        "_id": str(user.id),
        "username": user.username,
        "email": user.email.address,
        "fullName": {
            "firstName": user.full_name.first_name,
            "lastName": user.full_name.last_name,
        },
        "role": user.role,
        "addresses": [address_view(a) for a in user.addresses],
        "createdAt": user.created_at.isoformat() if user.created_at else None,
    }
