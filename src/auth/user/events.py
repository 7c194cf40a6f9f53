"""Domain events for the User aggregate."""

from protean.fields import Boolean, DateTime, Identifier, String

from auth.domain import auth


@auth.event(part_of="User")
class UserRegistered:
    """A new user account was created."""

    __version__ = 1

    user_id: Identifier(required=True)
    username: String(required=True)
    email: String(required=True)
    first_name: String(required=True)
    last_name: String()
    role: String(required=True)
    registered_at: DateTime(required=True)


@auth.event(part_of="User")
class AddressAdded:
    __version__ = 1

    user_id: Identifier(required=True)
    address_id: Identifier(required=True)
    street: String(required=True)
    city: String(required=True)
    state: String(required=True)
    country: String(required=True)
    pincode: String(required=True)
    is_default: Boolean(default=False)


@auth.event(part_of="User")
class AddressRemoved:
    __version__ = 1

    user_id: Identifier(required=True)
    address_id: Identifier(required=True)
