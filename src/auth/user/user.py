"""User aggregate root with Address entity and FullName value object."""

import re
from datetime import UTC, datetime
from enum import Enum

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, HasMany, String, ValueObject

from auth.domain import auth
from auth.shared.email import EmailAddress

PINCODE_PATTERN = re.compile(r"^[1-9][0-9]{5}$")


class Role(Enum):
    """Roles a user can hold on the marketplace."""

    USER = "user"
    SELLER = "seller"
    ADMIN = "admin"


@auth.value_object(part_of="User")
class FullName:
    """A user's display name. Only the first name is mandatory."""

    first_name: String(required=True, max_length=100)
    last_name: String(max_length=100)


@auth.entity(part_of="User")
class Address:
    """A delivery address in the user's address book.

    Indian postal codes: six digits, never starting with zero.
    """

    street: String(required=True, max_length=255)
    city: String(required=True, max_length=100)
    state: String(required=True, max_length=100)
    country: String(required=True, max_length=100)
    pincode: String(required=True, max_length=6)
    phone: String(max_length=20)
    is_default: Boolean(default=False)

    @invariant.post
    def pincode_is_valid(self):
        if self.pincode and not PINCODE_PATTERN.match(self.pincode):
            raise ValidationError({"pincode": ["Pincode must be a valid 6-digit code"]})


@auth.aggregate
class User:
    """A registered account: a shopper, a seller or an administrator.

    Credentials, role and the address book change together, so they live in
    one transactional boundary. When the address book is not empty exactly one
    address is the default.
    """

    username: String(required=True, min_length=3, max_length=50, unique=True)
    email: ValueObject(EmailAddress, required=True)
    password_hash: String(required=True, max_length=255)
    full_name: ValueObject(FullName, required=True)
    role: String(choices=Role, default=Role.USER.value)
    addresses: HasMany(Address)
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def exactly_one_default_address_when_addresses_exist(self):
        if not self.addresses:
            return
        defaults = [a for a in self.addresses if a.is_default]
        if len(defaults) != 1:
            raise ValidationError({"addresses": ["Exactly one address must be marked as default"]})

    @classmethod
    def register(cls, username, email, password_hash, first_name, last_name=None, role=Role.USER.value):
        from auth.user.events import UserRegistered

        try:
            email_address = EmailAddress.normalized(email)
        except ValidationError as exc:
            raise ValidationError({"email": ["Invalid email address"]}) from exc

        now = datetime.now(UTC)
        user = cls(
            username=username,
            email=email_address,
            password_hash=password_hash,
            full_name=FullName(first_name=first_name, last_name=last_name),
            role=role or Role.USER.value,
            created_at=now,
            updated_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=user.id,
                username=user.username,
                email=email_address.address,
                first_name=first_name,
                last_name=last_name,
                role=user.role,
                registered_at=now,
            )
        )
        return user

    def find_address(self, address_id):
        return next((a for a in self.addresses if str(a.id) == str(address_id)), None)

    @property
    def default_address(self):
        return next((a for a in self.addresses if a.is_default), None)

    def add_address(self, street, city, state, country, pincode, phone=None, is_default=False):
        from auth.user.events import AddressAdded

        # First address is always default
        if not self.addresses:
            is_default = True

        with atomic_change(self):
            if is_default:
                for addr in self.addresses:
                    if addr.is_default:
                        addr.is_default = False

            address = Address(
                street=street,
                city=city,
                state=state,
                country=country,
                pincode=pincode,
                phone=phone,
                is_default=is_default,
            )
            self.add_addresses(address)
            self.updated_at = datetime.now(UTC)

        self.raise_(
            AddressAdded(
                user_id=self.id,
                address_id=address.id,
                street=street,
                city=city,
                state=state,
                country=country,
                pincode=pincode,
                is_default=is_default,
            )
        )
        return address

    def remove_address(self, address_id):
        """Remove an address; the first remaining one inherits the default flag."""
        from auth.user.events import AddressRemoved

        address = self.find_address(address_id)
        if address is None:
            raise ValidationError({"addresses": ["Address not found"]})

        was_default = address.is_default

        with atomic_change(self):
            self.remove_addresses(address)

            if was_default and self.addresses:
                self.addresses[0].is_default = True
            self.updated_at = datetime.now(UTC)

        self.raise_(
            AddressRemoved(
                user_id=self.id,
                address_id=address.id,
            )
        )
