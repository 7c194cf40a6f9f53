"""Address book management: commands and handler."""

from protean import handle
from protean.fields import Boolean, Identifier, String
from protean.utils.globals import current_domain

from auth.domain import auth
from auth.user.user import User


@auth.command(part_of="User")
class AddAddress:
    user_id: Identifier(required=True)
    street: String(required=True, max_length=255)
    city: String(required=True, max_length=100)
    state: String(required=True, max_length=100)
    country: String(required=True, max_length=100)
    pincode: String(required=True, max_length=6)
    phone: String(max_length=20)
    is_default: Boolean(default=False)


@auth.command(part_of="User")
class RemoveAddress:
    user_id: Identifier(required=True)
    address_id: Identifier(required=True)


@auth.command_handler(part_of=User)
class ManageAddressesHandler:
    @handle(AddAddress)
    def add_address(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        address = user.add_address(
            street=command.street,
            city=command.city,
            state=command.state,
            country=command.country,
            pincode=command.pincode,
            phone=command.phone,
            is_default=bool(command.is_default),
        )
        repo.add(user)
        return str(address.id)

    @handle(RemoveAddress)
    def remove_address(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        user.remove_address(command.address_id)
        repo.add(user)
