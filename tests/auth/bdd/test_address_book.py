"""BDD tests for the address book."""

from protean.exceptions import ValidationError
from pytest_bdd import parsers, scenarios, when

scenarios("features/address_book.feature")


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('the user adds an address in "{city}"'))
def add_address(user, city, address_in):
    user.add_address(**address_in(city))


@when(parsers.cfparse('the user adds a default address in "{city}"'))
def add_default_address(user, city, address_in):
    user.add_address(**address_in(city), is_default=True)


@when(parsers.cfparse('the user adds an address with pincode "{pincode}"'))
def add_address_with_pincode(user, pincode, error, address_in):
    try:
        user.add_address(**address_in("Bengaluru", pincode=pincode))
    except ValidationError as exc:
        error["exc"] = exc


@when(parsers.cfparse('the user removes the address in "{city}"'))
def remove_address(user, city):
    address = next(a for a in user.addresses if a.city == city)
    user.remove_address(address.id)
