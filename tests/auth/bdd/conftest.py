"""Shared BDD fixtures and step definitions for the Auth domain."""

import pytest
from auth.user.events import AddressAdded, AddressRemoved, UserRegistered
from auth.user.user import User
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then

_USER_EVENT_CLASSES = {
    "UserRegistered": UserRegistered,
    "AddressAdded": AddressAdded,
    "AddressRemoved": AddressRemoved,
}


def _address_in(city, **overrides):
    address = {"street": f"1 Main Road, {city}", "city": city, "state": "KA", "country": "India", "pincode": "560001"}
    address.update(overrides)
    return address


def _new_user():
    user = User.register(username="asha", email="asha@example.com", password_hash="hashed", first_name="Asha")
    user._events.clear()
    return user


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@pytest.fixture()
def address_in():
    """Builds an address dict for a city."""
    return _address_in


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("a registered user", target_fixture="user")
def registered_user():
    return _new_user()


@given(parsers.cfparse('a registered user with an address in "{city}"'), target_fixture="user")
def user_with_address(city):
    user = _new_user()
    user.add_address(**_address_in(city))
    user._events.clear()
    return user


@given(
    parsers.cfparse('a registered user with addresses in "{first}" and "{second}"'),
    target_fixture="user",
)
def user_with_two_addresses(first, second):
    user = _new_user()
    user.add_address(**_address_in(first))
    user.add_address(**_address_in(second))
    user._events.clear()
    return user


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the action fails with a validation error")
def action_fails_with_validation_error(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then(parsers.cfparse('the user role is "{role}"'))
def user_role_is(user, role):
    assert user.role == role


@then(parsers.cfparse('the user email is "{email}"'))
def user_email_is(user, email):
    assert user.email.address == email


@then(parsers.cfparse("the user has {count:d} address"))
@then(parsers.cfparse("the user has {count:d} addresses"))
def user_has_addresses(user, count):
    assert len(user.addresses) == count


@then(parsers.cfparse('the default address is in "{city}"'))
def default_address_is_in(user, city):
    assert user.default_address.city == city


@then(parsers.cfparse("a {event_type} user event is raised"))
def user_event_raised(user, event_type):
    event_cls = _USER_EVENT_CLASSES[event_type]
    assert any(
        isinstance(e, event_cls) for e in user._events
    ), f"No {event_type} event found. Events: {[type(e).__name__ for e in user._events]}"
