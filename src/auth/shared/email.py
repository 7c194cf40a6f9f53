"""EmailAddress value object for account email addresses."""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import String

from auth.domain import auth

FORBIDDEN_CHARACTERS = frozenset(';,()":<>[]\\')


@auth.value_object
class EmailAddress:
    """A structurally valid, lower-cased email address.

    One @, non-empty local and domain parts, a dotted domain whose labels
    neither start nor end with a hyphen, no whitespace, no consecutive dots.
    """

    address: String(required=True, max_length=254)

    @classmethod
    def normalized(cls, value: str) -> "EmailAddress":
        return cls(address=(value or "").strip().lower())

    @invariant.post
    def address_is_well_formed(self):
        address = self.address
        local_part, at, domain_part = address.partition("@")

        if (
            not at
            or "@" in domain_part
            or any(ch.isspace() for ch in address)
            or FORBIDDEN_CHARACTERS.intersection(address)
            or not local_part
            or "." not in domain_part
            or ".." in address
            or local_part.startswith(".")
            or local_part.endswith(".")
            or any(not label or label.startswith("-") or label.endswith("-") for label in domain_part.split("."))
        ):
            raise ValidationError({"address": ["Invalid email address"]})
