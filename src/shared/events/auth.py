"""Cross-domain event contracts for Auth domain events.

Consumed by the Notifications domain to send the welcome email. Registered
in consumers via domain.register_external_event() with the matching
"Auth.<Event>.v1" type string.

The source-of-truth events are in src/auth/user/events.py.
"""

from protean.core.event import BaseEvent
from protean.fields import DateTime, Identifier, String


class UserRegistered(BaseEvent):
    """A new user account was created."""

    __version__ = 1

    user_id = Identifier(required=True)
    username = String(required=True)
    email = String(required=True)
    first_name = String(required=True)
    last_name = String()
    role = String(required=True)
    registered_at = DateTime(required=True)
