"""Credential checks and user lookups.

Logging in changes no state, so it is a plain query over the User
repository rather than a command.
"""

from protean.utils.globals import current_domain

from shared.security import verify_password

from auth.user.user import User


def _first(**filters):
    results = current_domain.repository_for(User)._dao.query.filter(**filters).all().items
    return results[0] if results else None


def find_user_by_username(username: str):
    return _first(username=username) if username else None


def find_user_by_email(email: str):
    return _first(email_address=email.strip().lower()) if email else None


def find_existing_user(username: str | None = None, email: str | None = None):
    """Return a user holding either the username or the email, if any."""
    return find_user_by_username(username) or find_user_by_email(email)


def authenticate_user(password: str, username: str | None = None, email: str | None = None):
    """Return the matching user when the password checks out, else None."""
    user = find_user_by_username(username) if username else find_user_by_email(email)
    if user is None or not verify_password(password, user.password_hash):
        return None
    return user
