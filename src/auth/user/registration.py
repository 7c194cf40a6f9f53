"""User registration: command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from auth.domain import auth, logger
from auth.user.authentication import find_existing_user
from auth.user.user import User


@auth.command(part_of="User")
class RegisterUser:
    username: String(required=True, min_length=3, max_length=50)
    email: String(required=True, max_length=254)
    password_hash: String(required=True, max_length=255)
    first_name: String(required=True, max_length=100)
    last_name: String(max_length=100)
    role: String(max_length=20)


@auth.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        if find_existing_user(username=command.username, email=command.email) is not None:
            raise ValidationError({"username": ["User already exists!"]})

        user = User.register(
            username=command.username,
            email=command.email,
            password_hash=command.password_hash,
            first_name=command.first_name,
            last_name=command.last_name,
            role=command.role,
        )

        current_domain.repository_for(User).add(user)
        logger.info("User registered", user_id=str(user.id), role=user.role)
        return str(user.id)
