"""User registration: command and handler."""

import structlog
from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.errors import DuplicateEmail
from storefront.user.user import User

logger = structlog.get_logger(__name__)


@storefront.command(part_of="User")
class RegisterUser:
    """Create a new shopper account."""

    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254)
    password: String(required=True, max_length=128)


@storefront.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        if repo.is_email_taken(command.email):
            raise DuplicateEmail("Email already taken")

        user = User.register(
            name=command.name,
            email=command.email,
            password=command.password,
        )
        repo.add(user)
        logger.info("User registered", user_id=str(user.id), email=user.email)
        return str(user.id)
