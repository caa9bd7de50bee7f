"""Credential check for login."""

import structlog

from storefront.errors import Unauthorized
from storefront.user.queries import get_user_by_email
from storefront.user.user import User

logger = structlog.get_logger(__name__)


def login_user_with_email_and_password(email: str, password: str) -> User:
    user = get_user_by_email(email)
    if user is None or not user.is_password_match(password):
        logger.info("Login rejected", email=email)
        raise Unauthorized("Incorrect email or password")
    return user
