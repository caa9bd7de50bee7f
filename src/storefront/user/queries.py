"""Read-side lookups for users. Absence is a valid result, never an error."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.user.user import User


def get_user_by_id(user_id) -> User | None:
    try:
        return current_domain.repository_for(User).get(user_id)
    except ObjectNotFoundError:
        return None


def get_user_by_email(email: str) -> User | None:
    return current_domain.repository_for(User).find_by_email(email)


def get_user_address_by_id(user_id) -> dict | None:
    """Only the fields needed to show a user's address."""
    user = get_user_by_id(user_id)
    if user is None:
        return None
    return {"id": str(user.id), "email": user.email, "address": user.address}
