"""EmailAddress value object for validated email addresses."""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import String

from storefront.domain import storefront

_FORBIDDEN_CHARACTERS = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


def normalize_email(email: str) -> str:
    """Emails are stored trimmed and lower-cased so that lookups are case-insensitive."""
    return email.strip().lower()


@storefront.value_object
class EmailAddress:
    """A structurally valid email address.

    Exactly one @, non-empty local and domain parts without leading or trailing
    dots, a dotted domain, and no whitespace, consecutive dots or forbidden
    characters.
    """

    address: String(required=True, max_length=254)

    @invariant.post
    def verify_email_address(self):
        email = self.address
        if not email:
            return

        error = ValidationError({"email": [f"Invalid email address: {email!r}"]})

        if any(ch.isspace() for ch in email) or email.count("@") != 1:
            raise error

        local_part, domain_part = email.split("@", 1)

        for part in (local_part, domain_part):
            if not part or part.startswith(".") or part.endswith(".") or ".." in part:
                raise error

        if "." not in domain_part:
            raise error

        if any(label.startswith("-") or label.endswith("-") for label in domain_part.split(".")):
            raise error

        if any(ch in email for ch in _FORBIDDEN_CHARACTERS):
            raise error
