"""Error taxonomy for storefront operations.

Each error carries the HTTP status the request layer responds with and the
message it renders verbatim.
"""

from http import HTTPStatus


class StorefrontError(Exception):
    """Base class for classified storefront failures."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"code": int(self.status_code), "message": self.message}


class InvalidInput(StorefrontError):
    """A client-correctable request: unmet precondition or bad reference."""

    status_code = HTTPStatus.BAD_REQUEST


class Conflict(StorefrontError):
    """The requested resource already exists."""

    status_code = HTTPStatus.BAD_REQUEST


class DuplicateEmail(Conflict):
    """Registration with an email that is already taken.

    Reported with 200 OK so that the response does not reveal whether an
    account exists for the email.
    """

    status_code = HTTPStatus.OK


class NotFound(StorefrontError):
    status_code = HTTPStatus.NOT_FOUND


class Unauthorized(StorefrontError):
    status_code = HTTPStatus.UNAUTHORIZED


class InternalError(StorefrontError):
    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
