"""
Domain exceptions raised by the services and mapped to HTTP responses.

Every error kind has exactly one HTTP status; the code/message pair comes
from the error catalogue.
"""

from __future__ import annotations

from http import HTTPStatus

from .error_catalog import message_for


class ApplicationError(Exception):
    """Base class for controlled errors carrying a catalogue code."""

    status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, code: str, message: str | None = None) -> None:
        self.code = code
        self.message = message or message_for(code)
        super().__init__(f"{code}: {self.message}")

    def to_dict(self) -> dict[str, str]:
        return {"code": self.code, "message": self.message}


class SignUpRestrictedError(ApplicationError):
    status = HTTPStatus.BAD_REQUEST


class AuthenticationFailedError(ApplicationError):
    status = HTTPStatus.UNAUTHORIZED


class AuthorizationFailedError(ApplicationError):
    status = HTTPStatus.FORBIDDEN


class UpdateCustomerError(ApplicationError):
    status = HTTPStatus.BAD_REQUEST


class AddressNotFoundError(ApplicationError):
    status = HTTPStatus.NOT_FOUND


class SaveAddressError(ApplicationError):
    status = HTTPStatus.BAD_REQUEST


class CouponNotFoundError(ApplicationError):
    status = HTTPStatus.NOT_FOUND


class RestaurantNotFoundError(ApplicationError):
    status = HTTPStatus.NOT_FOUND


class PaymentMethodNotFoundError(ApplicationError):
    status = HTTPStatus.NOT_FOUND


class ItemNotFoundError(ApplicationError):
    status = HTTPStatus.NOT_FOUND


class InvalidRatingError(ApplicationError):
    status = HTTPStatus.BAD_REQUEST


class CategoryNotFoundError(ApplicationError):
    status = HTTPStatus.NOT_FOUND


class UnexpectedError(ApplicationError):
    status = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, code: str = "GEN-001", message: str | None = None) -> None:
        super().__init__(code, message)


def status_for(exc: BaseException) -> HTTPStatus:
    """HTTP status for any exception; unrecognized ones are internal errors."""
    if isinstance(exc, ApplicationError):
        return exc.status
    return HTTPStatus.INTERNAL_SERVER_ERROR
