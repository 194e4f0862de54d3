"""
Centralized error handlers for the food ordering API.

Every failure leaves the API as `{code, message}` JSON with the status of
its error kind.
"""

from http import HTTPStatus

from flask import Flask, jsonify
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from foodorder_shared.error_catalog import message_for
from foodorder_shared.errors import ApplicationError, UnexpectedError, status_for
from foodorder_shared.logging_config import get_logger
from foodorder_shared.serializers import error_response

logger = get_logger(__name__)

HTTP_ERROR_CODES = {
    HTTPStatus.NOT_FOUND: "GEN-003",
    HTTPStatus.METHOD_NOT_ALLOWED: "GEN-004",
}


def _catalog_response(code: str, status: HTTPStatus):
    return jsonify(error_response(code, message_for(code))), status


def register_error_handlers(app: Flask) -> None:
    """
    Register centralized error handlers for the Flask app.

    Args:
        app: Flask application instance
    """

    @app.errorhandler(ApplicationError)
    def handle_application_error(e: ApplicationError):
        """Handle controlled business errors."""
        logger.warning("Request rejected with %s: %s", e.code, e.message)
        return jsonify(e.to_dict()), status_for(e)

    @app.errorhandler(PydanticValidationError)
    def handle_pydantic_validation_error(e: PydanticValidationError):
        """Handle Pydantic validation errors."""
        logger.warning("Invalid payload: %s", e.errors())
        return _catalog_response("GEN-002", HTTPStatus.BAD_REQUEST)

    @app.errorhandler(SQLAlchemyError)
    def handle_database_error(e: SQLAlchemyError):
        logger.error("Database error: %s", e, exc_info=True)
        return _catalog_response("GEN-001", HTTPStatus.INTERNAL_SERVER_ERROR)

    @app.errorhandler(HTTPException)
    def handle_http_exception(e: HTTPException):
        """Handle HTTP exceptions from Werkzeug."""
        logger.warning("HTTP exception %s: %s", e.code, e.description)
        status = HTTPStatus(e.code or HTTPStatus.INTERNAL_SERVER_ERROR)
        code = HTTP_ERROR_CODES.get(status)
        if code is not None:
            return _catalog_response(code, status)
        if status >= HTTPStatus.INTERNAL_SERVER_ERROR:
            return _catalog_response("GEN-001", status)
        return _catalog_response("GEN-002", status)

    @app.errorhandler(Exception)
    def handle_generic_exception(e: Exception):
        """Handle any unhandled exceptions."""
        logger.error("Unhandled exception: %s", e, exc_info=True)
        error = UnexpectedError()
        return jsonify(error.to_dict()), status_for(error)
