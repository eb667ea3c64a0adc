"""Centralized JSON error handling for the service.

Every failure raised while serving a request, on an API route or not, is
turned into a ``{"message": ...}`` body by :func:`translate`.
"""

from flask import current_app as app
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound

from cart_service.models import (
    CartServiceError,
    DataValidationError,
    NotFoundError,
    StorageError,
)
from . import status

ROUTE_NOT_FOUND_MESSAGE = "Route not found."
INTERNAL_ERROR_MESSAGE = "An unexpected error occurred."

ERROR_STATUS = {
    DataValidationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    StorageError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def translate(error) -> tuple[dict, int]:
    """Map an error to the JSON body and status code sent to the client."""
    for error_type, code in ERROR_STATUS.items():
        if isinstance(error, error_type):
            return {"message": error.message}, code

    # unknown paths and unsupported methods on known paths look the same
    if isinstance(error, (NotFound, MethodNotAllowed)):
        return {"message": ROUTE_NOT_FOUND_MESSAGE}, status.HTTP_404_NOT_FOUND

    if isinstance(error, HTTPException):
        code = error.code or status.HTTP_500_INTERNAL_SERVER_ERROR
        if code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            return {"message": INTERNAL_ERROR_MESSAGE}, code
        return {"message": error.description or error.name}, code

    return {"message": INTERNAL_ERROR_MESSAGE}, status.HTTP_500_INTERNAL_SERVER_ERROR


def _json_error(error):
    """Translate and log an expected error."""
    payload, code = translate(error)
    logger = app.logger.error if code >= 500 else app.logger.warning
    logger(payload["message"])
    return payload, code


def handle_service_error(error):
    """Return the status mapped to a validation, lookup or storage error."""
    return _json_error(error)


def handle_http_exception(error):
    """Ensure all HTTPException responses are JSON."""
    return _json_error(error)


def handle_unhandled_exception(error):
    """Catch-all handler to guarantee JSON 500 responses."""
    app.logger.exception("Unhandled exception: %s", error)
    return translate(error)


def handle_api_error(error):
    """
    Translate an error raised inside a Flask-RESTX resource

    Flask-RESTX logs every 5xx response with its traceback through
    ``app.log_exception``, so only client errors are logged here.
    """
    payload, code = translate(error)
    if code < status.HTTP_500_INTERNAL_SERVER_ERROR:
        app.logger.warning(payload["message"])
    return payload, code


def init_error_handlers(app_, api):
    """
    Register the handlers on both the Flask app and the Flask-RESTX API

    Flask-RESTX intercepts errors raised inside its own resources, so the
    same error types have to be known to it. It picks the first matching
    handler in registration order, most specific first.
    """
    handlers = (
        (CartServiceError, handle_service_error),
        (HTTPException, handle_http_exception),
        (Exception, handle_unhandled_exception),
    )
    for error_type, handler in handlers:
        app_.register_error_handler(error_type, handler)
        api.errorhandler(error_type)(handle_api_error)


__all__ = [
    "handle_api_error",
    "handle_http_exception",
    "handle_service_error",
    "handle_unhandled_exception",
    "init_error_handlers",
    "translate",
]
