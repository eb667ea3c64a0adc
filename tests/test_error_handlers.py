"""Unit tests for JSON error handlers."""
# pylint: disable=missing-function-docstring,missing-class-docstring,too-few-public-methods

import logging
from unittest import TestCase
from unittest.mock import patch

import mongomock
from werkzeug.exceptions import (
    BadRequest,
    InternalServerError,
    MethodNotAllowed,
    NotFound,
    UnsupportedMediaType,
)

from cart_service import create_app
from cart_service.common import error_handlers, status
from cart_service.models import (
    CartServiceError,
    DataValidationError,
    NotFoundError,
    StorageError,
)


class TestTranslate(TestCase):
    """Validate the mapping from errors to status codes and messages."""

    def test_validation_error_is_400(self):
        payload, code = error_handlers.translate(DataValidationError("Invalid cart item ID."))
        self.assertEqual(code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(payload, {"message": "Invalid cart item ID."})

    def test_not_found_error_is_404(self):
        payload, code = error_handlers.translate(NotFoundError("Cart item not found."))
        self.assertEqual(code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(payload, {"message": "Cart item not found."})

    def test_storage_error_is_500(self):
        payload, code = error_handlers.translate(StorageError("Failed to update cart item."))
        self.assertEqual(code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(payload, {"message": "Failed to update cart item."})

    def test_routing_errors_are_route_not_found(self):
        for error in (NotFound(), MethodNotAllowed(valid_methods=["GET"])):
            with self.subTest(error=error):
                payload, code = error_handlers.translate(error)
                self.assertEqual(code, status.HTTP_404_NOT_FOUND)
                self.assertEqual(payload, {"message": "Route not found."})

    def test_other_http_errors_keep_their_code(self):
        payload, code = error_handlers.translate(BadRequest("body is broken"))
        self.assertEqual(code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(payload, {"message": "body is broken"})

        _, code = error_handlers.translate(UnsupportedMediaType())
        self.assertEqual(code, status.HTTP_415_UNSUPPORTED_MEDIA_TYPE)

    def test_http_server_errors_hide_details(self):
        payload, code = error_handlers.translate(InternalServerError("stack trace here"))
        self.assertEqual(code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(payload, {"message": "An unexpected error occurred."})

    def test_unexpected_errors_are_internal(self):
        for error in (RuntimeError("boom"), KeyError("x"), CartServiceError("untyped")):
            with self.subTest(error=error):
                payload, code = error_handlers.translate(error)
                self.assertEqual(code, status.HTTP_500_INTERNAL_SERVER_ERROR)
                self.assertEqual(payload, {"message": "An unexpected error occurred."})


class TestErrorHandlers(TestCase):
    """Validate the handlers registered on the application."""

    @classmethod
    def setUpClass(cls):
        cls.app = create_app({"TESTING": True}, client=mongomock.MongoClient())
        cls.app.logger.setLevel(logging.CRITICAL)
        cls.ctx = cls.app.app_context()
        cls.ctx.push()

    @classmethod
    def tearDownClass(cls):
        cls.ctx.pop()

    def test_service_error_handler(self):
        payload, code = error_handlers.handle_service_error(NotFoundError("Cart item not found."))
        self.assertEqual(code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(payload["message"], "Cart item not found.")

    def test_http_exception_handler(self):
        payload, code = error_handlers.handle_http_exception(NotFound("missing resource"))
        self.assertEqual(code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(payload["message"], "Route not found.")

    def test_unhandled_exception_handler(self):
        with self.assertLogs(self.app.logger, level="ERROR") as logs:
            payload, code = error_handlers.handle_unhandled_exception(RuntimeError("boom"))
        self.assertEqual(code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(payload["message"], "An unexpected error occurred.")
        self.assertIn("boom", logs.output[0])

    def test_handlers_are_registered(self):
        handlers = self.app.error_handler_spec[None][None]
        self.assertIs(handlers[CartServiceError], error_handlers.handle_service_error)
        self.assertIs(handlers[Exception], error_handlers.handle_unhandled_exception)

    def test_api_error_handler_logs_client_errors(self):
        with self.assertLogs(self.app.logger, level="WARNING") as logs:
            payload, code = error_handlers.handle_api_error(DataValidationError("Invalid cart item ID."))
        self.assertEqual(code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(payload, {"message": "Invalid cart item ID."})
        self.assertIn("Invalid cart item ID.", logs.output[0])

    def test_api_error_handler_leaves_server_errors_to_restx(self):
        with self.assertNoLogs(self.app.logger, level="ERROR"):
            payload, code = error_handlers.handle_api_error(RuntimeError("boom"))
        self.assertEqual(code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(payload, {"message": "An unexpected error occurred."})

    def test_api_unexpected_error_is_logged_once(self):
        with patch("cart_service.resources.carts.get_store", side_effect=RuntimeError("boom")):
            with self.assertLogs(self.app.logger, level="ERROR") as logs:
                response = self.app.test_client().get("/carts")
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.get_json(), {"message": "An unexpected error occurred."})
        self.assertEqual(len(logs.records), 1)
        self.assertIsNotNone(logs.records[0].exc_info)
