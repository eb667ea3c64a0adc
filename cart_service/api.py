"""Shared Flask-RESTX API configuration for the Cart service."""

from flask_restx import Api

# pylint: disable=import-outside-toplevel


def create_api(app) -> Api:
    """Build the API for an application and register all namespaces"""
    from cart_service.resources.carts import ns as carts_namespace

    api = Api(
        title="Cart REST API Service",
        version="1.0.0",
        description="This service manages cart items stored in MongoDB.",
        doc="/apidocs/",
    )
    api.add_namespace(carts_namespace)
    # The Swagger UI and swagger.json are only served when API_DOCS is on
    api.init_app(app, add_specs=app.config.get("API_DOCS", False))
    return api


__all__ = ["create_api"]
