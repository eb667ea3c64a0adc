"""Flask-RESTX resources for cart item operations."""

# pylint: disable=missing-function-docstring

from flask import current_app as app, request
from flask_restx import Namespace, Resource, fields

from cart_service.common import status
from cart_service.models import CartItem, NotFoundError, get_store

NOT_FOUND_MESSAGE = "Cart item not found."

ns = Namespace("carts", path="/carts", description="Cart item operations")

# ---------------------------------------------------------------------------
# Swagger models (documentation only, documents are free-form)
# ---------------------------------------------------------------------------
message_model = ns.model(
    "Message",
    {
        "message": fields.String(example="Cart item not found."),
    },
)

cart_item_model = ns.model(
    "CartItem",
    {
        "_id": fields.String(readonly=True, example="6650b1c2f1a2b3c4d5e6f708"),
        "product": fields.String(required=True, example="pen"),
        "quantity": fields.Integer(required=True, example=2),
    },
)

cart_item_update_model = ns.model(
    "CartItemUpdate",
    {
        "product": fields.String(required=False, example="pencil"),
        "quantity": fields.Integer(required=False, example=5),
    },
)

cart_item_envelope_model = ns.model(
    "CartItemEnvelope",
    {
        "message": fields.String(example="Cart item created successfully"),
        "data": fields.Nested(cart_item_model),
    },
)


def _request_body():
    """Return the JSON body, or an empty mapping when missing or malformed."""
    data = request.get_json(silent=True)
    return {} if data is None else data


def _get_item_or_404(item_id: str) -> CartItem:
    item = get_store().find(CartItem.parse_id(item_id))
    if item is None:
        raise NotFoundError(NOT_FOUND_MESSAGE)
    return item


# Resources
# ---------------------------------------------------------------------------
@ns.route("")
class CartCollectionResource(Resource):
    """Handles /carts endpoint operations."""

    @ns.doc("list_cart_items")
    @ns.response(status.HTTP_200_OK, "All cart items", [cart_item_model])
    @ns.response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Store failure", message_model)
    def get(self):
        """Retrieve every cart item."""
        app.logger.info("Request to list all cart items")
        items = get_store().all()
        app.logger.info("Returning %d cart items", len(items))
        return [item.serialize() for item in items], status.HTTP_200_OK

    @ns.doc("create_cart_item")
    @ns.expect(cart_item_model, validate=False)
    @ns.response(status.HTTP_201_CREATED, "Cart item created", cart_item_envelope_model)
    @ns.response(status.HTTP_400_BAD_REQUEST, "Missing product or quantity", message_model)
    @ns.response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Store failure", message_model)
    def post(self):
        """Create a cart item."""
        app.logger.info("Request to create a cart item")
        item = CartItem().deserialize(_request_body())
        item = get_store().create(item)
        app.logger.info("Cart item with id [%s] created", item.id)

        return (
            {"message": "Cart item created successfully", "data": item.serialize()},
            status.HTTP_201_CREATED,
            {"Location": f"/carts/{item.id}"},
        )


@ns.route("/<string:item_id>")
@ns.param("item_id", "The cart item identifier (a 24 character ObjectId)")
@ns.response(status.HTTP_400_BAD_REQUEST, "Invalid cart item ID", message_model)
@ns.response(status.HTTP_404_NOT_FOUND, "Cart item not found", message_model)
@ns.response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Store failure", message_model)
class CartItemResource(Resource):
    """Handles /carts/<item_id> endpoint operations."""

    @ns.doc("get_cart_item")
    @ns.response(status.HTTP_200_OK, "The cart item", cart_item_model)
    def get(self, item_id):
        """Retrieve a single cart item."""
        app.logger.info("Request to retrieve cart item with id [%s]", item_id)
        item = _get_item_or_404(item_id)
        return item.serialize(), status.HTTP_200_OK

    @ns.doc("update_cart_item")
    @ns.expect(cart_item_update_model, validate=False)
    @ns.response(status.HTTP_200_OK, "Cart item updated", cart_item_envelope_model)
    def put(self, item_id):
        """Merge the supplied fields into a cart item."""
        app.logger.info("Request to update cart item with id [%s]", item_id)
        oid = CartItem.parse_id(item_id)
        changes = CartItem.deserialize_patch(_request_body())

        item = get_store().update(oid, changes)
        if item is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)

        app.logger.info("Cart item with id [%s] updated", item_id)
        return (
            {"message": "Cart item updated successfully", "data": item.serialize()},
            status.HTTP_200_OK,
        )

    @ns.doc("delete_cart_item")
    @ns.response(status.HTTP_200_OK, "Cart item deleted", message_model)
    def delete(self, item_id):
        """Delete a cart item."""
        app.logger.info("Request to delete cart item with id [%s]", item_id)
        oid = CartItem.parse_id(item_id)
        if not get_store().delete(oid):
            raise NotFoundError(NOT_FOUND_MESSAGE)

        app.logger.info("Cart item with id [%s] deleted", item_id)
        return {"message": "Cart item deleted successfully."}, status.HTTP_200_OK
