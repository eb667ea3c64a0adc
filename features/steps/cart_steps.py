"""Step definitions for cart item API BDD scenarios."""

# pylint: disable=no-member,not-callable,function-redefined
# The behave decorators (@given, @when, @then) are not recognized by pylint
# but they work correctly at runtime

from __future__ import annotations

from behave import given, when, then

from features.environment import WAIT_TIMEOUT, api_url

# Any well formed ObjectId that is never handed out by the store
MISSING_ID = "0" * 24


def _request(context, method: str, path: str, **kwargs):
    context.response = context.session.request(
        method, api_url(context, path), timeout=WAIT_TIMEOUT, **kwargs
    )
    return context.response


def _payload(context) -> dict:
    body = context.response.json()
    return body.get("data", body) if isinstance(body, dict) else body


def _id_for(context, product: str) -> str:
    return context.items_by_product[product]


@given("the following cart items")
def step_impl(context):
    """Create the cart items listed in the table"""
    context.items_by_product = {}
    for row in context.table:
        payload = {"product": row["product"], "quantity": int(row["quantity"])}
        response = _request(context, "POST", "carts", json=payload)
        assert response.status_code == 201, response.text
        item_id = response.json()["data"]["_id"]
        context.items_by_product[row["product"]] = item_id
        context.created_ids.append(item_id)


@when('I visit the "Home Page"')
def step_impl(context):
    _request(context, "GET", "/")


@when('I create a cart item with product "{product}" and quantity "{quantity:d}"')
def step_impl(context, product, quantity):
    response = _request(context, "POST", "carts", json={"product": product, "quantity": quantity})
    if response.status_code == 201:
        context.created_ids.append(response.json()["data"]["_id"])


@when("I list all cart items")
def step_impl(context):
    _request(context, "GET", "carts")


@when('I retrieve the cart item for "{product}"')
def step_impl(context, product):
    _request(context, "GET", f"carts/{_id_for(context, product)}")


@when('I update the cart item for "{product}" with quantity "{quantity:d}"')
def step_impl(context, product, quantity):
    _request(context, "PUT", f"carts/{_id_for(context, product)}", json={"quantity": quantity})


@when('I update a missing cart item with quantity "{quantity:d}"')
def step_impl(context, quantity):
    _request(context, "PUT", f"carts/{MISSING_ID}", json={"quantity": quantity})


@when('I delete the cart item for "{product}"')
def step_impl(context, product):
    _request(context, "DELETE", f"carts/{_id_for(context, product)}")


@when('I request the path "{path}"')
def step_impl(context, path):
    _request(context, "GET", path)


@then('I should see status code "{code:d}"')
def step_impl(context, code):
    assert context.response.status_code == code, (
        f"expected {code}, got {context.response.status_code}: {context.response.text}"
    )


@then('I should see the text "{text}"')
def step_impl(context, text):
    assert text in context.response.text


@then('I should see the message "{message}"')
def step_impl(context, message):
    assert context.response.json() == {"message": message}


@then('the returned item should have product "{product}" and quantity "{quantity:d}"')
def step_impl(context, product, quantity):
    item = _payload(context)
    assert item["product"] == product
    assert item["quantity"] == quantity


@then("the returned item should have an id")
def step_impl(context):
    assert _payload(context).get("_id")


@then('I should see "{product}" in the results')
def step_impl(context, product):
    products = [item["product"] for item in context.response.json()]
    assert product in products
