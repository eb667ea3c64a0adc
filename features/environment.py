"""Behave environment configuration for API level BDD tests."""

from __future__ import annotations

import os
from urllib.parse import urljoin

import requests

WAIT_TIMEOUT = int(os.getenv("WAIT_TIMEOUT", "10"))


def before_all(context):
    """Point the scenarios at a running cart service."""
    base_url = os.getenv("BASE_URL", "http://127.0.0.1:3000")
    context.base_url = base_url.rstrip("/")
    context.session = requests.Session()


def before_scenario(context, _scenario):
    context.response = None
    context.created_ids = []


def after_scenario(context, _scenario):
    for item_id in getattr(context, "created_ids", []):
        delete_cart_item_via_api(context, item_id)
    context.created_ids = []


def after_all(context):
    """Close the HTTP session."""
    if getattr(context, "session", None):
        context.session.close()


def api_url(context, path: str) -> str:
    """Build a URL rooted at the running service base URL."""
    return urljoin(context.base_url + "/", path.lstrip("/"))


def delete_cart_item_via_api(context, item_id: str):
    """Remove a cart item using the REST API; ignore 404s."""
    try:
        context.session.delete(api_url(context, f"carts/{item_id}"), timeout=WAIT_TIMEOUT)
    except requests.RequestException:
        pass
