"""Shared fixtures for the GCD server tests."""
import pytest
from fastapi.testclient import TestClient

from modules.gcd.tool.app import app as gcd_module_app
from universe.engine import build_app

FORM_HEADERS = {"content-type": "application/x-www-form-urlencoded"}


@pytest.fixture
def gcd_app():
    """The GCD module app on its own, without the server middleware."""
    return gcd_module_app


@pytest.fixture
def module_client(gcd_app):
    with TestClient(gcd_app) as c:
        yield c


@pytest.fixture
def app():
    """The full server app as the CLI builds it."""
    return build_app(max_body=4096, timeout_seconds=5.0)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def post_form(client):
    """POST a raw urlencoded body to /gcd."""

    def _post(body, headers=None):
        return client.post("/gcd", content=body, headers=headers or FORM_HEADERS)

    return _post
