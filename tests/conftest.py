"""Pytest configuration and fixtures."""

import httpx
import pytest

from simple_blog.app import create_app
from simple_blog.client import BlogController, PostsClient
from simple_blog.models import db


TEST_CONFIG = {
    "TESTING": True,
    "SQLALCHEMY_DATABASE_URI": "sqlite://",
}


@pytest.fixture
def app():
    """API application over a fresh in-memory store."""
    app = create_app(TEST_CONFIG)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def http(app):
    """Flask test client."""
    return app.test_client()


@pytest.fixture
def broken_store(app):
    """Drop the posts table so every store call fails."""
    with app.app_context():
        db.drop_all()
    return app


@pytest.fixture
def posts_client(app):
    """PostsClient wired straight into the Flask app."""
    client = PostsClient(
        base_url="http://testserver",
        transport=httpx.WSGITransport(app=app),
    )
    yield client
    client.close()


@pytest.fixture
def unreachable_client():
    """PostsClient whose every request fails to connect."""

    def refuse(request):
        raise httpx.ConnectError("Connection refused", request=request)

    client = PostsClient(
        base_url="http://testserver",
        transport=httpx.MockTransport(refuse),
    )
    yield client
    client.close()


@pytest.fixture
def controller(posts_client):
    """BlogController talking to the in-memory API."""
    return BlogController(posts_client)
