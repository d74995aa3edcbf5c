import pytest
from fastapi.testclient import TestClient

from card_store_api.app.main import create_app


@pytest.fixture
def app():
    """A fresh application whose store holds only the seed cards."""
    return create_app()


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def store(app):
    return app.state.card_store
