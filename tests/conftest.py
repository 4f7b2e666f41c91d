import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.database import ProductStore
from app.main import create_app

API_KEY = "test-key"

@pytest.fixture
def settings():
    return Settings(api_key=API_KEY)

@pytest.fixture
def store():
    return ProductStore()

@pytest.fixture
def app(settings, store):
    return create_app(settings=settings, store=store)

@pytest.fixture
def client(app):
    return TestClient(app, headers={"x-api-key": API_KEY})

@pytest.fixture
def anon_client(app):
    # no x-api-key header
    return TestClient(app)

def new_product(**overrides):
    body = {"name": "Kettle", "description": "1.7L electric kettle", "price": 35, "category": "kitchen"}
    body.update(overrides)
    return body
