"""Shared pytest fixtures for the storefront tests."""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from app.controllers.catalog_store import CatalogStore
from app.main import create_app
from app.schemas.catalog_schemas import CategoryCreateSchema, ProductCreateSchema
from app.services.cart.cart_service import CartService
from app.services.cart.codec import CartCodec


@pytest.fixture
def store():
    return CatalogStore()


@pytest.fixture
def category(store):
    return store.categories.create(obj_in=CategoryCreateSchema(name="Apparel"))


@pytest.fixture
def product(store, category):
    """A 10.00 USD product in the Apparel category."""
    return store.products.create(
        obj_in=ProductCreateSchema(
            name="Organic Cotton T-Shirt",
            description="Soft t-shirt.",
            price=Decimal("10.00"),
            currency="USD",
            category_ids=[category.id],
        )
    )


@pytest.fixture
def cart_service(store):
    return CartService(store)


@pytest.fixture
def codec():
    return CartCodec(max_payload_size=4096)


@pytest.fixture
def client(store):
    return TestClient(create_app(store))
