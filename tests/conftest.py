"""Pytest configuration and shared fixtures."""

import mongomock
import pytest
from fastapi.testclient import TestClient

from merchant.core.config import Settings
from merchant.database.carts import cart_db
from merchant.database.products import ProductDatabase, get_product_db
from merchant.main import app
from merchant.models.product import ProductCreate, ProductVariant
from merchant.security.session import ADMIN_ROLE, SessionUser, session_manager
from merchant.services.catalog import CatalogService


@pytest.fixture
def product_db() -> ProductDatabase:
    """Product database over a fresh in-memory collection."""
    collection = mongomock.MongoClient()["storefront_test"]["products"]
    return ProductDatabase(collection)


@pytest.fixture
def catalog(product_db: ProductDatabase) -> CatalogService:
    """Catalog service with default page sizes."""
    return CatalogService(product_db, Settings(default_page_size=12, max_page_size=100))


@pytest.fixture
def admin() -> SessionUser:
    return SessionUser(user_id="u-admin", email="admin@example.com", role=ADMIN_ROLE)


@pytest.fixture
def customer() -> SessionUser:
    return SessionUser(user_id="u-customer", email="shopper@example.com", role="customer")


@pytest.fixture
def admin_token(admin: SessionUser):
    """Bearer token of a registered administrator session."""
    session = session_manager.create_session(admin)
    yield session.token
    session_manager.delete_session(session.token)


@pytest.fixture
def customer_token(customer: SessionUser):
    session = session_manager.create_session(customer)
    yield session.token
    session_manager.delete_session(session.token)


@pytest.fixture
def client(product_db: ProductDatabase):
    """HTTP client for the merchant app, bound to the test database."""
    app.dependency_overrides[get_product_db] = lambda: product_db
    yield TestClient(app)
    app.dependency_overrides.clear()
    cart_db.carts.clear()


@pytest.fixture
def sample_product() -> ProductCreate:
    """Two-color product, one variant on promotion, one sold out."""
    return ProductCreate(
        name="Canvas Tote",
        description="Heavy canvas tote bag",
        price=100.0,
        category="bags",
        images=["https://img.example.com/tote.jpg"],
        variants=[
            ProductVariant(
                sku="TOTE-BLK",
                label="Black",
                color="black",
                price=100.0,
                promotional_price=80.0,
                stock_total=5,
                image_url="https://img.example.com/tote-black.jpg",
            ),
            ProductVariant(
                sku="TOTE-RED",
                label="Red",
                color="red",
                price=120.0,
                promotional_price=0.0,
                stock_total=0,
            ),
        ],
    )
