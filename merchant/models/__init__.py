# Storefront Models

from .product import (
    ProductVariant,
    Product,
    ProductCreate,
    ProductUpdate,
    PriceFilter,
    CatalogSummary,
    ProductListResponse,
    DeleteResponse,
)
from .cart import RemoteCartLine, RemoteCart, SaveCartRequest

__all__ = [
    "ProductVariant",
    "Product",
    "ProductCreate",
    "ProductUpdate",
    "PriceFilter",
    "CatalogSummary",
    "ProductListResponse",
    "DeleteResponse",
    "RemoteCartLine",
    "RemoteCart",
    "SaveCartRequest",
]
