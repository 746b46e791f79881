# Database modules

from .products import ProductDatabase, get_product_db, connect_products_collection
from .carts import cart_db, CartDatabase

__all__ = [
    "ProductDatabase",
    "get_product_db",
    "connect_products_collection",
    "cart_db",
    "CartDatabase",
]
