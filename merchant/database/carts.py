"""Remembered cart storage"""

import uuid
from typing import Optional

from ..models.cart import RemoteCart, RemoteCartLine


class CartDatabase:
    """In-memory storage of carts a shopper can come back to"""

    def __init__(self):
        self.carts: dict[str, list[RemoteCartLine]] = {}

    def save_cart(
        self,
        products: list[RemoteCartLine],
        cart_id: Optional[str] = None,
    ) -> RemoteCart:
        """Store a cart, under a fresh id unless one is given"""
        cart_id = cart_id or str(uuid.uuid4())
        self.carts[cart_id] = list(products)
        return RemoteCart(id_cart=cart_id, products=self.carts[cart_id])

    def get_cart(self, cart_id: str) -> Optional[RemoteCart]:
        """Get a cart by ID"""
        products = self.carts.get(cart_id)
        if products is None:
            return None
        return RemoteCart(id_cart=cart_id, products=products)

    def delete_cart(self, cart_id: str) -> bool:
        """Delete a cart"""
        if cart_id in self.carts:
            del self.carts[cart_id]
            return True
        return False


# Singleton instance
cart_db = CartDatabase()
