# Cart state

from .reducer import (
    CartLineItem,
    CartState,
    AddItem,
    RemoveItem,
    UpdateQuantity,
    ClearCart,
    SetCart,
    CartAction,
    apply,
    total_price,
)
from .store import CartStore
from .bridge import transform_api_cart_to_cart_items, get_cart_from_api

__all__ = [
    "CartLineItem",
    "CartState",
    "AddItem",
    "RemoveItem",
    "UpdateQuantity",
    "ClearCart",
    "SetCart",
    "CartAction",
    "apply",
    "total_price",
    "CartStore",
    "transform_api_cart_to_cart_items",
    "get_cart_from_api",
]
