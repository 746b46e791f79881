"""Remembered cart models.

These use the wire names of the remote cart contract (``title``,
``unit_price``) rather than the shopper's line item names.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RemoteCartLine(BaseModel):
    """Line of a remembered cart"""
    id: str
    title: str
    unit_price: float = Field(ge=0)
    quantity: int = Field(ge=0)
    image: Optional[str] = None


class RemoteCart(BaseModel):
    """Remembered cart as returned by ``GET /api/cart``"""
    model_config = ConfigDict(populate_by_name=True)

    id_cart: Optional[str] = Field(default=None, alias="idCart")
    products: list[RemoteCartLine] = []


class SaveCartRequest(BaseModel):
    """Store a cart, replacing the one under ``idCart`` when given"""
    model_config = ConfigDict(populate_by_name=True)

    id_cart: Optional[str] = Field(default=None, alias="idCart")
    products: list[RemoteCartLine] = []
