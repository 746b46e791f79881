"""Remembered cart API routes"""

from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from ..database.carts import cart_db
from ..models.cart import RemoteCart, SaveCartRequest

router = APIRouter(prefix="/api/cart", tags=["Cart"])


def _missing_cart(cart_id: Optional[str]) -> JSONResponse:
    # Clients read a 404 as an empty cart, so the body keeps the same shape
    return JSONResponse(
        status_code=404,
        content=RemoteCart(id_cart=cart_id).model_dump(by_alias=True),
    )


@router.get("", response_model=RemoteCart)
async def get_cart(id_cart: Optional[str] = Query(None, alias="idCart")):
    """Get a remembered cart by ID"""
    cart = cart_db.get_cart(id_cart) if id_cart else None
    if not cart:
        return _missing_cart(id_cart)
    return cart


@router.post("", response_model=RemoteCart, status_code=201)
async def save_cart(request: SaveCartRequest):
    """Remember a cart, replacing the one under ``idCart`` if given"""
    return cart_db.save_cart(request.products, cart_id=request.id_cart)


@router.delete("", response_model=RemoteCart)
async def delete_cart(id_cart: Optional[str] = Query(None, alias="idCart")):
    """Forget a remembered cart"""
    cart = cart_db.get_cart(id_cart) if id_cart else None
    if not cart:
        return _missing_cart(id_cart)
    cart_db.delete_cart(id_cart)
    return cart
