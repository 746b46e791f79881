"""
Remote cart bridge

Translates remembered carts from the merchant's wire shape (``title``,
``unit_price``) into cart line items.
"""

import logging
from typing import Any, Iterable, Union

import httpx

from merchant.models.cart import RemoteCart, RemoteCartLine

from ..services.merchant_client import MerchantClient
from .reducer import CartLineItem

logger = logging.getLogger(__name__)


def transform_api_cart_to_cart_items(
    lines: Iterable[Union[RemoteCartLine, dict[str, Any]]],
) -> list[CartLineItem]:
    """Map remote cart lines to cart line items, with no stock limit"""
    items = []
    for line in lines:
        if not isinstance(line, RemoteCartLine):
            line = RemoteCartLine.model_validate(line)
        items.append(
            CartLineItem(
                id=line.id,
                name=line.title,
                price=line.unit_price,
                image=line.image or "",
                quantity=line.quantity,
            )
        )
    return items


async def get_cart_from_api(client: MerchantClient, cart_id: str) -> list[CartLineItem]:
    """
    Fetch a remembered cart.

    200 and 404 are both read as a possibly empty cart. Any other status,
    a network failure or an unreadable body gives an empty cart and is
    logged.
    """
    try:
        response = await client.get_cart(cart_id)

        if response.status_code not in (200, 404):
            raise httpx.HTTPStatusError(
                f"Unexpected status {response.status_code} fetching cart",
                request=response.request,
                response=response,
            )

        cart = RemoteCart.model_validate(response.json())
        return transform_api_cart_to_cart_items(cart.products)
    except (httpx.HTTPError, ValueError) as e:
        logger.error(f"Error getting cart {cart_id}: {e}")
        return []
