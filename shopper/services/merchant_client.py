"""
Merchant API Client

Async HTTP client for the storefront catalog and remembered-cart APIs.
"""

import logging
from typing import Any, Optional

import httpx

from merchant.models.cart import RemoteCartLine
from merchant.models.product import Product

from ..core.config import settings

logger = logging.getLogger(__name__)


class MerchantClient:
    """
    Client for the merchant APIs.

    Administrator calls need a session token, sent as a bearer token.
    """

    def __init__(
        self,
        merchant_base_url: Optional[str] = None,
        session_token: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize merchant client.

        Args:
            merchant_base_url: Base URL of merchant API
            session_token: Token of an authenticated session, if any
            timeout: Request timeout in seconds
            transport: Custom httpx transport (tests use httpx.MockTransport)
        """
        self.base_url = (merchant_base_url or settings.merchant_base_url).rstrip("/")
        self.session_token = session_token
        self._http_client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout if timeout is not None else settings.request_timeout,
            transport=transport,
        )

    async def close(self) -> None:
        """Close HTTP client"""
        await self._http_client.aclose()

    async def __aenter__(self) -> "MerchantClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.session_token:
            headers["Authorization"] = f"Bearer {self.session_token}"
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        body: Optional[Any] = None,
    ) -> Any:
        """Make an HTTP request and return the decoded JSON body"""
        response = await self._http_client.request(
            method=method,
            url=path,
            params=params,
            json=body,
            headers=self._headers(),
        )

        if response.status_code >= 400:
            logger.error(f"Request failed: {response.status_code} - {response.text}")
            response.raise_for_status()

        return response.json()

    # ==================== Product APIs ====================

    async def search_products(
        self,
        query: Optional[str] = None,
        category: Optional[str] = None,
        price_filter: Optional[str] = None,
        max_price: Optional[float] = None,
        page: int = 1,
        limit: Optional[int] = None,
    ) -> dict:
        """List one page of the catalog"""
        params: dict[str, Any] = {"page": page}
        if query:
            params["q"] = query
        if category:
            params["category"] = category
        if price_filter:
            params["priceFilter"] = price_filter
        if max_price is not None:
            params["maxPrice"] = max_price
        if limit is not None:
            params["limit"] = limit

        return await self._request("GET", "/api/products", params=params)

    async def get_product(self, product_id: str) -> Product:
        """Get product details"""
        data = await self._request("GET", f"/api/products/{product_id}")
        return Product.model_validate(data)

    async def create_product(self, product: dict) -> Product:
        """Create a product (administrator session required)"""
        data = await self._request("POST", "/api/products", body=product)
        return Product.model_validate(data)

    async def update_product(self, product_id: str, patch: dict) -> Product:
        """Update a product (administrator session required)"""
        data = await self._request("PUT", "/api/products", body={**patch, "id": product_id})
        return Product.model_validate(data)

    async def delete_product(self, product_id: str) -> dict:
        """Delete a product (administrator session required)"""
        return await self._request("DELETE", "/api/products", params={"id": product_id})

    # ==================== Cart APIs ====================

    async def get_cart(self, cart_id: str) -> httpx.Response:
        """
        Fetch a remembered cart.

        Returns the raw response: a 404 still carries a cart body.
        """
        return await self._http_client.get(
            "/api/cart",
            params={"idCart": cart_id},
            headers=self._headers(),
        )

    async def save_cart(
        self,
        lines: list[RemoteCartLine],
        cart_id: Optional[str] = None,
    ) -> dict:
        """Remember a cart on the merchant"""
        body: dict[str, Any] = {"products": [line.model_dump() for line in lines]}
        if cart_id:
            body["idCart"] = cart_id
        return await self._request("POST", "/api/cart", body=body)
