"""
Product detail view

Shows one product, lets the shopper pick a variant and a quantity, and
adds the selection to the cart. Distinct variants of the same product get
distinct cart lines.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import httpx

from merchant.models.product import Product, ProductVariant

from ..cart.reducer import CartLineItem
from ..cart.store import CartStore
from ..core.config import settings
from ..services.merchant_client import MerchantClient

logger = logging.getLogger(__name__)


class NoticeLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notice:
    """Transient message for the shopper (a toast)"""
    level: NoticeLevel
    message: str


class ProductDetailView:
    """State behind a product page"""

    def __init__(
        self,
        client: MerchantClient,
        cart: CartStore,
        placeholder_image: Optional[str] = None,
    ):
        self.client = client
        self.cart = cart
        self.placeholder_image = placeholder_image or settings.placeholder_image

        self.product: Optional[Product] = None
        self.selected_variant = 0
        self.quantity = 1
        self.loading = False
        self.not_found = False

    async def load(self, product_id: str) -> Optional[Product]:
        """Fetch the product; a 404 marks the page as not found"""
        self.loading = True
        self.not_found = False
        try:
            self.product = await self.client.get_product(product_id)
        except httpx.HTTPStatusError as e:
            self.product = None
            if e.response.status_code == 404:
                self.not_found = True
            else:
                logger.error(f"Error fetching product {product_id}: {e}")
        except httpx.HTTPError as e:
            self.product = None
            logger.error(f"Error fetching product {product_id}: {e}")
        finally:
            self.loading = False

        self.selected_variant = 0
        self.quantity = 1
        return self.product

    @property
    def variant(self) -> Optional[ProductVariant]:
        if not self.product or not self.product.variants:
            return None
        if 0 <= self.selected_variant < len(self.product.variants):
            return self.product.variants[self.selected_variant]
        return None

    @property
    def available_stock(self) -> int:
        return (self.variant.stock_total or 0) if self.variant else 0

    @property
    def low_stock(self) -> bool:
        return 0 < self.available_stock <= settings.low_stock_threshold

    def is_selectable(self, index: int) -> bool:
        """Hidden or sold-out variants cannot be picked"""
        if not self.product or not 0 <= index < len(self.product.variants):
            return False
        variant = self.product.variants[index]
        return variant.visible and variant.stock_total != 0

    def select_variant(self, index: int) -> bool:
        if not self.is_selectable(index):
            return False
        self.selected_variant = index
        return True

    def increment_quantity(self) -> None:
        if self.quantity < self.available_stock:
            self.quantity += 1

    def decrement_quantity(self) -> None:
        if self.quantity > 1:
            self.quantity -= 1

    def set_quantity(self, value: int) -> bool:
        """Typed quantity; values outside 1..stock are ignored"""
        if 1 <= value <= self.available_stock:
            self.quantity = value
            return True
        return False

    def add_to_cart(self) -> Optional[Notice]:
        """
        Add the selected variant to the cart.

        Returns:
            Notice to show the shopper, or None when nothing is loaded
        """
        product, variant = self.product, self.variant
        if not product or not variant:
            return None

        stock = self.available_stock
        if stock == 0:
            logger.debug(f"Add to cart rejected, {product.id} variant {variant.variant_id} sold out")
            return Notice(NoticeLevel.ERROR, "Out of stock")

        if self.quantity > stock:
            logger.debug(f"Add to cart rejected, {self.quantity} requested, {stock} in stock")
            return Notice(NoticeLevel.ERROR, f"Only {stock} units available")

        self.cart.add_item(
            CartLineItem(
                id=f"{product.id}-{variant.variant_id}",
                name=f"{product.name} - Color {self.selected_variant + 1}",
                price=float(product.price),
                image=variant.image_url or self.placeholder_image,
                stock=stock,
            ),
            self.quantity,
        )
        return Notice(NoticeLevel.SUCCESS, f"{self.quantity} item(s) added to cart")
