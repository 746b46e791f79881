"""
Product catalog service

CRUD over the product collection. Every write that carries variants goes
through ``aggregate_variants`` before it reaches the store, and every
mutating call checks the administrator role before touching anything.
"""

import logging
import math
from typing import Any, Optional

from ..core.config import Settings, get_settings
from ..core.errors import NotFoundError, ValidationError
from ..database.products import ProductDatabase
from ..models.product import (
    CatalogSummary,
    DeleteResponse,
    PriceFilter,
    Product,
    ProductCreate,
    ProductListResponse,
    ProductUpdate,
)
from ..security.session import SessionUser, require_admin
from .variants import aggregate_variants

logger = logging.getLogger(__name__)


def parse_price_filter(value: Optional[str]) -> Optional[PriceFilter]:
    """Unknown sort names fall back to the default newest-first order"""
    if not value:
        return None
    try:
        return PriceFilter(value.strip())
    except ValueError:
        return None


class CatalogService:
    """Catalog operations on top of a ProductDatabase"""

    def __init__(self, products: ProductDatabase, settings: Optional[Settings] = None):
        self.products = products
        self.settings = settings or get_settings()

    def list_products(
        self,
        page: int = 1,
        limit: Optional[int] = None,
        query: Optional[str] = None,
        category: Optional[str] = None,
        price_filter: Optional[str] = None,
        max_price: Optional[float] = None,
    ) -> ProductListResponse:
        """List one page of products; the summary ignores the filters"""
        page = max(1, page)
        if limit is None:
            limit = self.settings.default_page_size
        limit = min(self.settings.max_page_size, max(1, limit))

        items, total = self.products.search_products(
            query=(query or "").strip() or None,
            category=(category or "").strip() or None,
            max_price=max_price,
            price_filter=parse_price_filter(price_filter),
            limit=limit,
            offset=(page - 1) * limit,
        )
        in_stock, out_of_stock, discounted = self.products.summary_counts()

        return ProductListResponse(
            items=items,
            total=total,
            page=page,
            limit=limit,
            total_pages=max(1, math.ceil(total / limit)),
            summary=CatalogSummary(
                in_stock=in_stock,
                out_of_stock=out_of_stock,
                discounted=discounted,
            ),
        )

    def get_product(self, product_id: str) -> Product:
        """Get one product or raise NotFoundError"""
        product = self.products.get_product(product_id)
        if not product:
            raise NotFoundError("Product not found")
        return product

    def create_product(self, data: ProductCreate, user: Optional[SessionUser]) -> Product:
        """Create a product with price and stock derived from its variants"""
        require_admin(user)

        if not data.name or not data.description or data.price is None:
            raise ValidationError("Missing required fields: name, description and price")

        summary = aggregate_variants(data.variants or [], fallback_price=data.price)

        fields: dict[str, Any] = {
            "name": data.name,
            "description": data.description,
            "brand": data.brand or None,
            "product_id": data.product_id,
            "images": data.images,
            "category": data.category or "",
        }
        fields.update(summary.to_fields())

        product = self.products.insert_product(fields)
        logger.info(
            f"Product {product.id} created by {user.email}: "
            f"{len(summary.variants)} variants, price={product.price}, stock={product.stock}"
        )
        return product

    def update_product(self, patch: ProductUpdate, user: Optional[SessionUser]) -> Product:
        """
        Apply a partial update.

        When the patch carries variants, they replace the stored ones and
        price, salePrice, stock and quantity are recomputed from them.
        """
        require_admin(user)

        if not patch.id:
            raise ValidationError("Product id is required")

        fields = patch.model_dump(exclude_unset=True, exclude_none=True, by_alias=True)
        fields.pop("id", None)

        if patch.variants is not None:
            summary = aggregate_variants(patch.variants, fallback_price=patch.price)
            fields.update(summary.to_fields())

        product = self.products.update_product(patch.id, fields)
        if not product:
            raise NotFoundError("Product not found")

        logger.info(f"Product {product.id} updated by {user.email}: {sorted(fields)}")
        return product

    def delete_product(self, product_id: Optional[str], user: Optional[SessionUser]) -> DeleteResponse:
        """Delete a product"""
        require_admin(user)

        if not product_id:
            raise ValidationError("Invalid product id")

        if not self.products.delete_product(product_id):
            raise NotFoundError("Product not found")

        logger.info(f"Product {product_id} deleted by {user.email}")
        return DeleteResponse(message="Product deleted", id=product_id)
