"""
Variant aggregation

A product's price and stock are denormalized summaries of its variants.
They are recomputed here whenever a variant list is written, so listing and
price filtering never have to look inside the variants.
"""

import random
import time
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from ..models.product import ProductVariant


@dataclass(frozen=True)
class VariantSummary:
    """Variants ready to store plus the product-level values derived from them"""
    variants: list[ProductVariant]
    price: Optional[float]
    stock: int

    def to_fields(self) -> dict[str, Any]:
        """Document fields to write alongside the variants"""
        fields: dict[str, Any] = {
            "variants": [v.model_dump() for v in self.variants],
            "stock": self.stock,
            "quantity": self.stock,
        }
        if self.price is not None:
            fields["price"] = self.price
            fields["salePrice"] = self.price
        return fields


def effective_price(variant: ProductVariant) -> float:
    """Promotional price when one is set, else the base price"""
    if variant.promotional_price > 0:
        return variant.promotional_price
    return variant.price


def new_variant_id(taken: set[int]) -> int:
    """
    Generate a variant id not present in ``taken``.

    Milliseconds since the epoch with a random suffix, so ids generated in
    separate requests do not collide either.
    """
    while True:
        candidate = int(time.time() * 1000) * 1000 + random.randrange(1000)
        if candidate not in taken:
            return candidate


def aggregate_variants(
    variants: Iterable[ProductVariant],
    fallback_price: Optional[float] = None,
) -> VariantSummary:
    """
    Stamp effective prices and ids on variants and derive product price/stock.

    Args:
        variants: Raw variants as sent by the administrator
        fallback_price: Top-level price used when there are no variants

    Returns:
        VariantSummary with the processed variants, the minimum effective
        price (or the fallback) and the summed stock
    """
    variants = list(variants)
    taken = {v.variant_id for v in variants if v.variant_id}

    # The first variant keeps a repeated id; later ones get fresh ids
    seen: set[int] = set()
    processed: list[ProductVariant] = []
    for variant in variants:
        variant_id = variant.variant_id
        if not variant_id or variant_id in seen:
            variant_id = new_variant_id(taken)
            taken.add(variant_id)
        seen.add(variant_id)
        processed.append(
            variant.model_copy(
                update={
                    "variant_id": variant_id,
                    "effective_price": effective_price(variant),
                }
            )
        )

    stock = sum(v.stock_total or 0 for v in processed)

    if processed:
        price = min(v.effective_price or v.price for v in processed)
    else:
        price = fallback_price

    return VariantSummary(variants=processed, price=price, stock=stock)
