# Catalog services

from .variants import VariantSummary, aggregate_variants, effective_price, new_variant_id
from .catalog import CatalogService

__all__ = [
    "VariantSummary",
    "aggregate_variants",
    "effective_price",
    "new_variant_id",
    "CatalogService",
]
