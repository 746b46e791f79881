"""Product models for the storefront catalog"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PriceFilter(str, Enum):
    LOW_TO_HIGH = "low-to-high"
    HIGH_TO_LOW = "high-to-low"


class ProductVariant(BaseModel):
    """Purchasable configuration of a product (usually a color)"""
    variant_id: Optional[int] = None
    sku: str = ""
    label: str = ""
    color: str = ""
    price: float = Field(default=0.0, ge=0)
    promotional_price: float = Field(default=0.0, ge=0)
    effective_price: Optional[float] = None
    stock_total: int = Field(default=0, ge=0)
    image_url: str = ""
    visible: bool = True
    weight: float = 0.0


class Product(BaseModel):
    """Product in the catalog.

    ``price``, ``sale_price``, ``stock`` and ``quantity`` are summaries of the
    variants, written together with them.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: str
    brand: Optional[str] = None
    product_id: Optional[int] = None
    images: list[str] = []
    price: float = 0.0
    sale_price: float = Field(default=0.0, alias="salePrice")
    stock: int = 0
    quantity: int = 0
    category: Optional[str] = None
    variants: list[ProductVariant] = []


class ProductCreate(BaseModel):
    """Body of a product creation request"""
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    brand: Optional[str] = None
    product_id: Optional[int] = None
    images: list[str] = []
    category: Optional[str] = None
    variants: Optional[list[ProductVariant]] = None


class ProductUpdate(BaseModel):
    """Body of a product update request; only sent fields are applied"""
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    brand: Optional[str] = None
    product_id: Optional[int] = None
    images: Optional[list[str]] = None
    price: Optional[float] = None
    sale_price: Optional[float] = Field(default=None, alias="salePrice")
    stock: Optional[int] = None
    quantity: Optional[int] = None
    category: Optional[str] = None
    variants: Optional[list[ProductVariant]] = None


class CatalogSummary(BaseModel):
    """Catalog-wide stock and discount counts"""
    model_config = ConfigDict(populate_by_name=True)

    in_stock: int = Field(alias="inStock")
    out_of_stock: int = Field(alias="outOfStock")
    discounted: int


class ProductListResponse(BaseModel):
    """One page of the product listing"""
    model_config = ConfigDict(populate_by_name=True)

    items: list[Product]
    total: int
    page: int
    limit: int
    total_pages: int = Field(alias="totalPages")
    summary: CatalogSummary


class DeleteResponse(BaseModel):
    message: str
    id: str
