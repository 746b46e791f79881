"""Product API routes"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from ..database.products import ProductDatabase, get_product_db
from ..models.product import (
    DeleteResponse,
    Product,
    ProductCreate,
    ProductListResponse,
    ProductUpdate,
)
from ..security.session import SessionUser, optional_session
from ..services.catalog import CatalogService

router = APIRouter(prefix="/api/products", tags=["Products"])


def get_catalog(products: ProductDatabase = Depends(get_product_db)) -> CatalogService:
    return CatalogService(products)


@router.get("", response_model=ProductListResponse)
def list_products(
    page: int = Query(1, description="Page number, starting at 1"),
    limit: Optional[int] = Query(None, description="Page size, clamped to 1..100"),
    q: Optional[str] = Query(None, description="Case-insensitive name search"),
    category: Optional[str] = Query(None, description="Exact category"),
    price_filter: Optional[str] = Query(
        None, alias="priceFilter", description="low-to-high or high-to-low"
    ),
    max_price: Optional[float] = Query(None, alias="maxPrice", description="Maximum price paid"),
    catalog: CatalogService = Depends(get_catalog),
):
    """
    List products with pagination, filters and a catalog-wide summary.

    Default order is newest first; price sorts break ties the same way.
    """
    return catalog.list_products(
        page=page,
        limit=limit,
        query=q,
        category=category,
        price_filter=price_filter,
        max_price=max_price,
    )


@router.get("/{product_id}", response_model=Product)
def get_product(
    product_id: str,
    catalog: CatalogService = Depends(get_catalog),
):
    """Get a product by ID"""
    return catalog.get_product(product_id)


@router.post("", response_model=Product, status_code=201)
def create_product(
    data: ProductCreate,
    user: Optional[SessionUser] = Depends(optional_session),
    catalog: CatalogService = Depends(get_catalog),
):
    """Create a product (administrators only)"""
    return catalog.create_product(data, user)


@router.put("", response_model=Product)
def update_product(
    patch: ProductUpdate,
    user: Optional[SessionUser] = Depends(optional_session),
    catalog: CatalogService = Depends(get_catalog),
):
    """Update a product identified by ``id`` in the body (administrators only)"""
    return catalog.update_product(patch, user)


@router.delete("", response_model=DeleteResponse)
def delete_product(
    id: Optional[str] = Query(None, description="Product ID"),
    user: Optional[SessionUser] = Depends(optional_session),
    catalog: CatalogService = Depends(get_catalog),
):
    """Delete a product (administrators only)"""
    return catalog.delete_product(id, user)
