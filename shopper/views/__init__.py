# Views

from .product_detail import Notice, NoticeLevel, ProductDetailView

__all__ = ["Notice", "NoticeLevel", "ProductDetailView"]
