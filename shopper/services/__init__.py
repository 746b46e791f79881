# Shopper services

from .merchant_client import MerchantClient

__all__ = ["MerchantClient"]
