"""Storefront merchant service: product catalog and remembered carts."""
