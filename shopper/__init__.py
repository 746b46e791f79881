"""Storefront shopper side: cart state and product detail view."""
