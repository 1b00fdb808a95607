"""
API routers, one per resource. Mounted under the configured API prefix.
"""
from . import admin, auth, messages, orders, products, reviews

__all__ = ["admin", "auth", "messages", "orders", "products", "reviews"]
