"""
Storefront API: product catalog, checkout, reviews, contact messages and
admin back-office over MongoDB.
"""

__version__ = "1.0.0"
