"""
Models package for database document structures.
These models represent how data is stored in MongoDB.
"""
from .product import ProductDocument, DEFAULT_CATEGORY
from .order import (
    OrderDocument,
    OrderItemDocument,
    ShippingInfo,
    UserInfo,
    OrderStatusHistory,
    ORDER_STATUSES,
    INITIAL_ORDER_STATUS,
)
from .review import ReviewDocument
from .message import MessageDocument
from .user import UserDocument, AdminDocument

__all__ = [
    # Product models
    "ProductDocument",
    "DEFAULT_CATEGORY",

    # Order models
    "OrderDocument",
    "OrderItemDocument",
    "ShippingInfo",
    "UserInfo",
    "OrderStatusHistory",
    "ORDER_STATUSES",
    "INITIAL_ORDER_STATUS",

    # Review and message models
    "ReviewDocument",
    "MessageDocument",

    # Account models
    "UserDocument",
    "AdminDocument",
]
