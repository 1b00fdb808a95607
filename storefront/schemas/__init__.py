"""
Schemas package for API request/response validation.
These models define the structure of data sent to and from the API endpoints.
"""

# Product schemas
from .product import (
    CreateProductRequest,
    UpdateProductRequest,
    ProductResponse,
    ProductDetailResponse,
    ProductsListResponse,
)

# Order schemas
from .order import (
    ShippingInfoSchema,
    UserInfoSchema,
    OrderItemRequest,
    CreateOrderRequest,
    UpdateOrderStatusRequest,
    OrderItemResponse,
    OrderStatusHistoryResponse,
    OrderResponse,
    OrderDetailResponse,
    OrdersListResponse,
)

# Review schemas
from .review import (
    CreateReviewRequest,
    ApproveReviewRequest,
    ReviewResponse,
    ReviewDetailResponse,
    ReviewsListResponse,
)

# Message schemas
from .message import (
    CreateMessageRequest,
    MarkMessageReadRequest,
    MessageResponse,
    MessageDetailResponse,
    MessagesListResponse,
)

# Sign-in and back-office schemas
from .auth import (
    TokenRequest,
    AdminLoginRequest,
    UserPublic,
    GoogleLoginResponse,
    TokenVerifyResponse,
    AdminPublic,
    AdminLoginResponse,
    StoreStats,
    StoreStatsResponse,
)

# Common schemas
from .common import (
    CamelModel,
    HealthCheckResponse,
    RootResponse,
    ErrorResponse,
    ValidationErrorDetail,
    ValidationErrorResponse,
    PaginationMeta,
    SuccessResponse,
)

__all__ = [
    # Product schemas
    "CreateProductRequest",
    "UpdateProductRequest",
    "ProductResponse",
    "ProductDetailResponse",
    "ProductsListResponse",

    # Order schemas
    "ShippingInfoSchema",
    "UserInfoSchema",
    "OrderItemRequest",
    "CreateOrderRequest",
    "UpdateOrderStatusRequest",
    "OrderItemResponse",
    "OrderStatusHistoryResponse",
    "OrderResponse",
    "OrderDetailResponse",
    "OrdersListResponse",

    # Review schemas
    "CreateReviewRequest",
    "ApproveReviewRequest",
    "ReviewResponse",
    "ReviewDetailResponse",
    "ReviewsListResponse",

    # Message schemas
    "CreateMessageRequest",
    "MarkMessageReadRequest",
    "MessageResponse",
    "MessageDetailResponse",
    "MessagesListResponse",

    # Sign-in and back-office schemas
    "TokenRequest",
    "AdminLoginRequest",
    "UserPublic",
    "GoogleLoginResponse",
    "TokenVerifyResponse",
    "AdminPublic",
    "AdminLoginResponse",
    "StoreStats",
    "StoreStatsResponse",

    # Common schemas
    "CamelModel",
    "HealthCheckResponse",
    "RootResponse",
    "ErrorResponse",
    "ValidationErrorDetail",
    "ValidationErrorResponse",
    "PaginationMeta",
    "SuccessResponse",
]
