"""
Order API schemas for request/response validation.
These models define the structure of data sent to and from the API.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from ..config.settings import get_settings
from .common import CamelModel, DocumentResponse, ListEnvelope, object_id_string

settings = get_settings()


class ShippingInfoSchema(CamelModel):
    """Shipping details as collected by the checkout form."""
    first_name: str = Field(..., min_length=1, description="First name")
    last_name: str = Field(..., min_length=1, description="Last name")
    email: str = Field(..., min_length=3, description="Contact email")
    phone: Optional[str] = Field(None, description="Contact phone number")
    address: str = Field(..., min_length=1, description="Street address")
    city: str = Field(..., min_length=1, description="City")
    state: Optional[str] = Field(None, description="State/Province")
    zip_code: str = Field(..., min_length=1, description="Postal/ZIP code")
    country: str = Field(..., min_length=1, description="Country")


# Request Schemas

class OrderItemRequest(CamelModel):
    """One cart line submitted at checkout."""
    product_id: str = Field(..., description="Product ID")
    name: str = Field(..., min_length=1, description="Product name shown in the cart")
    price: float = Field(..., ge=0, description="Unit price shown in the cart")
    quantity: int = Field(..., gt=0, le=settings.max_item_quantity, description="Quantity ordered")
    image: Optional[str] = Field(None, description="Product image shown in the cart")

    @field_validator("product_id")
    @classmethod
    def validate_product_id(cls, v):
        return object_id_string(v)


class CreateOrderRequest(CamelModel):
    """Request schema for placing an order from the cart."""
    items: List[OrderItemRequest] = Field(
        ..., min_length=1, max_length=settings.max_order_items, description="Cart lines"
    )
    shipping_info: ShippingInfoSchema = Field(..., description="Shipping details")
    total_amount: float = Field(..., gt=0, description="Order total shown at checkout")


class UpdateOrderStatusRequest(BaseModel):
    """Request schema for updating order status. The value is checked by the endpoint."""
    status: str = Field(..., description="New order status")


# Response Schemas

class UserInfoSchema(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None


class OrderItemResponse(CamelModel):
    """Response schema for order items."""
    product_id: str = Field(..., description="Product ID")
    name: str = Field(..., description="Product name")
    price: float = Field(..., description="Unit price")
    quantity: int = Field(..., description="Quantity ordered")
    image: Optional[str] = Field(None, description="Product image")


class OrderStatusHistoryResponse(CamelModel):
    status: str
    timestamp: datetime
    updated_by: Optional[str] = None


class OrderResponse(DocumentResponse):
    """Response schema for a single order."""
    user_id: str = Field(..., description="Account that placed the order")
    user_info: UserInfoSchema = Field(default_factory=UserInfoSchema)
    items: List[OrderItemResponse] = Field(..., description="Order items")
    shipping_info: ShippingInfoSchema = Field(..., description="Shipping details")
    total_amount: float = Field(..., description="Total order amount")
    status: str = Field(..., description="Order status")
    status_history: List[OrderStatusHistoryResponse] = Field(default_factory=list)
    created_at: datetime = Field(..., description="Order creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")
    processing_at: Optional[datetime] = None
    shipped_at: Optional[datetime] = None
    delivered_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None


class OrderDetailResponse(BaseModel):
    success: bool = True
    data: OrderResponse


class OrdersListResponse(ListEnvelope):
    """Response schema for order listings."""
    data: List[OrderResponse] = Field(..., description="List of orders")
