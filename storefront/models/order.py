"""
Order data models for database documents.
These represent the actual structure of documents stored in MongoDB.
"""
from datetime import datetime
from typing import List, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field

from ..utils.serializers import utc_now

ORDER_STATUSES = ("processing", "shipped", "delivered", "cancelled")
INITIAL_ORDER_STATUS = "processing"


class OrderItemDocument(BaseModel):
    """Line item as it was in the cart at checkout time."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    product_id: ObjectId = Field(..., description="Product ID reference")
    name: str = Field(..., description="Product name at time of order")
    price: float = Field(..., description="Unit price at time of order")
    quantity: int = Field(..., gt=0, description="Quantity ordered")
    image: Optional[str] = Field(None, description="Product image at time of order")


class ShippingInfo(BaseModel):
    """Shipping details collected by the checkout form."""
    first_name: str = Field(..., min_length=1, description="First name")
    last_name: str = Field(..., min_length=1, description="Last name")
    email: str = Field(..., min_length=3, description="Contact email")
    phone: Optional[str] = Field(None, description="Contact phone number")
    address: str = Field(..., min_length=1, description="Street address")
    city: str = Field(..., min_length=1, description="City")
    state: Optional[str] = Field(None, description="State/Province")
    zip_code: str = Field(..., min_length=1, description="Postal/ZIP code")
    country: str = Field(..., min_length=1, description="Country")


class UserInfo(BaseModel):
    """Buyer identity copied from the session token."""
    name: Optional[str] = None
    email: Optional[str] = None


class OrderStatusHistory(BaseModel):
    """Order status change history."""
    status: str = Field(..., description="Status value")
    timestamp: datetime = Field(default_factory=utc_now, description="When status changed")
    updated_by: Optional[str] = Field(None, description="Who updated the status")


class OrderDocument(BaseModel):
    """
    Order document model representing the MongoDB document structure.
    This matches how orders are stored in the database.
    """
    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    id: Optional[ObjectId] = Field(None, alias="_id", description="Order ID")
    user_id: ObjectId = Field(..., description="Account that placed the order")
    user_info: UserInfo = Field(default_factory=UserInfo)
    items: List[OrderItemDocument] = Field(..., min_length=1, description="Order items")
    shipping_info: ShippingInfo
    total_amount: float = Field(..., gt=0, description="Total order amount")

    status: str = Field(default=INITIAL_ORDER_STATUS, description="Order status")
    status_history: List[OrderStatusHistory] = Field(default_factory=list)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, description="Order creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    def to_mongo(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
