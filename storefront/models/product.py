"""
Product data models for database documents.
These represent the actual structure of documents stored in MongoDB.
"""
from datetime import datetime
from typing import Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field

from ..utils.serializers import utc_now

DEFAULT_CATEGORY = "general"


class ProductDocument(BaseModel):
    """
    Product document model representing the MongoDB document structure.
    Deleting a product only clears ``active``; orders and reviews keep pointing at it.
    """
    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    id: Optional[ObjectId] = Field(None, alias="_id", description="Product ID")
    name: str = Field(..., min_length=1, max_length=200, description="Product name")
    description: str = Field(..., description="Product description")
    price: float = Field(..., gt=0, description="Unit price")
    image: str = Field(..., description="Image URL")
    stock: int = Field(..., ge=0, description="Units available")
    category: str = Field(default=DEFAULT_CATEGORY, description="Product category")
    active: bool = Field(default=True, description="Visible in the catalog")

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")
    deleted_at: Optional[datetime] = Field(None, description="Soft delete timestamp")

    def to_mongo(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
