"""
Review data model for database documents.
"""
from datetime import datetime
from typing import Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field

from ..utils.serializers import utc_now


class ReviewDocument(BaseModel):
    """A buyer's rating of a product from one of their delivered orders."""
    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    id: Optional[ObjectId] = Field(None, alias="_id", description="Review ID")
    product_id: ObjectId
    user_id: ObjectId
    order_id: ObjectId
    user_name: Optional[str] = None
    rating: int = Field(..., ge=1, le=5)
    comment: str = ""
    approved: bool = True
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: Optional[datetime] = None

    def to_mongo(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
