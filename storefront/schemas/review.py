"""
Review API schemas.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from .common import CamelModel, DocumentResponse, ListEnvelope, object_id_string


class CreateReviewRequest(CamelModel):
    product_id: Optional[str] = Field(None, description="Reviewed product")
    order_id: Optional[str] = Field(None, description="Delivered order containing the product")
    rating: Optional[int] = Field(None, description="Stars, 1 to 5")
    comment: Optional[str] = Field(None, max_length=2000)

    @field_validator("product_id", "order_id")
    @classmethod
    def validate_ids(cls, v):
        if v is None:
            return v
        return object_id_string(v)


class ApproveReviewRequest(CamelModel):
    approved: bool = Field(..., description="Whether the review is shown on the product page")


class ReviewResponse(DocumentResponse):
    product_id: str
    user_id: str
    order_id: str
    user_name: Optional[str] = None
    rating: int
    comment: str = ""
    approved: bool
    created_at: datetime
    updated_at: Optional[datetime] = None


class ReviewDetailResponse(BaseModel):
    success: bool = True
    data: ReviewResponse


class ReviewsListResponse(ListEnvelope):
    data: List[ReviewResponse]
