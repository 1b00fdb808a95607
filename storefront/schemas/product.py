"""
Product API schemas for request/response validation.
These models define the structure of data sent to and from the API.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ..models.product import DEFAULT_CATEGORY
from .common import CamelModel, DocumentResponse, ListEnvelope


# Request Schemas

class CreateProductRequest(CamelModel):
    """Request schema for creating a new product."""
    name: str = Field(..., min_length=1, max_length=200, description="Product name")
    description: str = Field(..., min_length=1, max_length=5000, description="Product description")
    price: float = Field(..., gt=0, description="Product price (must be positive)")
    image: str = Field(..., min_length=1, description="Image URL")
    stock: int = Field(..., ge=0, description="Available stock quantity")
    category: Optional[str] = Field(None, max_length=100, description=f"Product category (defaults to '{DEFAULT_CATEGORY}')")


class UpdateProductRequest(CamelModel):
    """Request schema for updating a product. Only provided fields change."""
    name: Optional[str] = Field(None, min_length=1, max_length=200, description="Product name")
    description: Optional[str] = Field(None, min_length=1, max_length=5000, description="Product description")
    price: Optional[float] = Field(None, gt=0, description="Product price")
    image: Optional[str] = Field(None, min_length=1, description="Image URL")
    stock: Optional[int] = Field(None, ge=0, description="Stock quantity")
    category: Optional[str] = Field(None, min_length=1, max_length=100, description="Product category")
    active: Optional[bool] = Field(None, description="Catalog visibility")


# Response Schemas

class ProductResponse(DocumentResponse):
    """Response schema for a single product."""
    name: str = Field(..., description="Product name")
    description: Optional[str] = Field(None, description="Product description")
    price: float = Field(..., description="Product price")
    image: Optional[str] = Field(None, description="Image URL")
    stock: int = Field(0, description="Available stock")
    category: str = Field(DEFAULT_CATEGORY, description="Product category")
    active: bool = Field(True, description="Visible in the catalog")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")
    deleted_at: Optional[datetime] = Field(None, description="Soft delete timestamp")


class ProductDetailResponse(BaseModel):
    success: bool = True
    data: ProductResponse


class ProductsListResponse(ListEnvelope):
    """Response schema for product listings."""
    data: List[ProductResponse] = Field(..., description="List of products")
