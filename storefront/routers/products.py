"""
Product catalog endpoints. Reads are public; writes require an admin token.
"""
import logging
import re
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..config.database import get_database
from ..config.settings import get_settings
from ..models.product import DEFAULT_CATEGORY, ProductDocument
from ..schemas.common import SuccessResponse
from ..schemas.product import (
    CreateProductRequest,
    ProductDetailResponse,
    ProductsListResponse,
    UpdateProductRequest,
)
from ..utils.dependencies import (
    pagination_meta,
    require_admin,
    validate_object_id,
    verify_product_exists,
)
from ..utils.serializers import serialize_doc, serialize_docs, utc_now

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", response_model=ProductsListResponse)
async def list_products(
    name: Optional[str] = Query(None, description="Filter by product name (supports partial matching)"),
    category: Optional[str] = Query(None, description="Filter by category"),
    min_price: Optional[float] = Query(None, alias="minPrice", ge=0, description="Minimum price filter"),
    max_price: Optional[float] = Query(None, alias="maxPrice", ge=0, description="Maximum price filter"),
    in_stock: Optional[bool] = Query(None, alias="inStock", description="Filter products in stock"),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    offset: int = Query(0, ge=0),
    db=Depends(get_database)
):
    """List active products, newest first, with optional filtering and pagination"""
    try:
        filter_query: Dict[str, Any] = {"active": True}

        if name:
            filter_query["name"] = {"$regex": re.escape(name), "$options": "i"}

        if category:
            filter_query["category"] = {"$regex": f"^{re.escape(category)}$", "$options": "i"}

        if min_price is not None or max_price is not None:
            price_filter = {}
            if min_price is not None:
                price_filter["$gte"] = min_price
            if max_price is not None:
                price_filter["$lte"] = max_price
            filter_query["price"] = price_filter

        if in_stock is True:
            filter_query["stock"] = {"$gt": 0}
        elif in_stock is False:
            filter_query["stock"] = {"$lte": 0}

        total_count = await db.products.count_documents(filter_query)

        cursor = db.products.find(filter_query).sort("created_at", -1).skip(offset).limit(limit)
        products = await cursor.to_list(length=limit)

        return {
            "success": True,
            "data": serialize_docs(products),
            "pagination": pagination_meta(total_count, limit, offset),
        }

    except Exception as e:
        logger.error(f"Failed to fetch products: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch products")


@router.get("/admin/all", response_model=ProductsListResponse)
async def list_all_products(admin=Depends(require_admin), db=Depends(get_database)):
    """Every product, including soft-deleted ones, for the back-office"""
    try:
        cursor = db.products.find({}).sort("created_at", -1)
        products = await cursor.to_list(length=None)
        return {"success": True, "data": serialize_docs(products)}

    except Exception as e:
        logger.error(f"Failed to fetch admin products: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch products")


@router.get("/{product_id}", response_model=ProductDetailResponse)
async def get_product(product_id: str, db=Depends(get_database)):
    """Get a specific active product by ID"""
    try:
        product = await verify_product_exists(product_id, db)
        return {"success": True, "data": serialize_doc(product)}

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to fetch product {product_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch product")


@router.post("", status_code=201, response_model=ProductDetailResponse)
async def create_product(
    product: CreateProductRequest,
    admin=Depends(require_admin),
    db=Depends(get_database)
):
    """Create a new product"""
    try:
        product_doc = ProductDocument(
            name=product.name,
            description=product.description,
            price=product.price,
            image=product.image,
            stock=product.stock,
            category=product.category or DEFAULT_CATEGORY,
        ).to_mongo()

        result = await db.products.insert_one(product_doc)
        created_product = await db.products.find_one({"_id": result.inserted_id})

        logger.info(f"Product created: {product.name} (ID: {result.inserted_id})")
        return {"success": True, "data": serialize_doc(created_product)}

    except Exception as e:
        logger.error(f"Failed to create product: {e}")
        raise HTTPException(status_code=500, detail="Failed to create product")


@router.put("/{product_id}", response_model=ProductDetailResponse)
async def update_product(
    product_id: str,
    product_update: UpdateProductRequest,
    admin=Depends(require_admin),
    db=Depends(get_database)
):
    """Update the provided fields of a product, active or not"""
    try:
        object_id = validate_object_id(product_id, "product")

        update_doc = product_update.model_dump(exclude_none=True)
        update_doc["updated_at"] = utc_now()

        update_ops: Dict[str, Any] = {"$set": update_doc}
        if update_doc.get("active") is True:
            update_ops["$unset"] = {"deleted_at": ""}

        result = await db.products.update_one({"_id": object_id}, update_ops)
        if result.matched_count == 0:
            raise HTTPException(status_code=404, detail="Product not found")

        updated_product = await db.products.find_one({"_id": object_id})

        logger.info(f"Product updated: {product_id} ({', '.join(sorted(update_doc))})")
        return {"success": True, "data": serialize_doc(updated_product)}

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to update product {product_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update product")


@router.delete("/{product_id}", response_model=SuccessResponse)
async def delete_product(product_id: str, admin=Depends(require_admin), db=Depends(get_database)):
    """Hide a product from the catalog; existing orders and reviews keep referencing it"""
    try:
        object_id = validate_object_id(product_id, "product")

        result = await db.products.update_one(
            {"_id": object_id},
            {"$set": {"active": False, "deleted_at": utc_now()}}
        )
        if result.matched_count == 0:
            raise HTTPException(status_code=404, detail="Product not found")

        logger.info(f"Product deleted: {product_id}")
        return {"success": True, "message": "Product deleted successfully"}

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to delete product {product_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete product")
