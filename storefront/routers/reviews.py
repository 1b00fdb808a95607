"""
Product review endpoints.
"""
import logging
from typing import Any, Dict

from bson import ObjectId
from fastapi import APIRouter, Depends, HTTPException

from ..config.database import get_database
from ..models.review import ReviewDocument
from ..schemas.common import SuccessResponse
from ..schemas.review import (
    ApproveReviewRequest,
    CreateReviewRequest,
    ReviewDetailResponse,
    ReviewsListResponse,
)
from ..utils.dependencies import (
    get_current_user,
    require_admin,
    user_object_id,
    validate_object_id,
)
from ..utils.serializers import serialize_doc, serialize_docs, utc_now

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reviews", tags=["Reviews"])


@router.post("", status_code=201, response_model=ReviewDetailResponse)
async def create_review(
    review: CreateReviewRequest,
    current_user: Dict[str, Any] = Depends(get_current_user),
    db=Depends(get_database)
):
    """
    Review a product from one of the caller's delivered orders.

    One review is accepted per product, order and user.
    """
    try:
        if not review.product_id or not review.order_id or not review.rating:
            raise HTTPException(status_code=400, detail="Product ID, order ID, and rating are required")

        if review.rating < 1 or review.rating > 5:
            raise HTTPException(status_code=400, detail="Rating must be between 1 and 5")

        reviewer_id = user_object_id(current_user)
        product_id = ObjectId(review.product_id)
        order_id = ObjectId(review.order_id)

        order = await db.orders.find_one({
            "_id": order_id,
            "user_id": reviewer_id,
            "status": "delivered",
        })
        if not order:
            raise HTTPException(status_code=400, detail="Order not found or not delivered yet")

        if not any(item.get("product_id") == product_id for item in order.get("items", [])):
            raise HTTPException(status_code=400, detail="Product not found in this order")

        existing_review = await db.reviews.find_one({
            "product_id": product_id,
            "user_id": reviewer_id,
            "order_id": order_id,
        })
        if existing_review:
            raise HTTPException(status_code=400, detail="You have already reviewed this product")

        review_doc = ReviewDocument(
            product_id=product_id,
            user_id=reviewer_id,
            order_id=order_id,
            user_name=current_user.get("name"),
            rating=review.rating,
            comment=review.comment or "",
        ).to_mongo()

        result = await db.reviews.insert_one(review_doc)
        created_review = await db.reviews.find_one({"_id": result.inserted_id})

        logger.info(f"Review created: {result.inserted_id} for product {product_id} ({review.rating} stars)")
        return {"success": True, "data": serialize_doc(created_review)}

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to add review: {e}")
        raise HTTPException(status_code=500, detail="Failed to add review")


@router.get("/product/{product_id}", response_model=ReviewsListResponse)
async def get_product_reviews(product_id: str, db=Depends(get_database)):
    """Approved reviews of a product, newest first"""
    try:
        object_id = validate_object_id(product_id, "product")

        cursor = db.reviews.find({"product_id": object_id, "approved": True}).sort("created_at", -1)
        reviews = await cursor.to_list(length=None)

        return {"success": True, "data": serialize_docs(reviews)}

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to fetch reviews for product {product_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch reviews")


@router.get("/admin/all", response_model=ReviewsListResponse)
async def list_all_reviews(admin: Dict[str, Any] = Depends(require_admin), db=Depends(get_database)):
    try:
        cursor = db.reviews.find({}).sort("created_at", -1)
        reviews = await cursor.to_list(length=None)
        return {"success": True, "data": serialize_docs(reviews)}

    except Exception as e:
        logger.error(f"Failed to fetch admin reviews: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch reviews")


@router.put("/{review_id}/approve", response_model=ReviewDetailResponse)
async def set_review_approval(
    review_id: str,
    approval: ApproveReviewRequest,
    admin: Dict[str, Any] = Depends(require_admin),
    db=Depends(get_database)
):
    """Show or hide a review on the product page"""
    try:
        object_id = validate_object_id(review_id, "review")

        result = await db.reviews.update_one(
            {"_id": object_id},
            {"$set": {"approved": approval.approved, "updated_at": utc_now()}}
        )
        if result.matched_count == 0:
            raise HTTPException(status_code=404, detail="Review not found")

        updated_review = await db.reviews.find_one({"_id": object_id})

        logger.info(f"Review {review_id} approved={approval.approved}")
        return {"success": True, "data": serialize_doc(updated_review)}

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to update review {review_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update review")


@router.delete("/{review_id}", response_model=SuccessResponse)
async def delete_review(review_id: str, admin: Dict[str, Any] = Depends(require_admin), db=Depends(get_database)):
    try:
        object_id = validate_object_id(review_id, "review")

        result = await db.reviews.delete_one({"_id": object_id})
        if result.deleted_count == 0:
            raise HTTPException(status_code=404, detail="Review not found")

        logger.info(f"Review deleted: {review_id}")
        return {"success": True, "message": "Review deleted successfully"}

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to delete review {review_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete review")
