"""
Checkout and order management endpoints.
"""
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..config.database import get_database
from ..config.settings import get_settings
from ..models.order import (
    INITIAL_ORDER_STATUS,
    ORDER_STATUSES,
    OrderDocument,
    OrderItemDocument,
    OrderStatusHistory,
    UserInfo,
)
from ..schemas.order import (
    CreateOrderRequest,
    OrderDetailResponse,
    OrdersListResponse,
    UpdateOrderStatusRequest,
)
from ..utils.dependencies import (
    get_current_user,
    pagination_meta,
    require_admin,
    user_object_id,
    validate_object_id,
)
from ..utils.serializers import serialize_doc, serialize_docs, utc_now

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.post("", status_code=201, response_model=OrderDetailResponse)
async def create_order(
    order: CreateOrderRequest,
    current_user: Dict[str, Any] = Depends(get_current_user),
    db=Depends(get_database)
):
    """
    Place an order from the cart.

    Every line is checked against current stock before anything is written;
    stock is decremented only after the order document is stored. The check
    and the decrement are separate statements, so concurrent checkouts of the
    last units can both succeed.
    """
    try:
        buyer_id = user_object_id(current_user)

        for item in order.items:
            product = await db.products.find_one(
                {"_id": validate_object_id(item.product_id, "product"), "active": True}
            )
            if not product:
                raise HTTPException(status_code=400, detail=f"Product {item.name} not found")

            available = product.get("stock", 0)
            if available < item.quantity:
                raise HTTPException(
                    status_code=400,
                    detail=f"Insufficient stock for {item.name}. Available: {available}"
                )

        placed_at = utc_now()
        order_doc = OrderDocument(
            user_id=buyer_id,
            user_info=UserInfo(name=current_user.get("name"), email=current_user.get("email")),
            items=[
                OrderItemDocument(
                    product_id=validate_object_id(item.product_id, "product"),
                    name=item.name,
                    price=item.price,
                    quantity=item.quantity,
                    image=item.image,
                )
                for item in order.items
            ],
            shipping_info=order.shipping_info.model_dump(),
            total_amount=order.total_amount,
            status_history=[OrderStatusHistory(status=INITIAL_ORDER_STATUS, timestamp=placed_at)],
            created_at=placed_at,
        ).to_mongo()

        result = await db.orders.insert_one(order_doc)

        for item in order.items:
            await db.products.update_one(
                {"_id": validate_object_id(item.product_id, "product")},
                {"$inc": {"stock": -item.quantity}}
            )

        created_order = await db.orders.find_one({"_id": result.inserted_id})

        logger.info(
            f"Order created: {result.inserted_id} for user {buyer_id} "
            f"({len(order.items)} items, total {order.total_amount})"
        )
        return {"success": True, "data": serialize_doc(created_order)}

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to create order: {e}")
        raise HTTPException(status_code=500, detail="Failed to create order")


@router.get("/user", response_model=OrdersListResponse)
async def get_user_orders(
    current_user: Dict[str, Any] = Depends(get_current_user),
    db=Depends(get_database)
):
    """Orders placed by the caller, newest first"""
    try:
        buyer_id = user_object_id(current_user)

        cursor = db.orders.find({"user_id": buyer_id}).sort("created_at", -1)
        orders = await cursor.to_list(length=None)

        return {"success": True, "data": serialize_docs(orders)}

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to fetch orders for user {current_user.get('userId')}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch orders")


@router.get("/admin/all", response_model=OrdersListResponse)
async def list_all_orders(
    status: Optional[str] = Query(None, description="Filter by order status"),
    limit: Optional[int] = Query(None, ge=1, le=settings.max_page_size, description="Number of orders to return"),
    offset: int = Query(0, ge=0, description="Number of orders to skip"),
    admin: Dict[str, Any] = Depends(require_admin),
    db=Depends(get_database)
):
    """All orders, newest first. Paginated only when ``limit`` is given."""
    try:
        filter_query: Dict[str, Any] = {}
        if status:
            if status not in ORDER_STATUSES:
                raise HTTPException(status_code=400, detail="Invalid status")
            filter_query["status"] = status

        cursor = db.orders.find(filter_query).sort("created_at", -1)
        if limit is None:
            orders = await cursor.to_list(length=None)
            return {"success": True, "data": serialize_docs(orders)}

        total_count = await db.orders.count_documents(filter_query)
        orders = await cursor.skip(offset).limit(limit).to_list(length=limit)

        return {
            "success": True,
            "data": serialize_docs(orders),
            "pagination": pagination_meta(total_count, limit, offset),
        }

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to fetch admin orders: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch orders")


@router.put("/{order_id}/status", response_model=OrderDetailResponse)
async def update_order_status(
    order_id: str,
    status_update: UpdateOrderStatusRequest,
    admin: Dict[str, Any] = Depends(require_admin),
    db=Depends(get_database)
):
    """Set an order's status; any status may follow any other"""
    try:
        object_id = validate_object_id(order_id, "order")

        new_status = status_update.status
        if new_status not in ORDER_STATUSES:
            raise HTTPException(status_code=400, detail="Invalid status")

        changed_at = utc_now()

        history_entry = OrderStatusHistory(
            status=new_status,
            timestamp=changed_at,
            updated_by=admin.get("username") or admin.get("email"),
        )

        result = await db.orders.update_one(
            {"_id": object_id},
            {
                "$set": {
                    "status": new_status,
                    "updated_at": changed_at,
                    f"{new_status}_at": changed_at,
                },
                "$push": {"status_history": history_entry.model_dump(exclude_none=True)},
            }
        )
        if result.matched_count == 0:
            raise HTTPException(status_code=404, detail="Order not found")

        updated_order = await db.orders.find_one({"_id": object_id})

        logger.info(f"Order status updated: {order_id} -> {new_status}")
        return {"success": True, "data": serialize_doc(updated_order)}

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to update order status {order_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update order status")


@router.get("/{order_id}", response_model=OrderDetailResponse)
async def get_order(
    order_id: str,
    current_user: Dict[str, Any] = Depends(get_current_user),
    db=Depends(get_database)
):
    """Get a specific order; shoppers only see their own"""
    try:
        query: Dict[str, Any] = {"_id": validate_object_id(order_id, "order")}
        if not current_user.get("isAdmin"):
            query["user_id"] = user_object_id(current_user)

        order = await db.orders.find_one(query)
        if not order:
            raise HTTPException(status_code=404, detail="Order not found")

        return {"success": True, "data": serialize_doc(order)}

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to fetch order {order_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch order")
