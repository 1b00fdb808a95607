"""
Back-office sign-in and dashboard figures.
"""
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.concurrency import run_in_threadpool
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from ..config.database import get_database
from ..config.settings import get_settings
from ..models.order import ORDER_STATUSES
from ..models.user import AdminDocument
from ..schemas.auth import AdminLoginRequest, AdminLoginResponse, StoreStatsResponse
from ..security import generate_token, hash_password, verify_password
from ..utils.dependencies import require_admin
from ..utils.serializers import serialize_docs

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin"])

DEFAULT_ADMINS = (
    ("admin1", "admin1"),
    ("admin2", "admin2"),
)
RECENT_ORDERS_LIMIT = 5


async def seed_default_admins(db: AsyncIOMotorDatabase) -> int:
    """
    Create each built-in admin account that does not exist yet.

    Accounts are upserted by username, so concurrent first logins never
    insert the same admin twice. Returns the number of accounts created.
    """
    created = 0
    for username, password in DEFAULT_ADMINS:
        password_hash = await run_in_threadpool(hash_password, password)
        admin_doc = AdminDocument(username=username, password=password_hash).to_mongo()
        try:
            result = await db.admins.update_one(
                {"username": username},
                {"$setOnInsert": admin_doc},
                upsert=True,
            )
        except DuplicateKeyError:
            # created by a concurrent login
            continue
        if result.upserted_id is not None:
            created += 1
    return created


async def ensure_default_admins(db: AsyncIOMotorDatabase) -> None:
    """Seed the built-in admin accounts when the admins collection is empty."""
    if await db.admins.count_documents({}) > 0:
        return

    created = await seed_default_admins(db)
    if created:
        names = ", ".join(username for username, _ in DEFAULT_ADMINS)
        logger.warning(f"Seeded default admin accounts ({names}); change their passwords")


@router.post("/login", response_model=AdminLoginResponse)
async def admin_login(credentials: AdminLoginRequest, db=Depends(get_database)):
    if not credentials.username or not credentials.password:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Username and password required")

    try:
        if get_settings().seed_default_admins:
            await ensure_default_admins(db)

        admin = await db.admins.find_one({"username": credentials.username})
        password_ok = admin is not None and await run_in_threadpool(
            verify_password, credentials.password, admin.get("password", "")
        )
        if not password_ok:
            logger.info(f"Failed admin login for '{credentials.username}'")
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

        admin_id = str(admin["_id"])
        token = generate_token({
            "userId": admin_id,
            "username": admin["username"],
            "isAdmin": True,
        })

        logger.info(f"Admin signed in: {admin['username']}")
        return {
            "success": True,
            "data": {
                "token": token,
                "admin": {"id": admin_id, "username": admin["username"], "is_admin": True},
            },
        }

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Admin login error: {e}")
        raise HTTPException(status_code=500, detail="Login failed")


@router.get("/stats", response_model=StoreStatsResponse)
async def store_stats(admin: Dict[str, Any] = Depends(require_admin), db=Depends(get_database)):
    """Dashboard totals. Revenue excludes cancelled orders."""
    try:
        revenue_rows = await db.orders.aggregate([
            {"$match": {"status": {"$ne": "cancelled"}}},
            {"$group": {"_id": None, "total": {"$sum": "$total_amount"}}},
        ]).to_list(length=None)
        total_revenue = float(revenue_rows[0]["total"]) if revenue_rows else 0.0

        status_rows = await db.orders.aggregate([
            {"$group": {"_id": "$status", "count": {"$sum": 1}}},
        ]).to_list(length=None)
        orders_by_status = {order_status: 0 for order_status in ORDER_STATUSES}
        for row in status_rows:
            orders_by_status[row["_id"]] = row["count"]

        cursor = db.orders.find({}).sort("created_at", -1).limit(RECENT_ORDERS_LIMIT)
        recent_orders = await cursor.to_list(length=RECENT_ORDERS_LIMIT)

        return {
            "success": True,
            "data": {
                "total_products": await db.products.count_documents({}),
                "active_products": await db.products.count_documents({"active": True}),
                "total_orders": await db.orders.count_documents({}),
                "total_reviews": await db.reviews.count_documents({}),
                "total_messages": await db.messages.count_documents({}),
                "unread_messages": await db.messages.count_documents({"read": False}),
                "total_revenue": round(total_revenue, 2),
                "orders_by_status": orders_by_status,
                "recent_orders": serialize_docs(recent_orders),
            },
        }

    except Exception as e:
        logger.error(f"Failed to compute store stats: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch stats")
