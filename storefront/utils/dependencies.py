"""
FastAPI dependencies for authentication, database lookups and common validations
"""
import logging
from typing import Any, Dict, Optional

from bson import ObjectId
from fastapi import Depends, Header, HTTPException, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from ..security import verify_token

logger = logging.getLogger(__name__)


def _extract_bearer_token(authorization: Optional[str]) -> str:
    raw = (authorization or "").strip()
    if raw.lower().startswith("bearer "):
        raw = raw[len("bearer "):]
    elif raw.lower() == "bearer":
        raw = ""
    return raw.strip()


async def get_current_user(authorization: Optional[str] = Header(default=None)) -> Dict[str, Any]:
    """
    Dependency returning the claims of the bearer token on the request

    Raises:
        HTTPException: 401 if the token is missing or invalid
    """
    token = _extract_bearer_token(authorization)
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="No token provided")

    claims = verify_token(token)
    if claims is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")

    return claims


async def require_admin(current_user: Dict[str, Any] = Depends(get_current_user)) -> Dict[str, Any]:
    """Dependency allowing only tokens issued to admins."""
    if not current_user.get("isAdmin"):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return current_user


def validate_object_id(object_id: str, resource_name: str = "resource") -> ObjectId:
    """
    Validate and convert string to ObjectId

    Args:
        object_id: String representation of ObjectId
        resource_name: Name of the resource for error messages

    Returns:
        Valid ObjectId instance

    Raises:
        HTTPException: If ObjectId format is invalid
    """
    if not ObjectId.is_valid(object_id):
        raise HTTPException(
            status_code=400,
            detail=f"Invalid {resource_name} ID"
        )
    return ObjectId(object_id)


def user_object_id(current_user: Dict[str, Any]) -> ObjectId:
    """ObjectId of the account a token was issued to."""
    user_id = str(current_user.get("userId") or "")
    if not ObjectId.is_valid(user_id):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")
    return ObjectId(user_id)


async def verify_product_exists(
    product_id: str, db: AsyncIOMotorDatabase, active_only: bool = True
) -> Dict[str, Any]:
    """
    Verify that a product exists in the database

    Args:
        product_id: Product ID to verify
        db: Database instance
        active_only: Treat soft-deleted products as missing

    Returns:
        Product document if found

    Raises:
        HTTPException: If product is not found or ID is invalid
    """
    query: Dict[str, Any] = {"_id": validate_object_id(product_id, "product")}
    if active_only:
        query["active"] = True

    product = await db.products.find_one(query)
    if not product:
        raise HTTPException(
            status_code=404,
            detail="Product not found"
        )

    return product


def pagination_meta(total: int, limit: int, offset: int) -> Dict[str, Any]:
    return {
        "total": total,
        "limit": limit,
        "offset": offset,
        "has_more": offset + limit < total,
    }
