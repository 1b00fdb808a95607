"""
Sign-in API schemas for shoppers (Google) and admins (username/password).
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .common import CamelModel
from .order import OrderResponse


# Request Schemas

class TokenRequest(CamelModel):
    """Body carrying a single token: a Google ID token or a session token."""
    token: Optional[str] = Field(None, description="Token to exchange or verify")


class AdminLoginRequest(CamelModel):
    username: Optional[str] = None
    password: Optional[str] = None


# Response Schemas

class UserPublic(CamelModel):
    id: str
    email: Optional[str] = None
    name: Optional[str] = None
    picture: Optional[str] = None
    is_admin: bool = False


class GoogleLoginData(BaseModel):
    token: str
    user: UserPublic


class GoogleLoginResponse(BaseModel):
    success: bool = True
    data: GoogleLoginData


class TokenVerifyResponse(BaseModel):
    success: bool = True
    data: Dict[str, Any]


class AdminPublic(CamelModel):
    id: str
    username: str
    is_admin: bool = True


class AdminLoginData(BaseModel):
    token: str
    admin: AdminPublic


class AdminLoginResponse(BaseModel):
    success: bool = True
    data: AdminLoginData


class StoreStats(CamelModel):
    """Back-office dashboard figures."""
    total_products: int
    active_products: int
    total_orders: int
    total_reviews: int
    total_messages: int
    unread_messages: int
    total_revenue: float
    orders_by_status: Dict[str, int]
    recent_orders: List[OrderResponse]


class StoreStatsResponse(BaseModel):
    success: bool = True
    data: StoreStats
