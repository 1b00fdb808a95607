"""
Account data models: shoppers signed in with Google, and back-office admins.
"""
from datetime import datetime
from typing import Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field

from ..utils.serializers import utc_now


class UserDocument(BaseModel):
    """Shopper account keyed by the Google ``sub`` claim."""
    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    id: Optional[ObjectId] = Field(None, alias="_id", description="User ID")
    google_id: str
    email: Optional[str] = None
    name: Optional[str] = None
    picture: Optional[str] = None
    is_admin: bool = False
    created_at: datetime = Field(default_factory=utc_now)
    last_login_at: Optional[datetime] = None

    def to_mongo(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class AdminDocument(BaseModel):
    """Back-office account; ``password`` holds a bcrypt hash."""
    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    id: Optional[ObjectId] = Field(None, alias="_id", description="Admin ID")
    username: str
    password: str
    created_at: datetime = Field(default_factory=utc_now)

    def to_mongo(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
