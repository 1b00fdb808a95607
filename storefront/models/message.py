"""
Contact message data model for database documents.
"""
from datetime import datetime
from typing import Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field

from ..utils.serializers import utc_now


class MessageDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    id: Optional[ObjectId] = Field(None, alias="_id", description="Message ID")
    name: str
    email: str
    phone: str = ""
    subject: str = ""
    message: str
    read: bool = False
    created_at: datetime = Field(default_factory=utc_now)
    read_at: Optional[datetime] = None

    def to_mongo(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
