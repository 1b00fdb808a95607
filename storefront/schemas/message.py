"""
Contact message API schemas.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field

from .common import CamelModel, DocumentResponse, ListEnvelope


class CreateMessageRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=50)
    subject: Optional[str] = Field(None, max_length=200)
    message: str = Field(..., min_length=1, max_length=5000)


class MarkMessageReadRequest(CamelModel):
    read: bool


class MessageResponse(DocumentResponse):
    name: str
    email: str
    phone: str = ""
    subject: str = ""
    message: str
    read: bool = False
    created_at: datetime
    read_at: Optional[datetime] = None


class MessageDetailResponse(BaseModel):
    success: bool = True
    data: MessageResponse


class MessagesListResponse(ListEnvelope):
    data: List[MessageResponse]
