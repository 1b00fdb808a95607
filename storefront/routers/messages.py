"""
Contact form endpoints. Anyone may send a message; only admins read them.
"""
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..config.database import get_database
from ..models.message import MessageDocument
from ..schemas.common import SuccessResponse
from ..schemas.message import (
    CreateMessageRequest,
    MarkMessageReadRequest,
    MessageDetailResponse,
    MessagesListResponse,
)
from ..utils.dependencies import require_admin, validate_object_id
from ..utils.serializers import serialize_doc, serialize_docs, utc_now

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/messages", tags=["Messages"])


@router.post("", status_code=201, response_model=MessageDetailResponse)
async def create_message(message: CreateMessageRequest, db=Depends(get_database)):
    try:
        message_doc = MessageDocument(
            name=message.name,
            email=str(message.email),
            phone=message.phone or "",
            subject=message.subject or "",
            message=message.message,
        ).to_mongo()

        result = await db.messages.insert_one(message_doc)
        created_message = await db.messages.find_one({"_id": result.inserted_id})

        logger.info(f"Contact message received: {result.inserted_id}")
        return {"success": True, "data": serialize_doc(created_message)}

    except Exception as e:
        logger.error(f"Failed to save message: {e}")
        raise HTTPException(status_code=500, detail="Failed to send message")


@router.get("/admin/all", response_model=MessagesListResponse)
async def list_all_messages(
    read: Optional[bool] = Query(None, description="Filter by read status"),
    admin: Dict[str, Any] = Depends(require_admin),
    db=Depends(get_database)
):
    """Inbox, newest first"""
    try:
        filter_query: Dict[str, Any] = {}
        if read is not None:
            filter_query["read"] = read

        cursor = db.messages.find(filter_query).sort("created_at", -1)
        messages = await cursor.to_list(length=None)
        return {"success": True, "data": serialize_docs(messages)}

    except Exception as e:
        logger.error(f"Failed to fetch admin messages: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch messages")


@router.put("/{message_id}/read", response_model=MessageDetailResponse)
async def mark_message_read(
    message_id: str,
    read_update: MarkMessageReadRequest,
    admin: Dict[str, Any] = Depends(require_admin),
    db=Depends(get_database)
):
    try:
        object_id = validate_object_id(message_id, "message")

        result = await db.messages.update_one(
            {"_id": object_id},
            {"$set": {"read": read_update.read, "read_at": utc_now()}}
        )
        if result.matched_count == 0:
            raise HTTPException(status_code=404, detail="Message not found")

        updated_message = await db.messages.find_one({"_id": object_id})
        return {"success": True, "data": serialize_doc(updated_message)}

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to update message {message_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update message")


@router.delete("/{message_id}", response_model=SuccessResponse)
async def delete_message(message_id: str, admin: Dict[str, Any] = Depends(require_admin), db=Depends(get_database)):
    try:
        object_id = validate_object_id(message_id, "message")

        result = await db.messages.delete_one({"_id": object_id})
        if result.deleted_count == 0:
            raise HTTPException(status_code=404, detail="Message not found")

        logger.info(f"Message deleted: {message_id}")
        return {"success": True, "message": "Message deleted successfully"}

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to delete message {message_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete message")
