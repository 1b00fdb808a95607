"""
Shopper sign-in with Google and session token verification.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.concurrency import run_in_threadpool

from ..config.database import get_database
from ..config.settings import get_settings
from ..models.user import UserDocument
from ..schemas.auth import GoogleLoginResponse, TokenRequest, TokenVerifyResponse
from ..security import generate_token, verify_google_id_token, verify_token
from ..utils.serializers import utc_now

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/google", response_model=GoogleLoginResponse)
async def google_login(body: TokenRequest, db=Depends(get_database)):
    """
    Exchange a Google ID token for a storefront session token.

    The first sign-in creates the shopper account; later sign-ins reuse the
    account matched by Google's subject identifier.
    """
    if not body.token:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Token required")

    client_id = get_settings().google_client_id
    if not client_id:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Google sign-in is not configured",
        )

    try:
        claims = await run_in_threadpool(verify_google_id_token, body.token, client_id)
    except ValueError as exc:
        logger.warning(f"Rejected Google ID token: {exc}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid Google token")

    try:
        google_id = claims["sub"]
        signed_in_at = utc_now()

        user = await db.users.find_one({"google_id": google_id})
        if not user:
            user = UserDocument(
                google_id=google_id,
                email=claims.get("email"),
                name=claims.get("name"),
                picture=claims.get("picture"),
                last_login_at=signed_in_at,
            ).to_mongo()
            result = await db.users.insert_one(user)
            user["_id"] = result.inserted_id
            logger.info(f"User created: {result.inserted_id} ({user.get('email')})")
        else:
            await db.users.update_one({"_id": user["_id"]}, {"$set": {"last_login_at": signed_in_at}})

        user_id = str(user["_id"])
        is_admin = bool(user.get("is_admin", False))
        token = generate_token({
            "userId": user_id,
            "email": user.get("email"),
            "name": user.get("name"),
            "isAdmin": is_admin,
        })

        return {
            "success": True,
            "data": {
                "token": token,
                "user": {
                    "id": user_id,
                    "email": user.get("email"),
                    "name": user.get("name"),
                    "picture": user.get("picture"),
                    "is_admin": is_admin,
                },
            },
        }

    except Exception as e:
        logger.error(f"Google authentication failed: {e}")
        raise HTTPException(status_code=500, detail="Authentication failed")


@router.post("/verify", response_model=TokenVerifyResponse)
async def verify_session_token(body: TokenRequest):
    """Decode a storefront session token and return its claims"""
    if not body.token:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Token required")

    claims = verify_token(body.token)
    if claims is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")

    return {"success": True, "data": claims}
