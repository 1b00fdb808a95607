# main.py
import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config.database import get_database_manager, lifespan
from .config.settings import get_settings
from .routers import admin, auth, messages, orders, products, reviews
from .schemas.common import (
    ErrorResponse,
    HealthCheckResponse,
    RootResponse,
    ValidationErrorDetail,
    ValidationErrorResponse,
)
from .utils.serializers import utc_now

settings = get_settings()

# Setup logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    description=settings.app_description,
    version=settings.app_version,
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

for module in (auth, admin, products, orders, reviews, messages):
    app.include_router(module.router, prefix=settings.api_prefix)


# Error envelope

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail)).model_dump(),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    details = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        ctx_error = (error.get("ctx") or {}).get("error")
        details.append(ValidationErrorDetail(
            field=".".join(location) or "body",
            message=str(ctx_error) if ctx_error else error.get("msg", "Invalid value"),
            input_value=error.get("input"),
        ))

    payload = ValidationErrorResponse(
        error=details[0].message if details else "Validation failed",
        details=details,
    )
    return JSONResponse(status_code=400, content=jsonable_encoder(payload))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content=ErrorResponse(error="Internal server error").model_dump())


# Service endpoints

@app.get("/", response_model=RootResponse, tags=["Root"])
async def root():
    """Root endpoint - Always accessible"""
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "docs": "/docs",
        "health": "/health",
        "status": "running",
        "timestamp": utc_now().isoformat(),
    }


@app.get("/health", response_model=HealthCheckResponse, tags=["Health"])
async def health_check():
    """Health check endpoint - Always accessible"""
    db_manager = get_database_manager()
    try:
        if db_manager.is_connected():
            await db_manager.get_database().command("ping")
            db_status = "connected"
        else:
            db_status = "disconnected"
    except Exception as e:
        logger.warning(f"Health check ping failed: {e}")
        db_status = "error"

    return {
        "status": "healthy",
        "database": db_status,
        "timestamp": utc_now().isoformat(),
        "version": settings.app_version,
    }
