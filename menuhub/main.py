from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from menuhub.core.config import get_settings
from menuhub.core.exceptions import AppError
from menuhub.core.logging_config import setup_logging
from menuhub.db.session import SessionLocal
from menuhub.routers.activity import router as activity_router
from menuhub.routers.auth import router as auth_router
from menuhub.routers.categories import router as categories_router
from menuhub.routers.health import router as health_router
from menuhub.routers.menu_items import router as menu_items_router
from menuhub.routers.public import pages_router as public_pages_router
from menuhub.routers.public import router as public_router
from menuhub.routers.qr_codes import router as qr_codes_router
from menuhub.routers.restaurants import router as restaurants_router
from menuhub.routers.social_media import router as social_media_router
from menuhub.routers.users import router as users_router
from menuhub.services.accounts import ensure_super_admin

logger = logging.getLogger(__name__)

# Request locations that carry no meaning for API clients
REQUEST_LOCATIONS = {"body", "query", "path", "header", "cookie"}


def bootstrap_super_admin() -> None:
    db = SessionLocal()
    try:
        ensure_super_admin(db)
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    bootstrap_super_admin()
    yield


settings = get_settings()

app = FastAPI(
    title=settings.APP_NAME,
    description="Multi-tenant restaurant menu platform - restaurant, menu and QR code management with public menus.",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Report payload problems as 400 with one entry per offending field."""
    errors = []
    for error in exc.errors():
        loc = [str(part) for part in error["loc"] if part not in REQUEST_LOCATIONS]
        # Model-level checks carry no field location
        field = ".".join(loc) or "body"
        errors.append({"field": field, "message": error["msg"]})

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Validation error", "errors": errors},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning(f"Constraint violation: {exc.orig}")
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"message": "Conflict with existing data"},
    )


# Global exception handler for unhandled errors
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle unexpected server errors without leaking internals."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(public_pages_router)
app.include_router(auth_router, prefix="/api")
app.include_router(users_router, prefix="/api")
app.include_router(restaurants_router, prefix="/api")
app.include_router(categories_router, prefix="/api")
app.include_router(menu_items_router, prefix="/api")
app.include_router(social_media_router, prefix="/api")
app.include_router(qr_codes_router, prefix="/api")
app.include_router(activity_router, prefix="/api")
app.include_router(public_router, prefix="/api")


@app.get("/")
def read_root():
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "docs": "/docs",
        "health": "/health"
    }
