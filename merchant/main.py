"""
Storefront Merchant Application

Product catalog with color/SKU variants and remembered carts, backed by a
MongoDB document store.
"""

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Load environment variables before settings are read
load_dotenv()

from .core.config import settings
from .core.errors import AuthorizationError, StorefrontError
from .routes import products_router, cart_router
from .security.session import ADMIN_ROLE, SessionUser, session_manager

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info("Storefront starting up...")
    logger.info(
        f"Document store: {'in-memory' if settings.uses_mongomock else settings.database_name}"
    )

    if settings.admin_session_token:
        session_manager.create_session(
            SessionUser(user_id="admin", email=settings.admin_email, role=ADMIN_ROLE),
            token=settings.admin_session_token,
        )
        logger.info(f"Administrator session registered for {settings.admin_email}")

    yield

    logger.info("Storefront shutting down...")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Storefront catalog and cart API",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StorefrontError)
async def storefront_error_handler(request: Request, exc: StorefrontError):
    """Known failures carry their own status and user-facing message"""
    if isinstance(exc, AuthorizationError):
        logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed input is a client error like any missing field"""
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid request", "errors": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    """Anything else is logged and hidden behind a generic 500"""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


# Include API routers
app.include_router(products_router)
app.include_router(cart_router)


@app.get("/")
async def home():
    """Storefront API index"""
    return {
        "message": f"{settings.app_name} API",
        "docs": "/docs",
        "endpoints": {
            "products": "/api/products",
            "cart": "/api/cart",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "storefront"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "merchant.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
