"""
FastAPI Application Entry Point - Insect Shop Service
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator

from insect_shop import __version__
from insect_shop.config import Settings, settings as default_settings
from insect_shop.database import Database
from insect_shop.exceptions import ShopError
from insect_shop.api import auth, health, insects, orders, users

logger = logging.getLogger(__name__)


async def shop_error_handler(request: Request, exc: ShopError) -> JSONResponse:
    """Translate service errors to their HTTP status"""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Request validation failures are reported as 400"""
    messages = [
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": {"message": messages, "status": status.HTTP_400_BAD_REQUEST}}
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize database on startup, release connections on shutdown"""
    settings = app.state.settings
    logger.info("Starting %s...", settings.SERVICE_NAME)
    app.state.database.init_db()
    logger.info("✓ Database initialized")
    logger.info("✓ %s is running on port %s", settings.SERVICE_NAME, settings.SERVICE_PORT)
    yield
    logger.info("Shutting down %s...", settings.SERVICE_NAME)
    app.state.database.dispose()


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Build the application
    
    Args:
        settings: Settings to use (defaults to environment settings)
        database: Database handle to use (defaults to one built from DATABASE_URL)
    """
    settings = settings or default_settings
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    
    # Create FastAPI application
    app = FastAPI(
        title="Insect Shop Service",
        description="Service for insect listings, orders and users",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.database = database or Database(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
    
    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    # Error handlers
    app.add_exception_handler(ShopError, shop_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    
    # Include routers
    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(insects.router)
    app.include_router(orders.router)
    
    # Prometheus metrics
    if settings.METRICS_ENABLED:
        Instrumentator().instrument(app).expose(app)
    
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    
    uvicorn.run(app, host="0.0.0.0", port=default_settings.SERVICE_PORT)
