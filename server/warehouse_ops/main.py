import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
import traceback

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from warehouse_ops.clients.material_lookup_client import close_material_lookup_client
from warehouse_ops.config import get_settings
from warehouse_ops.dependencies import get_registry
from warehouse_ops.logging_config import setup_logging, get_logger
from warehouse_ops.routers import exports, materials, uploads, views

# Load settings
settings = get_settings()

# Configure logging
setup_logging(log_level=settings.log_level, log_format=settings.log_format)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(
        "Starting application",
        extra={
            "app_name": settings.app_name,
            "version": settings.app_version,
            "environment": settings.environment,
        }
    )
    yield
    await close_material_lookup_client()
    logger.info("Shutting down application")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    debug=settings.debug,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(uploads.router, prefix="/api/uploads", tags=["uploads"])
app.include_router(views.router, prefix="/api/views", tags=["views"])
app.include_router(exports.router, prefix="/api/exports", tags=["exports"])
app.include_router(materials.router, prefix="/api/materials", tags=["materials"])


# Global exception handler to ensure JSON responses for all errors
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle all unhandled exceptions and return JSON error response."""
    logger.error(
        f"Unhandled exception: {exc}",
        extra={
            "path": request.url.path,
            "method": request.method,
            "traceback": traceback.format_exc(),
        }
    )
    return JSONResponse(
        status_code=500,
        content={
            "detail": str(exc),
            "type": type(exc).__name__,
        }
    )


@app.get("/")
async def root():
    return {"message": settings.app_name}


@app.get("/health")
async def health():
    """
    Health check endpoint for container orchestration and load balancers.
    Returns 200 OK with basic application info and the number of loaded uploads.
    """
    return {
        "status": "ok",
        "sources": len(get_registry()),
        "app_name": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
