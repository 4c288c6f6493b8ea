# File: app/main.py
import os
import time
import logging
from contextlib import asynccontextmanager
from typing import Callable, Optional
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from app.api.v1.api import api_router
from app.core.config import settings
from app.core.errors import AssetTrackerError
from app.db.database import Database

# Configure logging
logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL))
logger = logging.getLogger(__name__)


def create_app(database: Optional[Database] = None) -> FastAPI:
    database = database or Database.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_database = not database.is_open
        if owns_database:
            database.open()
        app.state.db = database
        logger.info(f"Starting {settings.PROJECT_NAME}")
        logger.info(f"Environment: {settings.ENVIRONMENT}")
        logger.info(f"API V1 prefix: {settings.API_V1_STR}")
        try:
            yield
        finally:
            if owns_database:
                database.close()
            logger.info("Shutdown complete")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        openapi_url=f"{settings.API_V1_STR}/openapi.json",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,  # Must be False when using allow_origins=["*"]
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Process-Time"],
        max_age=3600,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next: Callable) -> Response:
        """Log all requests with timing"""
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        logger.info(
            f"{request.method} {request.url.path} - "
            f"Status: {response.status_code} - "
            f"Time: {process_time:.4f}s"
        )
        response.headers["X-Process-Time"] = str(process_time)
        return response

    # Error handlers
    @app.exception_handler(AssetTrackerError)
    async def asset_tracker_error_handler(request: Request, exc: AssetTrackerError):
        logger.warning(f"{request.method} {request.url.path} - {exc.code}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        messages = []
        for error in exc.errors():
            location = ".".join(str(part) for part in error["loc"] if part != "body")
            messages.append(f"{location}: {error['msg']}" if location else error["msg"])
        return JSONResponse(status_code=400, content={"error": "; ".join(messages)})

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception):
        """Handle internal server errors"""
        logger.exception(f"Internal server error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    # Include API router
    app.include_router(api_router, prefix=settings.API_V1_STR)

    # Basic routes
    @app.get("/")
    def read_root():
        return {
            "message": f"Welcome to {settings.PROJECT_NAME}",
            "version": "0.1.0",
            "environment": settings.ENVIRONMENT,
            "docs_url": "/docs",
            "status": "running",
        }

    @app.get("/health")
    def health_check(request: Request):
        """Health check endpoint"""
        try:
            with request.app.state.db.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return {
                "status": "healthy",
                "environment": settings.ENVIRONMENT,
                "database": "connected",
                "timestamp": time.time(),
            }
        except Exception as e:
            logger.error(f"Health check failed: {e}")
            return {
                "status": "unhealthy",
                "environment": settings.ENVIRONMENT,
                "database": f"error: {str(e)}",
                "timestamp": time.time(),
            }

    return app


app = create_app()

# For local development
if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    host = "0.0.0.0" if settings.is_production else "127.0.0.1"

    logger.info(f"Starting server on {host}:{port}")
    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=settings.LOG_LEVEL.lower(),
    )
