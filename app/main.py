"""
app/main.py

Purpose: Application entry point

- Initializes FastAPI app
- Loads configuration and logging
- Registers API routes and error handlers
- No business logic should be written here
- Manages application lifecycle (startup/shutdown)
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import time

from app.core.config import settings, validate_settings
from app.core.errors import add_exception_handlers
from app.core.logging import setup_logging, get_logger
from app.db.memory import init_storage, close_storage, check_storage_health, get_storage
from app.api import clients, dashboard, kyc, payments, reminders, reports
from app.api import settings as firm_settings

# Initialize logging first
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    # Startup
    logger.info("🚀 Starting TaxFlow application...")

    try:
        logger.info("Validating configuration...")
        validate_settings()
        logger.info("✅ Configuration validated")

        init_storage()

        if not check_storage_health():
            logger.warning("⚠️ Store health check failed during startup")
        else:
            logger.info("✅ Store health check passed")

        logger.info("🎉 TaxFlow application started successfully!")
        logger.info(f"Environment: {settings.ENVIRONMENT}")
        logger.info(f"Debug Mode: {settings.DEBUG}")

    except Exception as e:
        logger.critical(f"Failed to start application: {str(e)}", exc_info=True)
        raise

    yield  # Application runs here

    # Shutdown
    logger.info("🛑 Shutting down TaxFlow application...")
    close_storage()
    logger.info("👋 TaxFlow application shut down successfully")


# Create FastAPI app with lifespan
app = FastAPI(
    title=f"{settings.APP_NAME} - Practice Management",
    description="Client, KYC, fee and compliance deadline tracking for tax practices",
    version=settings.APP_VERSION,
    lifespan=lifespan,
    debug=settings.DEBUG,
    docs_url="/docs" if settings.is_development else None,  # Disable docs in production
    redoc_url="/redoc" if settings.is_development else None,
)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request timing middleware
@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    """Add processing time header to all responses."""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)

    if process_time > settings.SLOW_REQUEST_SECONDS:
        logger.warning(
            f"Slow request detected: {request.method} {request.url.path}",
            extra={"method": request.method, "path": request.url.path, "process_time": process_time}
        )

    return response


add_exception_handlers(app)

# Register API routes
app.include_router(dashboard.router, prefix=settings.API_PREFIX, tags=["Dashboard"])
app.include_router(clients.router, prefix=settings.API_PREFIX, tags=["Clients"])
app.include_router(kyc.router, prefix=settings.API_PREFIX, tags=["KYC"])
app.include_router(payments.router, prefix=settings.API_PREFIX, tags=["Payments"])
app.include_router(reminders.router, prefix=settings.API_PREFIX, tags=["Reminders"])
app.include_router(firm_settings.router, prefix=settings.API_PREFIX, tags=["Settings"])
app.include_router(reports.router, prefix=settings.API_PREFIX, tags=["Reports"])


# Root endpoint
@app.get("/", tags=["Health"])
async def root():
    """Root endpoint - basic info."""
    return {
        "name": f"{settings.APP_NAME} API",
        "version": settings.APP_VERSION,
        "description": "Practice management for tax consultants",
        "status": "running",
        "environment": settings.ENVIRONMENT
    }


# Health check endpoint
@app.get("/health", tags=["Health"])
async def health_check():
    """
    Health check endpoint.
    Reports store status and record counts.
    """
    health_status = {
        "status": "healthy",
        "timestamp": time.time(),
        "environment": settings.ENVIRONMENT,
        "version": settings.APP_VERSION,
        "checks": {}
    }

    store_healthy = check_storage_health()
    health_status["checks"]["store"] = "healthy" if store_healthy else "unhealthy"

    if store_healthy:
        health_status["records"] = get_storage().stats()
    else:
        health_status["status"] = "unhealthy"

    status_code = 200 if health_status["status"] == "healthy" else 503
    return JSONResponse(content=health_status, status_code=status_code)


# Readiness probe (for Kubernetes/orchestration)
@app.get("/ready", tags=["Health"])
async def readiness_check():
    """
    Readiness probe - indicates if app is ready to receive traffic.
    """
    if check_storage_health():
        return {"status": "ready"}
    return JSONResponse(
        status_code=503,
        content={"status": "not_ready", "reason": "store_unavailable"}
    )


# Liveness probe (for Kubernetes/orchestration)
@app.get("/live", tags=["Health"])
async def liveness_check():
    """
    Liveness probe - indicates if app is alive.
    """
    return {"status": "alive"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
        log_level=settings.LOG_LEVEL.lower()
    )
