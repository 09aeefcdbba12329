from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession
from contextlib import asynccontextmanager
import logging

from .config import settings
from .database import engine, Base, get_db, check_connection
from .exceptions import OrderPlacementError
from .api import api_router
from . import models  # noqa: F401  registers the tables on Base.metadata

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown"""
    logger.info("🚀 Starting Order Placement Service...")

    try:
        if settings.create_tables:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info("✅ Database tables created")

        logger.info("🎉 Order Placement Service started successfully!")

    except Exception as e:
        logger.error(f"❌ Failed to start Order Placement Service: {e}")
        raise

    yield

    logger.info("🛑 Shutting down Order Placement Service...")
    await engine.dispose()
    logger.info("✅ Database connection closed")


app = FastAPI(
    title=settings.app_name,
    description="Places customer orders and decrements item stock",
    version=settings.version,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/health")
async def health_check():
    """Service liveness"""
    return {
        "status": "healthy",
        "service": "order-placement-service",
        "version": settings.version
    }


@app.get("/health/ready")
async def readiness_check(db: AsyncSession = Depends(get_db)):
    """Checks that the database answers"""
    try:
        if await check_connection(db):
            return {
                "status": "ready",
                "service": "order-placement-service"
            }
    except Exception as e:
        logger.error(f"❌ Readiness check failed: {e}")
    raise HTTPException(status_code=503, detail="Service not ready")


@app.get("/")
async def root():
    return {
        "message": "Order Placement Service API",
        "version": settings.version,
        "docs": "/docs",
        "health": "/health"
    }


@app.exception_handler(OrderPlacementError)
async def order_placement_exception_handler(request: Request, exc: OrderPlacementError):
    if exc.status_code >= 500:
        logger.error(f"❌ {request.method} {request.url.path} failed: {exc.__cause__ or exc}")
    else:
        logger.warning(f"⚠️ {request.method} {request.url.path} rejected: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    """Payloads that cannot be decoded into an order are a Bad Request, not a 422"""
    errors = exc.errors()
    if not errors or errors[0].get("type") == "json_invalid":
        message = "Invalid JSON"
    else:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"Malformed order payload: {location}: {first.get('msg')}" if location \
            else f"Malformed order payload: {first.get('msg')}"
    logger.warning(f"⚠️ {request.method} {request.url.path} undecodable: {message}")
    return JSONResponse(status_code=400, content={"detail": message})


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Anything unexpected is logged and hidden behind a generic 500"""
    logger.error(f"❌ Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": OrderPlacementError.default_message}
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "order_placement.main:app",
        host="0.0.0.0",
        port=8002,
        reload=settings.debug
    )
