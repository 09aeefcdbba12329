from fastapi import APIRouter
from .routes import orders_router
from ..config import settings

# Main API router
api_router = APIRouter(prefix=settings.api_prefix)

api_router.include_router(orders_router)

__all__ = ["api_router"]
