from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..exceptions import OrderDecodeError
from ..services.order_service import OrderService


async def get_order_service(
    db: AsyncSession = Depends(get_db)
) -> OrderService:
    """Dependency returning an OrderService bound to the request's session"""
    return OrderService(db)


def require_json_content_type(request: Request) -> None:
    """Rejects requests that do not declare a JSON body"""
    content_type = request.headers.get("content-type")
    if content_type is None or not content_type.startswith("application/json"):
        raise OrderDecodeError("Invalid JSON")
