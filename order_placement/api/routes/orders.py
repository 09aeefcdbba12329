from fastapi import APIRouter, Depends, HTTPException, status

from ...schemas.order import OrderCreate, OrderResponse
from ...services.order_service import OrderService
from ..dependencies import get_order_service, require_json_content_type
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post(
    "",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_json_content_type)]
)
@router.post(
    "/",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_json_content_type)],
    include_in_schema=False
)
async def place_order(
        order: OrderCreate,
        order_service: OrderService = Depends(get_order_service)
):
    """Place a new order and decrement the stock of every ordered item"""
    logger.info(f"🛒 Placing order for customer {order.customerId}")
    return await order_service.place_order(order)


@router.post("/{sub_path:path}", include_in_schema=False)
async def order_sub_resource(sub_path: str):
    """Only the collection root accepts new orders"""
    raise HTTPException(status_code=status.HTTP_501_NOT_IMPLEMENTED, detail="Not Implemented")
