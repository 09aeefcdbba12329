from pydantic import BaseModel, field_serializer
from typing import List, Optional
from datetime import date
from decimal import Decimal

from .order_detail import OrderDetailCreate


class OrderCreate(BaseModel):
    """
    Incoming order payload.

    Fields are optional on purpose: presence and format rules are enforced by
    validate_order_request so that each rule reports its own message.
    """
    customerId: Optional[str] = None
    orderDetails: Optional[List[Optional[OrderDetailCreate]]] = None

    class Config:
        frozen = True


class OrderResponse(BaseModel):
    orderId: int
    orderDate: date
    customerId: str
    customerName: str
    numOfItems: int
    total: Decimal

    @field_serializer("total", when_used="json")
    def total_as_number(self, total: Decimal) -> float:
        # Numeric(10, 2) values survive the shortest float repr digit for digit
        return float(total)
