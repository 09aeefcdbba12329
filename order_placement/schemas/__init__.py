from .order import OrderCreate, OrderResponse
from .order_detail import OrderDetailCreate

__all__ = [
    "OrderCreate",
    "OrderResponse",
    "OrderDetailCreate"
]
