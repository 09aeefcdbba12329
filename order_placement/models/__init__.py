from .customer import Customer
from .item import Item
from .order import Order
from .order_detail import OrderDetail

__all__ = [
    "Customer",
    "Item",
    "Order",
    "OrderDetail"
]
