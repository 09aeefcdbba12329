import re

from .exceptions import OrderValidationError
from .schemas.order import OrderCreate

CUSTOMER_ID_PATTERN = re.compile(r"C\d{3}", re.ASCII)
ITEM_CODE_PATTERN = re.compile(r"I\d{3}", re.ASCII)


def validate_order_request(order: OrderCreate) -> None:
    """
    Checks the request rules in order and raises OrderValidationError on the
    first one that fails. Every line is checked before the caller touches the
    database.
    """
    if order.customerId is None or not CUSTOMER_ID_PATTERN.fullmatch(order.customerId):
        raise OrderValidationError("Customer ID is empty or invalid")

    if not order.orderDetails:
        raise OrderValidationError("Order Details are empty or null")

    if any(line is None or line.code is None or line.qty is None for line in order.orderDetails):
        raise OrderValidationError("Null values are not allowed")

    if not all(ITEM_CODE_PATTERN.fullmatch(line.code) and line.qty > 0 for line in order.orderDetails):
        raise OrderValidationError("Either an item code or qty is invalid")
