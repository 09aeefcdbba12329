"""Errors raised while placing an order, each carrying its HTTP status."""


class OrderPlacementError(Exception):
    status_code = 500
    default_message = "Failed to place the order"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class OrderDecodeError(OrderPlacementError):
    """Payload could not be read: wrong content type or malformed JSON"""
    status_code = 400
    default_message = "Invalid JSON"


class OrderValidationError(OrderPlacementError):
    """Payload decoded but breaks a request rule"""
    status_code = 400


class BusinessRuleError(OrderPlacementError):
    """Request refers to data the store cannot satisfy"""
    status_code = 400


class CustomerNotFoundError(BusinessRuleError):
    def __init__(self, customer_id: str):
        self.customer_id = customer_id
        super().__init__("Customer doesn't exist in the database")


class ItemNotFoundError(BusinessRuleError):
    def __init__(self, item_code: str):
        self.item_code = item_code
        super().__init__(f"Item {{{item_code}}} doesn't exist in the database")


class InsufficientStockError(BusinessRuleError):
    def __init__(self, item_code: str):
        self.item_code = item_code
        super().__init__(f"Not enough qty available for the item {{{item_code}}}")


class PersistenceError(OrderPlacementError):
    """A write in the atomic phase failed; the message never exposes the cause"""
    status_code = 500
