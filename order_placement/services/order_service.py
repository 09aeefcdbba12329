from typing import Dict, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import insert, select, update
from datetime import date
from decimal import Decimal

from ..exceptions import (
    BusinessRuleError,
    CustomerNotFoundError,
    InsufficientStockError,
    ItemNotFoundError,
    PersistenceError,
)
from ..models.customer import Customer
from ..models.item import Item
from ..models.order import Order
from ..models.order_detail import OrderDetail
from ..schemas.order import OrderCreate, OrderResponse
from ..validation import validate_order_request
import logging

logger = logging.getLogger(__name__)


class OrderService:
    """Places orders against the customer/item tables"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_customer(self, customer_id: str) -> Optional[Customer]:
        result = await self.db.execute(select(Customer).where(Customer.id == customer_id))
        return result.scalar_one_or_none()

    async def get_item(self, code: str) -> Optional[Item]:
        result = await self.db.execute(select(Item).where(Item.code == code))
        return result.scalar_one_or_none()

    async def place_order(self, order: OrderCreate) -> OrderResponse:
        """
        Validates the request, checks the customer and stock, then writes the
        order, its details and the stock decrements as one unit.

        Raises:
            OrderValidationError: the request breaks a format rule
            BusinessRuleError: unknown customer/item or not enough stock
            PersistenceError: a write failed; everything was rolled back
        """
        validate_order_request(order)

        customer = await self.get_customer(order.customerId)
        if customer is None:
            raise CustomerNotFoundError(order.customerId)
        customer_name = customer.name

        prices = await self._snapshot_prices(order)

        order_date = date.today()
        total = Decimal("0")

        try:
            new_order = Order(date=order_date, customer_id=order.customerId)
            self.db.add(new_order)
            await self.db.flush()  # assigns the order id

            order_id = new_order.id
            if order_id is None:
                raise PersistenceError("Failed to insert the order")

            for line in order.orderDetails:
                unit_price = prices[line.code]

                result = await self.db.execute(
                    insert(OrderDetail).values(
                        order_id=order_id,
                        item_code=line.code,
                        qty=line.qty,
                        unit_price=unit_price
                    )
                )
                if result.rowcount != 1:
                    raise PersistenceError("Failed to insert an order detail")

                # Re-checks the stock under the transaction instead of
                # trusting the snapshot
                result = await self.db.execute(
                    update(Item)
                    .where(Item.code == line.code, Item.qty >= line.qty)
                    .values(qty=Item.qty - line.qty)
                    .execution_options(synchronize_session=False)
                )
                if result.rowcount != 1:
                    raise InsufficientStockError(line.code)

                total += unit_price * line.qty

            await self.db.commit()

        except BusinessRuleError as e:
            await self.db.rollback()
            logger.warning(f"⚠️ Order for customer {order.customerId} rolled back: {e.message}")
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(f"❌ Error placing order for customer {order.customerId}: {e}", exc_info=True)
            raise PersistenceError() from e

        logger.info(f"✅ Order {order_id} placed for customer {order.customerId}, total {total}")

        return OrderResponse(
            orderId=order_id,
            orderDate=order_date,
            customerId=order.customerId,
            customerName=customer_name,
            numOfItems=len(order.orderDetails),
            total=total
        )

    async def _snapshot_prices(self, order: OrderCreate) -> Dict[str, Decimal]:
        """Reads every line's item and captures its price, failing on the first unusable line"""
        prices: Dict[str, Decimal] = {}

        for line in order.orderDetails:
            item = await self.get_item(line.code)
            if item is None:
                raise ItemNotFoundError(line.code)
            if item.qty < line.qty:
                raise InsufficientStockError(line.code)
            prices[line.code] = Decimal(item.unit_price)

        return prices
