from sqlalchemy import Column, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship
from ..database import Base


class OrderDetail(Base):
    __tablename__ = "order_detail"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False, index=True)
    item_code = Column(String(10), ForeignKey("item.code"), nullable=False)

    qty = Column(Integer, nullable=False)
    unit_price = Column(Numeric(10, 2), nullable=False)  # price captured at order time

    order = relationship("Order", back_populates="details")
