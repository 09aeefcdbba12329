from sqlalchemy import Column, Date, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from ..database import Base


class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(Date, nullable=False)
    customer_id = Column(String(10), ForeignKey("customer.id"), nullable=False, index=True)

    customer = relationship("Customer", back_populates="orders")
    details = relationship("OrderDetail", back_populates="order", cascade="all, delete-orphan")
