from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from ..database import Base


class Customer(Base):
    __tablename__ = "customer"

    id = Column(String(10), primary_key=True)  # C001
    name = Column(String(100), nullable=False)
    address = Column(String(255), nullable=True)

    orders = relationship("Order", back_populates="customer")
