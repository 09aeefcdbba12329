from sqlalchemy import Column, String, Integer, Numeric, CheckConstraint
from ..database import Base


class Item(Base):
    __tablename__ = "item"
    __table_args__ = (
        CheckConstraint("qty >= 0", name="ck_item_qty_non_negative"),
    )

    code = Column(String(10), primary_key=True)  # I001
    description = Column(String(255), nullable=True)

    # Stock on hand and current price
    qty = Column(Integer, nullable=False)
    unit_price = Column(Numeric(10, 2), nullable=False)
