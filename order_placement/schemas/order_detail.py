from pydantic import BaseModel, StrictInt
from typing import Optional


class OrderDetailCreate(BaseModel):
    """One requested line: item code and quantity"""
    code: Optional[str] = None
    qty: Optional[StrictInt] = None

    class Config:
        frozen = True
