# payments/models.py
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PaymentType(str, Enum):
    CASH = "CASH"
    CARD = "CARD"


class BillStatus(str, Enum):
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"


class _CamelModel(BaseModel):
    # wire format is camelCase, python attributes stay snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Item(_CamelModel):
    id: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    price: float = 0.0
    quantity: int = 1


class Payment(_CamelModel):
    id: Optional[str] = None
    paid_amount: float
    items: List[Item] = Field(default_factory=list)
    type: PaymentType = PaymentType.CARD


class Bill(_CamelModel):
    model_config = ConfigDict(frozen=True)

    payment_id: str
    amount: float
    status: BillStatus
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class PaymentRecord(BaseModel):
    """What the in-memory store keeps per payment id."""
    model_config = ConfigDict(frozen=True)

    payment: Payment
    bill: Bill
