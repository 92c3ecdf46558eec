import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from sqlalchemy import DateTime
from sqlmodel import Field, Relationship, SQLModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderStatus(str, Enum):
    pending = "pending"
    confirmed = "confirmed"
    preparing = "preparing"
    out_for_delivery = "out_for_delivery"
    delivered = "delivered"
    cancelled = "cancelled"


class PaymentStatus(str, Enum):
    pending = "pending"
    paid = "paid"
    failed = "failed"


class PaymentMethod(str, Enum):
    cod = "cod"
    online = "online"


class MenuItem(SQLModel, table=True):
    __tablename__ = "menu_items"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    description: str = ""
    # minor currency units
    price: int = 0
    category: str = Field(default="", index=True)
    image_url: Optional[str] = None
    is_veg: bool = True
    is_available: bool = Field(default=True, index=True)
    created_at: datetime = Field(default_factory=_utcnow, sa_type=DateTime(timezone=True))


class Order(SQLModel, table=True):
    __tablename__ = "orders"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    customer_name: str
    customer_phone: str
    customer_address: str
    total_amount: int = 0
    status: OrderStatus = Field(default=OrderStatus.pending, index=True)
    payment_status: PaymentStatus = PaymentStatus.pending
    payment_method: PaymentMethod = PaymentMethod.cod
    created_at: datetime = Field(
        default_factory=_utcnow, sa_type=DateTime(timezone=True), index=True
    )

    lines: List["OrderLine"] = Relationship(
        back_populates="order",
        sa_relationship_kwargs={"order_by": "OrderLine.id"},
    )


class OrderLine(SQLModel, table=True):
    __tablename__ = "order_lines"

    id: Optional[int] = Field(default=None, primary_key=True)
    order_id: str = Field(foreign_key="orders.id", index=True)
    menu_item_id: int = Field(foreign_key="menu_items.id")
    quantity: int
    price_at_time: int

    order: Optional[Order] = Relationship(back_populates="lines")
    menu_item: Optional[MenuItem] = Relationship()


class AdminAccount(SQLModel, table=True):
    __tablename__ = "admin_accounts"

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(index=True, sa_column_kwargs={"unique": True})
    secret: str
    created_at: datetime = Field(default_factory=_utcnow, sa_type=DateTime(timezone=True))


__all__ = [
    "AdminAccount",
    "MenuItem",
    "Order",
    "OrderLine",
    "OrderStatus",
    "PaymentMethod",
    "PaymentStatus",
]
