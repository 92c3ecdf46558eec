from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .models import OrderStatus, PaymentMethod, PaymentStatus

# Bounds of a signed 64-bit INTEGER column.
DB_INT_MAX = 2**63 - 1
DB_INT_MIN = -(2**63)


def as_utc(value: datetime) -> datetime:
    """SQLite drops the offset on stored timestamps; they are written as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class CartLine(BaseModel):
    id: int
    quantity: int

    @field_validator("quantity")
    @classmethod
    def check_quantity(cls, value: int) -> int:
        if value < 1:
            raise ValueError("Quantity must be at least 1")
        if value > DB_INT_MAX:
            raise ValueError("Quantity is too large")
        return value


class OrderCreate(BaseModel):
    # Field order is the order constraints are reported in.
    customer_name: str
    customer_phone: str
    customer_address: str
    items: List[CartLine]
    payment_method: PaymentMethod

    @field_validator("customer_name")
    @classmethod
    def check_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Name is required")
        return value

    @field_validator("customer_phone")
    @classmethod
    def check_phone(cls, value: str) -> str:
        if len(value) < 10:
            raise ValueError("Valid phone number is required")
        return value

    @field_validator("customer_address")
    @classmethod
    def check_address(cls, value: str) -> str:
        if len(value) < 5:
            raise ValueError("Address must be complete")
        return value

    @field_validator("items")
    @classmethod
    def check_items(cls, value: List[CartLine]) -> List[CartLine]:
        if not value:
            raise ValueError("Cart cannot be empty")
        return value


class OrderCreated(BaseModel):
    order_id: str
    total_amount: int


class OrderStatusRead(BaseModel):
    """Public status view. Customer contact fields are deliberately absent."""

    id: str
    status: OrderStatus
    total_amount: int
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def created_at_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class OrderLineRead(BaseModel):
    name: str
    quantity: int
    price: int


class OrderRead(BaseModel):
    id: str
    customer_name: str
    customer_phone: str
    customer_address: str
    total_amount: int
    status: OrderStatus
    payment_status: PaymentStatus
    payment_method: PaymentMethod
    created_at: datetime
    items: List[OrderLineRead]

    @field_validator("created_at")
    @classmethod
    def created_at_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class OrderStatusUpdate(BaseModel):
    status: OrderStatus


class MenuItemWrite(BaseModel):
    name: str = Field(min_length=1)
    description: str = ""
    price: int = Field(ge=DB_INT_MIN, le=DB_INT_MAX)
    category: str = ""
    image_url: Optional[str] = None
    is_veg: bool = False
    is_available: bool = False

    @field_validator("is_veg", "is_available", mode="before")
    @classmethod
    def coerce_flag(cls, value):
        if value is None:
            return False
        return value


class MenuItemRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    price: int
    category: str
    image_url: Optional[str] = None
    is_veg: bool
    is_available: bool


class LoginRequest(BaseModel):
    username: str
    password: str


class LoginResponse(BaseModel):
    success: bool = True
    token: str


class OrderSubmitted(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    order_id: str = Field(alias="orderId")
    total_amount: int = Field(alias="totalAmount")


class ActionResult(BaseModel):
    success: bool = True
