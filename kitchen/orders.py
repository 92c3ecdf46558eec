"""Order creation and status transitions.

Orders are priced from the catalog at submission time and written together
with their lines in a single commit. Line prices are frozen copies: later
catalog edits never change an existing order's lines or total.
"""
from __future__ import annotations

import logging
from typing import Any, List, Mapping

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import selectinload
from sqlmodel import Session, select

from . import errors, schemas
from .crud import commit, get_menu_item
from .models import Order, OrderLine, OrderStatus

logger = logging.getLogger(__name__)


def _parse_order(payload: schemas.OrderCreate | Mapping[str, Any]) -> schemas.OrderCreate:
    if isinstance(payload, schemas.OrderCreate):
        return payload
    try:
        return schemas.OrderCreate.model_validate(payload)
    except PydanticValidationError as exc:
        raise errors.from_pydantic(exc) from exc


def submit_order(
    session: Session,
    payload: schemas.OrderCreate | Mapping[str, Any],
) -> schemas.OrderCreated:
    order_in = _parse_order(payload)

    total_amount = 0
    lines: List[OrderLine] = []
    for cart_line in order_in.items:
        # Availability is a listing filter only; unavailable items can still be ordered.
        menu_item = get_menu_item(session, cart_line.id)
        if menu_item is None:
            raise errors.InvalidReferenceError(cart_line.id)
        total_amount += menu_item.price * cart_line.quantity
        lines.append(
            OrderLine(
                menu_item_id=menu_item.id,
                quantity=cart_line.quantity,
                price_at_time=menu_item.price,
            )
        )

    if not schemas.DB_INT_MIN <= total_amount <= schemas.DB_INT_MAX:
        raise errors.ValidationError("items", "Order total is too large")

    order = Order(
        customer_name=order_in.customer_name,
        customer_phone=order_in.customer_phone,
        customer_address=order_in.customer_address,
        total_amount=total_amount,
        payment_method=order_in.payment_method,
    )
    order_id = order.id
    order.lines = lines
    session.add(order)
    commit(session, "create order")

    logger.info(
        "Created order %s with %d line(s), total %d, payment %s",
        order_id,
        len(lines),
        total_amount,
        order_in.payment_method.value,
    )
    return schemas.OrderCreated(order_id=order_id, total_amount=total_amount)


def get_order_status(session: Session, order_id: str) -> schemas.OrderStatusRead:
    order = session.get(Order, order_id)
    if order is None:
        raise errors.NotFoundError("Order not found")
    return schemas.OrderStatusRead(
        id=order.id,
        status=order.status,
        total_amount=order.total_amount,
        created_at=order.created_at,
    )


def list_orders_with_lines(session: Session) -> List[schemas.OrderRead]:
    statement = (
        select(Order)
        .options(selectinload(Order.lines).selectinload(OrderLine.menu_item))
        .order_by(Order.created_at.desc())
    )
    return [_to_order_read(order) for order in session.exec(statement)]


def set_order_status(session: Session, order_id: str, status: OrderStatus | str) -> None:
    """Apply ``status`` unconditionally.

    Any status may follow any other, including moving backwards, so an
    operator can correct mistakes. The previous value is not kept.
    """
    try:
        update = schemas.OrderStatusUpdate(status=status)
    except PydanticValidationError as exc:
        raise errors.from_pydantic(exc) from exc

    order = session.get(Order, order_id)
    if order is None:
        raise errors.NotFoundError("Order not found")
    previous = order.status
    order.status = update.status
    session.add(order)
    commit(session, "update order status")
    logger.info("Order %s status %s -> %s", order_id, previous.value, update.status.value)


def _to_order_read(order: Order) -> schemas.OrderRead:
    return schemas.OrderRead(
        id=order.id,
        customer_name=order.customer_name,
        customer_phone=order.customer_phone,
        customer_address=order.customer_address,
        total_amount=order.total_amount,
        status=order.status,
        payment_status=order.payment_status,
        payment_method=order.payment_method,
        created_at=order.created_at,
        items=[
            schemas.OrderLineRead(
                name=line.menu_item.name,
                quantity=line.quantity,
                price=line.price_at_time,
            )
            for line in order.lines
        ],
    )
