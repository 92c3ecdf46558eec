from __future__ import annotations

import logging
from typing import Any, List, Mapping

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from . import errors, schemas
from .menu_data import DEFAULT_MENU_ITEMS
from .models import MenuItem

logger = logging.getLogger(__name__)


def commit(session: Session, action: str) -> None:
    """Commit the session or roll it back and raise StoreError."""
    try:
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Store failure while trying to %s", action)
        raise errors.StoreError(f"Failed to {action}") from exc
    except Exception:
        session.rollback()
        raise


def _parse_menu_item(data: schemas.MenuItemWrite | Mapping[str, Any]) -> schemas.MenuItemWrite:
    if isinstance(data, schemas.MenuItemWrite):
        return data
    try:
        return schemas.MenuItemWrite.model_validate(data)
    except PydanticValidationError as exc:
        raise errors.from_pydantic(exc) from exc


# -------------------------
# Menu operations
# -------------------------

def list_menu_items(session: Session, *, available_only: bool = False) -> List[MenuItem]:
    statement = select(MenuItem)
    if available_only:
        statement = statement.where(MenuItem.is_available.is_(True))
    statement = statement.order_by(MenuItem.id.asc())
    return list(session.exec(statement))


def get_menu_item(session: Session, item_id: int) -> MenuItem | None:
    # ids outside the INTEGER column range cannot exist
    if not schemas.DB_INT_MIN <= item_id <= schemas.DB_INT_MAX:
        return None
    return session.get(MenuItem, item_id)


def create_menu_item(session: Session, data: schemas.MenuItemWrite | Mapping[str, Any]) -> MenuItem:
    fields = _parse_menu_item(data)
    item = MenuItem(**fields.model_dump())
    session.add(item)
    commit(session, "create menu item")
    session.refresh(item)
    logger.info("Created menu item %s (%s)", item.id, item.name)
    return item


def replace_menu_item(
    session: Session,
    item_id: int,
    data: schemas.MenuItemWrite | Mapping[str, Any],
) -> MenuItem:
    fields = _parse_menu_item(data)
    item = get_menu_item(session, item_id)
    if item is None:
        raise errors.NotFoundError("Item not found")
    for key, value in fields.model_dump().items():
        setattr(item, key, value)
    session.add(item)
    commit(session, "update menu item")
    session.refresh(item)
    logger.info("Replaced menu item %s (%s)", item.id, item.name)
    return item


def ensure_default_menu_items(session: Session) -> None:
    existing_count = session.exec(select(func.count(MenuItem.id))).one()
    if existing_count:
        return
    for item in DEFAULT_MENU_ITEMS:
        session.add(MenuItem(is_available=True, **item))
    commit(session, "seed menu")
    logger.info("Seeded %d default menu items", len(DEFAULT_MENU_ITEMS))
