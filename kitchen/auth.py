from __future__ import annotations

import logging
import secrets
from typing import Annotated

from fastapi import Depends, Header
from sqlalchemy import func
from sqlmodel import Session, select

from . import errors
from .config import Settings, get_app_settings
from .crud import commit
from .models import AdminAccount

logger = logging.getLogger(__name__)


def ensure_admin_account(session: Session, username: str, secret: str) -> None:
    existing_count = session.exec(select(func.count(AdminAccount.id))).one()
    if existing_count:
        return
    session.add(AdminAccount(username=username, secret=secret))
    commit(session, "seed admin account")
    logger.info("Seeded admin account %r", username)


def authenticate(session: Session, username: str, secret: str, token: str) -> str:
    # Plain comparison against the stored secret and a static token.
    # Hashing and signed expiring tokens are not part of this service yet.
    account = session.exec(
        select(AdminAccount).where(AdminAccount.username == username)
    ).first()
    if account is None or not secrets.compare_digest(account.secret.encode(), secret.encode()):
        logger.warning("Rejected admin login for %r", username)
        raise errors.UnauthorizedError("Invalid credentials")
    logger.info("Admin %r logged in", username)
    return token


def verify_admin_token(
    settings: Annotated[Settings, Depends(get_app_settings)],
    authorization: Annotated[str | None, Header()] = None,
) -> None:
    if not settings.require_admin_token:
        return
    scheme, _, credentials = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or not secrets.compare_digest(
        credentials.encode(), settings.admin_token.encode()
    ):
        raise errors.UnauthorizedError("Invalid admin token")


AdminGuard = Annotated[None, Depends(verify_admin_token)]
