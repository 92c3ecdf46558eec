from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import List

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from . import auth, crud, errors, orders, schemas
from .auth import AdminGuard
from .config import Settings, get_app_settings, get_settings
from .database import create_db_engine, get_session, init_db

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = create_db_engine(settings.database_url)
        init_db(engine)
        with Session(engine) as session:
            if settings.seed_menu:
                crud.ensure_default_menu_items(session)
            auth.ensure_admin_account(session, settings.admin_username, settings.admin_password)
        app.state.engine = engine
        logger.info("Store ready at %s", engine.url.render_as_string(hide_password=True))
        try:
            yield
        finally:
            engine.dispose()

    app = FastAPI(title="Kitchen Orders", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_error_handlers(app)
    _register_routes(app)
    return app


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(errors.KitchenError)
    async def kitchen_error_handler(request: Request, exc: errors.KitchenError):
        body = {"detail": exc.message}
        if isinstance(exc, errors.ValidationError):
            body["field"] = exc.field
        return JSONResponse(status_code=exc.status_code, content=body)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        error = errors.first_validation_error(list(exc.errors()))
        return JSONResponse(
            status_code=error.status_code,
            content={"detail": error.message, "field": error.field},
        )

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("Store failure on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )


def _register_routes(app: FastAPI) -> None:
    @app.get("/health")
    def health_check() -> dict:
        return {"status": "ok"}

    # -------------------------
    # Storefront
    # -------------------------

    @app.get("/api/menu", response_model=List[schemas.MenuItemRead])
    def list_menu(session: Session = Depends(get_session)):
        return crud.list_menu_items(session, available_only=True)

    @app.get("/api/orders/{order_id}", response_model=schemas.OrderStatusRead)
    def get_order_status(order_id: str, session: Session = Depends(get_session)):
        return orders.get_order_status(session, order_id)

    @app.post(
        "/api/orders",
        response_model=schemas.OrderSubmitted,
        status_code=status.HTTP_201_CREATED,
    )
    def create_order(payload: schemas.OrderCreate, session: Session = Depends(get_session)):
        created = orders.submit_order(session, payload)
        return schemas.OrderSubmitted(order_id=created.order_id, total_amount=created.total_amount)

    # -------------------------
    # Admin
    # -------------------------

    @app.post("/api/admin/login", response_model=schemas.LoginResponse)
    def admin_login(
        payload: schemas.LoginRequest,
        settings: Settings = Depends(get_app_settings),
        session: Session = Depends(get_session),
    ):
        token = auth.authenticate(session, payload.username, payload.password, settings.admin_token)
        return schemas.LoginResponse(token=token)

    @app.get("/api/admin/orders", response_model=List[schemas.OrderRead])
    def admin_list_orders(_: AdminGuard, session: Session = Depends(get_session)):
        return orders.list_orders_with_lines(session)

    @app.patch("/api/admin/orders/{order_id}/status", response_model=schemas.ActionResult)
    def admin_set_order_status(
        order_id: str,
        payload: schemas.OrderStatusUpdate,
        _: AdminGuard,
        session: Session = Depends(get_session),
    ):
        orders.set_order_status(session, order_id, payload.status)
        return schemas.ActionResult()

    @app.get("/api/admin/menu", response_model=List[schemas.MenuItemRead])
    def admin_list_menu(_: AdminGuard, session: Session = Depends(get_session)):
        return crud.list_menu_items(session)

    @app.post(
        "/api/admin/menu",
        response_model=schemas.MenuItemRead,
        status_code=status.HTTP_201_CREATED,
    )
    def admin_create_menu_item(
        payload: schemas.MenuItemWrite,
        _: AdminGuard,
        session: Session = Depends(get_session),
    ):
        return crud.create_menu_item(session, payload)

    @app.put("/api/admin/menu/{item_id}", response_model=schemas.MenuItemRead)
    def admin_replace_menu_item(
        item_id: int,
        payload: schemas.MenuItemWrite,
        _: AdminGuard,
        session: Session = Depends(get_session),
    ):
        return crud.replace_menu_item(session, item_id, payload)


if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", 8000))
    uvicorn.run("kitchen.main:create_app", factory=True, host="0.0.0.0", port=port)
