from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from kitchen import crud
from kitchen.config import Settings
from kitchen.database import create_db_engine, init_db
from kitchen.main import create_app


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine) -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


@pytest.fixture
def menu(session: Session) -> dict:
    """Two available items priced 450 and 320."""
    risotto = crud.create_menu_item(
        session,
        {"name": "Risotto", "price": 450, "category": "Mains", "is_veg": True, "is_available": True},
    )
    wings = crud.create_menu_item(
        session,
        {"name": "Wings", "price": 320, "category": "Starters", "is_available": True},
    )
    return {"risotto": risotto.id, "wings": wings.id}


@pytest.fixture
def order_payload(menu: dict) -> dict:
    return {
        "customer_name": "Asha Rao",
        "customer_phone": "9876543210",
        "customer_address": "12 Lake Road, Pune",
        "items": [
            {"id": menu["risotto"], "quantity": 2},
            {"id": menu["wings"], "quantity": 1},
        ],
        "payment_method": "cod",
    }


@pytest.fixture
def make_settings():
    def _make(**overrides) -> Settings:
        values = {"database_url": "sqlite://", "log_level": "WARNING"}
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make


@pytest.fixture
def client(make_settings) -> Generator[TestClient, None, None]:
    app = create_app(make_settings())
    with TestClient(app) as test_client:
        yield test_client
