"""Shared pytest fixtures: in-memory database, fixed clock, API client."""

import os

# Must happen before importing catalog_api, which reads settings at import time
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from collections.abc import Generator
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from catalog_api.api.dependencies.db import get_session
from catalog_api.core.clock import get_clock
from catalog_api.db.base import Base
from catalog_api.db.models.product import Product
from catalog_api.main import create_app
from catalog_api.repositories.product_repository import ProductRepository

FIXED_NOW = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


class FixedClock:
    def __init__(self, now: datetime = FIXED_NOW):
        self._now = now

    def now(self) -> datetime:
        return self._now


def product_payload(**overrides: Any) -> dict[str, Any]:
    payload = {
        "code": "A1",
        "name": "Widget",
        "description": "A small widget",
        "price": 9.99,
        "categoryId": 1,
        "stockQuantity": 5,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db_session(engine: Engine) -> Generator[Session, None, None]:
    session = sessionmaker(bind=engine, autoflush=False, autocommit=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def repository(db_session: Session) -> ProductRepository:
    return ProductRepository(db_session)


@pytest.fixture
def make_product(db_session: Session):
    """Insert a product row directly, bypassing the handlers."""

    def _make(**overrides: Any) -> Product:
        values = {
            "code": "P-1",
            "name": "Product",
            "description": None,
            "price": Decimal("10.00"),
            "category_id": 1,
            "stock_quantity": 1,
            "active": True,
            "created_at": FIXED_NOW,
        }
        values.update(overrides)
        product = Product(**values)
        db_session.add(product)
        db_session.commit()
        db_session.refresh(product)
        return product

    return _make


@pytest.fixture
def app(db_session: Session, clock: FixedClock) -> FastAPI:
    app = create_app()

    def override_session() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[get_session] = override_session
    app.dependency_overrides[get_clock] = lambda: clock
    return app


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(app) as client:
        yield client


@pytest.fixture
def payload():
    """Factory for valid create payloads in camelCase."""
    return product_payload
