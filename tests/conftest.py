"""
Pytest fixtures for the SupplySight API test suite.

Every test gets a fresh in-memory SQLite database seeded with three
warehouses, four products and twenty days of KPI samples.
"""
import os
from datetime import date, timedelta

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.config.database import get_db
from app.main import app
from app.shared.database.models import Base, Warehouse, Product, Kpi


KPI_START = date(2024, 1, 1)
KPI_DAYS = 20


@pytest.fixture
def engine():
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
def session_factory(engine):
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    _seed(factory)
    return factory


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def _seed(factory):
    session = factory()
    try:
        session.add_all([
            Warehouse(code="W1", name="Central", city="Bangalore", country="India"),
            Warehouse(code="W2", name="North", city="Delhi", country="India"),
            Warehouse(code="W3", name="Annex", city="Pune", country="India"),
        ])
        session.flush()
        session.add_all([
            Product(id="P-1", name="Widget", sku="WID-001", warehouse="W1", stock=100, demand=40),
            Product(id="P-2", name="Gadget", sku="GAD-002", warehouse="W1", stock=10, demand=5),
            Product(id="P-3", name="Bolt", sku="BLT-003", warehouse="W2", stock=50, demand=50),
            Product(id="P-4", name="Anchor", sku="ANC-004", warehouse="W3", stock=5, demand=30),
        ])
        session.add_all([
            Kpi(date=KPI_START + timedelta(days=i), stock=100 + i, demand=90)
            for i in range(KPI_DAYS)
        ])
        session.commit()
    finally:
        session.close()
