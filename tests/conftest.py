"""Shared pytest fixtures for orderdesk tests."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from orderdesk.db.schema import Base
from orderdesk.models.domain import OrderEntity


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def session(engine):
    """Create a database session for testing."""
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


def make_orders(*rows: tuple[str, int, float]) -> list[OrderEntity]:
    """Build OrderEntity values with sequential ids from (product, qty, price)."""
    return [
        OrderEntity(id=i, product=product, qty=qty, price=price)
        for i, (product, qty, price) in enumerate(rows, start=1)
    ]
