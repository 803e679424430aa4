"""
Pytest configuration shared by all test modules.

Environment variables are set before anything from ``app`` is imported so
that ``Settings`` picks up an in-memory database and no rate limiting.
"""

import os

os.environ.setdefault("ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.repositories.memory import InMemoryRepository
from app.repositories.sql import SqlAlchemyRepository


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def db_session(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    yield session
    session.close()


@pytest.fixture(params=["sqlalchemy", "memory"])
def repo(request, db_session):
    """Every service test runs once per storage backend."""
    if request.param == "memory":
        return InMemoryRepository()
    return SqlAlchemyRepository(db_session)


@pytest.fixture()
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def customer(repo):
    from app.schemas.customer import CustomerCreate
    from app.services.customers import create_customer

    return create_customer(
        repo,
        CustomerCreate(
            name="Test Customer",
            email="test@example.com",
            phone="123-456-7890",
            company="Test Company",
        ),
    )
