"""Shared fixtures for the test suite."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from biztime.core.db import Base, get_db
from biztime.main import app
from biztime.models.company_model import Company


@pytest.fixture
def engine():
    """Fresh in-memory SQLite database shared by every session in a test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    """TestClient wired to the test database instead of DATABASE_URL."""

    def _get_test_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_test_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def test_company(db_session):
    """The company every route test starts from."""
    company = Company(code="apple", name="Apple Computer", description="Maker of OSX.")
    db_session.add(company)
    db_session.commit()
    return {"code": "apple", "name": "Apple Computer", "description": "Maker of OSX."}
