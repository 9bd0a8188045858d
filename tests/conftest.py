"""
Wspolne fixtures dla testow.

Baza: SQLite w pamieci (StaticPool) podstawiona pod get_db.
"""

import os

# Ustawienia musza byc gotowe przed pierwszym importem smashfun
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ["SUPABASE_URL"] = ""
os.environ["SUPABASE_ANON_KEY"] = ""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from smashfun import models  # noqa: F401
from smashfun.auth import close_session_store
from smashfun.database import Base, create_db_engine, get_db, init_db
from smashfun.seed import seed_demo_data


@pytest.fixture
def engine():
    """Swieza baza w pamieci dla kazdego testu."""
    engine = create_db_engine("sqlite://")
    init_db(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def seeded_db(db):
    """Baza z kontami admin/user, kodami promocyjnymi i rezerwacjami."""
    seed_demo_data(db)
    return db


@pytest.fixture
def app(session_factory):
    from smashfun.main import app

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app, seeded_db):
    return TestClient(app)


@pytest.fixture
def admin_client(client):
    """Klient zalogowany jako admin."""
    response = client.post("/api/auth/login", json={"username": "admin", "password": "admin123"})
    assert response.status_code == 200
    return client


@pytest.fixture(autouse=True)
def reset_session_store():
    """Sesja procesu nie przecieka miedzy testami."""
    yield
    close_session_store()
