# tests/conftest.py
import os
import tempfile

# --- Temporary SQLite DB file for the whole test session ---
# Must be in place before contact_api.settings reads the environment.
_fd, TMP_DB_PATH = tempfile.mkstemp(suffix=".db")
os.close(_fd)
os.environ["DATABASE_URL"] = f"sqlite:///{TMP_DB_PATH}"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import text
from sqlalchemy.orm import sessionmaker

from contact_api.main import app
from contact_api.db import Base, get_db
from contact_api import db as db_module
from contact_api import models  # noqa: F401


@pytest.fixture(scope="session")
def engine():
    eng = db_module.engine
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()
    try:
        os.remove(TMP_DB_PATH)
    except Exception:
        pass


# --- Utility: clear tables (and reset autoincrement) ---
def _clear_all(db):
    db.execute(text("DELETE FROM messages"))
    db.execute(text("DELETE FROM users"))
    try:
        db.execute(text("DELETE FROM sqlite_sequence WHERE name IN ('messages', 'users')"))
    except Exception:
        # not critical if sqlite_sequence doesn't exist
        pass
    db.commit()


@pytest.fixture(scope="function")
def db_session(engine):
    TestingSession = sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)
    db = TestingSession()
    _clear_all(db)
    try:
        yield db
    finally:
        db.rollback()
        db.close()


# --- Override FastAPI's DB dependency to use our test session ---
@pytest.fixture(autouse=True)
def override_get_db(db_session):
    def _get_db():
        try:
            yield db_session
        finally:
            pass
    app.dependency_overrides[get_db] = _get_db
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def recaptcha_ok(monkeypatch):
    """Make every reCAPTCHA token pass."""
    from contact_api.routers import contact
    monkeypatch.setattr(contact, "verify_recaptcha", lambda token: True)


@pytest.fixture
def message_payload():
    return {
        "name": "Ana Ruiz",
        "email": "ana@example.com",
        "phone": "555-0101",
        "message": "Hello there",
        "accepted_terms": True,
        "token": "tok-123",
    }
