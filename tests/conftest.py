"""Shared fixtures: in-memory SQLite, fake stores and a seeded app client."""

import os
import tempfile

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SALT"] = "test-salt"
os.environ.setdefault("SESSION_SECRET_KEY", "test-session-secret")
os.environ.setdefault("SITE_LOG_FILE", os.path.join(tempfile.mkdtemp(), "site.log"))

import pytest
from fastapi.testclient import TestClient

from webserver.database import Base, SessionLocal, engine
from webserver.models import Language
from webserver.site_service import SiteService
from webserver.stores import MemoryCookieJar, MemorySessionStore

TEST_SALT = "test-salt"


@pytest.fixture()
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def languages(db):
    """en enabled seq 2, fr disabled seq 1, de enabled seq 1."""
    db.add_all([
        Language(id="en", name="English", is_enabled=1, seq=2),
        Language(id="fr", name="Français", is_enabled=0, seq=1),
        Language(id="de", name="Deutsch", is_enabled=1, seq=1),
    ])
    db.commit()
    return ["de", "en"]


@pytest.fixture()
def session_store():
    return MemorySessionStore()


@pytest.fixture()
def cookies():
    return MemoryCookieJar()


@pytest.fixture()
def site(db, session_store, cookies):
    return SiteService(db, session_store, cookies, salt=TEST_SALT)


@pytest.fixture()
def client(db):
    from webserver.main import app
    from webserver.seed import seed_all

    seed_all(db, TEST_SALT)
    with TestClient(app) as test_client:
        yield test_client
