"""Pytest fixtures for the website backend."""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SESSION_SECRET"] = "test-session-secret"
os.environ.pop("ENV", None)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.services.content_repository import ContentRepository
from app.services.spaces_storage import get_image_store, random_object_key

PUBLIC_BASE = "https://cdn.example.test"


class FakeImageStore:
    """In-memory stand-in for the Spaces bucket."""

    def __init__(self):
        self.public_base = PUBLIC_BASE
        self.objects = {}
        self.fail_upload = False
        self.fail_delete = False

    def upload(self, *, content, content_type, filename):
        if self.fail_upload:
            raise RuntimeError("bucket unavailable")
        key = random_object_key(filename)
        self.objects[key] = (content, content_type)
        return f"{self.public_base}/{key}"

    def delete(self, url):
        if self.fail_delete:
            raise RuntimeError("bucket unavailable")
        key = url[len(self.public_base) + 1:]
        if key not in self.objects:
            raise KeyError(key)
        del self.objects[key]


@pytest.fixture(autouse=True)
def admin_env(monkeypatch):
    """Use the built-in admin credentials unless a test overrides them."""
    for name in ("ADMIN_EMAIL", "ADMIN_PASSWORD", "ADMIN_PASSWORD_HASH"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    session = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)()
    yield session
    session.close()


@pytest.fixture
def image_store():
    return FakeImageStore()


@pytest.fixture
def repo(db_session, image_store):
    return ContentRepository(db_session, image_store)


@pytest.fixture
def client(engine, image_store):
    Session = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

    def override_get_db():
        db = Session()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_image_store] = lambda: image_store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def admin_client(client):
    """Client holding a valid admin session cookie."""
    resp = client.post(
        "/api/admin/signin",
        json={"email": "admin@turnitaround.com", "password": "admin123"},
    )
    assert resp.status_code == 200
    return client


@pytest.fixture
def article_payload():
    return {
        "type": "blog",
        "title": "T",
        "content": "C",
        "excerpt": "E",
        "category": "Governance Training",
        "author": "A",
    }
