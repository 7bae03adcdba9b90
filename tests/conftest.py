import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from studio.config import settings
from studio.database import enable_sqlite_foreign_keys, get_db
from studio.main import app
from studio.models import Base, User, UserRole


@pytest.fixture()
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture()
def client(session_factory, monkeypatch):
    monkeypatch.setattr(settings, "bcrypt_rounds", 4)

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def register(client, username, password="secret1", **extra):
    body = {"email": f"{username}@mail.com", "username": username, "password": password, **extra}
    r = client.post("/api/auth/register", json=body)
    assert r.status_code == 201, r.text
    return r.json()["data"]


@pytest.fixture()
def make_user(client, session_factory):
    """Register a user (optionally with an elevated role) and return id, token and auth headers."""

    def _make(username, role=UserRole.USER):
        data = register(client, username)
        if role != UserRole.USER:
            with session_factory() as s:
                user = s.get(User, data["user"]["id"])
                user.role = role.value
                s.commit()
        return {
            "id": data["user"]["id"],
            "token": data["token"],
            "headers": {"Authorization": f"Bearer {data['token']}"},
        }

    return _make
