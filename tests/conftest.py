import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("SECURITY_HEADERS_ENABLED", "true")

from datetime import datetime  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from daycare.database import Base, build_engine, get_db, get_session_factory  # noqa: E402
from daycare.main import app  # noqa: E402
from daycare.models import Canine, Owner, Role, User, Vaccination  # noqa: E402
from daycare.security_utils import create_access_token, hash_password  # noqa: E402


@pytest.fixture
def engine(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'test.db'}")
    Base.metadata.create_all(bind=engine)
    yield engine
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
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sent_emails(monkeypatch):
    """Capture outgoing emails instead of calling Resend"""
    sent = []

    async def fake_accepted(to, role):
        sent.append(("accepted", to, role))
        return {"id": "test"}

    async def fake_rejected(to, role):
        sent.append(("rejected", to, role))
        return {"id": "test"}

    async def fake_verification(to, token):
        sent.append(("verification", to, token))
        return {"id": "test"}

    monkeypatch.setattr("daycare.domain.roles.service.send_role_accepted_email", fake_accepted)
    monkeypatch.setattr("daycare.domain.roles.service.send_role_rejected_email", fake_rejected)
    monkeypatch.setattr("daycare.domain.users.service.send_verification_email", fake_verification)
    return sent


def make_user(db, email, role=Role.USER, name="Test User", password="password123"):
    user = User(name=name, email=email, password_hash=hash_password(password), role=role.value)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def auth_headers_for(user):
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


@pytest.fixture
def user(db):
    return make_user(db, "staff@example.com")


@pytest.fixture
def admin(db):
    return make_user(db, "admin@example.com", role=Role.ADMIN, name="Admin")


@pytest.fixture
def auth_headers(user):
    return auth_headers_for(user)


@pytest.fixture
def admin_headers(admin):
    return auth_headers_for(admin)


@pytest.fixture
def owner(db):
    owner = Owner(name="Jane Walker", email="jane@example.com", mobile="0400000000")
    db.add(owner)
    db.commit()
    db.refresh(owner)
    return owner


@pytest.fixture
def canine(db, owner):
    canine = Canine(
        owner_id=owner.id,
        name="Rex",
        breed="Labrador",
        date_of_birth=datetime(2020, 5, 1),
        gender="MALE",
        color="Black",
        spayed=True,
        social_skills={"dogs": "friendly"},
        behaviour={"recall": "good"},
        health={"allergies": []},
    )
    canine.vaccinations.append(
        Vaccination(dhpp=datetime(2024, 1, 1), lepto=datetime(2024, 1, 1), kc=datetime(2024, 1, 1), fleaed=True)
    )
    db.add(canine)
    db.commit()
    db.refresh(canine)
    return canine
