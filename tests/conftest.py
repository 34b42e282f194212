import os

# Required settings must exist before anything under app/ is imported
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("INTERNAL_ADMIN_SECRET", "test-internal-secret")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.hashing import hash_password
from app.core.jwt import create_access_token
from app.database import Base, get_db
from app.main import app
from app.models.accounts import Account
from app.models.posts import Post


engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Hashing is slow; every fixture account shares one password
PASSWORD = "green-future-2030"
PASSWORD_HASH = hash_password(PASSWORD)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    def override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_account(db):
    counter = {"n": 0}

    def _make(role, name=None, email=None, status="active"):
        counter["n"] += 1
        account = Account(
            name=name or f"{role} {counter['n']}",
            email=email or f"{role}{counter['n']}@esgconnect.io",
            password_hash=PASSWORD_HASH,
            role=role,
            status=status,
        )
        db.add(account)
        db.commit()
        db.refresh(account)
        return account

    return _make


def auth_headers(account):
    token = create_access_token({"sub": str(account.id), "role": account.role})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def owner(make_account):
    return make_account("business_owner", name="Olive Owner")


@pytest.fixture
def other_owner(make_account):
    return make_account("business_owner")


@pytest.fixture
def admin(make_account):
    return make_account("admin")


@pytest.fixture
def superadmin(make_account):
    return make_account("superadmin")


@pytest.fixture
def investor(make_account):
    return make_account("investor")


@pytest.fixture
def make_post(db):
    def _make(owner, status="pending", **fields):
        values = {
            "title": "EcoFarm",
            "business_name": "EcoFarm",
            "description": "Regenerative farming cooperative",
            "industry": "Agriculture",
            "location": "Nairobi",
            "investment_needed": 5000,
        }
        values.update(fields)
        post = Post(created_by=owner.id, status=status, **values)
        db.add(post)
        db.commit()
        db.refresh(post)
        return post

    return _make


@pytest.fixture
def headers():
    return auth_headers
