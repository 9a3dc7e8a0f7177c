import os
import tempfile

# must be set before config.settings is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ["AVATAR_DIRECTORY"] = tempfile.mkdtemp(prefix="kidavu-avatars-")

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from config.database import Base, get_db
from main import app
from app.models.auth_models import User
from app.models.baby_model import BabyProfile

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

TEST_EMAIL = "parent@kidavu.app"
TEST_PASSWORD = "s3cret-pass"


@pytest.fixture
def db_session():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def signup_and_login(client, email=TEST_EMAIL, password=TEST_PASSWORD):
    client.post("/api/auth/signup", json={"email": email, "password": password})
    response = client.post("/api/auth/login", json={"email": email, "password": password})
    token = response.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers(client):
    return signup_and_login(client)


@pytest.fixture
def baby_profile(client, auth_headers):
    payload = {
        "name": "Mia",
        "date_of_birth": "2024-01-15",
        "gender": "female",
        "weight_at_birth": 3.4,
        "height_at_birth": 50.5,
    }
    response = client.put("/api/babies/me", json=payload, headers=auth_headers)
    assert response.status_code == 200
    return response.json()


@pytest.fixture
def stored_baby(db_session):
    """A profile written straight to the database, for tests below the HTTP layer."""
    user = User(email="direct@kidavu.app", password_hash="not-a-real-hash")
    db_session.add(user)
    db_session.commit()

    baby = BabyProfile(user_id=user.id, name="Leo", date_of_birth=date(2024, 1, 15), gender="male")
    db_session.add(baby)
    db_session.commit()
    db_session.refresh(baby)
    return baby
