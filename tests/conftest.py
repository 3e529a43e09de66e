import os
from datetime import timedelta

# Must be set before the app modules read their configuration
os.environ["TESTING"] = "1"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from skillmatrix.config import SESSION_COOKIE
from skillmatrix.db import Base, get_db
from skillmatrix.main import app
from skillmatrix.models import AuthSession, User
from skillmatrix.utils.validators import utcnow

# Force an in-memory SQLite database shared by every connection
engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

TEST_USER_ID = "user-hr-1"
TEST_SID = "session-hr-1"

# Fresh tables plus one logged-in user for every test
@pytest.fixture(autouse=True)
def setup_test_db():
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    db.add(User(id=TEST_USER_ID, email="hr@example.com", first_name="Hana", last_name="Reyes", role="manager"))
    db.add(AuthSession(sid=TEST_SID, user_id=TEST_USER_ID, expire=utcnow() + timedelta(hours=1)))
    db.commit()
    db.close()
    yield
    Base.metadata.drop_all(bind=engine)

# Fixture to override the get_db dependency in FastAPI
@pytest.fixture(autouse=True)
def override_get_db():
    def _get_test_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()
    app.dependency_overrides[get_db] = _get_test_db
    yield
    app.dependency_overrides.clear()

@pytest.fixture
def db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def client():
    return TestClient(app, cookies={SESSION_COOKIE: TEST_SID})

@pytest.fixture
def anon_client():
    return TestClient(app)

# ----------------------------
# Factories (go through the API like a real client)
# ----------------------------
@pytest.fixture
def make_skill(client):
    def _make(name="SQL", category="technical", **extra):
        r = client.post("/api/skills", json={"name": name, "category": category, **extra})
        assert r.status_code == 201, r.json()
        return r.json()
    return _make

@pytest.fixture
def make_position(client):
    def _make(title="Backend Developer", department="Engineering", level="senior", **extra):
        r = client.post("/api/positions", json={"title": title, "department": department, "level": level, **extra})
        assert r.status_code == 201, r.json()
        return r.json()
    return _make

@pytest.fixture
def make_employee(client):
    def _make(first_name="Ada", last_name="Lovelace", position=None, **extra):
        body = {"firstName": first_name, "lastName": last_name, **extra}
        if position is not None:
            body["positionId"] = position["id"]
        r = client.post("/api/employees", json=body)
        assert r.status_code == 201, r.json()
        return r.json()
    return _make

@pytest.fixture
def require_skill(client):
    def _require(position, skill, level):
        r = client.post(f"/api/positions/{position['id']}/skills", json={"skillId": skill["id"], "requiredLevel": level})
        assert r.status_code == 201, r.json()
        return r.json()
    return _require

@pytest.fixture
def evaluate(client):
    def _evaluate(employee, skill, level, **extra):
        r = client.post(f"/api/employees/{employee['id']}/skills", json={"skillId": skill["id"], "currentLevel": level, **extra})
        assert r.status_code == 201, r.json()
        return r.json()
    return _evaluate
