from fastapi.testclient import TestClient
import pytest

from token_gateway.token_gateway.auth_service.main import app
from token_gateway.token_gateway.auth_service.db import Base, engine, SessionLocal
from token_gateway.token_gateway.auth_service.credentials import create_user


@pytest.fixture(scope="session")
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture(autouse=True)
def reset_database():
    # Drop all tables and recreate them before each test
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


@pytest.fixture
def db_session():
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def user(db_session):
    return create_user("test@test.com", "password123", db_session, name="John Doe")


@pytest.fixture
def auth_headers(client, user):
    response = client.post("/auth/sign_in", json={"email": "test@test.com", "password": "password123"})
    assert response.status_code == 200
    return {name: response.headers[name] for name in ("access-token", "client", "uid")}
