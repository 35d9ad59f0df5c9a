import itertools
import uuid
import os

# Settings and the engine are read at import time
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["DASHBOARD_MAX_WORKERS"] = "1"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["LAMBDA_BASE_PATH"] = "/default/agroflow-api"

import pytest
from fastapi.testclient import TestClient

import agroflow.models  # noqa: F401
from agroflow.core.database import Base, SessionLocal, engine
from agroflow.main import app
from agroflow.models import ROLE_ADMIN, Farmer

PASSWORD = "s3nha-segura"
VALID_CNPJ = "11222333000181"

_sequence = itertools.count(1)


def cpf_from(seed: int) -> str:
    """Build a CPF with valid check digits from a 9-digit seed"""
    digits = [int(d) for d in f"{seed:09d}"]
    for position in (9, 10):
        total = sum(d * (position + 1 - i) for i, d in enumerate(digits))
        digits.append((total * 10) % 11 % 10)
    return "".join(str(d) for d in digits)


def farmer_payload(**overrides):
    n = next(_sequence)
    payload = {
        "cpf": cpf_from(123456780 + n),
        "producer_name": f"Produtor {n}",
        "email": f"produtor{n}@fazenda.com.br",
        "password": PASSWORD,
        "phone": "65999990000",
    }
    payload.update(overrides)
    return payload


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


def login(client, email, password=PASSWORD):
    response = client.post("/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()


@pytest.fixture(autouse=True)
def schema():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    # no context manager: skip the lifespan pool warm-up
    return TestClient(app)


@pytest.fixture
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_farmer(client):
    """Sign up a farmer through the API and log in; returns id, email and headers."""

    def _make(admin=False, **overrides):
        payload = farmer_payload(**overrides)
        response = client.post("/farmers", json=payload)
        assert response.status_code == 201, response.text
        farmer_id = response.json()["data"]["id"]

        if admin:
            session = SessionLocal()
            try:
                session.query(Farmer).filter(Farmer.id == uuid.UUID(farmer_id)).update(
                    {"role": ROLE_ADMIN}, synchronize_session=False
                )
                session.commit()
            finally:
                session.close()

        tokens = login(client, payload["email"], payload["password"])
        return {
            "id": farmer_id,
            "email": payload["email"],
            "payload": payload,
            "tokens": tokens,
            "headers": bearer(tokens["token"]),
        }

    return _make


@pytest.fixture
def farmer(make_farmer):
    return make_farmer()


@pytest.fixture
def admin(make_farmer):
    return make_farmer(admin=True)


@pytest.fixture
def make_property(client):
    def _make(headers, **overrides):
        payload = {
            "farm_name": "Fazenda Boa Vista",
            "city": "Sorriso",
            "state": "MT",
            "total_area_ha": 100,
            "arable_area_ha": 60,
            "vegetable_area_ha": 30,
        }
        payload.update(overrides)
        response = client.post("/properties", json=payload, headers=headers)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _make


def count_rows(model, **filters):
    session = SessionLocal()
    try:
        query = session.query(model)
        for column, value in filters.items():
            if isinstance(value, str) and (column == "id" or column.endswith("_id")):
                value = uuid.UUID(value)
            query = query.filter(getattr(model, column) == value)
        return query.count()
    finally:
        session.close()
