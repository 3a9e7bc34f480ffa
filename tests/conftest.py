import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from app.db import enable_sqlite_foreign_keys, get_session
from app.main import app
from app import models  # noqa: F401

# In-memory database shared by every connection of the test engine
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
enable_sqlite_foreign_keys(engine)


@pytest.fixture(scope="function")
def db_session():
    """Fresh tables for every test."""
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(scope="function")
def client(db_session):
    """API client bound to the test database."""

    def override_get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def barbero(client):
    return client.post("/barberos", json={"nombre": "Luis Pérez"}).json()


@pytest.fixture
def cliente(client):
    return client.post("/clientes", json={"nombre": "Ana Gómez", "telefono": "555-0101"}).json()


@pytest.fixture
def servicio(client):
    return client.post("/servicios", json={"descripcion": "Corte clásico", "costo": 150.0}).json()


@pytest.fixture
def cita_body(barbero, cliente, servicio):
    return {
        "fecha": "2024-05-01",
        "hora": "10:00",
        "barbero": {"idBarbero": barbero["idBarbero"]},
        "cliente": {"idCliente": cliente["idCliente"]},
        "servicio": {"idServicio": servicio["idServicio"]},
    }
