import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["RUN_MIGRATIONS_ON_STARTUP"] = "0"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine, event  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.crud.inscripcion import inscripcion_crud  # noqa: E402
from app.db.base import Base  # noqa: E402
from app.db.session import get_db  # noqa: E402
from app.main import api  # noqa: E402
from app.schemas.inscripcion import InscripcionCreate  # noqa: E402


engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


@event.listens_for(engine, "connect")
def _set_sqlite_pragma(dbapi_connection, _connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture()
def db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(db):
    def _override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    api.dependency_overrides[get_db] = _override_get_db
    with TestClient(api) as test_client:
        yield test_client
    api.dependency_overrides.clear()


def evento_payload(**overrides) -> dict:
    payload = {
        "nombre": "Conferencia",
        "lugar": "Hall1",
        "fechaInicio": "2024-01-01T10:00:00Z",
        "fechaFinal": "2024-01-01T12:00:00Z",
        "organizadorId": 1,
    }
    payload.update(overrides)
    return payload


@pytest.fixture()
def crear_evento(client):
    def _crear(**overrides) -> dict:
        response = client.post("/evento", json=evento_payload(**overrides))
        assert response.status_code == 200, response.text
        return response.json()
    return _crear


@pytest.fixture()
def inscribir(db):
    def _inscribir(evento_id: int, participante_id: int):
        return inscripcion_crud.create(
            db, InscripcionCreate(evento_id=evento_id, participante_id=participante_id)
        )
    return _inscribir
