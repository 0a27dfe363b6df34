"""
Fixtures do pytest.

O banco de testes é um SQLite em memória; a variável precisa ser definida
antes de importar a aplicação.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from main import app  # noqa: E402
from moto_api.database import Base, SessionLocal, engine  # noqa: E402
from moto_api.models.manutencao import STATUS_PENDENTE  # noqa: E402


@pytest.fixture
def client():
    """Cliente HTTP com o esquema recriado do zero."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db(client):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def moto(client):
    """Moto já cadastrada."""
    response = client.post("/api/moto", json={"placa": "ABC1234", "modelo": "CB500"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def manutencao_payload(moto):
    return {
        "motoId": moto["id"],
        "tipoServico": "Troca de óleo",
        "dataServico": "2024-01-01T00:00:00",
        "status": STATUS_PENDENTE,
        "descricao": "Óleo 10W30",
    }
