from unittest.mock import MagicMock

import mongomock
import pytest
from fastapi import Request
from fastapi.testclient import TestClient

from util.armazenamento import definir_cliente
from util.db import definir_db


USUARIO_TESTE = {"id": "65f0c0ffee0000000000abcd", "email": "avaliador@ifro.edu.br"}


@pytest.fixture
def db():
    banco = mongomock.MongoClient().inventario_teste
    definir_db(banco)
    yield banco
    definir_db(None)


@pytest.fixture
def armazenamento():
    """Cliente S3 falso; as chamadas ficam registradas para conferência."""
    cliente = MagicMock()
    definir_cliente(cliente)
    yield cliente
    definir_cliente(None)


@pytest.fixture
def app(db):
    from main import app as aplicacao

    yield aplicacao
    aplicacao.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """Cliente com a checagem de permissão substituída por um usuário fixo."""
    from util.auth import checar_autorizacao

    async def autorizar(request: Request):
        request.state.usuario = USUARIO_TESTE

    app.dependency_overrides[checar_autorizacao] = autorizar
    return TestClient(app)


@pytest.fixture
def client_real(app):
    return TestClient(app)
