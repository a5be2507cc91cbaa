import logging
import math
import os
from dataclasses import fields
from datetime import datetime, timezone

from bson import ObjectId
from pymongo import ASCENDING, MongoClient


logger = logging.getLogger(__name__)

_cliente = None
_db = None


def obter_db():
    global _cliente, _db
    if _db is None:
        uri = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        _cliente = MongoClient(uri)
        _db = _cliente[os.getenv("MONGO_DB", "inventario")]
        logger.info("Conectado ao MongoDB em %s", _db.name)
    return _db


def definir_db(db):
    """Substitui o banco em uso (ex.: um banco do mongomock nos testes)."""
    global _db
    _db = db


def criar_indices(db=None):
    db = db if db is not None else obter_db()
    db.usuarios.create_index([("email", ASCENDING)], unique=True)
    db.usuarios.create_index([("cpf", ASCENDING)], unique=True)
    db.bens.create_index([("tombo", ASCENDING)], unique=True)
    db.rotas.create_index([("rota", ASCENDING), ("dominio", ASCENDING)], unique=True)


def agora() -> datetime:
    return datetime.now(timezone.utc)


def para_object_id(valor):
    if isinstance(valor, str) and ObjectId.is_valid(valor):
        return ObjectId(valor)
    return valor


def converter_ids(dados: dict, campos) -> dict:
    """Troca os ids em texto dos campos de referência por ObjectId."""
    convertidos = dict(dados)
    for campo in campos:
        if campo in convertidos:
            convertidos[campo] = para_object_id(convertidos[campo])
    return convertidos


def _texto_ids(valor):
    if isinstance(valor, ObjectId):
        return str(valor)
    if isinstance(valor, dict):
        return {chave: _texto_ids(item) for chave, item in valor.items()}
    if isinstance(valor, list):
        return [_texto_ids(item) for item in valor]
    return valor


def documento_para_modelo(classe, documento):
    if documento is None:
        return None
    documento = _texto_ids(documento)
    nomes = {campo.name for campo in fields(classe)}
    dados = {chave: valor for chave, valor in documento.items() if chave in nomes}
    dados["id"] = documento.get("_id")
    return classe(**dados)


def paginar(colecao, filtros: dict, page: int, limite: int, classe, ordem="nome") -> dict:
    total = colecao.count_documents(filtros)
    cursor = (
        colecao.find(filtros)
        .sort(ordem, ASCENDING)
        .skip((page - 1) * limite)
        .limit(limite)
    )
    total_paginas = math.ceil(total / limite) if total else 1
    return {
        "docs": [documento_para_modelo(classe, documento) for documento in cursor],
        "totalDocs": total,
        "limit": limite,
        "page": page,
        "totalPages": total_paginas,
        "hasPrevPage": page > 1,
        "hasNextPage": page < total_paginas,
    }
