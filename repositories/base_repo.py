from typing import Optional

from bson import ObjectId
from pymongo import ReturnDocument

from util.db import agora, converter_ids, documento_para_modelo, obter_db, paginar


class BaseRepo:
    """Operações comuns de CRUD sobre uma coleção.

    As subclasses definem a coleção, a dataclass do modelo e quais campos
    guardam referências (ObjectId) para outras coleções.
    """

    colecao: str = ""
    modelo = None
    campos_ids: tuple = ()
    ordem: str = "nome"

    @classmethod
    def _colecao(cls):
        return obter_db()[cls.colecao]

    @classmethod
    def _preparar(cls, dados: dict) -> dict:
        return converter_ids(dados, cls.campos_ids)

    @classmethod
    def inserir(cls, dados: dict):
        documento = cls._preparar(dados)
        documento["criado_em"] = documento["atualizado_em"] = agora()
        resultado = cls._colecao().insert_one(documento)
        documento["_id"] = resultado.inserted_id
        return documento_para_modelo(cls.modelo, documento)

    @classmethod
    def obter_documento(cls, id: str) -> Optional[dict]:
        if not ObjectId.is_valid(id):
            return None
        return cls._colecao().find_one({"_id": ObjectId(id)})

    @classmethod
    def obter_por_id(cls, id: str):
        return documento_para_modelo(cls.modelo, cls.obter_documento(id))

    @classmethod
    def obter_todos(cls, filtros: dict, page: int = 1, limite: int = 10) -> dict:
        return paginar(cls._colecao(), filtros, page, limite, cls.modelo, cls.ordem)

    @classmethod
    def obter_um(cls, filtros: dict):
        return documento_para_modelo(cls.modelo, cls._colecao().find_one(cls._preparar(filtros)))

    @classmethod
    def alterar(cls, id: str, dados: dict):
        if not ObjectId.is_valid(id):
            return None
        alteracoes = cls._preparar(dados)
        alteracoes["atualizado_em"] = agora()
        documento = cls._colecao().find_one_and_update(
            {"_id": ObjectId(id)},
            {"$set": alteracoes},
            return_document=ReturnDocument.AFTER,
        )
        return documento_para_modelo(cls.modelo, documento)

    @classmethod
    def excluir(cls, id: str) -> bool:
        if not ObjectId.is_valid(id):
            return False
        return cls._colecao().delete_one({"_id": ObjectId(id)}).deleted_count == 1

    @classmethod
    def existe(cls, filtros: dict) -> bool:
        return cls._colecao().count_documents(cls._preparar(filtros), limit=1) > 0
