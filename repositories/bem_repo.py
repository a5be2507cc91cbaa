from models.bem_model import Bem
from repositories.base_repo import BaseRepo
from util.db import agora


class BemRepo(BaseRepo):
    colecao = "bens"
    modelo = Bem
    campos_ids = ("sala",)

    @classmethod
    def obter_por_tombo(cls, tombo: str):
        return cls.obter_um({"tombo": tombo})

    @classmethod
    def tombos_existentes(cls, tombos: list) -> set:
        documentos = cls._colecao().find({"tombo": {"$in": tombos}}, {"tombo": 1})
        return {documento["tombo"] for documento in documentos}

    @classmethod
    def inserir_varios(cls, bens: list) -> int:
        """Insere sem parar no primeiro erro; BulkWriteError sobe para quem chamou."""
        momento = agora()
        documentos = [{**cls._preparar(bem), "criado_em": momento, "atualizado_em": momento} for bem in bens]
        resultado = cls._colecao().insert_many(documentos, ordered=False)
        return len(resultado.inserted_ids)
