from typing import Optional

from bson import ObjectId

from models.campus_model import Campus
from repositories.base_repo import BaseRepo


class CampusRepo(BaseRepo):
    colecao = "campus"
    modelo = Campus

    @classmethod
    def obter_por_nome_cidade(cls, nome: str, cidade: str, id_diferente: Optional[str] = None):
        filtros = {"nome": nome, "cidade": cidade}
        if id_diferente:
            filtros["_id"] = {"$ne": ObjectId(id_diferente)}
        return cls.obter_um(filtros)
