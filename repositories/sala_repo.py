from models.sala_model import Sala
from repositories.base_repo import BaseRepo


class SalaRepo(BaseRepo):
    colecao = "salas"
    modelo = Sala
    campos_ids = ("campus",)

    @classmethod
    def obter_por_nome_bloco(cls, nome: str, bloco: str, campus_id: str):
        return cls.obter_um({"nome": nome, "bloco": bloco, "campus": campus_id})
