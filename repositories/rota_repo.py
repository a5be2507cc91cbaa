from models.rota_model import Rota
from repositories.base_repo import BaseRepo


class RotaRepo(BaseRepo):
    colecao = "rotas"
    modelo = Rota
    ordem = "rota"

    @classmethod
    def obter_por_rota_dominio(cls, rota: str, dominio: str):
        return cls.obter_um({"rota": rota, "dominio": dominio})
